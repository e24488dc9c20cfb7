"""
HTML-context safe values: SafeScript, its argument serializer, the trusted
types bridge and Jinja2 filters.
"""

from safescript.html.filters import SCRIPT_FILTERS, register_script_filters
from safescript.html.safescript import SafeScript
from safescript.html.serializer import serialize_argument, serialize_arguments
from safescript.html.trustedtypes import (
    TrustedScript,
    TrustedTypePolicy,
    TrustedTypePolicyFactory,
    TrustedTypesBridge,
    get_default_bridge,
    get_policy,
    reset_default_bridge,
    set_default_bridge,
)
from safescript.html.unchecked import safe_script_from_string_known_to_satisfy_type_contract

__all__ = [
    "SafeScript",
    "serialize_argument",
    "serialize_arguments",
    "TrustedScript",
    "TrustedTypePolicy",
    "TrustedTypePolicyFactory",
    "TrustedTypesBridge",
    "get_default_bridge",
    "get_policy",
    "reset_default_bridge",
    "set_default_bridge",
    "safe_script_from_string_known_to_satisfy_type_contract",
    "SCRIPT_FILTERS",
    "register_script_filters",
]
