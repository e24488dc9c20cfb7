"""
Unchecked conversions into SafeScript.

These bypass the builders' construction discipline. Every call site must
carry a constant justification explaining why the runtime string satisfies
the SafeScript contract, and should be security reviewed.
"""

import logging

from safescript.html.safescript import SafeScript, _create_unchecked
from safescript.string.const import Const

_LOG = logging.getLogger(__name__)


def safe_script_from_string_known_to_satisfy_type_contract(
    justification: Const,
    script: str,
) -> SafeScript:
    """Wrap *script* as ``SafeScript``. *justification* must be a non-empty ``Const``."""
    reason = Const.unwrap(justification)
    if not reason.strip():
        raise ValueError("A justification must be provided")
    _LOG.debug("Unchecked SafeScript conversion: %s", reason)
    return _create_unchecked(script)
