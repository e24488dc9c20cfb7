"""
safescript: values certified safe for script-executing sinks.

Exports: Const, SafeScript, TrustedScript, TypeMismatchError.
"""

from safescript.core.errors import PolicyCreationError, SafeScriptError, TypeMismatchError
from safescript.html import SafeScript, TrustedScript
from safescript.string import Const, TypedString

__all__ = [
    "Const",
    "SafeScript",
    "TrustedScript",
    "TypedString",
    "SafeScriptError",
    "TypeMismatchError",
    "PolicyCreationError",
]
