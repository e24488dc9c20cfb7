"""
Core: settings, logging setup and exceptions.
"""

from safescript.core.config import configure_logging, settings
from safescript.core.errors import PolicyCreationError, SafeScriptError, TypeMismatchError

__all__ = [
    "settings",
    "configure_logging",
    "SafeScriptError",
    "TypeMismatchError",
    "PolicyCreationError",
]
