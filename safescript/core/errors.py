"""
Exceptions raised by safescript.

``TypeMismatchError`` is also a ``TypeError`` so callers that already guard
sinks with ``except TypeError`` keep working.
"""

from typing import Any


class SafeScriptError(Exception):
    """Base class for safescript errors."""

    pass


class TypeMismatchError(SafeScriptError, TypeError):
    """Raised when a value lacking the expected type brand is unwrapped."""

    def __init__(self, expected: str, value: Any) -> None:
        self.expected = expected
        self.actual = type(value).__name__
        preview = repr(value)
        if len(preview) > 200:
            preview = preview[:200] + "..."
        super().__init__(
            f"expected object of type {expected}, got {preview} of type {self.actual}"
        )


class PolicyCreationError(SafeScriptError):
    """Raised by a policy factory that refuses to create a policy."""

    pass
