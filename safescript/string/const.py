"""
``Const``: a string asserted to come from a program literal.

The only public factory is ``Const.from_``, whose parameter is typed
``LiteralString``: static type checkers (mypy, pyright) reject any call that
passes a runtime-built string. At runtime only an exact ``str`` is accepted.
The type cannot be subclassed or mutated, and the constructor refuses calls
that do not present this module's private token.

Usage::

    greeting = Const.from_("alert('hi');")
    Const.unwrap(greeting)  # "alert('hi');"
"""

from typing import Any, ClassVar, LiteralString, final

from safescript.core.errors import TypeMismatchError

_CONSTRUCTOR_TOKEN = object()


@final
class Const:
    """Wrapper for a developer-controlled string literal."""

    __slots__ = ("_value",)

    EMPTY: ClassVar["Const"]
    implements_typed_string: ClassVar[bool] = True

    def __init__(self, value: str, token: object) -> None:
        if token is not _CONSTRUCTOR_TOKEN:
            raise TypeError("Const cannot be constructed directly; use Const.from_()")
        object.__setattr__(self, "_value", value)

    def __init_subclass__(cls, **kwargs: Any) -> None:
        raise TypeError("Const cannot be subclassed")

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError("Const is immutable")

    def __delattr__(self, name: str) -> None:
        raise AttributeError("Const is immutable")

    def __copy__(self) -> "Const":
        return self

    def __deepcopy__(self, memo: dict[int, Any]) -> "Const":
        return self

    def __reduce__(self) -> Any:
        raise TypeError("Const cannot be pickled")

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Const):
            return NotImplemented
        return self._value == other._value

    def __hash__(self) -> int:
        return hash((Const, self._value))

    def __str__(self) -> str:
        return f"Const{{{self._value}}}"

    def __repr__(self) -> str:
        return f"Const.from_({self._value!r})"

    def get_typed_string_value(self) -> str:
        return self._value

    @classmethod
    def from_(cls, s: LiteralString) -> "Const":
        """Wrap the literal *s*. Empty input returns ``Const.EMPTY``."""
        if type(s) is not str:
            raise TypeError(f"Const.from_() expects a str literal, got {type(s).__name__}")
        if not s:
            return cls.EMPTY
        return cls(s, _CONSTRUCTOR_TOKEN)

    @staticmethod
    def unwrap(c: Any) -> str:
        """Return the wrapped text, or raise ``TypeMismatchError`` if *c* is not a ``Const``."""
        if isinstance(c, Const):
            return c._value
        raise TypeMismatchError("Const", c)


Const.EMPTY = Const("", _CONSTRUCTOR_TOKEN)
