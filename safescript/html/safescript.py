"""
SafeScript: text certified safe to hand to script-executing sinks.

Instances come only from the builders below (or the audited helpers in
``safescript.html.unchecked``); the constructor refuses callers that do not
hold this module's token, and the class is final and immutable. The
builders trust their ``Const`` input entirely: no script syntax is checked.

Usage::

    script = SafeScript.from_constant_and_args(
        Const.from_("function(name) { greet(name); }"), "<b>bob"
    )
    SafeScript.unwrap(script)
    # '(function(name) { greet(name); })("\\x3cb>bob");'
"""

from typing import Any, ClassVar, final

from safescript.core.errors import TypeMismatchError
from safescript.html.serializer import serialize_argument, serialize_arguments
from safescript.html.trustedtypes import TrustedScript, TrustedTypesBridge, get_default_bridge
from safescript.string.const import Const

_CONSTRUCTOR_TOKEN = object()


@final
class SafeScript:
    """Immutable wrapper around certified script text."""

    __slots__ = ("_value",)

    EMPTY: ClassVar["SafeScript"]
    implements_typed_string: ClassVar[bool] = True

    def __init__(self, value: str, token: object) -> None:
        if token is not _CONSTRUCTOR_TOKEN:
            raise TypeError("SafeScript cannot be constructed directly; use a SafeScript builder")
        object.__setattr__(self, "_value", value)

    def __init_subclass__(cls, **kwargs: Any) -> None:
        raise TypeError("SafeScript cannot be subclassed")

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError("SafeScript is immutable")

    def __delattr__(self, name: str) -> None:
        raise AttributeError("SafeScript is immutable")

    def __copy__(self) -> "SafeScript":
        return self

    def __deepcopy__(self, memo: dict[int, Any]) -> "SafeScript":
        return self

    def __reduce__(self) -> Any:
        raise TypeError("SafeScript cannot be pickled")

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SafeScript):
            return NotImplemented
        return self._value == other._value

    def __hash__(self) -> int:
        return hash((SafeScript, self._value))

    def __str__(self) -> str:
        return f"SafeScript{{{self._value}}}"

    def __repr__(self) -> str:
        return f"<SafeScript {self._value!r}>"

    def get_typed_string_value(self) -> str:
        return self._value

    # -----------------------------------------------------------------------
    # Builders
    # -----------------------------------------------------------------------

    @classmethod
    def from_constant(cls, script: Const) -> "SafeScript":
        """Wrap a compile-time constant. Empty text returns ``SafeScript.EMPTY``."""
        text = Const.unwrap(script)
        if not text:
            return cls.EMPTY
        return cls(text, _CONSTRUCTOR_TOKEN)

    @classmethod
    def from_constant_and_args(cls, code: Const, *args: Any) -> "SafeScript":
        """
        Invoke the function literal *code* with *args*.

        Produces ``(<code>)(<arg>, <arg>, ...);`` where every argument is
        JSON-serialized with ``<`` escaped. *code* must be a function
        expression; it is not checked.
        """
        fn = Const.unwrap(code)
        return cls(f"({fn})({serialize_arguments(args)});", _CONSTRUCTOR_TOKEN)

    @classmethod
    def from_json(cls, value: Any) -> "SafeScript":
        """JSON for *value* (``<`` escaped) with no invocation around it."""
        return cls(serialize_argument(value), _CONSTRUCTOR_TOKEN)

    # -----------------------------------------------------------------------
    # Unwrapping
    # -----------------------------------------------------------------------

    @staticmethod
    def unwrap(script: Any) -> str:
        """Return the text of *script*, or raise ``TypeMismatchError`` if it is not a ``SafeScript``."""
        if isinstance(script, SafeScript):
            return script._value
        raise TypeMismatchError("SafeScript", script)

    @staticmethod
    def unwrap_trusted_script(
        script: Any,
        bridge: TrustedTypesBridge | None = None,
    ) -> TrustedScript | str:
        """
        Text of *script* as a ``TrustedScript`` when the bridge has a policy,
        else as a plain ``str``. ``str()`` of the result is the text either way.

        Uses the process default bridge unless *bridge* is given.
        """
        text = SafeScript.unwrap(script)
        if bridge is None:
            bridge = get_default_bridge()
        return bridge.to_trusted_script(text)


def _create_unchecked(script: str) -> SafeScript:
    """Wrap *script* without any check. Reserved for ``safescript.html.unchecked``."""
    if type(script) is not str:
        raise TypeError(f"expected str, got {type(script).__name__}")
    if not script:
        return SafeScript.EMPTY
    return SafeScript(script, _CONSTRUCTOR_TOKEN)


SafeScript.EMPTY = SafeScript("", _CONSTRUCTOR_TOKEN)
