"""
TypedString: the interface shared by wrapped string types (Const, SafeScript).

Implementers carry ``implements_typed_string = True`` and expose their text
through ``get_typed_string_value()``.
"""

from typing import ClassVar, Protocol, runtime_checkable


@runtime_checkable
class TypedString(Protocol):
    implements_typed_string: ClassVar[bool]

    def get_typed_string_value(self) -> str: ...
