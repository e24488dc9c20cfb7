"""
String primitives: Const (developer-controlled literals) and the TypedString interface.
"""

from safescript.string.const import Const
from safescript.string.typedstring import TypedString

__all__ = ["Const", "TypedString"]
