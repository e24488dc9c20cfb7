"""
Argument serializer: Python values -> script-literal text.

Each value is converted to JSON the way a browser's ``JSON.stringify``
would see it (compact separators, non-ASCII kept, unrepresentable members
dropped, integral floats below 1e21 printed without a fraction, ``-0.0``
as ``0``), then every ``<`` is rewritten as ``\\x3c`` so the text can sit
inside an HTML ``<script>`` element without closing it early. No other
character is escaped. Exponent forms keep Python spelling (``1e-07`` where a
browser prints ``1e-7``); both read back as the same number.

Usage::

    serialize_arguments(["</script>", 42])
    # '"\\x3c/script>", 42'
"""

import json
import math
from collections.abc import Iterable, Mapping
from datetime import date, datetime, time
from decimal import Decimal
from typing import Any
from uuid import UUID

from pydantic import BaseModel

_SCRIPT_LT_ESCAPE = str.maketrans({"<": "\\x3c"})

ARGUMENT_SEPARATOR = ", "


# ---------------------------------------------------------------------------
# _OMIT: returned for values JSON has no representation for. Mapping members
# holding it are dropped, sequence elements become null.
# ---------------------------------------------------------------------------

_OMIT = object()

_JSON_KEY_TYPES = (str, int, float, bool, type(None))

# Integral floats from here up print in exponent form in JS.
_JS_EXPONENT_THRESHOLD = 1e21


def _js_number(value: float) -> int | float | None:
    """Number as JS would print it: non-finite is null, integral floats lose ``.0``."""
    if not math.isfinite(value):
        return None
    if value.is_integer() and abs(value) < _JS_EXPONENT_THRESHOLD:
        return int(value)
    return value


def _js_key(key: Any) -> str:
    """Property name a JS object would use for *key*."""
    if isinstance(key, str):
        return key
    if key is None:
        return "null"
    if isinstance(key, bool):
        return "true" if key else "false"
    if isinstance(key, int):
        return str(int(key))
    if math.isnan(key):
        return "NaN"
    if math.isinf(key):
        return "Infinity" if key > 0 else "-Infinity"
    return str(_js_number(key))


def _to_json_value(value: Any, path: set[int]) -> Any:
    """Convert *value* into plain JSON types, or ``_OMIT``."""
    if value is None or isinstance(value, (bool, str)):
        return value
    if isinstance(value, int):
        return int(value)
    if isinstance(value, float):
        return _js_number(value)
    if isinstance(value, Decimal):
        if not value.is_finite():
            return None
        if value == value.to_integral_value():
            return int(value)
        return _js_number(float(value))
    if isinstance(value, (datetime, date, time)):
        return value.isoformat()
    if isinstance(value, UUID):
        return str(value)
    if isinstance(value, BaseModel):
        return _to_json_value(value.model_dump(mode="json"), path)
    if isinstance(value, Mapping):
        return _container(value, path, _mapping_to_json)
    if isinstance(value, (list, tuple)):
        return _container(value, path, _sequence_to_json)
    to_json = getattr(value, "to_json", None)
    if callable(to_json) and not isinstance(value, type):
        return _to_json_value(to_json(), path)
    return _OMIT


def _container(value: Any, path: set[int], convert: Any) -> Any:
    marker = id(value)
    if marker in path:
        raise ValueError("Circular reference detected")
    path.add(marker)
    try:
        return convert(value, path)
    finally:
        path.discard(marker)


def _mapping_to_json(value: Mapping[Any, Any], path: set[int]) -> dict[Any, Any]:
    out: dict[Any, Any] = {}
    for key, item in value.items():
        if not isinstance(key, _JSON_KEY_TYPES):
            continue
        converted = _to_json_value(item, path)
        if converted is _OMIT:
            continue
        out[_js_key(key)] = converted
    return out


def _sequence_to_json(value: Iterable[Any], path: set[int]) -> list[Any]:
    out: list[Any] = []
    for item in value:
        converted = _to_json_value(item, path)
        out.append(None if converted is _OMIT else converted)
    return out


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------


def escape_script_text(text: str) -> str:
    """Replace every ``<`` in *text* with ``\\x3c``."""
    return text.translate(_SCRIPT_LT_ESCAPE)


def to_json_text(value: Any) -> str:
    """Compact JSON for *value*, unescaped. A top-level unrepresentable value is ``null``."""
    converted = _to_json_value(value, set())
    if converted is _OMIT:
        converted = None
    return json.dumps(
        converted,
        separators=(",", ":"),
        ensure_ascii=False,
        allow_nan=False,
    )


def serialize_argument(value: Any) -> str:
    """JSON for *value* with ``<`` escaped, ready to embed in a script."""
    return escape_script_text(to_json_text(value))


def serialize_arguments(args: Iterable[Any]) -> str:
    """Serialize each of *args* in order and join them with ``", "``."""
    return ARGUMENT_SEPARATOR.join(serialize_argument(a) for a in args)
