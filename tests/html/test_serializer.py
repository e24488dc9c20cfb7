"""Unit tests for html.serializer — JSON argument serialization with < escaping."""

import math
from datetime import date, datetime
from decimal import Decimal
from uuid import UUID

import pytest
from pydantic import BaseModel

from safescript.html.serializer import (
    escape_script_text,
    serialize_argument,
    serialize_arguments,
    to_json_text,
)


class TestEscapeScriptText:
    def test_replaces_every_lt(self) -> None:
        assert escape_script_text("<a><b>") == "\\x3ca>\\x3cb>"

    def test_leaves_other_characters(self) -> None:
        text = "]]> -- > & ' \" \u2028"
        assert escape_script_text(text) == text


class TestSerializeArgument:
    def test_primitives(self) -> None:
        assert serialize_argument("hello world") == '"hello world"'
        assert serialize_argument(42) == "42"
        assert serialize_argument(1.5) == "1.5"
        assert serialize_argument(None) == "null"
        assert serialize_argument(True) == "true"
        assert serialize_argument(False) == "false"

    def test_compact_object(self) -> None:
        assert serialize_argument({"foo": "bar", "n": [1, 2]}) == '{"foo":"bar","n":[1,2]}'

    def test_script_close_tag_escaped(self) -> None:
        out = serialize_argument("</script</script")
        assert out == '"\\x3c/script\\x3c/script"'
        assert "<" not in out

    def test_nested_lt_escaped(self) -> None:
        out = serialize_argument({"html": ["<b>", {"<k>": "<v>"}]})
        assert "<" not in out
        assert out.count("\\x3c") == 3

    def test_non_ascii_kept(self) -> None:
        assert serialize_argument("héllo") == '"héllo"'

    def test_non_finite_floats_are_null(self) -> None:
        assert serialize_argument(math.nan) == "null"
        assert serialize_argument([math.inf, -math.inf]) == "[null,null]"

    def test_function_member_dropped(self) -> None:
        assert serialize_argument({"a": 1, "b": len}) == '{"a":1}'

    def test_function_in_list_is_null(self) -> None:
        assert serialize_argument([1, len, 2]) == "[1,null,2]"

    def test_top_level_function_is_null(self) -> None:
        assert serialize_argument(len) == "null"

    def test_unsupported_key_dropped(self) -> None:
        assert serialize_argument({(1, 2): "x", "k": "v"}) == '{"k":"v"}'

    def test_numeric_keys_become_strings(self) -> None:
        assert serialize_argument({1: "a"}) == '{"1":"a"}'

    def test_non_finite_float_keys(self) -> None:
        assert serialize_argument({math.nan: 1, "a": 2}) == '{"NaN":1,"a":2}'
        assert serialize_argument({math.inf: 1, -math.inf: 2}) == '{"Infinity":1,"-Infinity":2}'

    def test_float_and_literal_keys(self) -> None:
        assert serialize_argument({1.0: "x", 1.5: "y"}) == '{"1":"x","1.5":"y"}'
        assert serialize_argument({True: 1, None: 2}) == '{"true":1,"null":2}'

    def test_integral_floats_without_fraction(self) -> None:
        assert serialize_argument([1.0, 1e20, -0.0]) == "[1,100000000000000000000,0]"
        assert serialize_argument(1e21) == "1e+21"
        assert serialize_argument(Decimal("2.50")) == "2.5"

    def test_tuple_as_array(self) -> None:
        assert serialize_argument((1, "a")) == '[1,"a"]'

    def test_dates_iso(self) -> None:
        assert serialize_argument(date(2025, 1, 15)) == '"2025-01-15"'
        assert serialize_argument(datetime(2025, 1, 15, 12, 30)) == '"2025-01-15T12:30:00"'

    def test_decimal_and_uuid(self) -> None:
        assert serialize_argument(Decimal("42")) == "42"
        assert serialize_argument(Decimal("2.5")) == "2.5"
        uid = UUID("12345678-1234-5678-1234-567812345678")
        assert serialize_argument(uid) == '"12345678-1234-5678-1234-567812345678"'

    def test_pydantic_model(self) -> None:
        class Point(BaseModel):
            x: int
            label: str

        assert serialize_argument(Point(x=1, label="<p>")) == '{"x":1,"label":"\\x3cp>"}'

    def test_to_json_hook(self) -> None:
        class Money:
            def to_json(self) -> dict:
                return {"amount": 3, "currency": "EUR"}

        assert serialize_argument(Money()) == '{"amount":3,"currency":"EUR"}'

    def test_circular_reference(self) -> None:
        loop: list = []
        loop.append(loop)
        with pytest.raises(ValueError):
            serialize_argument(loop)

    def test_shared_reference_is_not_circular(self) -> None:
        shared = {"a": 1}
        assert serialize_argument([shared, shared]) == '[{"a":1},{"a":1}]'


class TestToJsonText:
    def test_not_escaped(self) -> None:
        assert to_json_text("<b>") == '"<b>"'


class TestSerializeArguments:
    def test_order_and_separator(self) -> None:
        out = serialize_arguments(["hello world", 42, None, {"foo": "bar"}])
        assert out == '"hello world", 42, null, {"foo":"bar"}'

    def test_empty(self) -> None:
        assert serialize_arguments([]) == ""

    def test_single(self) -> None:
        assert serialize_arguments(["<"]) == '"\\x3c"'
