"""Unit tests for string.const — Const construction discipline."""

import copy

import pytest

from safescript.core.errors import TypeMismatchError
from safescript.string.const import Const


class TestConstFrom:
    def test_wraps_literal(self) -> None:
        c = Const.from_("var x = 1;")
        assert Const.unwrap(c) == "var x = 1;"
        assert c.get_typed_string_value() == "var x = 1;"

    def test_empty_is_shared(self) -> None:
        assert Const.from_("") is Const.EMPTY
        assert Const.unwrap(Const.EMPTY) == ""

    def test_rejects_non_str(self) -> None:
        with pytest.raises(TypeError):
            Const.from_(42)  # type: ignore[arg-type]

    def test_rejects_str_subclass(self) -> None:
        class Sneaky(str):
            pass

        with pytest.raises(TypeError):
            Const.from_(Sneaky("alert(1)"))  # type: ignore[arg-type]


class TestConstBrand:
    def test_direct_construction_refused(self) -> None:
        with pytest.raises(TypeError):
            Const("alert(1)", object())

    def test_subclass_refused(self) -> None:
        with pytest.raises(TypeError):

            class Forged(Const):  # type: ignore[misc]
                pass

    def test_immutable(self) -> None:
        c = Const.from_("a")
        with pytest.raises(AttributeError):
            c._value = "b"  # type: ignore[misc]
        with pytest.raises(AttributeError):
            del c._value

    def test_unwrap_rejects_plain_string(self) -> None:
        with pytest.raises(TypeMismatchError) as exc:
            Const.unwrap("alert(1)")
        assert "expected object of type Const" in str(exc.value)

    def test_copy_returns_same(self) -> None:
        c = Const.from_("a")
        assert copy.copy(c) is c
        assert copy.deepcopy(c) is c


class TestConstValue:
    def test_equality_and_hash(self) -> None:
        assert Const.from_("a") == Const.from_("a")
        assert Const.from_("a") != Const.from_("b")
        assert hash(Const.from_("a")) == hash(Const.from_("a"))

    def test_not_equal_to_str(self) -> None:
        assert Const.from_("a") != "a"

    def test_str(self) -> None:
        assert str(Const.from_("abc")) == "Const{abc}"
