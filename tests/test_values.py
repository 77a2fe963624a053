"""Tests for kite_core.values."""

import dataclasses

import pytest

from kite_core import BuiltinFn, UserFn
from kite_core.values import (
    Nothing,
    ValueKind,
    VBool,
    VFunc,
    VInt,
    VText,
    _Nothing,
    kind_of,
)


class TestNothing:
    def test_singleton(self):
        assert Nothing is _Nothing()

    def test_repr(self):
        assert repr(Nothing) == "Nothing"

    def test_str(self):
        assert str(Nothing) == "Nothing"


class TestRendering:
    def test_int(self):
        assert str(VInt(42)) == "42"

    def test_negative_int(self):
        assert str(VInt(-7)) == "-7"

    def test_text_is_raw(self):
        assert str(VText("hello world")) == "hello world"

    def test_bool_lowercase(self):
        assert str(VBool(True)) == "true"
        assert str(VBool(False)) == "false"

    def test_function_renders_empty(self):
        assert str(VFunc(BuiltinFn(name="print"))) == ""
        assert str(VFunc(UserFn(name="double", params=["n"]))) == ""


class TestEquality:
    def test_same_variant(self):
        assert VInt(3) == VInt(3)
        assert VText("a") != VText("b")

    def test_cross_variant_never_equal(self):
        assert VInt(1) != VBool(True)
        assert VText("1") != VInt(1)


def test_values_are_frozen():
    v = VInt(1)
    with pytest.raises(dataclasses.FrozenInstanceError):
        v.value = 2


def test_kind_of():
    assert kind_of(VInt(0)) is ValueKind.Int
    assert kind_of(VText("")) is ValueKind.Text
    assert kind_of(VBool(False)) is ValueKind.Bool
    assert kind_of(VFunc(BuiltinFn(name="print"))) is ValueKind.Fn
    assert kind_of(Nothing) is ValueKind.Nothing
