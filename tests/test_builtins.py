"""Tests for kite_core.builtins."""

import io

import pytest

from kite_core import (
    BUILTINS,
    ArityFault,
    Nothing,
    UnknownCallee,
    ValueKind,
    VBool,
    VFunc,
    VInt,
    VText,
)
from kite_core.builtins import call_builtin, is_builtin


def _call(name, args):
    out = io.StringIO()
    result = call_builtin(name, args, out)
    return result, out.getvalue()


class TestPrint:
    def test_single_argument(self):
        result, out = _call("print", [VInt(8)])
        assert result is Nothing
        assert out == "8\n"

    def test_multiple_arguments(self):
        _, out = _call("print", [VInt(1), VInt(2), VInt(3)])
        assert out == "1, 2, 3\n"

    def test_repeated_values_are_joined_by_position(self):
        _, out = _call("print", [VInt(1), VInt(2), VInt(1)])
        assert out == "1, 2, 1\n"

    def test_mixed_variants(self):
        _, out = _call("print", [VText("a"), VBool(False), Nothing])
        assert out == "a, false, Nothing\n"

    def test_function_value_prints_empty(self):
        _, out = _call("print", [VFunc(BUILTINS["print"])])
        assert out == "\n"

    def test_zero_arguments(self):
        with pytest.raises(ArityFault) as exc_info:
            _call("print", [])
        assert exc_info.value.expected == 1
        assert exc_info.value.got == 0


class TestRegistry:
    def test_print_descriptor(self):
        fn = BUILTINS["print"]
        assert str(fn) == "print"
        assert fn.body == []
        assert fn.return_kind is ValueKind.Nothing

    def test_is_builtin(self):
        assert is_builtin("print")
        assert not is_builtin("println")

    def test_unknown_name(self):
        with pytest.raises(UnknownCallee) as exc_info:
            _call("println", [VInt(1)])
        assert exc_info.value.name == "println"
        assert "Undefined function: println" in str(exc_info.value)
