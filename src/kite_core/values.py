"""Value types for Kite Core."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto
from typing import TYPE_CHECKING, Union

if TYPE_CHECKING:
    from .functions import BuiltinFn, UserFn


INT_MIN = -(2 ** 63)
INT_MAX = 2 ** 63 - 1


class ValueKind(Enum):
    Int = auto()
    Text = auto()
    Bool = auto()
    Fn = auto()
    Nothing = auto()


@dataclass(frozen=True, slots=True)
class VInt:
    value: int

    def __str__(self) -> str:
        return str(self.value)


@dataclass(frozen=True, slots=True)
class VText:
    value: str

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True, slots=True)
class VBool:
    value: bool

    def __str__(self) -> str:
        return str(self.value).lower()


@dataclass(frozen=True, slots=True)
class VFunc:
    fn: "BuiltinFn | UserFn"

    def __str__(self) -> str:
        # Function values print as nothing at all.
        return ""


class _Nothing:
    """Singleton unit value, the result of statements such as assignment."""

    _instance: "_Nothing | None" = None

    def __new__(cls) -> "_Nothing":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "Nothing"

    def __str__(self) -> str:
        return "Nothing"


Nothing = _Nothing()

Value = Union[VInt, VText, VBool, VFunc, _Nothing]


_KINDS: dict[type, ValueKind] = {
    VInt: ValueKind.Int,
    VText: ValueKind.Text,
    VBool: ValueKind.Bool,
    VFunc: ValueKind.Fn,
    _Nothing: ValueKind.Nothing,
}


def kind_of(value: Value) -> ValueKind:
    return _KINDS[type(value)]
