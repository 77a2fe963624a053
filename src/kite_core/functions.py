"""Function descriptors for Kite Core."""

from __future__ import annotations

from dataclasses import dataclass, field

from .syntax import Expr
from .values import ValueKind


@dataclass(frozen=True)
class BuiltinFn:
    name: str
    params: list[str] = field(default_factory=list)
    body: list[Expr] = field(default_factory=list)  # always empty; implemented natively
    return_kind: ValueKind = ValueKind.Nothing

    def __str__(self) -> str:
        return self.name


@dataclass(frozen=True)
class UserFn:
    """A function declared in source.

    The parser builds these and a declaration may bind one in the
    environment, but no call path invokes them: calls resolve built-ins only.
    """

    name: str
    params: list[str] = field(default_factory=list)
    body: list[Expr] = field(default_factory=list)
    return_kind: ValueKind = ValueKind.Nothing

    def __str__(self) -> str:
        return self.name
