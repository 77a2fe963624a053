"""AST node types handed to the evaluator by the parser.

The evaluator never builds or mutates these; it only walks them.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Union


# ---------------------------------------------------------------------------
# Tokens
# ---------------------------------------------------------------------------

class TokenType(Enum):
    Num = auto()
    String = auto()
    Bool = auto()
    Identifier = auto()
    # Structural kinds the lexer emits; the evaluator reduces them to Nothing.
    LParen = auto()
    RParen = auto()
    LBrace = auto()
    RBrace = auto()
    Comma = auto()
    Semicolon = auto()
    Colon = auto()
    Arrow = auto()
    Keyword = auto()
    Eof = auto()


@dataclass(frozen=True, slots=True)
class Token:
    type: TokenType
    value: int | str | bool | None = None

    def __str__(self) -> str:
        if self.value is None:
            return self.type.name
        return str(self.value)


# ---------------------------------------------------------------------------
# Expressions
# ---------------------------------------------------------------------------

class Operator(Enum):
    SetVal = auto()   # :=
    Add = auto()
    Sub = auto()
    Mul = auto()
    Div = auto()
    Eq = auto()
    Neq = auto()


@dataclass(frozen=True, slots=True)
class BinaryExpr:
    op: Operator
    lhs: Expr
    rhs: Expr


@dataclass(frozen=True, slots=True)
class FnCall:
    name: str
    args: list[Expr] = field(default_factory=list)


Expr = Union[BinaryExpr, Token, FnCall]
