"""Kite Core — tree-walking evaluator for Kite ASTs."""

from .builtins import BUILTINS
from .environment import Environment
from .errors import (
    ArithmeticFault,
    ArityFault,
    KiteCoreError,
    TypeMismatch,
    UnboundName,
    UnknownCallee,
)
from .evaluator import Interpreter, evaluate
from .functions import BuiltinFn, UserFn
from .session import Session
from .syntax import BinaryExpr, Expr, FnCall, Operator, Token, TokenType
from .values import (
    Nothing,
    Value,
    ValueKind,
    VBool,
    VFunc,
    VInt,
    VText,
    _Nothing,
    kind_of,
)

__all__ = [
    "evaluate",
    "Interpreter",
    "Session",
    "Environment",
    "BUILTINS",
    "BuiltinFn",
    "UserFn",
    "Nothing",
    "Value",
    "ValueKind",
    "VBool",
    "VFunc",
    "VInt",
    "VText",
    "kind_of",
    "BinaryExpr",
    "Expr",
    "FnCall",
    "Operator",
    "Token",
    "TokenType",
    "KiteCoreError",
    "TypeMismatch",
    "UnboundName",
    "UnknownCallee",
    "ArityFault",
    "ArithmeticFault",
]
