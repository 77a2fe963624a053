"""Evaluator: reduce a sequence of AST nodes against one environment."""

from __future__ import annotations

import logging
import sys
from typing import IO, Callable

from .builtins import call_builtin
from .environment import Environment
from .errors import ArithmeticFault, KiteCoreError, TypeMismatch
from .syntax import BinaryExpr, Expr, FnCall, Operator, Token, TokenType
from .values import INT_MAX, INT_MIN, Nothing, Value, VBool, VInt, VText

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Public entry point
# ---------------------------------------------------------------------------

def evaluate(
    exprs: list[Expr],
    *,
    environment: Environment | None = None,
    stdout: IO[str] | None = None,
) -> Environment:
    """Run *exprs* in order and return the final environment."""
    interp = Interpreter(exprs, environment=environment, stdout=stdout)
    interp.run()
    return interp.environment


# ---------------------------------------------------------------------------
# Interpreter
# ---------------------------------------------------------------------------

class Interpreter:
    """Tree-walking evaluator holding the program and its environment.

    ``stdout`` defaults to ``sys.stdout`` as it is at call time, so output
    redirection done after construction is honoured.
    """

    def __init__(
        self,
        exprs: list[Expr],
        *,
        environment: Environment | None = None,
        stdout: IO[str] | None = None,
    ) -> None:
        self.exprs = list(exprs)
        self.environment = Environment() if environment is None else environment
        self._stdout = stdout

    @property
    def stdout(self) -> IO[str]:
        return sys.stdout if self._stdout is None else self._stdout

    def run(self) -> None:
        """Reduce every top-level expression; the first fault propagates."""
        logger.debug("run: %d top-level expression(s)", len(self.exprs))
        for index, expr in enumerate(self.exprs):
            try:
                self.interpret_expr(expr)
            except KiteCoreError as exc:
                exc.index = index
                raise
        logger.debug("run: finished with %d binding(s)", len(self.environment))

    def interpret_expr(self, expr: Expr) -> Value:
        if isinstance(expr, BinaryExpr):
            if expr.op is Operator.SetVal:
                return self._assign(expr)
            left = self.interpret_expr(expr.lhs)
            right = self.interpret_expr(expr.rhs)
            return _apply_operator(expr.op, left, right)

        if isinstance(expr, Token):
            return self._eval_token(expr)

        if isinstance(expr, FnCall):
            args = [self.interpret_expr(arg) for arg in expr.args]
            return self.call_fn(expr.name, args)

        raise TypeError(f"not an expression node: {expr!r}")

    def call_fn(self, name: str, args: list[Value]) -> Value:
        return call_builtin(name, args, self.stdout)

    # -- Node handlers ---------------------------------------------------

    def _assign(self, expr: BinaryExpr) -> Value:
        target = expr.lhs
        if not (isinstance(target, Token) and target.type is TokenType.Identifier):
            raise TypeMismatch(f"Cannot assign to {target}")
        value = self.interpret_expr(expr.rhs)
        self.environment.set_global(str(target), value)
        return Nothing

    def _eval_token(self, token: Token) -> Value:
        if token.type is TokenType.Num:
            return VInt(token.value)
        if token.type is TokenType.String:
            return VText(token.value)
        if token.type is TokenType.Bool:
            return VBool(token.value)
        if token.type is TokenType.Identifier:
            return self.environment.get_global(token.value)
        return Nothing


# ---------------------------------------------------------------------------
# Operators
# ---------------------------------------------------------------------------

def _checked(result: int, verb: str) -> VInt:
    if not INT_MIN <= result <= INT_MAX:
        raise ArithmeticFault(f"attempt to {verb} with overflow")
    return VInt(result)


def _trunc_div(left: int, right: int) -> int:
    if right == 0:
        raise ArithmeticFault("attempt to divide by zero")
    quotient = abs(left) // abs(right)
    return quotient if (left < 0) == (right < 0) else -quotient


def _add(left: Value, right: Value) -> Value:
    if isinstance(left, VInt) and isinstance(right, VInt):
        return _checked(left.value + right.value, "add")
    if isinstance(left, VText) and isinstance(right, VText):
        return VText(left.value + right.value)
    raise TypeMismatch("Cannot add non-numeric values")


def _int_op(verb: str, fn: Callable[[int, int], int]):
    def apply(left: Value, right: Value) -> Value:
        if isinstance(left, VInt) and isinstance(right, VInt):
            return _checked(fn(left.value, right.value), verb)
        raise TypeMismatch(f"Cannot {verb} non-numeric values")
    return apply


def _compare(negate: bool):
    def apply(left: Value, right: Value) -> Value:
        if type(left) is type(right) and isinstance(left, (VInt, VText, VBool)):
            return VBool((left.value == right.value) != negate)
        raise TypeMismatch("Cannot compare non-numeric values")
    return apply


_OPERATORS: dict[Operator, Callable[[Value, Value], Value]] = {
    Operator.Add: _add,
    Operator.Sub: _int_op("subtract", lambda a, b: a - b),
    Operator.Mul: _int_op("multiply", lambda a, b: a * b),
    Operator.Div: _int_op("divide", _trunc_div),
    Operator.Eq: _compare(negate=False),
    Operator.Neq: _compare(negate=True),
}


def _apply_operator(op: Operator, left: Value, right: Value) -> Value:
    return _OPERATORS[op](left, right)
