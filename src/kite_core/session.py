"""Session: incremental evaluation for notebook / interactive use."""

from __future__ import annotations

import logging
from typing import IO

from .environment import Environment
from .errors import KiteCoreError
from .evaluator import Interpreter
from .syntax import Expr
from .values import Value

logger = logging.getLogger(__name__)


class Session:
    """Stateful evaluator that keeps one environment across calls.

    Unlike ``Interpreter.run``, a fault does not escape: the batch that raised
    it stops, the fault is recorded, and the next ``eval`` carries on with the
    bindings made so far.

    Usage::

        session = Session()
        session.eval([BinaryExpr(Operator.SetVal, ident("x"), num(5))])
        session.eval([ident("x")])        # -> VInt(5)
        session.eval([ident("nobody")])   # -> None, session.last_fault set
        session.reset()
    """

    def __init__(self, stdout: IO[str] | None = None) -> None:
        self._stdout = stdout
        self.reset()

    @property
    def environment(self) -> Environment:
        return self._interp.environment

    def eval(self, exprs: list[Expr]) -> Value | None:
        """Evaluate *exprs* in order and return the last value.

        Returns ``None`` for an empty batch or when a fault stopped it.
        """
        self.last_fault = None
        self.last_result = None
        for expr in exprs:
            try:
                self.last_result = self._interp.interpret_expr(expr)
            except KiteCoreError as exc:
                logger.warning("evaluation fault: %s", exc)
                self.faults.append(exc)
                self.last_fault = exc
                self.last_result = None
                break
        return self.last_result

    def reset(self) -> None:
        """Clear all bindings and recorded faults."""
        self._interp = Interpreter([], stdout=self._stdout)
        self.faults: list[KiteCoreError] = []
        self.last_fault: KiteCoreError | None = None
        self.last_result: Value | None = None
