"""Faults raised during evaluation.

Every fault aborts the current run. ``Interpreter.run`` records the index of
the top-level expression that raised it in ``index`` before re-raising.
"""

from __future__ import annotations


class KiteCoreError(Exception):
    """Base class for all evaluation faults."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message
        self.index: int | None = None

    def __str__(self) -> str:
        if self.index is None:
            return self.message
        return f"{self.message} (in top-level expression {self.index})"


class TypeMismatch(KiteCoreError):
    """Operand variants do not fit the operator."""


class UnboundName(KiteCoreError):
    def __init__(self, name: str) -> None:
        super().__init__(f"Undefined variable: {name}")
        self.name = name


class UnknownCallee(KiteCoreError):
    def __init__(self, name: str) -> None:
        super().__init__(f"Undefined function: {name}")
        self.name = name


class ArityFault(KiteCoreError):
    def __init__(self, name: str, expected: int, got: int) -> None:
        super().__init__(
            f"{name} expects at least {expected} argument(s), got {got}"
        )
        self.name = name
        self.expected = expected
        self.got = got


class ArithmeticFault(KiteCoreError):
    """Integer division by zero or 64-bit overflow."""
