"""Built-in functions.

Calls are resolved against this fixed registry, never against variable
bindings in the environment.
"""

from __future__ import annotations

import logging
from typing import IO, Callable

from .errors import ArityFault, UnknownCallee
from .functions import BuiltinFn
from .values import Nothing, Value, ValueKind

logger = logging.getLogger(__name__)

Impl = Callable[[list[Value], IO[str]], Value]


def _print(args: list[Value], dest: IO[str]) -> Value:
    """Write the arguments joined by ``", "`` followed by a newline."""
    if not args:
        raise ArityFault("print", expected=1, got=0)
    dest.write(", ".join(str(arg) for arg in args) + "\n")
    dest.flush()
    return Nothing


BUILTINS: dict[str, BuiltinFn] = {
    "print": BuiltinFn(name="print", params=["args"], return_kind=ValueKind.Nothing),
}

_IMPLS: dict[str, Impl] = {
    "print": _print,
}


def is_builtin(name: str) -> bool:
    return name in _IMPLS


def call_builtin(name: str, args: list[Value], dest: IO[str]) -> Value:
    """Run the built-in *name* on already-evaluated *args*."""
    impl = _IMPLS.get(name)
    if impl is None:
        raise UnknownCallee(name)
    logger.debug("call %s with %d argument(s)", name, len(args))
    return impl(args, dest)
