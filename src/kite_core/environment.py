"""The single global binding table."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Iterator

from .errors import UnboundName
from .values import Value

logger = logging.getLogger(__name__)


@dataclass
class Environment:
    """Holds every variable binding of a program.

    There is one flat scope: no nesting, no call frames.
    """

    globals_: dict[str, Value] = field(default_factory=dict)

    def set_global(self, name: str, value: Value) -> None:
        logger.debug("bind %s = %r", name, value)
        self.globals_[name] = value

    def get_global(self, name: str) -> Value:
        try:
            return self.globals_[name]
        except KeyError:
            raise UnboundName(name) from None

    def __contains__(self, name: object) -> bool:
        return name in self.globals_

    def __iter__(self) -> Iterator[str]:
        return iter(self.globals_)

    def __len__(self) -> int:
        return len(self.globals_)
