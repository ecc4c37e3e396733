"""Diagnostics collector handed to `evaluate`.

Every evaluation failure is reported here before the error is raised. The
collector keeps the messages for the caller and mirrors them to the module
logger.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Iterator, List, Optional

from .token_types import TT

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Diagnostic:
    message: str
    line: Optional[int] = None
    operator: Optional[TT] = None

    def __str__(self) -> str:
        if self.line is None:
            return self.message

        return f"line {self.line}: {self.message}"


@dataclass
class Diagnostics:
    entries: List[Diagnostic] = field(default_factory=list)

    def report(self, message: str, line: Optional[int] = None, operator: Optional[TT] = None) -> Diagnostic:
        diag = Diagnostic(message=message, line=line, operator=operator)
        self.entries.append(diag)
        logger.debug("%s", diag)
        return diag

    def messages(self) -> List[str]:
        return [d.message for d in self.entries]

    def clear(self) -> None:
        self.entries.clear()

    def __iter__(self) -> Iterator[Diagnostic]:
        return iter(self.entries)

    def __len__(self) -> int:
        return len(self.entries)
