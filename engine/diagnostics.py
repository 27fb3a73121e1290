"""
Recoverable conditions raised while computing the comparison tables.

A missing catalog, an unknown held product or an absent future month never
stops the run: the condition is logged, kept in order for the caller, and the
affected row or table is skipped.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Iterator, List

logger = logging.getLogger(__name__)


@dataclass
class Diagnostics:
    messages: List[str] = field(default_factory=list)

    def report(self, message: str) -> None:
        logger.warning(message)
        self.messages.append(message)

    def __iter__(self) -> Iterator[str]:
        return iter(self.messages)

    def __len__(self) -> int:
        return len(self.messages)
