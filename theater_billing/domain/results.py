"""Domain-level results for statement generation."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Sequence


@dataclass(frozen=True)
class StatementLine:
    play_name: str
    play_type: str
    audience: int
    amount: int
    volume_credits: int


@dataclass(frozen=True)
class Statement:
    customer: str
    lines: Sequence[StatementLine] = field(default_factory=tuple)
    total_amount: int = 0
    total_volume_credits: int = 0
    cents_per_dollar: int = 100

    def is_empty(self) -> bool:
        return not self.lines
