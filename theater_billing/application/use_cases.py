"""Application services orchestrating statement generation."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

from theater_billing.domain.repositories import InvoiceRepository, PlayRepository
from theater_billing.domain.results import Statement
from theater_billing.domain.services import StatementCalculator


@dataclass(slots=True)
class StatementContext:
    play_repository: PlayRepository
    invoice_repository: InvoiceRepository
    calculator: StatementCalculator


class GenerateStatementsUseCase:
    def __init__(self, context: StatementContext) -> None:
        self._context = context

    def execute(self) -> Sequence[Statement]:
        plays = self._context.play_repository.get_plays()
        invoices = self._context.invoice_repository.list_invoices()
        return [self._context.calculator.build(invoice, plays) for invoice in invoices]
