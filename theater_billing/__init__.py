"""Theater invoice pricing and statement printing."""
from theater_billing.application.use_cases import GenerateStatementsUseCase, StatementContext
from theater_billing.domain.services import StatementCalculator
from theater_billing.infrastructure.repositories.json_repositories import (
    JsonInvoiceRepository,
    JsonPlayRepository,
)
from theater_billing.presentation.statement_report import format_usd, render_text, statement

__all__ = [
    "GenerateStatementsUseCase",
    "StatementContext",
    "StatementCalculator",
    "JsonInvoiceRepository",
    "JsonPlayRepository",
    "format_usd",
    "render_text",
    "statement",
]
