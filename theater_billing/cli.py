"""Command-line entrypoint for printing invoice statements."""
from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from theater_billing.application.use_cases import GenerateStatementsUseCase, StatementContext
from theater_billing.config import JSON_SUFFIXES, SETTINGS, WORKBOOK_SUFFIXES
from theater_billing.domain.errors import DomainError, InvalidDocumentError
from theater_billing.domain.repositories import InvoiceRepository, PlayRepository
from theater_billing.domain.services import StatementCalculator
from theater_billing.infrastructure.repositories.excel_repositories import (
    ExcelInvoiceRepository,
    ExcelPlayRepository,
)
from theater_billing.infrastructure.repositories.json_repositories import (
    JsonInvoiceRepository,
    JsonPlayRepository,
)
from theater_billing.infrastructure.storage.pricing_store import load_pricing
from theater_billing.log import setup_logging
from theater_billing.presentation.statement_report import render_csv, render_html, render_text


def parse_args(argv: list[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Print billing statements for theater invoices")
    parser.add_argument("plays", type=Path, help="Path to plays file (.json, .xlsx)")
    parser.add_argument("invoices", type=Path, help="Path to invoices file (.json, .xlsx)")
    parser.add_argument("--format", choices=["text", "csv", "html"], default="text", help="Output format")
    parser.add_argument("--pricing", type=Path, help="JSON file overriding pricing constants")
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")
    return parser.parse_args(argv)


def _play_repository(path: Path) -> PlayRepository:
    suffix = path.suffix.lower()
    if suffix in JSON_SUFFIXES:
        return JsonPlayRepository(path)
    if suffix in WORKBOOK_SUFFIXES:
        return ExcelPlayRepository(path)
    raise InvalidDocumentError(str(path), f"unsupported file type {suffix!r}")


def _invoice_repository(path: Path) -> InvoiceRepository:
    suffix = path.suffix.lower()
    if suffix in JSON_SUFFIXES:
        return JsonInvoiceRepository(path)
    if suffix in WORKBOOK_SUFFIXES:
        return ExcelInvoiceRepository(path)
    raise InvalidDocumentError(str(path), f"unsupported file type {suffix!r}")


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv if argv is not None else sys.argv[1:])
    logger = setup_logging(level=logging.DEBUG if args.verbose else logging.INFO)

    pricing = load_pricing(args.pricing) if args.pricing else SETTINGS.pricing

    try:
        context = StatementContext(
            play_repository=_play_repository(args.plays),
            invoice_repository=_invoice_repository(args.invoices),
            calculator=StatementCalculator(pricing),
        )
        statements = GenerateStatementsUseCase(context).execute()
    except DomainError as exc:
        logger.error("Statement generation failed: %s", exc)
        return 1

    logger.debug("Generated %d statements", len(statements))
    header_written = False
    for index, statement in enumerate(statements):
        if args.format == "csv":
            sys.stdout.write(render_csv(statement, include_header=not header_written).decode("utf-8"))
            header_written = header_written or not statement.is_empty()
        elif args.format == "html":
            print(render_html(statement))
        else:
            if index:
                print()
            print(render_text(statement), end="")

    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
