"""Excel-backed repositories for plays and invoices."""
from __future__ import annotations

from io import BytesIO
from pathlib import Path
from typing import Mapping, Sequence

from theater_billing.domain.models import Invoice, Play
from theater_billing.domain.repositories import InvoiceRepository, PlayRepository
from theater_billing.infrastructure.parsing.utils import ensure_bytes
from theater_billing.infrastructure.parsing.workbook import workbook_to_invoices, workbook_to_plays


class ExcelPlayRepository(PlayRepository):
    def __init__(self, source: BytesIO | Path | bytes | str) -> None:
        self._source = ensure_bytes(source)

    def get_plays(self) -> Mapping[str, Play]:
        return workbook_to_plays(BytesIO(self._source))


class ExcelInvoiceRepository(InvoiceRepository):
    def __init__(self, source: BytesIO | Path | bytes | str) -> None:
        self._source = ensure_bytes(source)

    def list_invoices(self) -> Sequence[Invoice]:
        return workbook_to_invoices(BytesIO(self._source))
