"""JSON-backed repositories for plays and invoices."""
from __future__ import annotations

from io import BytesIO
from pathlib import Path
from typing import Mapping, Sequence

from theater_billing.domain.models import Invoice, Play
from theater_billing.domain.repositories import InvoiceRepository, PlayRepository
from theater_billing.infrastructure.parsing.json_documents import json_to_invoices, json_to_plays


class JsonPlayRepository(PlayRepository):
    def __init__(self, source: BytesIO | Path | bytes | str) -> None:
        self._source = source

    def get_plays(self) -> Mapping[str, Play]:
        return json_to_plays(self._source)


class JsonInvoiceRepository(InvoiceRepository):
    def __init__(self, source: BytesIO | Path | bytes | str) -> None:
        self._source = source

    def list_invoices(self) -> Sequence[Invoice]:
        return json_to_invoices(self._source)
