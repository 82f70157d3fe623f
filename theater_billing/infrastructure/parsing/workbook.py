"""Excel workbook parser producing plays and invoices.

The workbook carries a plays sheet (``playID``, ``name``, ``type``) and a
performances sheet (``customer``, ``playID``, ``audience``) with one row per
performance.
"""
from __future__ import annotations

from io import BytesIO
from pathlib import Path
from typing import Sequence
import logging
from zipfile import BadZipFile

import pandas as pd

from theater_billing.config import SETTINGS
from theater_billing.domain.errors import InvalidDocumentError
from theater_billing.domain.models import Invoice, Performance, Play
from theater_billing.infrastructure.parsing.utils import (
    describe_source,
    ensure_bytes,
    parse_audience,
    parse_text,
)

logger = logging.getLogger(__name__)

PLAY_COLUMNS = ["playID", "name", "type"]
PERFORMANCE_COLUMNS = ["customer", "playID", "audience"]


def _list_sheets(source: BytesIO) -> list[str]:
    xls = pd.ExcelFile(source, engine="openpyxl")
    return xls.sheet_names


def _pick_sheet(source: BytesIO, preferred: str, name: str) -> str:
    try:
        sheets = _list_sheets(source)
    except (ValueError, BadZipFile) as exc:
        raise InvalidDocumentError(name, f"not a readable workbook ({exc})") from exc
    if preferred in sheets:
        return preferred
    lower_map = {sheet.lower(): sheet for sheet in sheets}
    if preferred.lower() in lower_map:
        return lower_map[preferred.lower()]
    raise InvalidDocumentError(name, f"workbook has no {preferred!r} sheet")


def _read_sheet(raw: bytes, preferred: str, columns: list[str], name: str) -> pd.DataFrame:
    sheet_name = _pick_sheet(BytesIO(raw), preferred, name)
    df = pd.read_excel(
        BytesIO(raw),
        sheet_name=sheet_name,
        engine="openpyxl",
        dtype=object,
    )
    df.columns = [str(column).strip() for column in df.columns]
    missing = [column for column in columns if column not in df.columns]
    if missing:
        raise InvalidDocumentError(name, f"sheet {sheet_name!r} is missing columns: {missing}")
    return df[columns].dropna(how="all")


def workbook_to_plays(source: BytesIO | Path | bytes | str) -> dict[str, Play]:
    name = describe_source(source)
    df = _read_sheet(ensure_bytes(source), SETTINGS.plays_sheet, PLAY_COLUMNS, name)

    plays: dict[str, Play] = {}
    for _, row in df.iterrows():
        play_id = parse_text(row["playID"], "playID", name)
        plays[play_id] = Play(
            name=parse_text(row["name"], "name", name),
            type=parse_text(row["type"], "type", name),
        )
    logger.debug("Loaded %d plays from %s", len(plays), name)
    return plays


def workbook_to_invoices(source: BytesIO | Path | bytes | str) -> Sequence[Invoice]:
    """Group performance rows by customer, in order of first appearance."""
    name = describe_source(source)
    df = _read_sheet(ensure_bytes(source), SETTINGS.performances_sheet, PERFORMANCE_COLUMNS, name)

    grouped: dict[str, list[Performance]] = {}
    for _, row in df.iterrows():
        customer = parse_text(row["customer"], "customer", name)
        grouped.setdefault(customer, []).append(
            Performance(
                play_id=parse_text(row["playID"], "playID", name),
                audience=parse_audience(row["audience"], name),
            )
        )
    invoices = [Invoice(customer=customer, performances=tuple(items)) for customer, items in grouped.items()]
    logger.debug("Loaded %d invoices from %s", len(invoices), name)
    return invoices
