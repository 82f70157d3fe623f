"""JSON parsers for ``plays.json`` and ``invoices.json`` style documents."""
from __future__ import annotations

from io import BytesIO
from pathlib import Path
from typing import Any, Mapping, Sequence
import json
import logging

from theater_billing.domain.errors import InvalidDocumentError
from theater_billing.domain.models import Invoice, Performance, Play
from theater_billing.infrastructure.parsing.utils import (
    describe_source,
    ensure_bytes,
    parse_audience,
    parse_text,
)

logger = logging.getLogger(__name__)


def _load_json(source: BytesIO | Path | bytes | str) -> Any:
    name = describe_source(source)
    try:
        return json.loads(ensure_bytes(source).decode("utf-8"))
    except (json.JSONDecodeError, UnicodeDecodeError) as exc:
        raise InvalidDocumentError(name, f"not valid JSON ({exc})") from exc


def plays_from_data(data: Any, source: str = "<memory>") -> dict[str, Play]:
    if not isinstance(data, Mapping):
        raise InvalidDocumentError(source, "plays document must be an object keyed by play id")
    plays: dict[str, Play] = {}
    for play_id, entry in data.items():
        if not isinstance(entry, Mapping):
            raise InvalidDocumentError(source, f"play {play_id!r} must be an object")
        plays[str(play_id)] = Play(
            name=parse_text(entry.get("name"), "name", source),
            type=parse_text(entry.get("type"), "type", source),
        )
    return plays


def _invoice_from_data(entry: Any, source: str) -> Invoice:
    if not isinstance(entry, Mapping):
        raise InvalidDocumentError(source, "invoice must be an object")
    performances = entry.get("performances")
    if not isinstance(performances, list):
        raise InvalidDocumentError(source, "invoice performances must be a list")
    parsed: list[Performance] = []
    for item in performances:
        if not isinstance(item, Mapping):
            raise InvalidDocumentError(source, "performance must be an object")
        parsed.append(
            Performance(
                play_id=parse_text(item.get("playID"), "playID", source),
                audience=parse_audience(item.get("audience"), source),
            )
        )
    return Invoice(customer=parse_text(entry.get("customer"), "customer", source), performances=tuple(parsed))


def invoices_from_data(data: Any, source: str = "<memory>") -> list[Invoice]:
    """Accepts a list of invoices or a single invoice object."""
    if isinstance(data, Mapping):
        data = [data]
    if not isinstance(data, list):
        raise InvalidDocumentError(source, "invoices document must be a list of invoices")
    return [_invoice_from_data(entry, source) for entry in data]


def json_to_plays(source: BytesIO | Path | bytes | str) -> dict[str, Play]:
    plays = plays_from_data(_load_json(source), describe_source(source))
    logger.debug("Loaded %d plays from %s", len(plays), describe_source(source))
    return plays


def json_to_invoices(source: BytesIO | Path | bytes | str) -> Sequence[Invoice]:
    invoices = invoices_from_data(_load_json(source), describe_source(source))
    logger.debug("Loaded %d invoices from %s", len(invoices), describe_source(source))
    return invoices
