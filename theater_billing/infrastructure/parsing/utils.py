"""Shared parsing utilities for plays and invoices documents."""
from __future__ import annotations

from io import BytesIO
from numbers import Integral, Real
from pathlib import Path

from theater_billing.domain.errors import InvalidDocumentError


def ensure_bytes(source: BytesIO | Path | bytes | str) -> bytes:
    if isinstance(source, bytes):
        return source
    if isinstance(source, BytesIO):
        return source.getvalue()
    if isinstance(source, (Path, str)):
        try:
            return Path(source).read_bytes()
        except OSError as exc:
            raise InvalidDocumentError(str(source), f"cannot read file ({exc.strerror or exc})") from exc
    raise TypeError(f"Unsupported source type: {type(source)!r}")


def describe_source(source: BytesIO | Path | bytes | str) -> str:
    if isinstance(source, (Path, str)):
        return str(source)
    return "<memory>"


def parse_text(value: object, field_name: str, source: str) -> str:
    if value is None or isinstance(value, float) and value != value:
        raise InvalidDocumentError(source, f"missing {field_name}")
    text = str(value).strip()
    if not text:
        raise InvalidDocumentError(source, f"empty {field_name}")
    return text


def parse_audience(value: object, source: str) -> int:
    """Coerce an audience cell to ``int``; integral floats such as 55.0 are accepted."""
    if isinstance(value, bool):
        raise InvalidDocumentError(source, f"audience must be an integer, got {value!r}")
    if isinstance(value, Integral):
        return int(value)
    if isinstance(value, Real):
        if value == value and float(value).is_integer():
            return int(value)
        raise InvalidDocumentError(source, f"audience must be an integer, got {value!r}")
    if isinstance(value, str):
        try:
            return int(value.strip())
        except ValueError:
            raise InvalidDocumentError(source, f"audience must be an integer, got {value!r}") from None
    raise InvalidDocumentError(source, f"audience must be an integer, got {value!r}")
