"""Storage helpers for pricing constant overrides."""
from __future__ import annotations

from pathlib import Path
import json
import logging
from typing import Any

from theater_billing.domain.pricing import DIVISOR_FIELDS, PricingConstants

logger = logging.getLogger(__name__)

DEFAULT_PATH = Path(__file__).resolve().parents[2] / "pricing_override.json"


def _normalize_pricing(raw: dict[str, Any] | None) -> dict[str, int]:
    normalized: dict[str, int] = {}
    if not isinstance(raw, dict):
        return normalized
    known = set(PricingConstants.field_names())
    for key, value in raw.items():
        if key is None:
            continue
        key_str = str(key).strip().lower()
        if key_str not in known:
            continue
        if isinstance(value, bool) or not isinstance(value, int):
            continue
        if key_str in DIVISOR_FIELDS and value <= 0:
            logger.warning("Ignoring non-positive pricing override %s=%s", key_str, value)
            continue
        normalized[key_str] = value
    return normalized


def load_pricing(path: Path | None = None) -> PricingConstants:
    override_path = path or DEFAULT_PATH
    defaults = PricingConstants().as_dict()
    if not override_path.exists():
        return PricingConstants.from_mapping(defaults)
    try:
        data = json.loads(override_path.read_text(encoding="utf-8"))
    except json.JSONDecodeError:
        logger.warning("Ignoring unreadable pricing override %s", override_path)
        return PricingConstants.from_mapping(defaults)
    override = _normalize_pricing(data)
    defaults.update(override)
    return PricingConstants.from_mapping(defaults)


def save_pricing(pricing: dict[str, Any], path: Path | None = None) -> PricingConstants:
    override_path = path or DEFAULT_PATH
    normalized = _normalize_pricing(pricing)
    override_path.write_text(
        json.dumps(normalized, ensure_ascii=False, indent=2, sort_keys=True),
        encoding="utf-8",
    )
    merged = PricingConstants().as_dict()
    merged.update(normalized)
    return PricingConstants.from_mapping(merged)
