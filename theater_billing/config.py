"""Central configuration for the theater billing package."""
from __future__ import annotations

from dataclasses import dataclass

from theater_billing.domain.pricing import PricingConstants
from theater_billing.infrastructure.storage.pricing_store import load_pricing

LOGGER_NAME = "theater_billing"
LOG_FORMAT = "%(asctime)s %(levelname)s %(message)s"

JSON_SUFFIXES = {".json"}
WORKBOOK_SUFFIXES = {".xlsx", ".xlsm"}

PLAYS_SHEET = "Plays"
PERFORMANCES_SHEET = "Performances"


@dataclass(slots=True, frozen=True)
class Settings:
    pricing: PricingConstants
    line_separator: str
    plays_sheet: str
    performances_sheet: str


SETTINGS = Settings(
    pricing=load_pricing(),
    line_separator="\n",
    plays_sheet=PLAYS_SHEET,
    performances_sheet=PERFORMANCES_SHEET,
)
