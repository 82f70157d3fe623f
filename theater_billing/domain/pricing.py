"""Pricing constants and the per-genre pricing rules."""
from __future__ import annotations

from dataclasses import dataclass, fields
from typing import Any, Mapping


DIVISOR_FIELDS = ("comedy_extra_volume_factor", "cents_per_dollar")


@dataclass(slots=True, frozen=True)
class PricingConstants:
    """Amounts are in cents."""

    tragedy_base_amount: int = 40000
    tragedy_audience_threshold: int = 30
    tragedy_over_base_capacity_per_person: int = 1000
    comedy_base_amount: int = 30000
    comedy_audience_threshold: int = 20
    comedy_over_base_capacity_amount: int = 10000
    comedy_over_base_capacity_per_person: int = 500
    comedy_amount_per_audience: int = 300
    base_volume_credit_threshold: int = 30
    comedy_extra_volume_factor: int = 5
    cents_per_dollar: int = 100

    def __post_init__(self) -> None:
        for name in DIVISOR_FIELDS:
            if getattr(self, name) <= 0:
                raise ValueError(f"{name} must be positive")

    @classmethod
    def field_names(cls) -> tuple[str, ...]:
        return tuple(f.name for f in fields(cls))

    @classmethod
    def from_mapping(cls, values: Mapping[str, Any]) -> PricingConstants:
        """Build constants from a mapping, ignoring keys that are not constants."""
        known = set(cls.field_names())
        return cls(**{key: int(value) for key, value in values.items() if key in known})

    def as_dict(self) -> dict[str, int]:
        return {name: getattr(self, name) for name in self.field_names()}


def base_volume_credits(audience: int, pricing: PricingConstants) -> int:
    return max(audience - pricing.base_volume_credit_threshold, 0)


class TragedyPricing:
    """Flat base price with a per-person surcharge past the threshold."""

    def __init__(self, pricing: PricingConstants) -> None:
        self._pricing = pricing

    def amount(self, audience: int) -> int:
        p = self._pricing
        result = p.tragedy_base_amount
        if audience > p.tragedy_audience_threshold:
            result += p.tragedy_over_base_capacity_per_person * (audience - p.tragedy_audience_threshold)
        return result

    def volume_credits(self, audience: int) -> int:
        return base_volume_credits(audience, self._pricing)


class ComedyPricing:
    """Base price, a step plus per-person surcharge past the threshold, and a per-seat charge."""

    def __init__(self, pricing: PricingConstants) -> None:
        self._pricing = pricing

    def amount(self, audience: int) -> int:
        p = self._pricing
        result = p.comedy_base_amount
        if audience > p.comedy_audience_threshold:
            result += p.comedy_over_base_capacity_amount + p.comedy_over_base_capacity_per_person * (
                audience - p.comedy_audience_threshold
            )
        result += p.comedy_amount_per_audience * audience
        return result

    def volume_credits(self, audience: int) -> int:
        # Truncates toward zero, so negative audiences do not round down.
        extra = abs(audience) // self._pricing.comedy_extra_volume_factor
        if audience < 0:
            extra = -extra
        return base_volume_credits(audience, self._pricing) + extra
