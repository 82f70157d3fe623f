"""Domain services implementing the pricing and credit rules."""
from __future__ import annotations

import logging
from typing import Mapping

from .errors import PlayNotFoundError, UnknownPlayTypeError
from .models import Invoice, Performance, Play, PlayType
from .pricing import ComedyPricing, PricingConstants, TragedyPricing, base_volume_credits
from .results import Statement, StatementLine

logger = logging.getLogger(__name__)


class StatementCalculator:
    """Prices performances and totals invoices against one set of pricing constants."""

    def __init__(self, pricing: PricingConstants | None = None) -> None:
        if pricing is None:
            pricing = PricingConstants()
        self._pricing = pricing
        self._rules = {
            PlayType.TRAGEDY: TragedyPricing(pricing),
            PlayType.COMEDY: ComedyPricing(pricing),
        }

    @property
    def pricing(self) -> PricingConstants:
        return self._pricing

    def compute_amount(self, performance: Performance, play: Play) -> int:
        """Return the price of one performance in cents.

        Raises:
            UnknownPlayTypeError: If ``play.type`` is not a known genre.
        """
        rule = self._rules[play.play_type]
        return rule.amount(performance.audience)

    def compute_volume_credits(self, performance: Performance, play: Play) -> int:
        """Return the volume credits earned by one performance.

        Only comedies earn extra credits; any other tag gets the base credits.
        """
        try:
            rule = self._rules[play.play_type]
        except UnknownPlayTypeError:
            return base_volume_credits(performance.audience, self._pricing)
        return rule.volume_credits(performance.audience)

    @staticmethod
    def resolve_play(performance: Performance, plays: Mapping[str, Play]) -> Play:
        play = plays.get(performance.play_id)
        if play is None:
            raise PlayNotFoundError(performance.play_id)
        return play

    def total_amount(self, invoice: Invoice, plays: Mapping[str, Play]) -> int:
        return sum(
            self.compute_amount(performance, self.resolve_play(performance, plays))
            for performance in invoice.performances
        )

    def total_volume_credits(self, invoice: Invoice, plays: Mapping[str, Play]) -> int:
        return sum(
            self.compute_volume_credits(performance, self.resolve_play(performance, plays))
            for performance in invoice.performances
        )

    def build(self, invoice: Invoice, plays: Mapping[str, Play]) -> Statement:
        """Compute every line of an invoice in order, then the totals.

        The first performance that fails to resolve or price aborts the whole
        statement.
        """
        lines: list[StatementLine] = []
        for performance in invoice.performances:
            play = self.resolve_play(performance, plays)
            amount = self.compute_amount(performance, play)
            credits = self.compute_volume_credits(performance, play)
            lines.append(
                StatementLine(
                    play_name=play.name,
                    play_type=play.type,
                    audience=performance.audience,
                    amount=amount,
                    volume_credits=credits,
                )
            )

        statement = Statement(
            customer=invoice.customer,
            lines=tuple(lines),
            total_amount=sum(line.amount for line in lines),
            total_volume_credits=sum(line.volume_credits for line in lines),
            cents_per_dollar=self._pricing.cents_per_dollar,
        )
        logger.debug(
            "Built statement for %s: %d lines, %d cents, %d credits",
            invoice.customer,
            len(lines),
            statement.total_amount,
            statement.total_volume_credits,
        )
        return statement
