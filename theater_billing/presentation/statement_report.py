"""Statement renderers: plain text, CSV and HTML."""
from __future__ import annotations

import csv
import html
import io
from decimal import Decimal
from typing import Mapping

from theater_billing.config import SETTINGS
from theater_billing.domain.models import Invoice, Play
from theater_billing.domain.results import Statement
from theater_billing.domain.services import StatementCalculator


def format_usd(cents: int, cents_per_dollar: int | None = None) -> str:
    """Render cents as US dollars, e.g. ``123000 -> "$1,230.00"``."""
    if cents_per_dollar is None:
        cents_per_dollar = SETTINGS.pricing.cents_per_dollar
    dollars = Decimal(cents) / Decimal(cents_per_dollar)
    sign = "-" if dollars < 0 else ""
    return f"{sign}${abs(dollars):,.2f}"


def render_text(statement: Statement, line_separator: str | None = None) -> str:
    sep = SETTINGS.line_separator if line_separator is None else line_separator
    unit = statement.cents_per_dollar
    parts = [f"Statement for {statement.customer}"]
    for line in statement.lines:
        parts.append(f"  {line.play_name}: {format_usd(line.amount, unit)} ({line.audience} seats)")
    parts.append(f"Amount owed is {format_usd(statement.total_amount, unit)}")
    parts.append(f"You earned {statement.total_volume_credits} credits")
    return "".join(part + sep for part in parts)


def statement(
    invoice: Invoice,
    plays: Mapping[str, Play],
    calculator: StatementCalculator | None = None,
) -> str:
    """Price an invoice and render it as text.

    Raises:
        PlayNotFoundError: If a performance references an unknown play id.
        UnknownPlayTypeError: If a play's type has no pricing rule.
    """
    calculator = calculator or StatementCalculator(SETTINGS.pricing)
    return render_text(calculator.build(invoice, plays))


def statement_to_rows(statement: Statement) -> list[dict[str, str]]:
    rows: list[dict[str, str]] = []
    for line in statement.lines:
        rows.append(
            {
                "customer": statement.customer,
                "play": line.play_name,
                "type": line.play_type,
                "audience": str(line.audience),
                "amount": format_usd(line.amount, statement.cents_per_dollar),
                "volume_credits": str(line.volume_credits),
            }
        )
    return rows


def render_csv(statement: Statement, include_header: bool = True) -> bytes:
    rows = statement_to_rows(statement)
    buffer = io.StringIO()
    writer = csv.DictWriter(buffer, fieldnames=list(rows[0].keys()) if rows else [])
    if rows:
        if include_header:
            writer.writeheader()
        writer.writerows(rows)
    return buffer.getvalue().encode("utf-8")


def render_html(statement: Statement) -> str:
    title = f"<h2>Statement for {html.escape(statement.customer)}</h2>"
    totals = (
        f"<p>Amount owed is {format_usd(statement.total_amount, statement.cents_per_dollar)}</p>"
        f"<p>You earned {statement.total_volume_credits} credits</p>"
    )
    rows = statement_to_rows(statement)
    if not rows:
        return f"{title}<p>No performances.</p>{totals}"
    header = "".join(f"<th>{col}</th>" for col in rows[0].keys())
    body_parts = []
    for row in rows:
        body_parts.append("<tr>" + "".join(f"<td>{html.escape(value)}</td>" for value in row.values()) + "</tr>")
    body_html = "".join(body_parts)
    return f"{title}<table><thead><tr>{header}</tr></thead><tbody>{body_html}</tbody></table>{totals}"
