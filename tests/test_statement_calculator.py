import pytest

from theater_billing.domain.errors import PlayNotFoundError, UnknownPlayTypeError
from theater_billing.domain.models import Invoice, Performance, Play, PlayType
from theater_billing.domain.pricing import PricingConstants
from theater_billing.domain.services import StatementCalculator


PLAYS = {
    "hamlet": Play(name="Hamlet", type="tragedy"),
    "as-like": Play(name="As You Like It", type="comedy"),
    "othello": Play(name="Othello", type="tragedy"),
}


def make_invoice(*performances: tuple[str, int]) -> Invoice:
    return Invoice(
        customer="BigCo",
        performances=tuple(Performance(play_id=play_id, audience=audience) for play_id, audience in performances),
    )


@pytest.mark.parametrize(
    "audience, expected",
    [(0, 40000), (29, 40000), (30, 40000), (31, 41000), (55, 65000)],
)
def test_tragedy_amount_around_threshold(audience, expected):
    calculator = StatementCalculator()

    assert calculator.compute_amount(Performance("hamlet", audience), PLAYS["hamlet"]) == expected


@pytest.mark.parametrize(
    "audience, expected",
    [(0, 30000), (19, 35700), (20, 36000), (21, 46800), (35, 58000)],
)
def test_comedy_amount_around_threshold(audience, expected):
    calculator = StatementCalculator()

    assert calculator.compute_amount(Performance("as-like", audience), PLAYS["as-like"]) == expected


def test_amount_is_deterministic():
    calculator = StatementCalculator()
    performance = Performance("as-like", 42)

    results = {calculator.compute_amount(performance, PLAYS["as-like"]) for _ in range(5)}

    assert len(results) == 1


def test_unknown_play_type_raises():
    calculator = StatementCalculator()
    play = Play(name="Cats", type="musical")

    with pytest.raises(UnknownPlayTypeError) as excinfo:
        calculator.compute_amount(Performance("cats", 10), play)

    assert excinfo.value.play_type == "musical"
    assert "unknown type: musical" in str(excinfo.value)


def test_play_type_tags():
    assert PlayType.from_tag("tragedy") is PlayType.TRAGEDY
    assert PlayType.from_tag("comedy") is PlayType.COMEDY
    with pytest.raises(UnknownPlayTypeError):
        PlayType.from_tag("Tragedy")


@pytest.mark.parametrize(
    "play_id, audience, expected",
    [
        ("hamlet", 55, 25),
        ("hamlet", 30, 0),
        ("hamlet", 10, 0),
        ("as-like", 35, 12),
        ("as-like", 4, 0),
        ("as-like", 30, 6),
    ],
)
def test_volume_credits(play_id, audience, expected):
    calculator = StatementCalculator()

    assert calculator.compute_volume_credits(Performance(play_id, audience), PLAYS[play_id]) == expected


def test_comedy_extra_credits_truncate_toward_zero():
    calculator = StatementCalculator()

    assert calculator.compute_volume_credits(Performance("as-like", -7), PLAYS["as-like"]) == -1


def test_volume_credits_for_unrecognized_type_use_base_rule():
    calculator = StatementCalculator()

    assert calculator.compute_volume_credits(Performance("cats", 40), Play("Cats", "musical")) == 10


@pytest.mark.parametrize("play_id", ["hamlet", "as-like"])
def test_volume_credits_never_decrease_with_audience(play_id):
    calculator = StatementCalculator()
    credits = [
        calculator.compute_volume_credits(Performance(play_id, audience), PLAYS[play_id])
        for audience in range(0, 120)
    ]

    assert credits == sorted(credits)


def test_totals_for_big_co():
    calculator = StatementCalculator()
    invoice = make_invoice(("hamlet", 55), ("as-like", 35))

    assert calculator.total_amount(invoice, PLAYS) == 123000
    assert calculator.total_volume_credits(invoice, PLAYS) == 37


def test_totals_do_not_depend_on_order():
    calculator = StatementCalculator()
    forward = make_invoice(("hamlet", 55), ("as-like", 35), ("othello", 40))
    backward = make_invoice(("othello", 40), ("as-like", 35), ("hamlet", 55))

    assert calculator.total_amount(forward, PLAYS) == calculator.total_amount(backward, PLAYS)
    assert calculator.total_volume_credits(forward, PLAYS) == calculator.total_volume_credits(backward, PLAYS)


def test_build_keeps_invoice_order():
    calculator = StatementCalculator()
    invoice = make_invoice(("as-like", 35), ("hamlet", 55))

    statement = calculator.build(invoice, PLAYS)

    assert [line.play_name for line in statement.lines] == ["As You Like It", "Hamlet"]
    assert [line.amount for line in statement.lines] == [58000, 65000]
    assert statement.total_amount == 123000
    assert statement.total_volume_credits == 37


def test_missing_play_raises_before_pricing():
    calculator = StatementCalculator()
    invoice = make_invoice(("hamlet", 55), ("missing", 10))

    with pytest.raises(PlayNotFoundError) as excinfo:
        calculator.build(invoice, PLAYS)

    assert excinfo.value.play_id == "missing"


def test_first_failing_performance_determines_error():
    calculator = StatementCalculator()
    plays = dict(PLAYS, cats=Play(name="Cats", type="musical"))
    invoice = make_invoice(("cats", 10), ("missing", 10))

    with pytest.raises(UnknownPlayTypeError):
        calculator.build(invoice, plays)


def test_empty_invoice_has_zero_totals():
    statement = StatementCalculator().build(Invoice(customer="Nobody"), PLAYS)

    assert statement.is_empty()
    assert statement.total_amount == 0
    assert statement.total_volume_credits == 0


def test_substituted_pricing_changes_results():
    pricing = PricingConstants(tragedy_base_amount=10000, tragedy_over_base_capacity_per_person=100)
    calculator = StatementCalculator(pricing)

    assert calculator.pricing is pricing
    assert calculator.compute_amount(Performance("hamlet", 40), PLAYS["hamlet"]) == 11000


def test_play_built_from_enum_gets_comedy_credits():
    calculator = StatementCalculator()
    play = Play(name="As You Like It", type=PlayType.COMEDY)
    performance = Performance("as-like", 35)

    assert play.type == "comedy"
    assert calculator.compute_amount(performance, play) == 58000
    assert calculator.compute_volume_credits(performance, play) == 12


def test_build_carries_pricing_unit():
    calculator = StatementCalculator(PricingConstants(cents_per_dollar=1000))

    statement = calculator.build(make_invoice(("hamlet", 55)), PLAYS)

    assert statement.cents_per_dollar == 1000


@pytest.mark.parametrize("field_name", ["comedy_extra_volume_factor", "cents_per_dollar"])
def test_pricing_rejects_non_positive_divisors(field_name):
    with pytest.raises(ValueError):
        PricingConstants(**{field_name: 0})
