from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal, localcontext
from enum import Enum

from cliquea_credit.domain.amortization import DECIMAL_PRECISION, HUNDRED
from cliquea_credit.domain.financing import ZERO, quantize_money
from cliquea_credit.domain.quote import Quote


class Rating(str, Enum):
    GOOD = "good"
    FAIR = "fair"
    POOR = "poor"
    BAD = "bad"


# Upper bounds (inclusive) for good / fair / poor; anything above is bad
COST_PERCENTAGE_BANDS = (Decimal("15"), Decimal("25"), Decimal("35"))
RATE_SPREAD_BANDS = (Decimal("3"), Decimal("5"), Decimal("8"))
TERM_MONTHS_BANDS = (36, 48, 60)

# Lower bounds (inclusive) for good / fair / poor on the overall score
OVERALL_SCORE_BANDS = (Decimal("75"), Decimal("50"), Decimal("25"))

COST_WEIGHT = Decimal("0.5")
RATE_WEIGHT = Decimal("0.3")
TERM_WEIGHT = Decimal("0.2")
REFERENCE_TERM_MONTHS = Decimal("60")


@dataclass(frozen=True, slots=True)
class CreditAssessment:
    cost_rating: Rating
    rate_rating: Rating
    term_rating: Rating
    overall_rating: Rating
    cost_score: Decimal
    rate_score: Decimal
    term_score: Decimal
    overall_score: Decimal
    cost_percentage: Decimal  # interest + commission over principal
    rate_spread: Decimal  # effective rate - nominal rate, in points


def assess_quote(quote: Quote) -> CreditAssessment:
    """
    Rate how expensive a quote is for the customer.

    Three factors are scored 0-100 and combined 50/30/20:
    financing cost relative to principal, gap between effective and
    nominal rate, and term length.
    """
    with localcontext() as ctx:
        ctx.prec = DECIMAL_PRECISION

        financing_cost = quote.total_interest + quote.commission_amount
        cost_percentage = financing_cost / quote.principal * HUNDRED
        rate_spread = quote.effective_rate - quote.annual_rate
        months = Decimal(quote.term_months)

        cost_score = _clamp(HUNDRED - cost_percentage * 2)
        rate_score = _clamp(HUNDRED - rate_spread * 10)
        term_score = _clamp(HUNDRED - months / REFERENCE_TERM_MONTHS * HUNDRED)
        overall_score = (
            cost_score * COST_WEIGHT + rate_score * RATE_WEIGHT + term_score * TERM_WEIGHT
        )

        return CreditAssessment(
            cost_rating=_rate_upper_bands(cost_percentage, COST_PERCENTAGE_BANDS),
            rate_rating=_rate_upper_bands(rate_spread, RATE_SPREAD_BANDS),
            term_rating=_rate_upper_bands(months, TERM_MONTHS_BANDS),
            overall_rating=_rate_lower_bands(overall_score, OVERALL_SCORE_BANDS),
            cost_score=quantize_money(cost_score),
            rate_score=quantize_money(rate_score),
            term_score=quantize_money(term_score),
            overall_score=quantize_money(overall_score),
            cost_percentage=quantize_money(cost_percentage),
            rate_spread=quantize_money(rate_spread),
        )


def _clamp(score: Decimal) -> Decimal:
    return max(ZERO, min(HUNDRED, score))


def _rate_upper_bands(value: Decimal, bands: tuple) -> Rating:
    good, fair, poor = bands
    if value <= good:
        return Rating.GOOD
    if value <= fair:
        return Rating.FAIR
    if value <= poor:
        return Rating.POOR
    return Rating.BAD


def _rate_lower_bands(value: Decimal, bands: tuple) -> Rating:
    good, fair, poor = bands
    if value >= good:
        return Rating.GOOD
    if value >= fair:
        return Rating.FAIR
    if value >= poor:
        return Rating.POOR
    return Rating.BAD
