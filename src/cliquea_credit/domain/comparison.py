from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from enum import Enum
from typing import Sequence

from cliquea_credit.domain.amortization import HUNDRED
from cliquea_credit.domain.errors import ComputationError
from cliquea_credit.domain.financing import ZERO, ValidationIssue, quantize_money
from cliquea_credit.domain.quote import Quote


class EmptyQuoteSet(ComputationError):
    def __init__(self, message: str = "Cannot rank an empty set of quotes") -> None:
        super().__init__(message)


class RankCriterion(str, Enum):
    MONTHLY_PAYMENT = "monthly_payment"
    TOTAL_COST = "total_cost"
    EFFECTIVE_RATE = "effective_rate"


DEFAULT_CRITERION = RankCriterion.MONTHLY_PAYMENT


@dataclass(frozen=True, slots=True)
class RankedQuote:
    quote: Quote
    rank: int  # 1-based position
    is_best: bool
    monthly_savings: Decimal  # vs the highest monthly payment in the set
    savings_percentage: Decimal


@dataclass(frozen=True, slots=True)
class ComparisonResult:
    criterion: RankCriterion
    entries: tuple[RankedQuote, ...]
    excluded: tuple[ValidationIssue, ...] = ()

    @property
    def quotes(self) -> tuple[Quote, ...]:
        return tuple(entry.quote for entry in self.entries)

    @property
    def best(self) -> RankedQuote:
        return self.entries[0]

    @property
    def best_bank_ids(self) -> tuple[int, ...]:
        return tuple(entry.quote.bank_id for entry in self.entries if entry.is_best)


def criterion_value(quote: Quote, criterion: RankCriterion) -> Decimal:
    if criterion is RankCriterion.MONTHLY_PAYMENT:
        return quote.monthly_payment
    if criterion is RankCriterion.TOTAL_COST:
        return quote.total_cost
    return quote.effective_rate


def rank(
    quotes: Sequence[Quote],
    criterion: RankCriterion = DEFAULT_CRITERION,
) -> ComparisonResult:
    """
    Order quotes ascending by the criterion.

    Values are compared at cent (0.01) resolution; ties are broken by bank
    name (case-insensitive) and then bank id, never by input order. Every
    quote tied with the first one is flagged as best.

    Raises:
        EmptyQuoteSet: If quotes is empty
    """
    if not quotes:
        raise EmptyQuoteSet()

    def sort_key(quote: Quote) -> tuple[Decimal, str, int]:
        return (
            quantize_money(criterion_value(quote, criterion)),
            quote.bank_name.casefold(),
            quote.bank_id,
        )

    ordered = sorted(quotes, key=sort_key)
    best_value = sort_key(ordered[0])[0]
    highest_payment = max(quote.monthly_payment for quote in quotes)

    entries = []
    for position, quote in enumerate(ordered, start=1):
        savings = highest_payment - quote.monthly_payment
        if len(quotes) > 1 and highest_payment > 0:
            percentage = quantize_money(savings / highest_payment * HUNDRED)
        else:
            percentage = quantize_money(ZERO)

        entries.append(
            RankedQuote(
                quote=quote,
                rank=position,
                is_best=sort_key(quote)[0] == best_value,
                monthly_savings=savings,
                savings_percentage=percentage,
            )
        )

    return ComparisonResult(criterion=criterion, entries=tuple(entries))
