from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal, localcontext
from enum import Enum

from cliquea_credit.domain.amortization import (
    DECIMAL_PRECISION,
    HUNDRED,
    compute_amortization,
)
from cliquea_credit.domain.bank import BankProfile
from cliquea_credit.domain.financing import (
    CENTS,
    ZERO,
    InvalidPrincipal,
    InvalidRate,
    as_decimal,
    quantize_money,
)


# Bisection settings for the effective rate estimate
IRR_MAX_ITERATIONS = 100
IRR_TOLERANCE = Decimal("1e-12")
IRR_MAX_BRACKET_DOUBLINGS = 64


class EffectiveRateSource(str, Enum):
    REPORTED = "reported"
    ESTIMATED = "estimated"


@dataclass(frozen=True, slots=True)
class Quote:
    """
    A bank's financing offer for one request.

    reported_effective_rate is the bank's own CAT (None if unknown);
    estimated_effective_rate is always computed from the payment stream.
    """

    bank_id: int
    bank_name: str
    principal: Decimal
    term_months: int
    annual_rate: Decimal
    periodic_rate: Decimal
    monthly_payment: Decimal
    total_interest: Decimal
    commission_amount: Decimal
    total_paid: Decimal
    total_cost: Decimal
    reported_effective_rate: Decimal | None
    estimated_effective_rate: Decimal

    @property
    def effective_rate(self) -> Decimal:
        if self.reported_effective_rate is not None:
            return self.reported_effective_rate
        return self.estimated_effective_rate

    @property
    def effective_rate_source(self) -> EffectiveRateSource:
        if self.reported_effective_rate is not None:
            return EffectiveRateSource.REPORTED
        return EffectiveRateSource.ESTIMATED


def build_quote(principal: Decimal | int, bank: BankProfile, term_months: int) -> Quote:
    """
    Assemble a complete quote for one bank.

    The term must already be within the bank's maximum (see validation).
    Deterministic: same inputs always yield identical rounded outputs.
    """
    principal = as_decimal(principal, "principal")
    if bank.annual_rate is None:
        raise InvalidRate(f"bank '{bank.name}' has no interest rate")

    amortization = compute_amortization(principal, bank.annual_rate, term_months)
    commission_amount = quantize_money(principal * bank.commission / HUNDRED)

    estimated = estimate_effective_rate(
        principal=principal,
        commission_amount=commission_amount,
        monthly_payment=amortization.monthly_payment,
        term_months=term_months,
    )

    return Quote(
        bank_id=bank.id,
        bank_name=bank.name,
        principal=principal,
        term_months=term_months,
        annual_rate=bank.annual_rate,
        periodic_rate=amortization.periodic_rate,
        monthly_payment=amortization.monthly_payment,
        total_interest=amortization.total_interest,
        commission_amount=commission_amount,
        total_paid=amortization.total_paid,
        total_cost=principal + amortization.total_interest + commission_amount,
        reported_effective_rate=bank.cat,
        estimated_effective_rate=estimated,
    )


def estimate_effective_rate(
    principal: Decimal,
    commission_amount: Decimal,
    monthly_payment: Decimal,
    term_months: int,
) -> Decimal:
    """
    Estimate an annual effective rate (%) from the credit's cash flows.

    The customer receives principal - commission and pays monthly_payment
    for term_months. The monthly rate that discounts the payments back to
    the net amount is found by bisection and compounded over 12 months.

    This is an estimate: it ignores taxes, insurance and any fee the bank
    does not report, which an official CAT includes.
    """
    with localcontext() as ctx:
        ctx.prec = DECIMAL_PRECISION

        net_amount = principal - commission_amount
        if net_amount <= 0:
            raise InvalidPrincipal("commission must leave a positive net amount")

        if monthly_payment * term_months <= net_amount:
            return ZERO.quantize(CENTS)

        low = ZERO
        high = Decimal("1")
        for _ in range(IRR_MAX_BRACKET_DOUBLINGS):
            if _present_value(monthly_payment, high, term_months) <= net_amount:
                break
            low = high
            high *= 2

        for _ in range(IRR_MAX_ITERATIONS):
            if high - low < IRR_TOLERANCE:
                break
            middle = (low + high) / 2
            if _present_value(monthly_payment, middle, term_months) > net_amount:
                low = middle
            else:
                high = middle

        monthly_rate = (low + high) / 2
        annual_rate = ((Decimal("1") + monthly_rate) ** 12 - 1) * HUNDRED
        return quantize_money(annual_rate)


def _present_value(payment: Decimal, rate: Decimal, periods: int) -> Decimal:
    if rate == 0:
        return payment * periods
    return payment * (Decimal("1") - (Decimal("1") + rate) ** -periods) / rate
