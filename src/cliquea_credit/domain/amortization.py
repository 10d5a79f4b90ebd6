from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal, localcontext

from cliquea_credit.domain.financing import (
    ZERO,
    Amortization,
    InvalidPrincipal,
    InvalidRate,
    InvalidTerm,
    as_decimal,
    quantize_money,
)


# Fixed working precision so results never depend on the caller's decimal context
DECIMAL_PRECISION = 28

MONTHS_PER_YEAR = Decimal("12")
HUNDRED = Decimal("100")


def periodic_rate(annual_rate_percent: Decimal) -> Decimal:
    """Nominal annual percentage -> monthly rate (12.00 -> 0.01)."""
    return annual_rate_percent / HUNDRED / MONTHS_PER_YEAR


def compute_amortization(
    principal: Decimal | int,
    annual_rate_percent: Decimal | int,
    term_months: int,
) -> Amortization:
    """
    Fixed-payment amortization for a single principal/rate/term.

    Rounding policy:
    - All intermediate calculations use full precision Decimal
    - Monthly payment is rounded to cents using ROUND_HALF_UP
    - Total interest is computed from the rounded monthly payment,
      floored at zero

    Raises:
        InvalidRate: If annual_rate_percent < 0
        InvalidTerm: If term_months <= 0
        InvalidPrincipal: If principal <= 0
    """
    principal = as_decimal(principal, "principal")
    annual_rate_percent = as_decimal(annual_rate_percent, "annual_rate_percent")

    if annual_rate_percent < 0:
        raise InvalidRate("annual_rate must be >= 0")
    if term_months <= 0:
        raise InvalidTerm("term_months must be > 0")
    if principal <= 0:
        raise InvalidPrincipal("principal must be > 0")

    with localcontext() as ctx:
        ctx.prec = DECIMAL_PRECISION

        rate = periodic_rate(annual_rate_percent)
        months = Decimal(term_months)

        # monthly_payment = P * r / (1 - (1 + r)^-n)
        if rate == 0:
            monthly_payment_precise = principal / months
        else:
            discount = (Decimal("1") + rate) ** -term_months
            monthly_payment_precise = principal * rate / (Decimal("1") - discount)

        monthly_payment = quantize_money(monthly_payment_precise)
        total_interest = quantize_money(max(monthly_payment * months - principal, ZERO))

    return Amortization(
        principal=principal,
        annual_rate=annual_rate_percent,
        term_months=term_months,
        periodic_rate=rate,
        monthly_payment=monthly_payment,
        total_interest=total_interest,
    )


# ==============================================================================
# Payment-by-payment schedule
# ==============================================================================


@dataclass(frozen=True, slots=True)
class AmortizationRow:
    number: int
    payment: Decimal
    principal_portion: Decimal
    interest_portion: Decimal
    balance: Decimal


@dataclass(frozen=True, slots=True)
class AmortizationSchedule:
    amortization: Amortization
    rows: tuple[AmortizationRow, ...]

    @property
    def total_paid(self) -> Decimal:
        return sum((row.payment for row in self.rows), ZERO)

    @property
    def total_interest(self) -> Decimal:
        return sum((row.interest_portion for row in self.rows), ZERO)


def build_schedule(
    principal: Decimal | int,
    annual_rate_percent: Decimal | int,
    term_months: int,
) -> AmortizationSchedule:
    """
    Expand an amortization into one row per monthly payment.

    Interest is charged on the outstanding balance each month and rounded to
    cents. The last payment settles whatever balance remains, so principal
    portions always add up to the principal and the final balance is zero.
    """
    amortization = compute_amortization(principal, annual_rate_percent, term_months)

    rows: list[AmortizationRow] = []
    balance = amortization.principal

    with localcontext() as ctx:
        ctx.prec = DECIMAL_PRECISION

        for number in range(1, term_months + 1):
            interest = quantize_money(balance * amortization.periodic_rate)
            payment = amortization.monthly_payment
            principal_portion = payment - interest

            if number == term_months or principal_portion > balance:
                principal_portion = balance
                payment = principal_portion + interest

            balance -= principal_portion
            rows.append(
                AmortizationRow(
                    number=number,
                    payment=payment,
                    principal_portion=principal_portion,
                    interest_portion=interest,
                    balance=balance,
                )
            )

    return AmortizationSchedule(amortization=amortization, rows=tuple(rows))
