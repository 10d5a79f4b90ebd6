from __future__ import annotations

from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal
from enum import Enum
from typing import Any, Sequence

from cliquea_credit.domain.errors import ValidationError


CENTS = Decimal("0.01")
ZERO = Decimal("0")


def quantize_money(value: Decimal) -> Decimal:
    """Round to cents using ROUND_HALF_UP."""
    return value.quantize(CENTS, rounding=ROUND_HALF_UP)


def as_decimal(value: Decimal | int, field: str) -> Decimal:
    # Guardrail: prevent float leakage past boundary
    if isinstance(value, float):
        raise TypeError(f"{field} must be Decimal or int (no floats past the boundary)")
    return Decimal(value)


# ==============================================================================
# Validation issues
# ==============================================================================


class IssueCode(str, Enum):
    INVALID_PRINCIPAL = "INVALID_PRINCIPAL"
    INVALID_TERM = "INVALID_TERM"
    INVALID_RATE = "INVALID_RATE"
    EXCEEDS_MAX_AMOUNT = "EXCEEDS_MAX_AMOUNT"
    NO_ELIGIBLE_BANKS = "NO_ELIGIBLE_BANKS"
    BANK_INACTIVE = "BANK_INACTIVE"
    INVALID_BANK_PROFILE = "INVALID_BANK_PROFILE"


@dataclass(frozen=True, slots=True)
class ValidationIssue:
    code: IssueCode
    field: str
    message: str
    bank_id: int | None = None

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {
            "field": self.field,
            "message": self.message,
            "code": self.code.value,
        }
        if self.bank_id is not None:
            data["bank_id"] = self.bank_id
        return data


class FinancingValidationError(ValidationError):
    """Raised with every problem found in a financing request at once."""

    def __init__(self, issues: Sequence[ValidationIssue]) -> None:
        self.issues = tuple(issues)
        super().__init__(errors=[issue.to_dict() for issue in self.issues])


class FinancingInputError(ValidationError):
    """A single invalid calculation input."""

    issue_code: IssueCode
    field: str

    def __init__(self, message: str) -> None:
        self.issue = ValidationIssue(code=self.issue_code, field=self.field, message=message)
        super().__init__(message, errors=[self.issue.to_dict()])


class InvalidPrincipal(FinancingInputError):
    issue_code = IssueCode.INVALID_PRINCIPAL
    field = "principal"


class InvalidTerm(FinancingInputError):
    issue_code = IssueCode.INVALID_TERM
    field = "term_months"


class InvalidRate(FinancingInputError):
    issue_code = IssueCode.INVALID_RATE
    field = "annual_rate"


# ==============================================================================
# Request / results
# ==============================================================================


@dataclass(frozen=True, slots=True)
class FinancingRequest:
    """
    What the customer wants to finance.

    vehicle_values are summed into the base price; the down payment is
    subtracted from it to get the financed principal. The optional overrides
    replace every bank's nominal rate and/or CAT.
    """

    vehicle_values: tuple[Decimal, ...]
    down_payment: Decimal
    term_months: int
    annual_rate_override: Decimal | None = None
    cat_override: Decimal | None = None

    @property
    def principal_base(self) -> Decimal:
        return sum(self.vehicle_values, ZERO)

    @property
    def principal(self) -> Decimal:
        return self.principal_base - self.down_payment


@dataclass(frozen=True, slots=True)
class Amortization:
    principal: Decimal
    annual_rate: Decimal
    term_months: int
    periodic_rate: Decimal
    monthly_payment: Decimal
    total_interest: Decimal

    @property
    def total_paid(self) -> Decimal:
        return self.monthly_payment * self.term_months
