from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from typing import Sequence

from cliquea_credit.domain.bank import BankProfile
from cliquea_credit.domain.financing import (
    FinancingRequest,
    FinancingValidationError,
    IssueCode,
    ValidationIssue,
)


MAX_COMMISSION_PERCENT = Decimal("100")


@dataclass(frozen=True, slots=True)
class ValidatedInput:
    request: FinancingRequest
    principal: Decimal
    eligible_banks: tuple[BankProfile, ...]
    excluded: tuple[ValidationIssue, ...] = ()


def validate(request: FinancingRequest, banks: Sequence[BankProfile]) -> ValidatedInput:
    """
    Check a financing request against the candidate banks.

    Request-level problems fail the whole request. Bank-level problems only
    exclude that bank; they are reported in ValidatedInput.excluded. When no
    bank is left, every collected issue is raised together.

    Raises:
        FinancingValidationError: With all request-level issues, or with the
            per-bank issues plus NO_ELIGIBLE_BANKS
    """
    request_issues = _request_issues(request)
    if request_issues:
        raise FinancingValidationError(request_issues)

    principal = request.principal
    eligible: list[BankProfile] = []
    excluded: list[ValidationIssue] = []

    for bank in banks:
        bank_issues = _bank_issues(bank, principal, request.term_months)
        if bank_issues:
            excluded.extend(bank_issues)
        else:
            eligible.append(bank)

    if not eligible:
        excluded.append(
            ValidationIssue(
                code=IssueCode.NO_ELIGIBLE_BANKS,
                field="banks",
                message="No bank can finance this request",
            )
        )
        raise FinancingValidationError(excluded)

    return ValidatedInput(
        request=request,
        principal=principal,
        eligible_banks=tuple(eligible),
        excluded=tuple(excluded),
    )


def _request_issues(request: FinancingRequest) -> list[ValidationIssue]:
    issues: list[ValidationIssue] = []

    if not request.vehicle_values:
        issues.append(
            ValidationIssue(
                code=IssueCode.INVALID_PRINCIPAL,
                field="vehicle_values",
                message="At least one vehicle value is required",
            )
        )
    if any(value < 0 for value in request.vehicle_values):
        issues.append(
            ValidationIssue(
                code=IssueCode.INVALID_PRINCIPAL,
                field="vehicle_values",
                message="vehicle values must be >= 0",
            )
        )
    if request.down_payment < 0:
        issues.append(
            ValidationIssue(
                code=IssueCode.INVALID_PRINCIPAL,
                field="down_payment",
                message="down_payment must be >= 0",
            )
        )
    elif request.down_payment > request.principal_base:
        issues.append(
            ValidationIssue(
                code=IssueCode.INVALID_PRINCIPAL,
                field="down_payment",
                message="down_payment cannot exceed the total vehicle value",
            )
        )

    if not issues and request.principal <= 0:
        issues.append(
            ValidationIssue(
                code=IssueCode.INVALID_PRINCIPAL,
                field="principal",
                message="financed amount must be > 0",
            )
        )

    if request.term_months <= 0:
        issues.append(
            ValidationIssue(
                code=IssueCode.INVALID_TERM,
                field="term_months",
                message="term_months must be > 0",
            )
        )

    if request.annual_rate_override is not None and request.annual_rate_override < 0:
        issues.append(
            ValidationIssue(
                code=IssueCode.INVALID_RATE,
                field="annual_rate_override",
                message="annual_rate_override must be >= 0",
            )
        )
    if request.cat_override is not None and request.cat_override < 0:
        issues.append(
            ValidationIssue(
                code=IssueCode.INVALID_RATE,
                field="cat_override",
                message="cat_override must be >= 0",
            )
        )

    return issues


def _bank_issues(bank: BankProfile, principal: Decimal, term_months: int) -> list[ValidationIssue]:
    if not bank.active:
        return [
            ValidationIssue(
                code=IssueCode.BANK_INACTIVE,
                field="bank_id",
                message=f"{bank.name} is not active",
                bank_id=bank.id,
            )
        ]

    issues: list[ValidationIssue] = []

    if bank.annual_rate is None:
        issues.append(
            ValidationIssue(
                code=IssueCode.INVALID_BANK_PROFILE,
                field="annual_rate",
                message=f"{bank.name} has no interest rate",
                bank_id=bank.id,
            )
        )
    elif bank.annual_rate < 0:
        issues.append(
            ValidationIssue(
                code=IssueCode.INVALID_RATE,
                field="annual_rate",
                message=f"{bank.name} interest rate must be >= 0",
                bank_id=bank.id,
            )
        )
    if bank.cat is not None and bank.cat < 0:
        issues.append(
            ValidationIssue(
                code=IssueCode.INVALID_RATE,
                field="cat",
                message=f"{bank.name} CAT must be >= 0",
                bank_id=bank.id,
            )
        )
    if not (0 <= bank.commission < MAX_COMMISSION_PERCENT):
        issues.append(
            ValidationIssue(
                code=IssueCode.INVALID_BANK_PROFILE,
                field="commission",
                message=f"{bank.name} commission must be >= 0 and < 100",
                bank_id=bank.id,
            )
        )
    if bank.max_term_months <= 0 or bank.max_amount < 0:
        issues.append(
            ValidationIssue(
                code=IssueCode.INVALID_BANK_PROFILE,
                field="max_term_months" if bank.max_term_months <= 0 else "max_amount",
                message=f"{bank.name} has an invalid financing limit",
                bank_id=bank.id,
            )
        )
        return issues

    if term_months > bank.max_term_months:
        issues.append(
            ValidationIssue(
                code=IssueCode.INVALID_TERM,
                field="term_months",
                message=f"{bank.name} allows at most {bank.max_term_months} months",
                bank_id=bank.id,
            )
        )
    if principal > bank.max_amount:
        issues.append(
            ValidationIssue(
                code=IssueCode.EXCEEDS_MAX_AMOUNT,
                field="principal",
                message=f"{bank.name} finances at most {bank.max_amount}",
                bank_id=bank.id,
            )
        )

    return issues
