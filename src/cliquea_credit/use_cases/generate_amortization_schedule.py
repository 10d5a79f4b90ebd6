"""Amortization schedule for a single bank."""

from __future__ import annotations

from dataclasses import dataclass

from cliquea_credit.domain.amortization import AmortizationSchedule, build_schedule
from cliquea_credit.domain.bank import BankProfile
from cliquea_credit.domain.errors import NotFoundError
from cliquea_credit.domain.financing import FinancingRequest
from cliquea_credit.domain.quote import Quote, build_quote
from cliquea_credit.domain.validation import validate
from cliquea_credit.ports.bank_profile_repository import BankProfileRepository


@dataclass(frozen=True, slots=True)
class GenerateAmortizationScheduleRequest:
    financing: FinancingRequest
    bank_id: int


@dataclass(frozen=True, slots=True)
class GenerateAmortizationScheduleResponse:
    bank: BankProfile  # with any rate/CAT override applied
    quote: Quote
    schedule: AmortizationSchedule


class GenerateAmortizationSchedule:
    """
    Use case for the payment-by-payment table of one bank's offer.

    The request goes through the same validation as a comparison, with
    the chosen bank as the only candidate.
    """

    def __init__(self, bank_profile_repository: BankProfileRepository) -> None:
        self._repository = bank_profile_repository

    def execute(
        self, request: GenerateAmortizationScheduleRequest
    ) -> GenerateAmortizationScheduleResponse:
        """
        Raises:
            NotFoundError: If the bank does not exist or is not active
            FinancingValidationError: If the bank cannot finance the request
        """
        bank = self._repository.get_by_id(request.bank_id)
        if bank is None or not bank.active:
            raise NotFoundError(resource="Bank", identifier=str(request.bank_id))

        financing = request.financing
        bank = bank.with_overrides(financing.annual_rate_override, financing.cat_override)
        validated = validate(financing, [bank])

        quote = build_quote(validated.principal, bank, financing.term_months)
        schedule = build_schedule(validated.principal, quote.annual_rate, financing.term_months)

        return GenerateAmortizationScheduleResponse(bank=bank, quote=quote, schedule=schedule)
