from __future__ import annotations

import logging
from concurrent.futures import Executor
from dataclasses import dataclass, field, replace
from functools import partial
from typing import Sequence

from cliquea_credit.domain.assessment import CreditAssessment, assess_quote
from cliquea_credit.domain.bank import BankProfile
from cliquea_credit.domain.comparison import (
    DEFAULT_CRITERION,
    ComparisonResult,
    RankCriterion,
    rank,
)
from cliquea_credit.domain.errors import NotFoundError
from cliquea_credit.domain.financing import FinancingRequest
from cliquea_credit.domain.quote import build_quote
from cliquea_credit.domain.validation import validate
from cliquea_credit.ports.bank_profile_repository import BankProfileRepository

logger = logging.getLogger(__name__)


def compare_financing(
    request: FinancingRequest,
    banks: Sequence[BankProfile],
    criterion: RankCriterion | None = None,
    executor: Executor | None = None,
) -> ComparisonResult:
    """
    Quote every eligible bank and rank the quotes.

    Rate/CAT overrides in the request are applied to every bank first.
    Quotes may be built on an executor; the output order comes from the
    ranking alone, never from completion order.

    Raises:
        FinancingValidationError: If the request is invalid or no bank is eligible
    """
    candidates = [
        bank.with_overrides(request.annual_rate_override, request.cat_override)
        for bank in banks
    ]
    validated = validate(request, candidates)

    quote_for = partial(build_quote, validated.principal, term_months=request.term_months)
    if executor is None:
        quotes = [quote_for(bank) for bank in validated.eligible_banks]
    else:
        quotes = list(executor.map(quote_for, validated.eligible_banks))

    result = rank(quotes, criterion or DEFAULT_CRITERION)
    return replace(result, excluded=validated.excluded)


@dataclass(frozen=True, slots=True)
class CompareBankFinancingRequest:
    financing: FinancingRequest
    bank_ids: tuple[int, ...] | None = None  # None compares every active bank
    criterion: RankCriterion = DEFAULT_CRITERION


@dataclass(frozen=True, slots=True)
class CompareBankFinancingResponse:
    result: ComparisonResult
    assessments: dict[int, CreditAssessment] = field(default_factory=dict)


class CompareBankFinancing:
    """
    Compare financing offers across the bank catalog.

    Responsibilities:
    - Load the selected banks (or every active bank) from the repository
    - Delegate validation, quoting and ranking to compare_financing
    - Attach a credit assessment to every ranked quote
    """

    def __init__(
        self,
        bank_profile_repository: BankProfileRepository,
        executor: Executor | None = None,
    ) -> None:
        self._repository = bank_profile_repository
        self._executor = executor

    def execute(self, request: CompareBankFinancingRequest) -> CompareBankFinancingResponse:
        """
        Raises:
            NotFoundError: If a selected bank ID does not exist
            FinancingValidationError: If the request is invalid or no bank is eligible
        """
        banks = self._load_banks(request.bank_ids)

        result = compare_financing(
            request.financing,
            banks,
            criterion=request.criterion,
            executor=self._executor,
        )
        assessments = {entry.quote.bank_id: assess_quote(entry.quote) for entry in result.entries}

        logger.info(
            "Financing comparison completed",
            extra={
                "criterion": result.criterion.value,
                "quoted_banks": len(result.entries),
                "excluded_issues": len(result.excluded),
                "best_bank_ids": list(result.best_bank_ids),
            },
        )

        return CompareBankFinancingResponse(result=result, assessments=assessments)

    def _load_banks(self, bank_ids: tuple[int, ...] | None) -> list[BankProfile]:
        if bank_ids is None:
            return self._repository.list_active()

        banks = []
        for bank_id in dict.fromkeys(bank_ids):  # de-duplicate, keep order
            bank = self._repository.get_by_id(bank_id)
            if bank is None:
                raise NotFoundError(resource="Bank", identifier=str(bank_id))
            banks.append(bank)
        return banks
