from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor
from decimal import Decimal
from unittest.mock import Mock

import pytest

from cliquea_credit.adapters.default_bank_catalog import DEFAULT_BANK_PROFILES
from cliquea_credit.adapters.in_memory_bank_profile_repository import (
    InMemoryBankProfileRepository,
)
from cliquea_credit.domain.assessment import CreditAssessment
from cliquea_credit.domain.bank import BankProfile
from cliquea_credit.domain.comparison import RankCriterion
from cliquea_credit.domain.errors import NotFoundError
from cliquea_credit.domain.financing import (
    FinancingRequest,
    FinancingValidationError,
    IssueCode,
)
from cliquea_credit.use_cases.compare_bank_financing import (
    CompareBankFinancing,
    CompareBankFinancingRequest,
    compare_financing,
)


def make_bank(bank_id: int, name: str, rate: str, **overrides) -> BankProfile:
    data = {
        "id": bank_id,
        "name": name,
        "annual_rate": Decimal(rate),
        "cat": None,
        "commission": Decimal("2.00"),
        "max_term_months": 60,
        "max_amount": Decimal("5000000.00"),
    }
    data.update(overrides)
    return BankProfile(**data)


def make_financing(**overrides) -> FinancingRequest:
    data = {
        "vehicle_values": (Decimal("350000"),),
        "down_payment": Decimal("70000"),
        "term_months": 36,
    }
    data.update(overrides)
    return FinancingRequest(**data)


@pytest.fixture
def repository() -> InMemoryBankProfileRepository:
    return InMemoryBankProfileRepository(DEFAULT_BANK_PROFILES)


# ============================================================================
# compare_financing
# ============================================================================


def test_compare_ranks_default_catalog_by_monthly_payment():
    """Lower nominal rate means lower payment, so BBVA (12.50%) wins."""
    result = compare_financing(make_financing(), DEFAULT_BANK_PROFILES)

    assert [quote.bank_name for quote in result.quotes] == [
        "BBVA",
        "Inbursa",
        "Hey Banco",
        "Banorte",
        "Citibanamex",
        "Santander",
        "BanRegio",
        "Scotiabank",
        "HSBC",
        "Afirme",
    ]
    assert result.best_bank_ids == (1,)
    assert result.excluded == ()


def test_compare_by_effective_rate_uses_reported_cat():
    """Ranking by effective rate follows the banks' CAT."""
    result = compare_financing(
        make_financing(), DEFAULT_BANK_PROFILES, criterion=RankCriterion.EFFECTIVE_RATE
    )

    assert result.quotes[0].bank_name == "BBVA"
    assert result.quotes[-1].bank_name == "Afirme"
    assert result.criterion is RankCriterion.EFFECTIVE_RATE


def test_compare_by_total_cost_is_sorted():
    """Ranking by total cost orders quotes by total cost."""
    result = compare_financing(
        make_financing(), DEFAULT_BANK_PROFILES, criterion=RankCriterion.TOTAL_COST
    )

    costs = [quote.total_cost for quote in result.quotes]
    assert costs == sorted(costs)


def test_compare_reports_excluded_banks():
    """Banks that cannot finance the term are listed as excluded."""
    banks = [
        make_bank(1, "BBVA", "12.50", max_term_months=48),
        make_bank(2, "Banorte", "13.20"),
    ]

    result = compare_financing(make_financing(term_months=60), banks)

    assert [quote.bank_id for quote in result.quotes] == [2]
    assert result.excluded[0].code is IssueCode.INVALID_TERM
    assert result.excluded[0].bank_id == 1


def test_compare_rate_override_applies_to_every_bank():
    """With a rate override every bank quotes the same payment; ties go by name."""
    banks = [make_bank(3, "Santander", "13.80"), make_bank(1, "BBVA", "12.50")]

    result = compare_financing(make_financing(annual_rate_override=Decimal("12.00")), banks)

    assert [quote.bank_name for quote in result.quotes] == ["BBVA", "Santander"]
    assert all(quote.annual_rate == Decimal("12.00") for quote in result.quotes)
    assert result.best_bank_ids == (1, 3)


def test_compare_cat_override_is_reported():
    """A CAT override replaces the reported effective rate."""
    banks = [make_bank(1, "BBVA", "12.50", cat=Decimal("16.20"))]

    result = compare_financing(make_financing(cat_override=Decimal("20.00")), banks)

    assert result.quotes[0].effective_rate == Decimal("20.00")


def test_compare_with_executor_matches_sequential():
    """Building quotes on a thread pool yields the same ranking."""
    sequential = compare_financing(make_financing(), DEFAULT_BANK_PROFILES)

    with ThreadPoolExecutor(max_workers=4) as executor:
        concurrent = compare_financing(make_financing(), DEFAULT_BANK_PROFILES, executor=executor)

    assert concurrent == sequential


def test_compare_raises_when_no_bank_is_eligible():
    """No eligible bank fails with every issue found."""
    banks = [make_bank(1, "BBVA", "12.50", max_term_months=48)]

    with pytest.raises(FinancingValidationError) as exc_info:
        compare_financing(make_financing(term_months=60), banks)

    assert [issue.code for issue in exc_info.value.issues] == [
        IssueCode.INVALID_TERM,
        IssueCode.NO_ELIGIBLE_BANKS,
    ]


# ============================================================================
# CompareBankFinancing use case
# ============================================================================


def test_execute_compares_every_active_bank(repository: InMemoryBankProfileRepository):
    """Without bank_ids every active bank is quoted and assessed."""
    use_case = CompareBankFinancing(bank_profile_repository=repository)

    response = use_case.execute(CompareBankFinancingRequest(financing=make_financing()))

    assert len(response.result.entries) == len(DEFAULT_BANK_PROFILES)
    assert set(response.assessments) == {bank.id for bank in DEFAULT_BANK_PROFILES}
    assert all(isinstance(a, CreditAssessment) for a in response.assessments.values())


def test_execute_compares_selected_banks(repository: InMemoryBankProfileRepository):
    """bank_ids restricts the comparison; duplicates are ignored."""
    use_case = CompareBankFinancing(bank_profile_repository=repository)
    request = CompareBankFinancingRequest(financing=make_financing(), bank_ids=(3, 1, 3))

    response = use_case.execute(request)

    assert [quote.bank_name for quote in response.result.quotes] == ["BBVA", "Santander"]


def test_execute_unknown_bank_raises_not_found(repository: InMemoryBankProfileRepository):
    """Selecting a bank that does not exist is a 404."""
    use_case = CompareBankFinancing(bank_profile_repository=repository)
    request = CompareBankFinancingRequest(financing=make_financing(), bank_ids=(1, 99))

    with pytest.raises(NotFoundError, match="Bank with identifier '99' not found"):
        use_case.execute(request)


def test_execute_selected_inactive_bank_is_excluded():
    """A selected inactive bank is excluded instead of quoted."""
    repository = InMemoryBankProfileRepository(
        [make_bank(1, "BBVA", "12.50", active=False), make_bank(2, "Banorte", "13.20")]
    )
    use_case = CompareBankFinancing(bank_profile_repository=repository)
    request = CompareBankFinancingRequest(financing=make_financing(), bank_ids=(1, 2))

    response = use_case.execute(request)

    assert [quote.bank_id for quote in response.result.quotes] == [2]
    assert response.result.excluded[0].code is IssueCode.BANK_INACTIVE


def test_execute_uses_executor(repository: InMemoryBankProfileRepository):
    """The injected executor builds the quotes."""
    with ThreadPoolExecutor(max_workers=2) as pool:
        executor = Mock(wraps=pool)
        use_case = CompareBankFinancing(bank_profile_repository=repository, executor=executor)

        response = use_case.execute(CompareBankFinancingRequest(financing=make_financing()))

    executor.map.assert_called_once()
    assert response.result.best_bank_ids == (1,)


def test_execute_logs_summary(repository: InMemoryBankProfileRepository, caplog):
    """A summary line is logged for each comparison."""
    use_case = CompareBankFinancing(bank_profile_repository=repository)

    with caplog.at_level("INFO", logger="cliquea_credit.use_cases.compare_bank_financing"):
        use_case.execute(CompareBankFinancingRequest(financing=make_financing()))

    record = next(r for r in caplog.records if r.getMessage() == "Financing comparison completed")
    assert record.quoted_banks == len(DEFAULT_BANK_PROFILES)
    assert record.best_bank_ids == [1]
