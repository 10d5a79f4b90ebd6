from decimal import Decimal
from unittest.mock import Mock

from cliquea_credit.adapters.default_bank_catalog import DEFAULT_BANK_PROFILES
from cliquea_credit.adapters.in_memory_bank_profile_repository import (
    InMemoryBankProfileRepository,
)
from cliquea_credit.domain.bank import BankProfile
from cliquea_credit.ports.bank_profile_repository import BankProfileRepository
from cliquea_credit.use_cases.list_banks import ListBanks


def make_bank(bank_id: int, name: str, active: bool = True) -> BankProfile:
    return BankProfile(
        id=bank_id,
        name=name,
        annual_rate=Decimal("13.00"),
        cat=None,
        commission=Decimal("0"),
        max_term_months=60,
        max_amount=Decimal("5000000.00"),
        active=active,
    )


def test_lists_active_banks_sorted_by_name():
    """Banks are sorted case-insensitively by name."""
    repository = InMemoryBankProfileRepository(
        [make_bank(1, "Scotiabank"), make_bank(2, "banorte"), make_bank(3, "Afirme")]
    )

    response = ListBanks(bank_profile_repository=repository).execute()

    assert [bank.name for bank in response.banks] == ["Afirme", "banorte", "Scotiabank"]


def test_skips_inactive_banks():
    """Inactive banks are not listed."""
    repository = InMemoryBankProfileRepository([make_bank(1, "BBVA"), make_bank(2, "HSBC", active=False)])

    response = ListBanks(bank_profile_repository=repository).execute()

    assert [bank.id for bank in response.banks] == [1]


def test_lists_default_catalog():
    """The built-in catalog lists all ten banks."""
    repository = InMemoryBankProfileRepository(DEFAULT_BANK_PROFILES)

    response = ListBanks(bank_profile_repository=repository).execute()

    assert len(response.banks) == 10
    assert response.banks[0].name == "Afirme"


def test_delegates_to_repository():
    """The use case reads from list_active()."""
    repository = Mock(spec=BankProfileRepository)
    repository.list_active.return_value = []

    response = ListBanks(bank_profile_repository=repository).execute()

    repository.list_active.assert_called_once_with()
    assert response.banks == []
