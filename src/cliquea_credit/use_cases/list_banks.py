from __future__ import annotations

from dataclasses import dataclass

from cliquea_credit.domain.bank import BankProfile
from cliquea_credit.ports.bank_profile_repository import BankProfileRepository


@dataclass(frozen=True, slots=True)
class ListBanksResponse:
    banks: list[BankProfile]


class ListBanks:
    """Active banks a customer can choose from, sorted by name."""

    def __init__(self, bank_profile_repository: BankProfileRepository) -> None:
        self._repository = bank_profile_repository

    def execute(self) -> ListBanksResponse:
        banks = sorted(
            self._repository.list_active(),
            key=lambda bank: (bank.name.casefold(), bank.id),
        )
        return ListBanksResponse(banks=banks)
