from __future__ import annotations

from typing import Iterable

from cliquea_credit.domain.bank import BankProfile
from cliquea_credit.ports.bank_profile_repository import BankProfileRepository


class InMemoryBankProfileRepository(BankProfileRepository):
    """
    Canonical contract implementation for tests and the `memory` catalog.

    - Stores banks in insertion order
    - list_active() skips inactive banks
    - get_by_id() returns inactive banks too
    """

    def __init__(self, banks: Iterable[BankProfile]) -> None:
        self._banks = list(banks)

    def list_active(self) -> list[BankProfile]:
        return [bank for bank in self._banks if bank.active]

    def get_by_id(self, bank_id: int) -> BankProfile | None:
        for bank in self._banks:
            if bank.id == bank_id:
                return bank
        return None
