from __future__ import annotations

from abc import ABC, abstractmethod

from cliquea_credit.domain.bank import BankProfile


class BankProfileRepository(ABC):
    """
    Port for read-only access to bank rate profiles.

    The comparison engine never writes bank data; implementations only
    expose the queries it needs.
    """

    @abstractmethod
    def list_active(self) -> list[BankProfile]:
        """
        List every bank currently offering credit.

        Returns:
            Active bank profiles, in no guaranteed order
        """
        ...

    @abstractmethod
    def get_by_id(self, bank_id: int) -> BankProfile | None:
        """
        Get a bank profile by ID, active or not.

        Returns:
            BankProfile if found, None otherwise
        """
        ...
