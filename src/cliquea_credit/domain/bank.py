from __future__ import annotations

from dataclasses import dataclass, replace
from decimal import Decimal


@dataclass(frozen=True, slots=True)
class BankProfile:
    """
    Rate profile a bank offers for vehicle credit.

    Percentages are expressed as numbers, e.g. Decimal("12.50") = 12.5%.
    A missing CAT (None) means the bank did not report one.
    """

    id: int
    name: str
    annual_rate: Decimal | None
    cat: Decimal | None
    commission: Decimal
    max_term_months: int
    max_amount: Decimal
    active: bool = True
    logo: str | None = None

    def with_overrides(
        self,
        annual_rate: Decimal | None = None,
        cat: Decimal | None = None,
    ) -> BankProfile:
        """
        Return a copy using custom rate and/or CAT.

        Overriding the rate without a CAT drops the bank's reported CAT,
        since it no longer describes the resulting credit.
        """
        if annual_rate is None and cat is None:
            return self

        if cat is None and annual_rate is not None:
            return replace(self, annual_rate=annual_rate, cat=None)

        return replace(
            self,
            annual_rate=annual_rate if annual_rate is not None else self.annual_rate,
            cat=cat,
        )
