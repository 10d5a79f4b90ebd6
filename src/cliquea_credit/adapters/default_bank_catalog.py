"""Bank catalog used by the `memory` catalog and the seed script.

Approximate rates offered by Mexican banks for vehicle credit.
"""

from __future__ import annotations

from decimal import Decimal

from cliquea_credit.domain.bank import BankProfile


DEFAULT_MAX_TERM_MONTHS = 60
DEFAULT_MAX_AMOUNT = Decimal("5000000.00")

# (id, name, rate, cat, commission, logo)
_BANKS = [
    (1, "BBVA", "12.50", "16.20", "2.00", "bbva.png"),
    (2, "Banorte", "13.20", "17.10", "1.80", "banorte.png"),
    (3, "Santander", "13.80", "17.50", "2.20", "santander.png"),
    (4, "Scotiabank", "14.20", "18.30", "1.50", "scotiabank.png"),
    (5, "Citibanamex", "13.50", "17.80", "2.00", "banamex.png"),
    (6, "HSBC", "14.50", "18.90", "1.70", "hsbc.png"),
    (7, "Inbursa", "12.80", "16.50", "1.90", "inbursa.png"),
    (8, "Afirme", "14.80", "19.20", "2.10", None),
    (9, "BanRegio", "13.90", "18.00", "1.60", "banregio.png"),
    (10, "Hey Banco", "12.90", "16.80", "1.80", "heybanco.svg"),
]

DEFAULT_BANK_PROFILES: tuple[BankProfile, ...] = tuple(
    BankProfile(
        id=bank_id,
        name=name,
        annual_rate=Decimal(rate),
        cat=Decimal(cat),
        commission=Decimal(commission),
        max_term_months=DEFAULT_MAX_TERM_MONTHS,
        max_amount=DEFAULT_MAX_AMOUNT,
        active=True,
        logo=logo,
    )
    for bank_id, name, rate, cat, commission, logo in _BANKS
)
