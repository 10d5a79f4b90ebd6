"""PostgreSQL implementation of BankProfileRepository."""

from __future__ import annotations

from decimal import Decimal

from sqlalchemy import select
from sqlalchemy.orm import Session

from cliquea_credit.domain.bank import BankProfile
from cliquea_credit.infra.db.models.bank import BankRow
from cliquea_credit.ports.bank_profile_repository import BankProfileRepository


class PostgresBankProfileRepository(BankProfileRepository):
    """
    PostgreSQL implementation of BankProfileRepository.

    - Reads the `bancos` table through the SQLAlchemy ORM
    - Never writes
    - Converts BankRow (infrastructure) to BankProfile (domain)
    """

    def __init__(self, session: Session) -> None:
        self._session = session

    def list_active(self) -> list[BankProfile]:
        query = select(BankRow).where(BankRow.activo.is_(True)).order_by(BankRow.banco_id)
        rows = self._session.execute(query).scalars().all()
        return [self._to_domain(row) for row in rows]

    def get_by_id(self, bank_id: int) -> BankProfile | None:
        query = select(BankRow).where(BankRow.banco_id == bank_id)
        row = self._session.execute(query).scalar_one_or_none()
        return self._to_domain(row) if row else None

    def _to_domain(self, row: BankRow) -> BankProfile:
        """
        Convert database model (BankRow) to domain entity (BankProfile).

        A NULL commission means the bank charges none. A NULL rate is kept
        as None so validation can exclude the bank.
        """
        return BankProfile(
            id=row.banco_id,
            name=row.nombre,
            annual_rate=row.tasa,  # Already Decimal from NUMERIC column
            cat=row.cat,
            commission=row.comision if row.comision is not None else Decimal("0"),
            max_term_months=row.plazo_maximo,
            max_amount=row.monto_maximo,
            active=row.activo,
            logo=row.logo,
        )
