from __future__ import annotations

from decimal import Decimal

from sqlalchemy import Boolean, CheckConstraint, Integer, Numeric, String, text
from sqlalchemy.orm import Mapped, mapped_column

from cliquea_credit.infra.db.models.base import Base


class BankRow(Base):
    __tablename__ = "bancos"
    __table_args__ = (
        CheckConstraint("plazo_maximo > 0", name="ck_bancos_plazo_maximo_positive"),
        CheckConstraint("monto_maximo >= 0", name="ck_bancos_monto_maximo_non_negative"),
    )

    banco_id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    nombre: Mapped[str] = mapped_column(String(50), nullable=False)

    # Percentages, e.g. 12.50 = 12.5%
    tasa: Mapped[Decimal | None] = mapped_column(Numeric(precision=5, scale=2), nullable=True)
    cat: Mapped[Decimal | None] = mapped_column(Numeric(precision=5, scale=2), nullable=True)
    comision: Mapped[Decimal | None] = mapped_column(Numeric(precision=5, scale=2), nullable=True)

    plazo_maximo: Mapped[int] = mapped_column(
        Integer, nullable=False, server_default=text("60")
    )
    monto_maximo: Mapped[Decimal] = mapped_column(
        Numeric(precision=15, scale=2), nullable=False, server_default=text("5000000")
    )
    activo: Mapped[bool] = mapped_column(Boolean, nullable=False, server_default=text("true"))

    logo: Mapped[str | None] = mapped_column(String(255), nullable=True)
