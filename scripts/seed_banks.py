#!/usr/bin/env python3
"""
Seed the bancos table with the default bank catalog.

Features:
- Idempotent: rows are upserted by banco_id, safe to run multiple times
- Same data the API serves with BANK_CATALOG=memory
- Advances the banco_id sequence past the seeded ids

Usage:
    python scripts/seed_banks.py
"""

from __future__ import annotations

import sys
from pathlib import Path

from sqlalchemy import text
from sqlalchemy.orm import Session

# Add src to path so we can import our modules
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from cliquea_credit.adapters.default_bank_catalog import DEFAULT_BANK_PROFILES
from cliquea_credit.domain.bank import BankProfile
from cliquea_credit.infra.db.models.bank import BankRow
from cliquea_credit.infra.db.session import get_session

BANCOS_TABLE = BankRow.__table__.fullname

# Explicit ids bypass the serial sequence, so the next insert would reuse id 1
SYNC_SEQUENCE_SQL = text(
    f"SELECT setval(pg_get_serial_sequence(:table_name, 'banco_id'), "
    f"(SELECT MAX(banco_id) FROM {BANCOS_TABLE}))"
)


def to_row(bank: BankProfile) -> BankRow:
    return BankRow(
        banco_id=bank.id,
        nombre=bank.name,
        tasa=bank.annual_rate,
        cat=bank.cat,
        comision=bank.commission,
        plazo_maximo=bank.max_term_months,
        monto_maximo=bank.max_amount,
        activo=bank.active,
        logo=bank.logo,
    )


def sync_id_sequence(session: Session) -> None:
    session.execute(SYNC_SEQUENCE_SQL, {"table_name": BANCOS_TABLE})


def seed_banks() -> None:
    print(f"🌱 Seeding database with {len(DEFAULT_BANK_PROFILES)} banks...")

    with get_session() as session:
        for bank in DEFAULT_BANK_PROFILES:
            # merge() inserts or updates by primary key
            session.merge(to_row(bank))
        session.flush()
        sync_id_sequence(session)

        print(f"✅ Successfully seeded {len(DEFAULT_BANK_PROFILES)} banks!")

        print("\n📊 Banks:")
        for bank in DEFAULT_BANK_PROFILES:
            print(
                f"   {bank.id}. {bank.name} - tasa {bank.annual_rate}% "
                f"CAT {bank.cat}% comisión {bank.commission}%"
            )


# ==============================================================================
# Main
# ==============================================================================


if __name__ == "__main__":
    try:
        seed_banks()
    except Exception as e:
        print(f"❌ Error seeding database: {e}", file=sys.stderr)
        sys.exit(1)
