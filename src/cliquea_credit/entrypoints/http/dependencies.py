"""
Dependency injection for FastAPI routes.

Key principle: Database sessions are per-request, never cached.
Only stateless singletons (the quote executor) use lru_cache.
"""

from __future__ import annotations

from concurrent.futures import Executor, ThreadPoolExecutor
from functools import lru_cache
from typing import Generator

from fastapi import Depends

from cliquea_credit.adapters.default_bank_catalog import DEFAULT_BANK_PROFILES
from cliquea_credit.adapters.in_memory_bank_profile_repository import (
    InMemoryBankProfileRepository,
)
from cliquea_credit.adapters.postgres_bank_profile_repository import (
    PostgresBankProfileRepository,
)
from cliquea_credit.infra.config import bank_catalog_source, comparison_workers
from cliquea_credit.infra.db.session import get_session
from cliquea_credit.ports.bank_profile_repository import BankProfileRepository
from cliquea_credit.use_cases.compare_bank_financing import CompareBankFinancing
from cliquea_credit.use_cases.generate_amortization_schedule import (
    GenerateAmortizationSchedule,
)
from cliquea_credit.use_cases.list_banks import ListBanks


def get_bank_profile_repository() -> Generator[BankProfileRepository, None, None]:
    """
    Provides the bank catalog for a single request.

    - BANK_CATALOG=memory: the built-in bank list, no database
    - otherwise: PostgreSQL, with a session opened for this request and
      closed when the request ends

    Yields:
        BankProfileRepository: Repository instance (per-request)
    """
    if bank_catalog_source() == "memory":
        yield InMemoryBankProfileRepository(DEFAULT_BANK_PROFILES)
        return

    with get_session() as session:
        yield PostgresBankProfileRepository(session=session)


@lru_cache(maxsize=1)
def get_quote_executor() -> Executor | None:
    """Shared thread pool for building quotes, or None to build them sequentially."""
    workers = comparison_workers()
    if workers == 0:
        return None
    return ThreadPoolExecutor(max_workers=workers, thread_name_prefix="quote")


def get_compare_bank_financing_use_case(
    repository: BankProfileRepository = Depends(get_bank_profile_repository),
    executor: Executor | None = Depends(get_quote_executor),
) -> CompareBankFinancing:
    return CompareBankFinancing(bank_profile_repository=repository, executor=executor)


def get_generate_amortization_schedule_use_case(
    repository: BankProfileRepository = Depends(get_bank_profile_repository),
) -> GenerateAmortizationSchedule:
    return GenerateAmortizationSchedule(bank_profile_repository=repository)


def get_list_banks_use_case(
    repository: BankProfileRepository = Depends(get_bank_profile_repository),
) -> ListBanks:
    return ListBanks(bank_profile_repository=repository)
