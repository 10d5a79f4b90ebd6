"""Application settings read from environment variables."""

from __future__ import annotations

import os

BANK_CATALOG_SOURCES = ("postgres", "memory")


def bank_catalog_source() -> str:
    """
    Where bank profiles come from: "postgres" (default) or "memory".

    The memory catalog serves the built-in Mexican bank list and needs no database.
    """
    source = os.getenv("BANK_CATALOG", "postgres").strip().lower()

    if source not in BANK_CATALOG_SOURCES:
        raise RuntimeError(
            f"BANK_CATALOG must be one of {', '.join(BANK_CATALOG_SOURCES)}, got '{source}'"
        )

    return source


def comparison_workers() -> int:
    """Threads used to build quotes concurrently; 0 builds them sequentially."""
    raw = os.getenv("COMPARISON_WORKERS", "0")

    try:
        workers = int(raw)
    except ValueError:
        raise RuntimeError(f"COMPARISON_WORKERS must be an integer, got '{raw}'") from None

    if workers < 0:
        raise RuntimeError("COMPARISON_WORKERS must be >= 0")

    return workers
