from __future__ import annotations

from sqlalchemy import MetaData
from sqlalchemy.orm import DeclarativeBase

# Every table lives in the application's schema
SCHEMA = "cliquea"


class Base(DeclarativeBase):
    metadata = MetaData(schema=SCHEMA)
