"""Test fixtures: sample DDL and seed rows."""

from __future__ import annotations

from datetime import datetime, timezone
from pathlib import Path

from fragql.schema.params import DateParam

_FIXTURES_DIR = Path(__file__).parent


def load_ddl() -> str:
    """Return the sample SQLite DDL string."""
    return (_FIXTURES_DIR / "ddl_sqlite.sql").read_text()


def hired(year: int, month: int, day: int) -> float:
    """Return a hire date as bound by the default builder config."""
    return DateParam(timestamp=datetime(year, month, day, tzinfo=timezone.utc)).bind()


DEPARTMENTS = [
    (1, "Engineering", "ENG"),
    (2, "Human Resources", "HR"),
    (3, "Sales", "SALES"),
]

EMPLOYEES = [
    (1, 1, "Alice", "engineer", 95000.0, hired(2020, 3, 15)),
    (2, 1, "Bob", "engineer", 45000.0, hired(2021, 7, 1)),
    (3, 2, "Charlie", "recruiter", None, hired(2022, 1, 10)),
    (4, 3, "Diana", "manager", 120000.0, hired(2018, 6, 1)),
    (5, None, "Eve", "contractor", None, hired(2023, 9, 1)),
]
