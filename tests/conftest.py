"""Shared pytest fixtures for fragQL unit and integration tests."""
from __future__ import annotations

import pytest

from fragql.compile.builder import QueryBuilder
from fragql.config import BuilderConfig


@pytest.fixture(scope="session")
def builder() -> QueryBuilder:
    """Builder with the default ``?`` / ``,`` configuration."""
    return QueryBuilder()


@pytest.fixture(scope="session")
def spaced_builder() -> QueryBuilder:
    """Builder that separates expanded markers with ``", "``."""
    return QueryBuilder(BuilderConfig(separator=", "))
