"""Global pytest configuration and fixtures."""

import pytest

from migrator import setup_test_logging
from migrator.generation import SqlGenerator
from migrator.generation.implementations import PostgresDialect, SQLiteDialect


@pytest.fixture(scope="session", autouse=True)
def setup_logging() -> None:
    """Setup test logging for all tests."""
    setup_test_logging()


@pytest.fixture
def sqlite_generator() -> SqlGenerator:
    """Create a SQLite generator."""
    return SqlGenerator(SQLiteDialect())


@pytest.fixture
def postgres_generator() -> SqlGenerator:
    """Create a PostgreSQL generator."""
    return SqlGenerator(PostgresDialect())
