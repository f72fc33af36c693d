"""Factory selecting dialects and building generators by name."""

from collections.abc import Mapping
from types import MappingProxyType
from typing import Final

from migrator.config import settings
from migrator.generation.generator import SqlGenerator
from migrator.generation.implementations import PostgresDialect, SQLiteDialect
from migrator.generation.interfaces.dialect import Dialect
from migrator.log import get_logger

logger = get_logger(__name__)

DIALECTS: Final[Mapping[str, type[Dialect]]] = MappingProxyType(
    {
        "sqlite": SQLiteDialect,
        "postgres": PostgresDialect,
        "postgresql": PostgresDialect,
    }
)


def get_dialect(name: str) -> Dialect:
    """Get a dialect by name.

    Args:
        name: Dialect name, case-insensitive

    Returns:
        Dialect instance

    Raises:
        KeyError: If the dialect is not known
    """
    key = name.strip().lower()
    if key not in DIALECTS:
        raise KeyError(f"Dialect not found: {name}")
    return DIALECTS[key]()


def get_supported_dialects() -> list[str]:
    """Get the names of all known dialects."""
    return sorted(DIALECTS)


def create_generator(name: str | None = None) -> SqlGenerator:
    """Create a generator for a dialect.

    Args:
        name: Dialect name, defaults to the configured default dialect

    Returns:
        Generator with a frozen type map
    """
    dialect = get_dialect(name or settings.default_dialect)
    logger.info(f"Creating SQL generator for dialect: {dialect.name}")
    return SqlGenerator(dialect)
