"""PostgreSQL dialect package."""

from .dialect import PostgresDialect, PostgresLiteralFormatter

__all__ = [
    "PostgresDialect",
    "PostgresLiteralFormatter",
]
