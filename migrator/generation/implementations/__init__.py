"""Dialect implementations package."""

from .postgres import PostgresDialect, PostgresLiteralFormatter
from .sqlite import SQLiteDialect

__all__ = [
    "PostgresDialect",
    "PostgresLiteralFormatter",
    "SQLiteDialect",
]
