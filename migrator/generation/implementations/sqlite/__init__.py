"""SQLite dialect package."""

from .dialect import SQLiteDialect

__all__ = [
    "SQLiteDialect",
]
