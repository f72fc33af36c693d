"""Generator constants and dialect capacity limits."""

from typing import Final

DEFAULT_DIALECT: Final[str] = "sqlite"

NULL_LITERAL: Final[str] = "NULL"

# Placeholders substituted into type-map templates
SIZE_PLACEHOLDER: Final[str] = "$size"
PRECISION_PLACEHOLDER: Final[str] = "$precision"

# PostgreSQL limits (varchar/char length, numeric precision)
POSTGRES_STRING_CAPACITY: Final[int] = 10485760
POSTGRES_DECIMAL_CAPACITY: Final[int] = 1000
