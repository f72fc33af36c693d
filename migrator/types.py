"""Common type definitions for the migrator system."""

from datetime import date, datetime, time
from decimal import Decimal
from enum import Enum
from typing import TypeAlias
from uuid import UUID

LiteralValue: TypeAlias = (
    None
    | bool
    | int
    | float
    | Decimal
    | str
    | datetime
    | date
    | time
    | UUID
    | bytes
)


class Environment(str, Enum):
    """Application environment types."""

    DEVELOPMENT = "development"
    PRODUCTION = "production"
    TESTING = "testing"


class DataType(str, Enum):
    """Generic, dialect-independent column data types."""

    ANSI_STRING = "ansi_string"
    ANSI_STRING_FIXED_LENGTH = "ansi_string_fixed_length"
    BINARY = "binary"
    BOOLEAN = "boolean"
    BYTE = "byte"
    CURRENCY = "currency"
    DATE = "date"
    DATETIME = "datetime"
    DATETIME_OFFSET = "datetime_offset"
    DECIMAL = "decimal"
    DOUBLE = "double"
    GUID = "guid"
    INT16 = "int16"
    INT32 = "int32"
    INT64 = "int64"
    SBYTE = "sbyte"
    SINGLE = "single"
    STRING = "string"
    STRING_FIXED_LENGTH = "string_fixed_length"
    TIME = "time"
    UINT16 = "uint16"
    UINT32 = "uint32"
    UINT64 = "uint64"
    VAR_NUMERIC = "var_numeric"
    XML = "xml"


class ExpressionKind(str, Enum):
    """Kinds of migration expressions a generator can translate."""

    CREATE_SCHEMA = "create_schema"
    DELETE_SCHEMA = "delete_schema"
    CREATE_TABLE = "create_table"
    RENAME_TABLE = "rename_table"
    DELETE_TABLE = "delete_table"
    CREATE_COLUMN = "create_column"
    RENAME_COLUMN = "rename_column"
    DELETE_COLUMN = "delete_column"
    CREATE_FOREIGN_KEY = "create_foreign_key"
    DELETE_FOREIGN_KEY = "delete_foreign_key"
    CREATE_INDEX = "create_index"
    DELETE_INDEX = "delete_index"
    INSERT_DATA = "insert_data"


class SortDirection(str, Enum):
    """Index column sort direction."""

    ASCENDING = "asc"
    DESCENDING = "desc"
