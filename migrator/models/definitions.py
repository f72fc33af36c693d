"""Column, index and foreign key definitions carried by expressions."""

from collections.abc import Mapping
from typing import Any, TypeAlias

from pydantic import BaseModel, ConfigDict, Field

from migrator.types import DataType, SortDirection

# Column name -> literal value, in insertion order; read-only once built
InsertionRow: TypeAlias = Mapping[str, Any]


class ColumnDefinition(BaseModel):
    """Definition of a single table column.

    When ``type`` is unset, ``custom_type`` is emitted verbatim as the
    column's SQL type.
    """

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., min_length=1, description="Column name")
    type: DataType | None = Field(None, description="Generic data type")
    custom_type: str | None = Field(
        None, description="Raw SQL type used when no generic type is set"
    )
    size: int = Field(0, ge=0, description="Size or length, 0 when unspecified")
    precision: int = Field(0, ge=0, description="Precision, 0 when unspecified")
    is_nullable: bool = False
    default_value: Any = None
    is_identity: bool = False
    is_primary_key: bool = False


class IndexColumnDefinition(BaseModel):
    """One key column of an index."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., min_length=1)
    direction: SortDirection = SortDirection.ASCENDING


class IndexDefinition(BaseModel):
    """Definition of an index; column order is the index key order."""

    model_config = ConfigDict(frozen=True)

    name: str = ""
    table_name: str = ""
    schema_name: str | None = None
    is_unique: bool = False
    columns: tuple[IndexColumnDefinition, ...] = ()


class ForeignKeyDefinition(BaseModel):
    """Definition of a foreign key constraint.

    ``foreign_*`` fields describe the referencing side and ``primary_*``
    fields the referenced side. Columns pair up positionally.
    """

    model_config = ConfigDict(frozen=True)

    name: str = ""
    foreign_table: str = ""
    foreign_schema: str | None = None
    foreign_columns: tuple[str, ...] = ()
    primary_table: str = ""
    primary_schema: str | None = None
    primary_columns: tuple[str, ...] = ()
