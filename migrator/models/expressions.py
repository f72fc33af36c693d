"""Migration expressions: dialect-agnostic descriptions of schema and data changes."""

from types import MappingProxyType
from typing import ClassVar, TypeAlias

from pydantic import BaseModel, ConfigDict, Field, field_validator

from migrator.models.definitions import (
    ColumnDefinition,
    ForeignKeyDefinition,
    IndexDefinition,
    InsertionRow,
)
from migrator.types import ExpressionKind


class MigrationExpression(BaseModel):
    """Base class for all migration expressions."""

    model_config = ConfigDict(frozen=True)

    kind: ClassVar[ExpressionKind]


class CreateSchemaExpression(MigrationExpression):
    kind: ClassVar[ExpressionKind] = ExpressionKind.CREATE_SCHEMA

    schema_name: str = Field(..., min_length=1)


class DeleteSchemaExpression(MigrationExpression):
    kind: ClassVar[ExpressionKind] = ExpressionKind.DELETE_SCHEMA

    schema_name: str = Field(..., min_length=1)


class CreateTableExpression(MigrationExpression):
    kind: ClassVar[ExpressionKind] = ExpressionKind.CREATE_TABLE

    table_name: str = ""
    schema_name: str | None = None
    columns: tuple[ColumnDefinition, ...] = ()


class RenameTableExpression(MigrationExpression):
    kind: ClassVar[ExpressionKind] = ExpressionKind.RENAME_TABLE

    old_name: str = ""
    new_name: str = ""
    schema_name: str | None = None


class DeleteTableExpression(MigrationExpression):
    kind: ClassVar[ExpressionKind] = ExpressionKind.DELETE_TABLE

    table_name: str = ""
    schema_name: str | None = None


class CreateColumnExpression(MigrationExpression):
    kind: ClassVar[ExpressionKind] = ExpressionKind.CREATE_COLUMN

    table_name: str = ""
    schema_name: str | None = None
    column: ColumnDefinition


class RenameColumnExpression(MigrationExpression):
    kind: ClassVar[ExpressionKind] = ExpressionKind.RENAME_COLUMN

    table_name: str = ""
    schema_name: str | None = None
    old_name: str = ""
    new_name: str = ""


class DeleteColumnExpression(MigrationExpression):
    kind: ClassVar[ExpressionKind] = ExpressionKind.DELETE_COLUMN

    table_name: str = ""
    schema_name: str | None = None
    column_name: str = ""


class CreateForeignKeyExpression(MigrationExpression):
    kind: ClassVar[ExpressionKind] = ExpressionKind.CREATE_FOREIGN_KEY

    foreign_key: ForeignKeyDefinition


class DeleteForeignKeyExpression(MigrationExpression):
    kind: ClassVar[ExpressionKind] = ExpressionKind.DELETE_FOREIGN_KEY

    foreign_key: ForeignKeyDefinition = Field(default_factory=ForeignKeyDefinition)


class CreateIndexExpression(MigrationExpression):
    kind: ClassVar[ExpressionKind] = ExpressionKind.CREATE_INDEX

    index: IndexDefinition


class DeleteIndexExpression(MigrationExpression):
    kind: ClassVar[ExpressionKind] = ExpressionKind.DELETE_INDEX

    index: IndexDefinition = Field(default_factory=IndexDefinition)


class InsertDataExpression(MigrationExpression):
    """Rows to insert; each row becomes one independent statement."""

    kind: ClassVar[ExpressionKind] = ExpressionKind.INSERT_DATA

    table_name: str = ""
    schema_name: str | None = None
    rows: tuple[InsertionRow, ...] = ()

    @field_validator("rows")
    @classmethod
    def freeze_rows(cls, v: tuple[InsertionRow, ...]) -> tuple[InsertionRow, ...]:
        """Copy each row into a read-only mapping, keeping column order."""
        return tuple(MappingProxyType(dict(row)) for row in v)


Expression: TypeAlias = (
    CreateSchemaExpression
    | DeleteSchemaExpression
    | CreateTableExpression
    | RenameTableExpression
    | DeleteTableExpression
    | CreateColumnExpression
    | RenameColumnExpression
    | DeleteColumnExpression
    | CreateForeignKeyExpression
    | DeleteForeignKeyExpression
    | CreateIndexExpression
    | DeleteIndexExpression
    | InsertDataExpression
)
