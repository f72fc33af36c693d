"""PostgreSQL dialect implementation."""

from collections.abc import Mapping

from migrator.constants import POSTGRES_DECIMAL_CAPACITY, POSTGRES_STRING_CAPACITY
from migrator.generation.interfaces.dialect import Dialect, Renderer
from migrator.generation.literals import LiteralFormatter
from migrator.generation.renderer import DefinitionRenderer, require
from migrator.generation.type_map import TypeMap
from migrator.models.expressions import (
    CreateSchemaExpression,
    DeleteIndexExpression,
    DeleteSchemaExpression,
    RenameColumnExpression,
)
from migrator.types import DataType, ExpressionKind


class PostgresLiteralFormatter(LiteralFormatter):
    """PostgreSQL literals: boolean keywords, microsecond timestamps, bytea hex."""

    true_literal = "TRUE"
    false_literal = "FALSE"
    keep_fractional_seconds = True

    def format_binary(self, value: bytes) -> str:
        return f"'\\x{value.hex()}'"


class PostgresDialect(Dialect):
    """PostgreSQL dialect with sized character and numeric types."""

    name = "postgres"

    identity_keyword = "GENERATED BY DEFAULT AS IDENTITY"

    def setup_type_maps(self, type_map: TypeMap) -> None:
        for data_type in (DataType.ANSI_STRING, DataType.STRING):
            type_map.set_type_map(data_type, "text")
            type_map.set_type_map(data_type, "varchar($size)", POSTGRES_STRING_CAPACITY)
        for data_type in (
            DataType.ANSI_STRING_FIXED_LENGTH,
            DataType.STRING_FIXED_LENGTH,
        ):
            type_map.set_type_map(data_type, "char(255)")
            type_map.set_type_map(data_type, "char($size)", POSTGRES_STRING_CAPACITY)

        type_map.set_type_map(DataType.DECIMAL, "decimal(19,5)")
        type_map.set_type_map(
            DataType.DECIMAL, "decimal($size,$precision)", POSTGRES_DECIMAL_CAPACITY
        )
        type_map.set_type_map(DataType.VAR_NUMERIC, "numeric")
        type_map.set_type_map(DataType.CURRENCY, "money")
        type_map.set_type_map(DataType.DOUBLE, "double precision")
        type_map.set_type_map(DataType.SINGLE, "real")

        type_map.set_type_map(DataType.BYTE, "smallint")
        type_map.set_type_map(DataType.INT16, "smallint")
        type_map.set_type_map(DataType.INT32, "integer")
        type_map.set_type_map(DataType.INT64, "bigint")

        type_map.set_type_map(DataType.BOOLEAN, "boolean")
        type_map.set_type_map(DataType.BINARY, "bytea")
        type_map.set_type_map(DataType.GUID, "uuid")
        type_map.set_type_map(DataType.XML, "xml")

        type_map.set_type_map(DataType.DATE, "date")
        type_map.set_type_map(DataType.TIME, "time")
        type_map.set_type_map(DataType.DATETIME, "timestamp")
        type_map.set_type_map(DataType.DATETIME_OFFSET, "timestamptz")

    def create_literal_formatter(self) -> LiteralFormatter:
        return PostgresLiteralFormatter()

    def renderers(self) -> Mapping[ExpressionKind, Renderer]:
        return {
            ExpressionKind.CREATE_SCHEMA: self.create_schema_sql,
            ExpressionKind.DELETE_SCHEMA: self.delete_schema_sql,
            ExpressionKind.RENAME_COLUMN: self.rename_column_sql,
            ExpressionKind.DELETE_INDEX: self.delete_index_sql,
        }

    def create_schema_sql(
        self, expression: CreateSchemaExpression, renderer: DefinitionRenderer
    ) -> str:
        return f"CREATE SCHEMA {expression.schema_name}"

    def delete_schema_sql(
        self, expression: DeleteSchemaExpression, renderer: DefinitionRenderer
    ) -> str:
        return f"DROP SCHEMA {expression.schema_name}"

    def rename_column_sql(
        self, expression: RenameColumnExpression, renderer: DefinitionRenderer
    ) -> str:
        table = renderer.format_table(expression.table_name, expression.schema_name)
        old_name = require(expression.old_name, "old_name")
        new_name = require(expression.new_name, "new_name")
        return f"ALTER TABLE {table} RENAME COLUMN {old_name} TO {new_name}"

    def delete_index_sql(
        self, expression: DeleteIndexExpression, renderer: DefinitionRenderer
    ) -> str:
        # Indexes live in their table's schema
        index = expression.index
        name = require(index.name, "index.name")
        if index.schema_name:
            name = f"{index.schema_name}.{name}"
        return f"DROP INDEX {name}"
