"""SQLite dialect implementation."""

from collections.abc import Mapping

from migrator.generation.interfaces.dialect import Dialect, Renderer
from migrator.generation.renderer import DefinitionRenderer, require
from migrator.generation.rewrite import RewriteRule
from migrator.generation.type_map import TypeMap
from migrator.models.expressions import DeleteIndexExpression
from migrator.types import DataType, ExpressionKind

_INTEGER_TYPES = (
    DataType.BYTE,
    DataType.INT16,
    DataType.INT32,
    DataType.INT64,
    DataType.SBYTE,
    DataType.UINT16,
    DataType.UINT32,
    DataType.UINT64,
)

_NUMERIC_TYPES = (
    DataType.CURRENCY,
    DataType.DECIMAL,
    DataType.DOUBLE,
    DataType.SINGLE,
    DataType.VAR_NUMERIC,
)

_TEXT_TYPES = (
    DataType.ANSI_STRING,
    DataType.STRING,
    DataType.ANSI_STRING_FIXED_LENGTH,
    DataType.STRING_FIXED_LENGTH,
)

_DATETIME_TYPES = (DataType.DATE, DataType.DATETIME, DataType.TIME)


class SQLiteDialect(Dialect):
    """SQLite dialect.

    SQLite types carry no size, so sizes and precisions are ignored. Foreign
    keys are not emitted, schemas and column renames are rejected, and an
    identity primary key becomes ``PRIMARY KEY AUTOINCREMENT``.

    The AUTOINCREMENT fix-up is a plain substring replacement over the whole
    column text, so a string default containing ``" IDENTITY PRIMARY KEY"``
    is rewritten as well.
    """

    name = "sqlite"

    ignores_type_size = True
    index_if_not_exists = True

    column_rewrites = (
        RewriteRule(" IDENTITY PRIMARY KEY", " PRIMARY KEY AUTOINCREMENT"),
    )

    ignored_operations = frozenset(
        {ExpressionKind.CREATE_FOREIGN_KEY, ExpressionKind.DELETE_FOREIGN_KEY}
    )
    unsupported_operations = frozenset(
        {
            ExpressionKind.CREATE_SCHEMA,
            ExpressionKind.DELETE_SCHEMA,
            ExpressionKind.RENAME_COLUMN,
        }
    )

    def setup_type_maps(self, type_map: TypeMap) -> None:
        type_map.set_type_map(DataType.BINARY, "BLOB")
        for data_type in _INTEGER_TYPES:
            type_map.set_type_map(data_type, "INTEGER")
        for data_type in _NUMERIC_TYPES:
            type_map.set_type_map(data_type, "NUMERIC")
        for data_type in _TEXT_TYPES:
            type_map.set_type_map(data_type, "TEXT")
        for data_type in _DATETIME_TYPES:
            type_map.set_type_map(data_type, "DATETIME")
        type_map.set_type_map(DataType.BOOLEAN, "INTEGER")
        type_map.set_type_map(DataType.GUID, "UNIQUEIDENTIFIER")

    def format_table_name(self, table_name: str, schema_name: str | None = None) -> str:
        """SQLite has no schemas; the schema name is dropped."""
        return table_name

    def renderers(self) -> Mapping[ExpressionKind, Renderer]:
        return {ExpressionKind.DELETE_INDEX: self.delete_index_sql}

    def delete_index_sql(
        self, expression: DeleteIndexExpression, renderer: DefinitionRenderer
    ) -> str:
        return f"DROP INDEX IF EXISTS {require(expression.index.name, 'index.name')}"
