"""Expression dispatcher turning migration expressions into dialect SQL."""

from collections.abc import Iterable, Mapping
from types import MappingProxyType
from typing import Any, Final

from migrator.exceptions import InvalidDefinitionError, UnsupportedOperationError
from migrator.generation.interfaces.dialect import Dialect, Renderer
from migrator.generation.renderer import DefinitionRenderer, require
from migrator.generation.type_map import TypeMap
from migrator.log import get_logger
from migrator.models.expressions import (
    CreateColumnExpression,
    CreateForeignKeyExpression,
    CreateIndexExpression,
    CreateTableExpression,
    DeleteColumnExpression,
    DeleteForeignKeyExpression,
    DeleteTableExpression,
    InsertDataExpression,
    MigrationExpression,
    RenameTableExpression,
)
from migrator.types import DataType, ExpressionKind

logger = get_logger(__name__)


def create_table_sql(
    expression: CreateTableExpression, renderer: DefinitionRenderer
) -> str:
    table = renderer.format_table(expression.table_name, expression.schema_name)
    if not expression.columns:
        raise InvalidDefinitionError(f"Table {expression.table_name} has no columns")
    return f"CREATE TABLE {table} ({renderer.render_columns(expression.columns)})"


def rename_table_sql(
    expression: RenameTableExpression, renderer: DefinitionRenderer
) -> str:
    table = renderer.format_table(expression.old_name, expression.schema_name)
    new_name = require(expression.new_name, "new_name")
    return f"ALTER TABLE {table} RENAME TO {new_name}"


def delete_table_sql(
    expression: DeleteTableExpression, renderer: DefinitionRenderer
) -> str:
    table = renderer.format_table(expression.table_name, expression.schema_name)
    return f"DROP TABLE {table}"


def create_column_sql(
    expression: CreateColumnExpression, renderer: DefinitionRenderer
) -> str:
    table = renderer.format_table(expression.table_name, expression.schema_name)
    return f"ALTER TABLE {table} ADD COLUMN {renderer.render_column(expression.column)}"


def delete_column_sql(
    expression: DeleteColumnExpression, renderer: DefinitionRenderer
) -> str:
    table = renderer.format_table(expression.table_name, expression.schema_name)
    column = require(expression.column_name, "column_name")
    return f"ALTER TABLE {table} DROP COLUMN {column}"


def create_foreign_key_sql(
    expression: CreateForeignKeyExpression, renderer: DefinitionRenderer
) -> str:
    return renderer.render_foreign_key(expression.foreign_key)


def delete_foreign_key_sql(
    expression: DeleteForeignKeyExpression, renderer: DefinitionRenderer
) -> str:
    foreign_key = expression.foreign_key
    table = renderer.format_table(foreign_key.foreign_table, foreign_key.foreign_schema)
    name = require(foreign_key.name, "foreign_key.name")
    return f"ALTER TABLE {table} DROP CONSTRAINT {name}"


def create_index_sql(
    expression: CreateIndexExpression, renderer: DefinitionRenderer
) -> str:
    return renderer.render_index(expression.index)


def insert_data_sql(
    expression: InsertDataExpression, renderer: DefinitionRenderer
) -> str:
    """Render one terminated INSERT statement per row, concatenated."""
    table = renderer.format_table(expression.table_name, expression.schema_name)
    statements: list[str] = []

    for position, row in enumerate(expression.rows):
        if not row:
            raise InvalidDefinitionError(
                f"Row {position} inserted into {expression.table_name} has no values"
            )
        columns = renderer.render_name_list(row.keys())
        values = renderer.render_value_list(row.values())
        statements.append(f"INSERT INTO {table} ({columns}) VALUES ({values});")

    return "".join(statements)


# Schema operations, column rename and index removal have no default;
# each dialect renders, ignores or rejects them explicitly.
DEFAULT_RENDERERS: Final[Mapping[ExpressionKind, Renderer]] = MappingProxyType(
    {
        ExpressionKind.CREATE_TABLE: create_table_sql,
        ExpressionKind.RENAME_TABLE: rename_table_sql,
        ExpressionKind.DELETE_TABLE: delete_table_sql,
        ExpressionKind.CREATE_COLUMN: create_column_sql,
        ExpressionKind.DELETE_COLUMN: delete_column_sql,
        ExpressionKind.CREATE_FOREIGN_KEY: create_foreign_key_sql,
        ExpressionKind.DELETE_FOREIGN_KEY: delete_foreign_key_sql,
        ExpressionKind.CREATE_INDEX: create_index_sql,
        ExpressionKind.INSERT_DATA: insert_data_sql,
    }
)


class SqlGenerator:
    """Generate SQL for migration expressions in one dialect.

    The type map is populated and frozen here; after construction the
    generator holds no mutable state, so ``generate`` may be called
    concurrently on a shared instance.
    """

    def __init__(self, dialect: Dialect) -> None:
        overlap = dialect.ignored_operations & dialect.unsupported_operations
        if overlap:
            kinds = ", ".join(sorted(kind.value for kind in overlap))
            raise ValueError(
                f"Dialect {dialect.name} marks operations both ignored and "
                f"unsupported: {kinds}"
            )

        self.dialect = dialect

        type_map = TypeMap()
        dialect.setup_type_maps(type_map)
        type_map.freeze()
        self.type_map = type_map

        self.formatter = dialect.create_literal_formatter()
        self.renderer = DefinitionRenderer(dialect, type_map, self.formatter)
        self._renderers: Mapping[ExpressionKind, Renderer] = MappingProxyType(
            {**DEFAULT_RENDERERS, **dialect.renderers()}
        )
        logger.debug(f"Created SQL generator for dialect: {dialect.name}")

    @property
    def dialect_name(self) -> str:
        return self.dialect.name

    def get_type_map(self, data_type: DataType, size: int = 0, precision: int = 0) -> str:
        """Resolve a data type under this dialect's size policy."""
        return self.renderer.resolve_type(data_type, size, precision)

    def format_literal(self, value: Any) -> str:
        return self.formatter.format_literal(value)

    def supports(self, kind: ExpressionKind) -> bool:
        """Check whether generating an expression kind can succeed.

        Ignored kinds count as supported: they generate an empty statement.
        """
        if kind in self.dialect.ignored_operations:
            return True
        if kind in self.dialect.unsupported_operations:
            return False
        return kind in self._renderers

    def generate(self, expression: MigrationExpression) -> str:
        """Generate SQL for one expression.

        Args:
            expression: Migration expression to translate

        Returns:
            SQL text; empty when the dialect deliberately ignores the kind

        Raises:
            UnsupportedOperationError: If the dialect cannot translate the kind
            InvalidDefinitionError: If a required field is missing
            UnmappedTypeError: If a column type has no mapping
            UnsupportedLiteralError: If a value has no literal form
        """
        if not isinstance(expression, MigrationExpression):
            raise TypeError(
                f"Expected a migration expression, got {type(expression).__name__}"
            )

        kind = expression.kind
        if kind in self.dialect.ignored_operations:
            logger.debug(f"{self.dialect.name} ignores {kind.value}, emitting nothing")
            return ""

        render = self._renderers.get(kind)
        if kind in self.dialect.unsupported_operations or render is None:
            logger.debug(f"{self.dialect.name} rejects {kind.value}")
            raise UnsupportedOperationError(
                f"Dialect {self.dialect.name} does not support {kind.value}"
            )

        sql = render(expression, self.renderer)
        logger.debug(f"Generated {kind.value} SQL: {sql}")
        return sql

    def generate_all(self, expressions: Iterable[MigrationExpression]) -> list[str]:
        """Generate SQL for expressions in order, keeping empty statements."""
        return [self.generate(expression) for expression in expressions]
