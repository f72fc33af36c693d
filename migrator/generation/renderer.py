"""DDL fragment rendering for columns, indexes and foreign keys."""

from collections.abc import Iterable, Sequence

from migrator.exceptions import InvalidDefinitionError
from migrator.generation.interfaces.dialect import Dialect
from migrator.generation.literals import LiteralFormatter
from migrator.generation.rewrite import apply_rewrites
from migrator.generation.type_map import TypeMap
from migrator.models.definitions import (
    ColumnDefinition,
    ForeignKeyDefinition,
    IndexDefinition,
)
from migrator.types import DataType, SortDirection


def require(value: str | None, field: str) -> str:
    """Return a required name, failing when it is missing or empty.

    Raises:
        InvalidDefinitionError: If value is empty
    """
    if not value:
        raise InvalidDefinitionError(f"Missing required field: {field}")
    return value


class DefinitionRenderer:
    """Render definitions into DDL fragments for one dialect."""

    def __init__(
        self, dialect: Dialect, type_map: TypeMap, formatter: LiteralFormatter
    ) -> None:
        self.dialect = dialect
        self.type_map = type_map
        self.formatter = formatter

    def format_table(self, table_name: str, schema_name: str | None = None) -> str:
        return self.dialect.format_table_name(
            require(table_name, "table_name"), schema_name
        )

    def format_literal(self, value: object) -> str:
        return self.formatter.format_literal(value)

    def resolve_type(self, data_type: DataType, size: int = 0, precision: int = 0) -> str:
        """Resolve a data type, applying the dialect's size policy."""
        if self.dialect.ignores_type_size:
            size, precision = 0, 0
        return self.type_map.get_type_map(data_type, size, precision)

    def render_column(self, column: ColumnDefinition) -> str:
        """Render a column definition.

        Args:
            column: Column definition

        Returns:
            Column DDL, e.g. ``Name TEXT NOT NULL DEFAULT 'x'``
        """
        parts = [column.name, " ", self._column_type(column)]

        if not column.is_nullable:
            parts.append(" NOT NULL")

        if column.default_value is not None:
            parts.append(f" DEFAULT {self.format_literal(column.default_value)}")

        if column.is_identity:
            parts.append(f" {self.dialect.identity_keyword}")

        if column.is_primary_key:
            parts.append(" PRIMARY KEY")

        return apply_rewrites("".join(parts), self.dialect.column_rewrites)

    def render_columns(self, columns: Sequence[ColumnDefinition]) -> str:
        return ", ".join(self.render_column(column) for column in columns)

    def render_index(self, index: IndexDefinition) -> str:
        """Render a CREATE INDEX statement.

        Raises:
            InvalidDefinitionError: If the index has no name, table or columns
        """
        if not index.columns:
            raise InvalidDefinitionError(f"Index {index.name!r} has no columns")

        sql = "CREATE UNIQUE INDEX" if index.is_unique else "CREATE INDEX"
        if self.dialect.index_if_not_exists:
            sql += " IF NOT EXISTS"

        columns = ",".join(
            f"{column.name} DESC"
            if column.direction == SortDirection.DESCENDING
            else column.name
            for column in index.columns
        )
        name = require(index.name, "index.name")
        table = self.format_table(index.table_name, index.schema_name)
        return f"{sql} {name} ON {table} ({columns})"

    def render_foreign_key(self, foreign_key: ForeignKeyDefinition) -> str:
        """Render an ALTER TABLE ... ADD CONSTRAINT ... FOREIGN KEY statement.

        Raises:
            InvalidDefinitionError: If names are missing or the column lists
                are empty or of different lengths
        """
        if not foreign_key.foreign_columns or not foreign_key.primary_columns:
            raise InvalidDefinitionError(
                f"Foreign key {foreign_key.name!r} needs columns on both sides"
            )
        if len(foreign_key.foreign_columns) != len(foreign_key.primary_columns):
            raise InvalidDefinitionError(
                f"Foreign key {foreign_key.name!r} pairs "
                f"{len(foreign_key.foreign_columns)} columns with "
                f"{len(foreign_key.primary_columns)}"
            )

        name = require(foreign_key.name, "foreign_key.name")
        foreign_table = self.format_table(
            foreign_key.foreign_table, foreign_key.foreign_schema
        )
        primary_table = self.format_table(
            foreign_key.primary_table, foreign_key.primary_schema
        )
        return (
            f"ALTER TABLE {foreign_table} ADD CONSTRAINT {name} "
            f"FOREIGN KEY ({self.render_name_list(foreign_key.foreign_columns)}) "
            f"REFERENCES {primary_table} "
            f"({self.render_name_list(foreign_key.primary_columns)})"
        )

    def render_name_list(self, names: Iterable[str]) -> str:
        return ",".join(names)

    def render_value_list(self, values: Iterable[object]) -> str:
        return ",".join(self.format_literal(value) for value in values)

    def _column_type(self, column: ColumnDefinition) -> str:
        if column.is_identity:
            return self.resolve_type(
                self.dialect.identity_type, column.size, column.precision
            )
        if column.type is not None:
            return self.resolve_type(column.type, column.size, column.precision)
        if column.custom_type:
            return column.custom_type
        raise InvalidDefinitionError(
            f"Column {column.name!r} has neither a data type nor a custom type"
        )
