"""Tests for the expression dispatcher."""

import logging
from collections.abc import Mapping
from concurrent.futures import ThreadPoolExecutor

import pytest

from migrator.exceptions import (
    InvalidDefinitionError,
    UnsupportedOperationError,
)
from migrator.generation.generator import DEFAULT_RENDERERS, SqlGenerator
from migrator.generation.interfaces.dialect import Dialect, Renderer
from migrator.generation.renderer import DefinitionRenderer
from migrator.generation.type_map import TypeMap
from migrator.models import (
    ColumnDefinition,
    CreateColumnExpression,
    CreateSchemaExpression,
    CreateTableExpression,
    DeleteColumnExpression,
    DeleteForeignKeyExpression,
    DeleteIndexExpression,
    DeleteTableExpression,
    ForeignKeyDefinition,
    IndexDefinition,
    InsertDataExpression,
    RenameColumnExpression,
    RenameTableExpression,
)
from migrator.types import DataType, ExpressionKind


class BaseDialect(Dialect):
    """Dialect relying entirely on the engine defaults."""

    name = "base"

    def setup_type_maps(self, type_map: TypeMap) -> None:
        type_map.set_type_map(DataType.INT32, "INT")
        type_map.set_type_map(DataType.STRING, "VARCHAR(255)")


class RenamingDialect(BaseDialect):
    """Dialect adding a column rename and ignoring index removal."""

    name = "renaming"

    ignored_operations = frozenset({ExpressionKind.DELETE_INDEX})
    unsupported_operations = frozenset({ExpressionKind.DELETE_COLUMN})

    def renderers(self) -> Mapping[ExpressionKind, Renderer]:
        return {ExpressionKind.RENAME_COLUMN: self.rename_column_sql}

    def rename_column_sql(
        self, expression: RenameColumnExpression, renderer: DefinitionRenderer
    ) -> str:
        return f"RENAME {expression.old_name} TO {expression.new_name}"


class ConflictingDialect(BaseDialect):
    name = "conflicting"

    ignored_operations = frozenset({ExpressionKind.DELETE_INDEX})
    unsupported_operations = frozenset({ExpressionKind.DELETE_INDEX})


@pytest.fixture
def generator() -> SqlGenerator:
    """Create a generator using only default renderers."""
    return SqlGenerator(BaseDialect())


@pytest.fixture
def users_table() -> CreateTableExpression:
    """Sample CREATE TABLE expression."""
    return CreateTableExpression(
        table_name="Users",
        columns=[
            ColumnDefinition(name="Id", type=DataType.INT32, is_primary_key=True),
            ColumnDefinition(name="Name", type=DataType.STRING, is_nullable=True),
        ],
    )


def test_create_table(generator: SqlGenerator, users_table: CreateTableExpression) -> None:
    """Test CREATE TABLE joins column DDL in declaration order."""
    assert generator.generate(users_table) == (
        "CREATE TABLE Users (Id INT NOT NULL PRIMARY KEY, Name VARCHAR(255))"
    )


def test_create_table_without_columns(generator: SqlGenerator) -> None:
    """Test a table needs at least one column."""
    with pytest.raises(InvalidDefinitionError, match="Users"):
        generator.generate(CreateTableExpression(table_name="Users"))


def test_rename_table(generator: SqlGenerator) -> None:
    """Test RENAME TO statement."""
    expression = RenameTableExpression(old_name="Users", new_name="Accounts")

    assert generator.generate(expression) == "ALTER TABLE Users RENAME TO Accounts"


def test_delete_table(generator: SqlGenerator) -> None:
    """Test DROP TABLE statement, qualified by schema."""
    expression = DeleteTableExpression(table_name="Users", schema_name="app")

    assert generator.generate(expression) == "DROP TABLE app.Users"


def test_delete_table_requires_name(generator: SqlGenerator) -> None:
    """Test a missing table name is an invalid definition."""
    with pytest.raises(InvalidDefinitionError, match="table_name"):
        generator.generate(DeleteTableExpression())


def test_create_column(generator: SqlGenerator) -> None:
    """Test ADD COLUMN statement."""
    expression = CreateColumnExpression(
        table_name="Users",
        column=ColumnDefinition(name="Age", type=DataType.INT32, default_value=18),
    )

    assert generator.generate(expression) == (
        "ALTER TABLE Users ADD COLUMN Age INT NOT NULL DEFAULT 18"
    )


def test_delete_column(generator: SqlGenerator) -> None:
    """Test DROP COLUMN statement."""
    expression = DeleteColumnExpression(table_name="Users", column_name="Age")

    assert generator.generate(expression) == "ALTER TABLE Users DROP COLUMN Age"


def test_delete_foreign_key(generator: SqlGenerator) -> None:
    """Test DROP CONSTRAINT statement."""
    expression = DeleteForeignKeyExpression(
        foreign_key=ForeignKeyDefinition(name="FK_Orders_Users", foreign_table="Orders")
    )

    assert generator.generate(expression) == (
        "ALTER TABLE Orders DROP CONSTRAINT FK_Orders_Users"
    )


def test_delete_unnamed_foreign_key(generator: SqlGenerator) -> None:
    """Test an unnamed foreign key cannot be dropped by the default renderer."""
    expression = DeleteForeignKeyExpression(
        foreign_key=ForeignKeyDefinition(foreign_table="Orders")
    )

    with pytest.raises(InvalidDefinitionError, match="foreign_key.name"):
        generator.generate(expression)


def test_insert_data_one_statement_per_row(generator: SqlGenerator) -> None:
    """Test each row becomes a terminated statement in row order."""
    expression = InsertDataExpression(
        table_name="People",
        rows=[{"Id": 1, "Name": "O'Brien"}, {"Name": "Lee", "Id": 2}],
    )

    assert generator.generate(expression) == (
        "INSERT INTO People (Id,Name) VALUES (1,'O''Brien');"
        "INSERT INTO People (Name,Id) VALUES ('Lee',2);"
    )


def test_insert_data_without_rows(generator: SqlGenerator) -> None:
    """Test an empty row set produces no statements."""
    assert generator.generate(InsertDataExpression(table_name="People")) == ""


def test_insert_data_empty_row_rejected(generator: SqlGenerator) -> None:
    """Test a row without values is invalid."""
    expression = InsertDataExpression(table_name="People", rows=[{"Id": 1}, {}])

    with pytest.raises(InvalidDefinitionError, match="Row 1"):
        generator.generate(expression)


@pytest.mark.parametrize(
    "expression, kind",
    [
        (CreateSchemaExpression(schema_name="app"), "create_schema"),
        (RenameColumnExpression(table_name="T", old_name="a", new_name="b"), "rename_column"),
        (DeleteIndexExpression(index=IndexDefinition(name="IX")), "delete_index"),
    ],
)
def test_operations_without_default_unsupported(
    generator: SqlGenerator, expression: object, kind: str
) -> None:
    """Test kinds with no default renderer fail for a dialect that adds none."""
    with pytest.raises(UnsupportedOperationError, match=kind):
        generator.generate(expression)  # type: ignore[arg-type]


def test_defaults_cover_universal_operations() -> None:
    """Test the engine leaves schema, column rename and index removal to dialects."""
    assert ExpressionKind.CREATE_SCHEMA not in DEFAULT_RENDERERS
    assert ExpressionKind.DELETE_SCHEMA not in DEFAULT_RENDERERS
    assert ExpressionKind.RENAME_COLUMN not in DEFAULT_RENDERERS
    assert ExpressionKind.DELETE_INDEX not in DEFAULT_RENDERERS
    assert len(DEFAULT_RENDERERS) == 9


def test_dialect_override_and_policies() -> None:
    """Test overrides render, ignored kinds are empty, unsupported kinds fail."""
    generator = SqlGenerator(RenamingDialect())

    rename = RenameColumnExpression(table_name="T", old_name="a", new_name="b")
    assert generator.generate(rename) == "RENAME a TO b"

    delete_index = DeleteIndexExpression(index=IndexDefinition(name="IX"))
    assert generator.generate(delete_index) == ""

    with pytest.raises(UnsupportedOperationError, match="renaming"):
        generator.generate(DeleteColumnExpression(table_name="T", column_name="a"))


def test_policies_are_logged(caplog: pytest.LogCaptureFixture) -> None:
    """Test ignored and rejected kinds leave a debug record."""
    generator = SqlGenerator(RenamingDialect())

    with caplog.at_level(logging.DEBUG, logger="migrator.generation.generator"):
        generator.generate(DeleteIndexExpression(index=IndexDefinition(name="IX")))
        with pytest.raises(UnsupportedOperationError):
            generator.generate(DeleteColumnExpression(table_name="T", column_name="a"))

    messages = [record.getMessage() for record in caplog.records]
    assert "renaming ignores delete_index, emitting nothing" in messages
    assert "renaming rejects delete_column" in messages


def test_supports(generator: SqlGenerator) -> None:
    """Test supports reflects renderers and policies."""
    renaming = SqlGenerator(RenamingDialect())

    assert generator.supports(ExpressionKind.CREATE_TABLE) is True
    assert generator.supports(ExpressionKind.RENAME_COLUMN) is False
    assert renaming.supports(ExpressionKind.RENAME_COLUMN) is True
    assert renaming.supports(ExpressionKind.DELETE_INDEX) is True
    assert renaming.supports(ExpressionKind.DELETE_COLUMN) is False


def test_conflicting_policies_rejected() -> None:
    """Test a kind cannot be both ignored and unsupported."""
    with pytest.raises(ValueError, match="delete_index"):
        SqlGenerator(ConflictingDialect())


def test_generate_rejects_non_expressions(generator: SqlGenerator) -> None:
    """Test non-expression input is a type error."""
    with pytest.raises(TypeError, match="dict"):
        generator.generate({"table_name": "Users"})  # type: ignore[arg-type]


def test_generate_all_keeps_order_and_empty_statements() -> None:
    """Test batch generation preserves order, including no-ops."""
    generator = SqlGenerator(RenamingDialect())
    expressions = [
        DeleteTableExpression(table_name="A"),
        DeleteIndexExpression(index=IndexDefinition(name="IX")),
        DeleteTableExpression(table_name="B"),
    ]

    assert generator.generate_all(expressions) == ["DROP TABLE A", "", "DROP TABLE B"]


def test_type_map_frozen_after_construction(generator: SqlGenerator) -> None:
    """Test the generator's registry is read-only."""
    assert generator.type_map.frozen is True
    with pytest.raises(RuntimeError):
        generator.type_map.set_type_map(DataType.GUID, "UUID")


def test_generation_is_idempotent(
    generator: SqlGenerator, users_table: CreateTableExpression
) -> None:
    """Test repeated and concurrent generation yields identical output."""
    expected = generator.generate(users_table)

    assert generator.generate(users_table) == expected
    with ThreadPoolExecutor(max_workers=4) as pool:
        results = list(pool.map(generator.generate, [users_table] * 32))
    assert set(results) == {expected}
