"""Tests for expression and definition models."""

import pytest
from pydantic import ValidationError

from migrator.generation import SqlGenerator
from migrator.models import (
    ColumnDefinition,
    CreateIndexExpression,
    CreateTableExpression,
    DeleteTableExpression,
    IndexColumnDefinition,
    IndexDefinition,
    InsertDataExpression,
)
from migrator.types import DataType, ExpressionKind, SortDirection


def test_column_defaults() -> None:
    """Test column definitions default to not nullable and no flags."""
    column = ColumnDefinition(name="Id", type=DataType.INT32)

    assert column.is_nullable is False
    assert column.is_identity is False
    assert column.is_primary_key is False
    assert column.default_value is None
    assert column.size == 0
    assert column.precision == 0


def test_column_name_required() -> None:
    """Test empty column names are rejected."""
    with pytest.raises(ValidationError):
        ColumnDefinition(name="", type=DataType.INT32)


def test_negative_size_rejected() -> None:
    """Test sizes cannot be negative."""
    with pytest.raises(ValidationError):
        ColumnDefinition(name="A", type=DataType.STRING, size=-1)


def test_expressions_are_immutable() -> None:
    """Test expressions cannot be modified after construction."""
    expression = DeleteTableExpression(table_name="Users")

    with pytest.raises(ValidationError):
        expression.table_name = "Other"  # type: ignore[misc]


def test_expression_kinds() -> None:
    """Test each expression class carries its kind."""
    assert DeleteTableExpression.kind == ExpressionKind.DELETE_TABLE
    assert InsertDataExpression(table_name="T").kind == ExpressionKind.INSERT_DATA


def test_index_column_direction_defaults_to_ascending() -> None:
    """Test index columns are ascending unless stated."""
    assert IndexColumnDefinition(name="A").direction == SortDirection.ASCENDING


def test_sequences_keep_order() -> None:
    """Test column lists and row values keep their order."""
    table = CreateTableExpression(
        table_name="T",
        columns=[
            ColumnDefinition(name="C", type=DataType.INT32),
            ColumnDefinition(name="A", type=DataType.INT32),
        ],
    )
    index = CreateIndexExpression(
        index=IndexDefinition(
            name="IX",
            table_name="T",
            columns=[IndexColumnDefinition(name="Z"), IndexColumnDefinition(name="B")],
        )
    )
    insert = InsertDataExpression(table_name="T", rows=[{"z": 1, "a": 2}])

    assert [column.name for column in table.columns] == ["C", "A"]
    assert [column.name for column in index.index.columns] == ["Z", "B"]
    assert list(insert.rows[0]) == ["z", "a"]


def test_insert_rows_are_read_only() -> None:
    """Test rows cannot be changed once the expression is built."""
    source = {"A": 1}
    insert = InsertDataExpression(table_name="T", rows=[source])
    source["A"] = 3

    with pytest.raises(TypeError):
        insert.rows[0]["A"] = 2  # type: ignore[index]

    assert insert.rows[0]["A"] == 1


def test_insert_generation_is_repeatable(sqlite_generator: SqlGenerator) -> None:
    """Test generating the same insert twice gives the same SQL."""
    insert = InsertDataExpression(table_name="T", rows=[{"A": 1}])
    first = sqlite_generator.generate(insert)

    with pytest.raises(TypeError):
        insert.rows[0]["A"] = 2  # type: ignore[index]

    assert sqlite_generator.generate(insert) == first == "INSERT INTO T (A) VALUES (1);"
