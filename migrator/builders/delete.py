"""Fluent builders recording delete expressions into a migration context."""

from typing import Any, cast

from migrator.log import get_logger
from migrator.models.definitions import ForeignKeyDefinition, IndexDefinition
from migrator.models.expressions import (
    DeleteColumnExpression,
    DeleteForeignKeyExpression,
    DeleteIndexExpression,
    DeleteSchemaExpression,
    DeleteTableExpression,
    MigrationExpression,
)

logger = get_logger(__name__)


class MigrationContext:
    """Ordered collection of expressions recorded by builders."""

    def __init__(self) -> None:
        self.expressions: list[MigrationExpression] = []

    def add(self, expression: MigrationExpression) -> int:
        """Append an expression and return its position."""
        self.expressions.append(expression)
        return len(self.expressions) - 1

    def replace(self, position: int, expression: MigrationExpression) -> None:
        self.expressions[position] = expression


class ExpressionBuilder:
    """Base builder owning one slot in the context.

    Expressions are immutable, so every refinement stores a modified copy
    back into the builder's slot.
    """

    def __init__(self, context: MigrationContext, expression: MigrationExpression):
        self._context = context
        self._position = context.add(expression)

    @property
    def expression(self) -> MigrationExpression:
        return self._context.expressions[self._position]

    def _update(self, **changes: Any) -> None:
        self._context.replace(
            self._position, self.expression.model_copy(update=changes)
        )


class DeleteTableExpressionBuilder(ExpressionBuilder):
    def in_schema(self, schema_name: str) -> "DeleteTableExpressionBuilder":
        self._update(schema_name=schema_name)
        return self


class DeleteColumnExpressionBuilder(ExpressionBuilder):
    def from_table(self, table_name: str) -> "DeleteColumnExpressionBuilder":
        self._update(table_name=table_name)
        return self

    def in_schema(self, schema_name: str) -> "DeleteColumnExpressionBuilder":
        self._update(schema_name=schema_name)
        return self


class DeleteForeignKeyExpressionBuilder(ExpressionBuilder):
    """Describe the foreign key to drop.

    A named key only needs ``on_table``; an unnamed one is described by its
    referencing and referenced columns.
    """

    def on_table(self, table_name: str) -> "DeleteForeignKeyExpressionBuilder":
        return self.from_table(table_name)

    def from_table(self, table_name: str) -> "DeleteForeignKeyExpressionBuilder":
        self._update_key(foreign_table=table_name)
        return self

    def in_schema(self, schema_name: str) -> "DeleteForeignKeyExpressionBuilder":
        self._update_key(foreign_schema=schema_name)
        return self

    def foreign_column(self, column_name: str) -> "DeleteForeignKeyExpressionBuilder":
        return self.foreign_columns(column_name)

    def foreign_columns(self, *column_names: str) -> "DeleteForeignKeyExpressionBuilder":
        key = self._foreign_key
        self._update_key(foreign_columns=(*key.foreign_columns, *column_names))
        return self

    def to_table(self, table_name: str) -> "DeleteForeignKeyExpressionBuilder":
        self._update_key(primary_table=table_name)
        return self

    def primary_column(self, column_name: str) -> "DeleteForeignKeyExpressionBuilder":
        return self.primary_columns(column_name)

    def primary_columns(self, *column_names: str) -> "DeleteForeignKeyExpressionBuilder":
        key = self._foreign_key
        self._update_key(primary_columns=(*key.primary_columns, *column_names))
        return self

    @property
    def _foreign_key(self) -> ForeignKeyDefinition:
        return cast(DeleteForeignKeyExpression, self.expression).foreign_key

    def _update_key(self, **changes: Any) -> None:
        self._update(foreign_key=self._foreign_key.model_copy(update=changes))


class DeleteIndexExpressionBuilder(ExpressionBuilder):
    def on_table(self, table_name: str) -> "DeleteIndexExpressionBuilder":
        self._update(index=self._index.model_copy(update={"table_name": table_name}))
        return self

    def in_schema(self, schema_name: str) -> "DeleteIndexExpressionBuilder":
        self._update(index=self._index.model_copy(update={"schema_name": schema_name}))
        return self

    @property
    def _index(self) -> IndexDefinition:
        return cast(DeleteIndexExpression, self.expression).index


class DeleteExpressionRoot:
    """Entry point for ``delete`` statements in a migration."""

    def __init__(self, context: MigrationContext):
        self._context = context

    def schema(self, schema_name: str) -> None:
        self._context.add(DeleteSchemaExpression(schema_name=schema_name))
        logger.debug(f"Recorded schema deletion: {schema_name}")

    def table(self, table_name: str) -> DeleteTableExpressionBuilder:
        return DeleteTableExpressionBuilder(
            self._context, DeleteTableExpression(table_name=table_name)
        )

    def column(self, column_name: str) -> DeleteColumnExpressionBuilder:
        return DeleteColumnExpressionBuilder(
            self._context, DeleteColumnExpression(column_name=column_name)
        )

    def foreign_key(
        self, foreign_key_name: str | None = None
    ) -> DeleteForeignKeyExpressionBuilder:
        foreign_key = ForeignKeyDefinition(name=foreign_key_name or "")
        return DeleteForeignKeyExpressionBuilder(
            self._context, DeleteForeignKeyExpression(foreign_key=foreign_key)
        )

    def index(self, index_name: str) -> DeleteIndexExpressionBuilder:
        return DeleteIndexExpressionBuilder(
            self._context,
            DeleteIndexExpression(index=IndexDefinition(name=index_name)),
        )
