"""Expression and definition models."""

from .definitions import (
    ColumnDefinition,
    ForeignKeyDefinition,
    IndexColumnDefinition,
    IndexDefinition,
    InsertionRow,
)
from .expressions import (
    CreateColumnExpression,
    CreateForeignKeyExpression,
    CreateIndexExpression,
    CreateSchemaExpression,
    CreateTableExpression,
    DeleteColumnExpression,
    DeleteForeignKeyExpression,
    DeleteIndexExpression,
    DeleteSchemaExpression,
    DeleteTableExpression,
    Expression,
    InsertDataExpression,
    MigrationExpression,
    RenameColumnExpression,
    RenameTableExpression,
)

__all__ = [
    "ColumnDefinition",
    "ForeignKeyDefinition",
    "IndexColumnDefinition",
    "IndexDefinition",
    "InsertionRow",
    "MigrationExpression",
    "Expression",
    "CreateSchemaExpression",
    "DeleteSchemaExpression",
    "CreateTableExpression",
    "RenameTableExpression",
    "DeleteTableExpression",
    "CreateColumnExpression",
    "RenameColumnExpression",
    "DeleteColumnExpression",
    "CreateForeignKeyExpression",
    "DeleteForeignKeyExpression",
    "CreateIndexExpression",
    "DeleteIndexExpression",
    "InsertDataExpression",
]
