"""Fluent expression builders."""

from .delete import (
    DeleteColumnExpressionBuilder,
    DeleteExpressionRoot,
    DeleteForeignKeyExpressionBuilder,
    DeleteIndexExpressionBuilder,
    DeleteTableExpressionBuilder,
    MigrationContext,
)

__all__ = [
    "MigrationContext",
    "DeleteExpressionRoot",
    "DeleteTableExpressionBuilder",
    "DeleteColumnExpressionBuilder",
    "DeleteForeignKeyExpressionBuilder",
    "DeleteIndexExpressionBuilder",
]
