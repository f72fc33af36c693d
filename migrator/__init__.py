"""Core functionality for the migrator system."""

from .config import Settings, settings
from .exceptions import (
    GeneratorError,
    InvalidDefinitionError,
    UnmappedTypeError,
    UnsupportedLiteralError,
    UnsupportedOperationError,
)
from .generation import SqlGenerator, create_generator
from .log import (
    configure_logging,
    get_logger,
    setup_logging,
    setup_production_logging,
    setup_test_logging,
)
from .types import DataType, Environment, ExpressionKind, SortDirection

__all__ = [
    "DataType",
    "Environment",
    "ExpressionKind",
    "SortDirection",
    "Settings",
    "settings",
    "configure_logging",
    "get_logger",
    "setup_logging",
    "setup_production_logging",
    "setup_test_logging",
    "SqlGenerator",
    "create_generator",
    "GeneratorError",
    "InvalidDefinitionError",
    "UnmappedTypeError",
    "UnsupportedLiteralError",
    "UnsupportedOperationError",
]
