"""Abstract dialect interface for different SQL backends."""

from abc import ABC, abstractmethod
from collections.abc import Callable, Mapping
from typing import TYPE_CHECKING, Any, ClassVar, TypeAlias

from migrator.generation.literals import LiteralFormatter
from migrator.generation.rewrite import RewriteRule
from migrator.generation.type_map import TypeMap
from migrator.types import DataType, ExpressionKind

if TYPE_CHECKING:
    from migrator.generation.renderer import DefinitionRenderer

# (expression, renderer) -> SQL
Renderer: TypeAlias = Callable[[Any, "DefinitionRenderer"], str]


class Dialect(ABC):
    """Capabilities and quirks of one SQL backend.

    A dialect populates the type map, picks a literal formatter, and states
    for each expression kind whether it is rendered (by the engine default
    or by one of its own ``renderers``), ignored (rendered as an empty
    statement) or unsupported (generation fails).
    """

    name: ClassVar[str]

    # Integer type backing identity columns, whatever their declared type
    identity_type: ClassVar[DataType] = DataType.INT32
    identity_keyword: ClassVar[str] = "IDENTITY"

    # Resolve types with size and precision zeroed
    ignores_type_size: ClassVar[bool] = False

    index_if_not_exists: ClassVar[bool] = False

    column_rewrites: ClassVar[tuple[RewriteRule, ...]] = ()

    ignored_operations: ClassVar[frozenset[ExpressionKind]] = frozenset()
    unsupported_operations: ClassVar[frozenset[ExpressionKind]] = frozenset()

    @abstractmethod
    def setup_type_maps(self, type_map: TypeMap) -> None:
        """Register the dialect's type templates.

        Args:
            type_map: Empty registry to populate
        """
        pass

    def create_literal_formatter(self) -> LiteralFormatter:
        """Create the formatter used for default and inserted values."""
        return LiteralFormatter()

    def renderers(self) -> Mapping[ExpressionKind, Renderer]:
        """Dialect-specific renderers, overriding the engine defaults."""
        return {}

    def format_table_name(self, table_name: str, schema_name: str | None = None) -> str:
        """Format a table name, qualified by its schema when one is given."""
        if schema_name:
            return f"{schema_name}.{table_name}"
        return table_name
