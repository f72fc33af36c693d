"""SQL generation package."""

from .factory import create_generator, get_dialect, get_supported_dialects
from .generator import DEFAULT_RENDERERS, SqlGenerator
from .interfaces import Dialect, Renderer
from .literals import LiteralFormatter
from .renderer import DefinitionRenderer
from .rewrite import RewriteRule, apply_rewrites
from .type_map import TypeMap, TypeMapEntry

__all__ = [
    "DEFAULT_RENDERERS",
    "DefinitionRenderer",
    "Dialect",
    "LiteralFormatter",
    "Renderer",
    "RewriteRule",
    "SqlGenerator",
    "TypeMap",
    "TypeMapEntry",
    "apply_rewrites",
    "create_generator",
    "get_dialect",
    "get_supported_dialects",
]
