"""Exceptions raised while generating SQL from migration expressions."""


class GeneratorError(Exception):
    """Base exception for SQL generation errors."""

    pass


class UnmappedTypeError(GeneratorError):
    """Raised when a dialect has no usable type mapping for a data type."""

    pass


class UnsupportedLiteralError(GeneratorError):
    """Raised when a runtime value has no SQL literal representation."""

    pass


class UnsupportedOperationError(GeneratorError):
    """Raised when a dialect cannot translate an expression kind."""

    pass


class InvalidDefinitionError(GeneratorError):
    """Raised when a definition is missing a structurally required field."""

    pass
