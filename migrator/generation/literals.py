"""Serialization of runtime values into SQL literal text."""

from datetime import date, datetime, time
from decimal import Decimal
from typing import Any
from uuid import UUID

from migrator.constants import NULL_LITERAL
from migrator.exceptions import UnsupportedLiteralError


class LiteralFormatter:
    """Format Python values as SQL literals.

    Strings are single-quoted with embedded quotes doubled; no other
    character is escaped. Datetimes use ``'YYYY-MM-DD HH:MM:SS'``: the base
    formatter drops sub-second precision and timezone information, keeping
    the wall-clock value. Subclasses set ``keep_fractional_seconds`` to emit
    microseconds instead.
    """

    true_literal: str = "1"
    false_literal: str = "0"
    keep_fractional_seconds: bool = False

    def format_literal(self, value: Any) -> str:
        """Format a value as a SQL literal.

        Args:
            value: Runtime value to format

        Returns:
            SQL literal text

        Raises:
            UnsupportedLiteralError: If the value's type has no literal form
        """
        if value is None:
            return NULL_LITERAL
        # bool before int, bool is an int subclass
        if isinstance(value, bool):
            return self.true_literal if value else self.false_literal
        if isinstance(value, (int, float, Decimal)):
            return self.format_number(value)
        # datetime before date, datetime is a date subclass
        if isinstance(value, datetime):
            return self.quote(self.format_datetime(value))
        if isinstance(value, date):
            return self.quote(self.format_datetime(datetime.combine(value, time())))
        if isinstance(value, time):
            return self.quote(self.format_time(value))
        if isinstance(value, str):
            return self.quote(value)
        if isinstance(value, UUID):
            return self.quote(str(value))
        if isinstance(value, (bytes, bytearray, memoryview)):
            return self.format_binary(bytes(value))

        raise UnsupportedLiteralError(
            f"No SQL literal format for value of type {type(value).__name__}"
        )

    def quote(self, text: str) -> str:
        """Single-quote text, doubling embedded single quotes."""
        return "'" + text.replace("'", "''") + "'"

    def format_number(self, value: int | float | Decimal) -> str:
        """Format a number as plain decimal text without exponent."""
        if isinstance(value, int):
            return str(int(value))

        number = value if isinstance(value, Decimal) else Decimal(repr(value))
        if not number.is_finite():
            raise UnsupportedLiteralError(f"No SQL literal format for number {value!r}")
        return format(number, "f")

    def format_datetime(self, value: datetime) -> str:
        value = value.replace(tzinfo=None)
        if self.keep_fractional_seconds and value.microsecond:
            return value.isoformat(sep=" ", timespec="microseconds")
        return value.isoformat(sep=" ", timespec="seconds")

    def format_time(self, value: time) -> str:
        value = value.replace(tzinfo=None)
        if self.keep_fractional_seconds and value.microsecond:
            return value.isoformat(timespec="microseconds")
        return value.isoformat(timespec="seconds")

    def format_binary(self, value: bytes) -> str:
        """Format a byte block as a hex blob literal."""
        return f"X'{value.hex().upper()}'"
