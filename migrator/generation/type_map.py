"""Type-map registry resolving generic data types to dialect SQL types."""

import bisect
from dataclasses import dataclass

from migrator.constants import PRECISION_PLACEHOLDER, SIZE_PLACEHOLDER
from migrator.exceptions import UnmappedTypeError
from migrator.types import DataType


@dataclass(frozen=True)
class TypeMapEntry:
    """A SQL type template, bounded by an inclusive size ceiling or unbounded."""

    data_type: DataType
    template: str
    max_size: int | None = None


class TypeMap:
    """Per-dialect registry of type templates.

    Each data type holds bounded entries sorted by ceiling plus an optional
    unbounded default. Resolution picks the smallest ceiling that fits the
    requested size and falls back to the default otherwise.
    """

    def __init__(self) -> None:
        self._defaults: dict[DataType, TypeMapEntry] = {}
        self._bounded: dict[DataType, list[TypeMapEntry]] = {}
        self._frozen = False

    @property
    def frozen(self) -> bool:
        """Whether the registry has been made read-only."""
        return self._frozen

    def freeze(self) -> None:
        """Make the registry read-only."""
        self._frozen = True

    def set_type_map(
        self, data_type: DataType, template: str, max_size: int | None = None
    ) -> None:
        """Register a type template.

        Args:
            data_type: Generic data type being mapped
            template: SQL type template, may contain $size and $precision
            max_size: Inclusive size ceiling, None for the unbounded default

        Raises:
            RuntimeError: If the registry is frozen
            ValueError: If max_size is not positive
        """
        if self._frozen:
            raise RuntimeError("Type map is frozen and cannot be modified")

        if max_size is None:
            self._defaults[data_type] = TypeMapEntry(data_type, template)
            return

        if max_size <= 0:
            raise ValueError(f"Size ceiling must be positive, got {max_size}")

        entries = self._bounded.setdefault(data_type, [])
        ceilings = [entry.max_size or 0 for entry in entries]
        position = bisect.bisect_left(ceilings, max_size)
        entry = TypeMapEntry(data_type, template, max_size)
        if position < len(entries) and entries[position].max_size == max_size:
            entries[position] = entry
        else:
            entries.insert(position, entry)

    def get_type_map(self, data_type: DataType, size: int = 0, precision: int = 0) -> str:
        """Resolve the SQL type for a data type and size.

        Args:
            data_type: Generic data type to resolve
            size: Requested size, 0 when unspecified
            precision: Requested precision, 0 when unspecified

        Returns:
            SQL type text with placeholders substituted

        Raises:
            UnmappedTypeError: If no bounded or default entry fits
        """
        entry = self._find_entry(data_type, size)
        if entry is None:
            raise UnmappedTypeError(
                f"No type mapping for {data_type.value} with size {size}"
            )
        return entry.template.replace(SIZE_PLACEHOLDER, str(size)).replace(
            PRECISION_PLACEHOLDER, str(precision)
        )

    def has_type(self, data_type: DataType) -> bool:
        """Check whether any entry exists for a data type."""
        return data_type in self._defaults or data_type in self._bounded

    def _find_entry(self, data_type: DataType, size: int) -> TypeMapEntry | None:
        if size > 0:
            for entry in self._bounded.get(data_type, []):
                if entry.max_size is not None and size <= entry.max_size:
                    return entry
        return self._defaults.get(data_type)
