"""In-process admin client.

Keeps table schemas and region boundaries in memory using
sortedcontainers, so region layouts can be planned and inspected without a
running cluster.
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Sequence
from dataclasses import dataclass

from sortedcontainers import SortedDict, SortedList

from ..core.errors import (
    InvalidArgumentError,
    TableExistsError,
    TableNotDisabledError,
    TableNotEnabledError,
    TableNotFoundError,
)
from ..core.schema import TableSchema
from ..core.splits import regions_for_splits
from ..core.types import Region, RowKey, TableName

logger = logging.getLogger(__name__)


@dataclass
class _TableState:
    schema: TableSchema
    split_keys: SortedList
    enabled: bool = True


class InMemoryAdmin:
    """Admin client holding tables in memory.

    Invariants:
        - Table names are unique
        - Split keys of a table are non-empty and strictly increasing
        - A table must be disabled before it can be deleted
        - Thread-safe via lock
    """

    def __init__(self):
        self._lock = threading.Lock()
        self._tables: SortedDict = SortedDict()

    def create_table(self, schema: TableSchema, split_keys: Sequence[RowKey]) -> None:
        """Create a table pre-split at the given ordered keys."""
        for prev, cur in zip(split_keys, split_keys[1:]):
            if cur <= prev:
                raise InvalidArgumentError(
                    f"Split keys must be strictly increasing: {prev!r} >= {cur!r}"
                )
        if any(not key for key in split_keys):
            raise InvalidArgumentError("Split keys must be non-empty")

        with self._lock:
            if schema.name in self._tables:
                raise TableExistsError(f"Table already exists: {schema.name}")
            self._tables[schema.name] = _TableState(schema, SortedList(split_keys))
        logger.debug(f"Created table {schema.name} with {len(split_keys) + 1} regions")

    def disable_table(self, name: TableName) -> None:
        with self._lock:
            state = self._get_locked(name)
            if not state.enabled:
                raise TableNotEnabledError(f"Table is already disabled: {name}")
            state.enabled = False
        logger.debug(f"Disabled table {name}")

    def delete_table(self, name: TableName) -> None:
        with self._lock:
            state = self._get_locked(name)
            if state.enabled:
                raise TableNotDisabledError(f"Table must be disabled before deletion: {name}")
            del self._tables[name]
        logger.debug(f"Deleted table {name}")

    def table_exists(self, name: TableName) -> bool:
        with self._lock:
            return name in self._tables

    def is_table_enabled(self, name: TableName) -> bool:
        with self._lock:
            return self._get_locked(name).enabled

    def get_schema(self, name: TableName) -> TableSchema:
        with self._lock:
            return self._get_locked(name).schema

    def list_tables(self) -> list[TableName]:
        """Return table names in sorted order."""
        with self._lock:
            return list(self._tables.keys())

    def get_split_keys(self, name: TableName) -> list[RowKey]:
        with self._lock:
            return list(self._get_locked(name).split_keys)

    def get_regions(self, name: TableName) -> list[Region]:
        """Return the table's regions in key order."""
        return regions_for_splits(self.get_split_keys(name))

    def locate_region(self, name: TableName, row_key: RowKey) -> int:
        """Return the index of the region holding row_key.

        A row equal to a split key belongs to the region that starts there.
        """
        with self._lock:
            return self._get_locked(name).split_keys.bisect_right(row_key)

    def _get_locked(self, name: TableName) -> _TableState:
        """Look up table state (must hold lock)."""
        state = self._tables.get(name)
        if state is None:
            raise TableNotFoundError(f"Table not found: {name}")
        return state
