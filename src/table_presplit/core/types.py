"""Common type definitions for table pre-splitting."""

from __future__ import annotations

from collections.abc import Mapping
from typing import NamedTuple

# Core primitive types
RowKey = bytes
TableName = str
TableOptions = Mapping[str, str]


class Region(NamedTuple):
    """Contiguous key range of a table.

    start_key is inclusive, end_key is exclusive. None means unbounded.
    """
    start_key: RowKey | None
    end_key: RowKey | None

    def contains(self, row_key: RowKey) -> bool:
        if self.start_key is not None and row_key < self.start_key:
            return False
        if self.end_key is not None and row_key >= self.end_key:
            return False
        return True
