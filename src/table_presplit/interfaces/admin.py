"""Protocol definition for the table admin client."""

from __future__ import annotations

from collections.abc import Sequence
from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from ..core.schema import TableSchema
    from ..core.types import RowKey, TableName


class AdminClient(Protocol):
    """Administrative capability of the key-value store."""

    def create_table(self, schema: TableSchema, split_keys: Sequence[RowKey]) -> None:
        """Create a table pre-split at the given ordered keys."""
        ...

    def disable_table(self, name: TableName) -> None:
        """Take the table offline; required before deletion."""
        ...

    def delete_table(self, name: TableName) -> None:
        """Drop a disabled table."""
        ...
