"""Table schema value and its staged builder.

The builder collects metadata and the column family, then freezes them into
an immutable TableSchema that is handed to the admin client.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass
from types import MappingProxyType

from .columns import COLUMN_FAMILY
from .errors import InvalidArgumentError
from .types import TableName, TableOptions

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TableSchema:
    """Immutable description of a table to be created.

    Attributes:
        name: Table identifier
        column_families: Column family names, in the order they were added
        options: Descriptor-level key/value options as ordered pairs
    """

    name: TableName
    column_families: tuple[str, ...]
    options: tuple[tuple[str, str], ...] = ()

    @property
    def metadata(self) -> Mapping[str, str]:
        """Read-only mapping view of options."""
        return MappingProxyType(dict(self.options))

    def get_value(self, key: str) -> str | None:
        """Return metadata value for key or None if not set."""
        return self.metadata.get(key)


class TableSchemaBuilder:
    """Staged construction of a TableSchema.

    Args:
        name: Table identifier; must be a non-empty string

    Invariants:
        - set_value overwrites earlier values for the same key
        - build() returns a new schema; later builder calls do not affect it
    """

    def __init__(self, name: TableName):
        if not isinstance(name, str) or not name.strip():
            raise InvalidArgumentError(f"Table name must be a non-empty string, got {name!r}")
        self._name = name
        self._metadata: dict[str, str] = {}
        self._families: list[str] = []

    def set_value(self, key: str, value: str) -> TableSchemaBuilder:
        self._metadata[key] = value
        return self

    def set_values(self, options: TableOptions) -> TableSchemaBuilder:
        for key, value in options.items():
            self.set_value(key, value)
        return self

    def set_column_family(self, family: str) -> TableSchemaBuilder:
        if not family:
            raise InvalidArgumentError("Column family name must be non-empty")
        if family not in self._families:
            self._families.append(family)
        return self

    def build(self) -> TableSchema:
        if not self._families:
            raise InvalidArgumentError(f"Table {self._name} has no column family")
        return TableSchema(
            name=self._name,
            column_families=tuple(self._families),
            options=tuple(self._metadata.items()),
        )


def build_table_schema(table_name: TableName, table_options: TableOptions | None = None) -> TableSchema:
    """Build the schema for a generated table.

    Every option is copied verbatim into the schema metadata, and the single
    COLUMN_FAMILY is attached.
    """
    builder = TableSchemaBuilder(table_name)
    builder.set_values(table_options or {})
    schema = builder.set_column_family(COLUMN_FAMILY).build()
    logger.debug(f"Built schema for {table_name} with {len(schema.metadata)} options")
    return schema
