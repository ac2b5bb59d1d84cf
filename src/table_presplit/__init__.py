"""Table presplit - deterministic split keys and pre-split table creation."""

from .components.memory_admin import InMemoryAdmin
from .core.columns import COLUMN_FAMILY, MAX_SPLIT_COUNT, SPLIT_PREFIX_LENGTH, TableColumnName
from .core.config import PresplitConfig, load_config
from .core.errors import (
    PresplitError,
    InvalidArgumentError,
    ExternalServiceError,
    TableExistsError,
    TableNotFoundError,
    TableNotEnabledError,
    TableNotDisabledError,
)
from .core.schema import TableSchema, TableSchemaBuilder, build_table_schema
from .core.splits import generate_split_keys, regions_for_splits
from .core.tables import create_table, delete_table
from .core.types import RowKey, TableName, TableOptions, Region
from .interfaces.admin import AdminClient

__all__ = [
    "InMemoryAdmin",
    "COLUMN_FAMILY",
    "MAX_SPLIT_COUNT",
    "SPLIT_PREFIX_LENGTH",
    "TableColumnName",
    "PresplitConfig",
    "load_config",
    "PresplitError",
    "InvalidArgumentError",
    "ExternalServiceError",
    "TableExistsError",
    "TableNotFoundError",
    "TableNotEnabledError",
    "TableNotDisabledError",
    "TableSchema",
    "TableSchemaBuilder",
    "build_table_schema",
    "generate_split_keys",
    "regions_for_splits",
    "create_table",
    "delete_table",
    "RowKey",
    "TableName",
    "TableOptions",
    "Region",
    "AdminClient",
]
