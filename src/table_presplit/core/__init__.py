"""Split planning and table lifecycle."""

from .schema import TableSchema, TableSchemaBuilder, build_table_schema
from .splits import generate_split_keys, regions_for_splits
from .tables import create_table, delete_table

__all__ = [
    "TableSchema",
    "TableSchemaBuilder",
    "build_table_schema",
    "generate_split_keys",
    "regions_for_splits",
    "create_table",
    "delete_table",
]
