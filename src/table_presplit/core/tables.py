"""Table lifecycle operations against an admin client.

Validation happens before any admin call. Admin errors propagate unchanged;
nothing here retries or compensates.
"""

from __future__ import annotations

import logging

from ..interfaces.admin import AdminClient
from .schema import build_table_schema
from .splits import generate_split_keys
from .types import TableName, TableOptions

logger = logging.getLogger(__name__)


def create_table(
    admin: AdminClient,
    table_name: TableName,
    split_count: int,
    table_options: TableOptions | None = None,
) -> None:
    """Create a pre-split table with a single column family.

    A table created with split_count=10 has 11 regions with boundaries
    000001, 000002, ..., 000010.

    Args:
        admin: Admin client used to create the table
        table_name: Name of the table to create
        split_count: Number of split keys (regions = split_count + 1),
            in the range [1, MAX_SPLIT_COUNT)
        table_options: Extra metadata set on the table descriptor
    """
    split_keys = generate_split_keys(split_count)
    schema = build_table_schema(table_name, table_options)

    logger.info(f"Creating table {table_name} with {split_count + 1} regions")
    admin.create_table(schema, split_keys)
    logger.info(f"Created table {table_name}")


def delete_table(admin: AdminClient, table_name: TableName) -> None:
    """Disable then delete a table.

    If deletion fails after a successful disable, the table stays disabled.
    """
    logger.info(f"Disabling table {table_name}")
    admin.disable_table(table_name)
    logger.info(f"Deleting table {table_name}")
    admin.delete_table(table_name)
    logger.info(f"Deleted table {table_name}")
