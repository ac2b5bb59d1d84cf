"""Column layout of generated tables.

Defines the single column family and the fixed set of attribute columns
that generated records carry.
"""

from __future__ import annotations

from enum import Enum

COLUMN_FAMILY = "cf"

SPLIT_PREFIX_LENGTH = 6

MAX_SPLIT_COUNT = 10 ** SPLIT_PREFIX_LENGTH


class TableColumnName(Enum):
    """Attribute columns of a generated record, stored under COLUMN_FAMILY."""

    ORG_ID = b"orgId"
    TOOL_EVENT_ID = b"toolEventId"
    EVENT_ID = b"eventId"
    VEHICLE_ID = b"vehicleId"
    SPEED = b"speed"
    LATITUDE = b"latitude"
    LONGITUDE = b"longitude"
    LOCATION = b"location"
    TIMESTAMP = b"timestamp"

    @property
    def column_name(self) -> bytes:
        return self.value

    def qualified_name(self) -> bytes:
        """Return ``family:qualifier`` as used in scans and puts."""
        return COLUMN_FAMILY.encode() + b":" + self.value
