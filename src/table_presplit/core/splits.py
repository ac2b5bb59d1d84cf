"""Split-key generation for pre-split tables.

Split keys are fixed-width, zero-padded decimal numerals, so byte order and
numeric order agree. N split keys yield N + 1 regions.
"""

from __future__ import annotations

from collections.abc import Sequence

from .columns import MAX_SPLIT_COUNT, SPLIT_PREFIX_LENGTH
from .errors import InvalidArgumentError
from .types import Region, RowKey


def validate_split_count(split_count: int, width: int = SPLIT_PREFIX_LENGTH) -> None:
    """Raise InvalidArgumentError unless 0 < split_count < 10**width."""
    if isinstance(split_count, bool) or not isinstance(split_count, int):
        raise InvalidArgumentError(f"Split count must be an integer, got {split_count!r}")
    if split_count <= 0:
        raise InvalidArgumentError("Split count must be greater than 0")
    limit = MAX_SPLIT_COUNT if width == SPLIT_PREFIX_LENGTH else 10 ** width
    if split_count >= limit:
        raise InvalidArgumentError(
            f"Split count {split_count} does not fit in {width}-digit split keys (max {limit - 1})"
        )


def format_split_key(index: int, width: int = SPLIT_PREFIX_LENGTH) -> RowKey:
    """Return index as a zero-padded ASCII numeral of the given width."""
    return f"{index:0{width}d}".encode("ascii")


def generate_split_keys(split_count: int, width: int = SPLIT_PREFIX_LENGTH) -> list[RowKey]:
    """Generate split_count ordered split keys.

    Example: split_count=3 gives [b"000001", b"000002", b"000003"].
    """
    validate_split_count(split_count, width)
    return [format_split_key(i, width) for i in range(1, split_count + 1)]


def regions_for_splits(split_keys: Sequence[RowKey]) -> list[Region]:
    """Return the contiguous regions produced by splitting at split_keys.

    The first region is unbounded below and the last unbounded above.
    """
    bounds: list[RowKey | None] = [None, *split_keys, None]
    return [Region(bounds[i], bounds[i + 1]) for i in range(len(bounds) - 1)]
