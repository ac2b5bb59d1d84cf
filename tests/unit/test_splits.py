"""Unit tests for split-key generation."""

import pytest

from table_presplit.core.columns import MAX_SPLIT_COUNT, SPLIT_PREFIX_LENGTH
from table_presplit.core.errors import InvalidArgumentError
from table_presplit.core.splits import (
    format_split_key,
    generate_split_keys,
    regions_for_splits,
    validate_split_count,
)
from table_presplit.core.types import Region


def test_generate_three_keys():
    """Test exact values for a small split count."""
    assert generate_split_keys(3) == [b"000001", b"000002", b"000003"]


@pytest.mark.parametrize("split_count", [1, 2, 10, 99, 1000, 12345])
def test_keys_count_width_and_order(split_count):
    """Test count, fixed width and strict byte ordering."""
    keys = generate_split_keys(split_count)

    assert len(keys) == split_count
    assert all(len(k) == SPLIT_PREFIX_LENGTH for k in keys)
    assert all(a < b for a, b in zip(keys, keys[1:]))


def test_key_matches_index():
    """Test that key i is the zero-padded decimal of i."""
    keys = generate_split_keys(250)
    for i, key in enumerate(keys, start=1):
        assert int(key) == i
        assert key == str(i).zfill(6).encode()


def test_largest_allowed_split_count():
    """Test the last representable split count."""
    keys = generate_split_keys(MAX_SPLIT_COUNT - 1)

    assert len(keys) == MAX_SPLIT_COUNT - 1
    assert keys[-1] == b"999999"
    assert keys == sorted(keys)


def test_generation_is_deterministic():
    """Test that repeated calls return identical sequences."""
    assert generate_split_keys(500) == generate_split_keys(500)


@pytest.mark.parametrize("split_count", [0, -1, -100])
def test_non_positive_split_count_rejected(split_count):
    with pytest.raises(InvalidArgumentError, match="greater than 0"):
        generate_split_keys(split_count)


@pytest.mark.parametrize("split_count", [MAX_SPLIT_COUNT, MAX_SPLIT_COUNT + 1, 10 ** 9])
def test_overflowing_split_count_rejected(split_count):
    with pytest.raises(InvalidArgumentError, match="does not fit"):
        generate_split_keys(split_count)


@pytest.mark.parametrize("split_count", [1.5, "10", None, True])
def test_non_integer_split_count_rejected(split_count):
    with pytest.raises(InvalidArgumentError):
        validate_split_count(split_count)


def test_invalid_argument_is_value_error():
    """Test that callers catching ValueError also see validation errors."""
    with pytest.raises(ValueError):
        generate_split_keys(0)


def test_custom_width():
    assert generate_split_keys(2, width=3) == [b"001", b"002"]
    with pytest.raises(InvalidArgumentError):
        generate_split_keys(1000, width=3)


def test_format_split_key():
    assert format_split_key(42) == b"000042"


def test_regions_for_splits_contiguous():
    """Test that N keys give N + 1 contiguous regions."""
    keys = generate_split_keys(3)
    regions = regions_for_splits(keys)

    assert regions == [
        Region(None, b"000001"),
        Region(b"000001", b"000002"),
        Region(b"000002", b"000003"),
        Region(b"000003", None),
    ]
    for left, right in zip(regions, regions[1:]):
        assert left.end_key == right.start_key


def test_regions_for_no_splits():
    assert regions_for_splits([]) == [Region(None, None)]


def test_region_contains():
    region = Region(b"000001", b"000002")

    assert region.contains(b"000001")
    assert region.contains(b"0000015")
    assert not region.contains(b"000002")
    assert not region.contains(b"000000")
    assert Region(None, None).contains(b"anything")


def test_default_bound_is_max_split_count():
    validate_split_count(MAX_SPLIT_COUNT - 1)
    with pytest.raises(InvalidArgumentError, match=f"max {MAX_SPLIT_COUNT - 1}"):
        validate_split_count(MAX_SPLIT_COUNT)
