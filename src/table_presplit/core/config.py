"""Configuration for table pre-splitting.

A table request can be described in a TOML file:

    [table]
    name = "TEST_TABLE_1"
    split_count = 10

    [table.options]
    "hbase.hregion.max.filesize" = "10737418240"
"""

from __future__ import annotations

import tomllib
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict

from .errors import InvalidArgumentError


@dataclass
class PresplitConfig:
    """Parameters of a pre-split table request.

    Attributes:
        table_name: Name of the table to create
        split_count: Number of split keys (regions = split_count + 1)
        table_options: Extra metadata set on the table descriptor
    """

    table_name: str
    split_count: int
    table_options: Dict[str, str] = field(default_factory=dict)

    @staticmethod
    def from_dict(d: Dict[str, Any]) -> "PresplitConfig":
        table = d.get("table")
        if not isinstance(table, dict):
            raise InvalidArgumentError("Missing required section: [table]")

        name = table.get("name")
        if not name:
            raise InvalidArgumentError("Missing required field: table.name")

        split_count = table.get("split_count")
        if split_count is None:
            raise InvalidArgumentError("Missing required field: table.split_count")

        options = table.get("options", {})
        if not isinstance(options, dict):
            raise InvalidArgumentError("Field table.options must be a table of key = value pairs")
        for key, value in options.items():
            if isinstance(value, (dict, list)):
                raise InvalidArgumentError(f"Option table.options.{key} must be a scalar value")

        return PresplitConfig(
            table_name=str(name),
            split_count=split_count,
            table_options={str(k): str(v) for k, v in options.items()},
        )


def load_config(path: Path) -> PresplitConfig:
    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {path}")
    if not path.is_file():
        raise InvalidArgumentError(f"Config path is not a file: {path}")
    raw = path.read_text(encoding="utf-8")
    try:
        data = tomllib.loads(raw)
    except tomllib.TOMLDecodeError as e:
        raise InvalidArgumentError(f"Invalid TOML in {path}: {e}") from e
    return PresplitConfig.from_dict(data)
