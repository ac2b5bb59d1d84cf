# Minimal CLI using argparse that prints split keys or plans a pre-split table.
from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from table_presplit.components.memory_admin import InMemoryAdmin
from table_presplit.core.config import PresplitConfig, load_config
from table_presplit.core.errors import InvalidArgumentError
from table_presplit.core.splits import generate_split_keys
from table_presplit.core.tables import create_table


def _format_key(key: bytes | None, unbounded: str) -> str:
    return unbounded if key is None else key.decode("ascii")


def parse_option(text: str) -> tuple[str, str]:
    key, sep, value = text.partition("=")
    if not sep or not key:
        raise argparse.ArgumentTypeError(f"Expected KEY=VALUE, got {text!r}")
    return key, value


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="table-presplit", description="Plan pre-split key-value store tables"
    )
    p.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    sub = p.add_subparsers(dest="command", required=True)

    splits = sub.add_parser("splits", help="Print split keys, one per line")
    splits.add_argument("count", type=int, help="Number of split keys")

    plan = sub.add_parser("plan", help="Show the schema and regions of a pre-split table")
    plan.add_argument("--config", type=Path, help="TOML file with a [table] section")
    plan.add_argument("--table", type=str, help="Table name (overrides config)")
    plan.add_argument("--splits", type=int, help="Split count (overrides config)")
    plan.add_argument(
        "--option",
        type=parse_option,
        action="append",
        default=[],
        metavar="KEY=VALUE",
        help="Table metadata option; may be repeated",
    )
    return p


def resolve_config(args: argparse.Namespace) -> PresplitConfig:
    if args.config is not None:
        cfg = load_config(args.config)
    else:
        if args.table is None or args.splits is None:
            raise InvalidArgumentError("--table and --splits are required without --config")
        cfg = PresplitConfig(table_name=args.table, split_count=args.splits)

    if args.table is not None:
        cfg.table_name = args.table
    if args.splits is not None:
        cfg.split_count = args.splits
    cfg.table_options.update(dict(args.option))
    return cfg


def run_plan(cfg: PresplitConfig) -> None:
    admin = InMemoryAdmin()
    create_table(admin, cfg.table_name, cfg.split_count, cfg.table_options)

    schema = admin.get_schema(cfg.table_name)
    print(f"Table: {schema.name}")
    print(f"Column families: {', '.join(schema.column_families)}")
    for key, value in schema.metadata.items():
        print(f"  {key} = {value}")

    regions = admin.get_regions(cfg.table_name)
    print(f"Regions: {len(regions)}")
    for i, region in enumerate(regions):
        start = _format_key(region.start_key, "-inf")
        end = _format_key(region.end_key, "+inf")
        print(f"  {i}: [{start}, {end})")


def main(argv: list[str] | None = None) -> int:
    argv = argv if argv is not None else sys.argv[1:]
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s | %(levelname)s | %(message)s",
    )

    try:
        if args.command == "splits":
            for key in generate_split_keys(args.count):
                print(key.decode("ascii"))
        else:
            run_plan(resolve_config(args))
    except (InvalidArgumentError, OSError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
