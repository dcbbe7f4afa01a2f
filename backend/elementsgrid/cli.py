"""Command-line entry point: build the asset, check the catalog, inspect a build."""

from __future__ import annotations

import argparse
import logging
import sys

from dotenv import load_dotenv

from elementsgrid.catalog.elements import ELEMENTS
from elementsgrid.catalog.lookup import validate_catalog
from elementsgrid.config import Settings
from elementsgrid.errors import ElementsGridError
from elementsgrid.grid.serializer import load_asset
from elementsgrid.pipeline import create_pipeline


def _configure_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )


def cmd_build(args: argparse.Namespace, config: Settings) -> int:
    overrides = {}
    if args.output:
        overrides["output_path"] = args.output
    if args.batch_size is not None:
        overrides["batch_size"] = args.batch_size
    if args.delay is not None:
        overrides["batch_delay_seconds"] = args.delay
    if overrides:
        config = config.model_copy(update=overrides)

    if config.batch_size < 1:
        print(f"Batch size must be positive, got {config.batch_size}", file=sys.stderr)
        return 2

    result = create_pipeline(config).run()
    print(f"Wrote {result.element_count} elements to {result.output_path}")
    return 0


def cmd_check(args: argparse.Namespace, config: Settings) -> int:
    issues = validate_catalog(ELEMENTS, rows=config.grid_rows, columns=config.grid_columns)
    for issue in issues:
        print(issue)
    if issues:
        print(f"{len(issues)} issue(s) found", file=sys.stderr)
        return 1
    print(f"Catalog OK: {len(ELEMENTS)} elements")
    return 0


def cmd_show(args: argparse.Namespace, config: Settings) -> int:
    path = args.asset or config.output_path
    try:
        cells = load_asset(path)
    except FileNotFoundError:
        print(f"Asset not found: {path}", file=sys.stderr)
        return 1

    wanted = args.symbol.lower()
    for record in cells:
        if record is not None and record.symbol.lower() == wanted:
            print(f"{record.number} {record.symbol} {record.name}")
            print(f"  category:      {record.category}")
            print(f"  atomic weight: {record.atomic_weight}")
            print(f"  source:        {record.source}")
            print(f"  colors:        {', '.join(f'0x{c:08X}' for c in record.colors)}")
            print()
            print(record.extract)
            return 0

    print(f"No element {args.symbol!r} in {path}", file=sys.stderr)
    return 1


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="elementsgrid",
        description="Build the periodic table grid asset",
    )
    parser.add_argument("--log-level", help="Override ELEMENTSGRID_LOG_LEVEL")
    sub = parser.add_subparsers(dest="command", required=True)

    build = sub.add_parser("build", help="Fetch extracts and write the grid asset")
    build.add_argument("-o", "--output", help="Output JSON path")
    build.add_argument("--batch-size", type=int, help="Titles per Wikipedia request")
    build.add_argument("--delay", type=float, help="Seconds to wait between requests")
    build.set_defaults(func=cmd_build)

    check = sub.add_parser("check", help="Validate the static catalog tables offline")
    check.set_defaults(func=cmd_check)

    show = sub.add_parser("show", help="Print one element from a built asset")
    show.add_argument("symbol", help="Element symbol, e.g. Fe")
    show.add_argument("--asset", help="Asset path (default: configured output path)")
    show.set_defaults(func=cmd_show)

    return parser


def main(argv: list[str] | None = None) -> int:
    load_dotenv()
    args = build_parser().parse_args(argv)
    config = Settings()
    _configure_logging(args.log_level or config.elementsgrid_log_level)

    try:
        return args.func(args, config)
    except ElementsGridError as e:
        print(f"Build failed: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
