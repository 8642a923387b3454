#!/usr/bin/env python3
# lunartab/cli.py
from __future__ import annotations

"""
Demo command line entrypoint.

Renders two sample tables (mixed rows with explicit headers, and keyed
columns) using settings from `load_config()`, overridable with flags:

    python -m lunartab --format grid --align center --empty None --hide top
    python -m lunartab --list-formats
"""

import argparse
import logging
import sys
from dataclasses import replace
from typing import Any, Optional, Sequence

from lunartab.config import TableConfig, load_config
from lunartab.errors import TabulateError
from lunartab.formats import FormatRegistry
from lunartab.table import SUPPRESSIBLE_LINES, create
from lunartab.ui import init_logger, print_block, print_line

DEMO_ROWS: list[list[Any]] = [
    ["test_row1_1", "test_row1_2", "test_row1_3", 1, 2, 3, 11.10, "1"],
    ["test_row2_1", "testssss_row2_222222", "test_row2_3", 1, 2, 3],
    ["test_row3_2", "test_row3_3", 1],
]
DEMO_HEADERS = ["Test", "Test Hea222der 2", "Test Header 3", "T 4", "Test Header 5"]


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="lunartab", description="Render demo tables in any registered format.")
    parser.add_argument("-f", "--format", dest="table_format",
                        help="format name (see --list-formats)")
    parser.add_argument("-a", "--align", choices=["left", "right", "center"])
    parser.add_argument("-e", "--empty", help="placeholder for missing cells")
    parser.add_argument("--hide", action="append", default=None,
                        choices=sorted(SUPPRESSIBLE_LINES),
                        help="suppress a border line (repeatable)")
    parser.add_argument("--float-format", help="format spec for floats, e.g. .2f")
    parser.add_argument("--list-formats", action="store_true",
                        help="list registered format names and exit")
    parser.add_argument("-v", "--verbose", action="store_true",
                        help="log at DEBUG level")
    return parser


def render_demo(config: TableConfig, registry: Optional[FormatRegistry] = None) -> str:
    """Render the two demo tables with `config` and return the joined text."""
    options = dict(
        fmt=config.table_format,
        align=config.align,
        empty=config.empty,
        hide_lines=config.hide_lines,
        registry=registry,
    )
    mixed = create(DEMO_ROWS, DEMO_HEADERS,
                   float_format=config.float_format, **options)
    keyed = create(
        {"test": DEMO_ROWS[0], "test222": DEMO_ROWS[1], "test header22": DEMO_ROWS[2]},
        float_format=config.float_format, **options)
    return mixed.render() + "\n" + keyed.render()


def _apply_overrides(config: TableConfig, args: argparse.Namespace) -> TableConfig:
    changes: dict[str, Any] = {}
    if args.table_format:
        changes["table_format"] = args.table_format
    if args.align:
        changes["align"] = args.align
    if args.empty is not None:
        changes["empty"] = args.empty
    if args.hide:
        changes["hide_lines"] = frozenset(args.hide)
    if args.float_format:
        changes["float_format"] = args.float_format
    return replace(config, **changes) if changes else config


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    logger = init_logger("lunartab")

    try:
        config = _apply_overrides(load_config(), args)
    except ValueError as exc:
        logger.error("Invalid configuration: %s", exc)
        return 2

    init_logger(
        "lunartab",
        level=logging.DEBUG if args.verbose else (config.log_level or logging.INFO),
        logfile=str(config.log_file_path) if config.log_file_path else None,
    )

    registry = FormatRegistry()
    if args.list_formats:
        for name in registry.names():
            print_line(name)
        return 0

    try:
        print_block(render_demo(config, registry))
    except (TabulateError, ValueError) as exc:
        logger.error("%s", exc)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
