#!/usr/bin/env python3
# lunartab/__init__.py
from __future__ import annotations
"""
Aligned plain-text tables with pluggable border styles.

    from lunartab import create

    table = create([["a", 1], ["b", 2.5]], ["Name", "Value"], fmt="grid")
    print(table.render(), end="")
"""

from .errors import NoData, TabulateError, UnknownFormat, UnsupportedInputType
from .formats import DEFAULT_FORMATS, FormatRegistry, Line, Row, TableFormat
from .table import SUPPRESSIBLE_LINES, Table, create
from .ui import format_table, init_logger, print_table

__version__ = "0.1.0"

__all__ = [
    "NoData",
    "TabulateError",
    "UnknownFormat",
    "UnsupportedInputType",
    "DEFAULT_FORMATS",
    "FormatRegistry",
    "Line",
    "Row",
    "TableFormat",
    "SUPPRESSIBLE_LINES",
    "Table",
    "create",
    "format_table",
    "init_logger",
    "print_table",
]
