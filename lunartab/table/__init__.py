#!/usr/bin/env python3
# lunartab/table/__init__.py
from __future__ import annotations

"""
Package for the Table container, its renderer and input normalization.

This package re-exports public APIs from:
- table.py
- normalize.py
"""

from .table import (
    DEFAULT_ALIGN,
    DEFAULT_FORMAT,
    SUPPRESSIBLE_LINES,
    Table,
)
from .normalize import (
    BooleanGrid,
    KeyedGrid,
    MixedGrid,
    NumericGrid,
    StringGrid,
    create,
    format_float,
    select_grid,
    to_display,
)

__all__ = [
    "DEFAULT_ALIGN",
    "DEFAULT_FORMAT",
    "SUPPRESSIBLE_LINES",
    "Table",
    "BooleanGrid",
    "KeyedGrid",
    "MixedGrid",
    "NumericGrid",
    "StringGrid",
    "create",
    "format_float",
    "select_grid",
    "to_display",
]
