#!/usr/bin/env python3
# lunartab/table/normalize.py
from __future__ import annotations

"""
Value normalization: typed input -> (headers, rows of display strings).

The input shape is inspected once by `select_grid`, which picks one of a
closed set of grid variants. Each variant knows how to turn its data into
display strings through `normalize()`.

Supported shapes:
    - sequence of rows (each a sequence of str / int / float / bool / None)
    - a single flat row (sequence of scalars)
    - mapping of header -> column values (KeyedGrid)
"""

import logging
import math
from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from decimal import Decimal
from typing import Any, List, Optional, Tuple

from lunartab.errors import UnsupportedInputType
from lunartab.table.table import Table

logger = logging.getLogger(__name__)

Normalized = Tuple[Optional[List[str]], List[List[str]]]


# ---------------- Scalar conversion ----------------

def format_float(value: float, float_format: Optional[str] = None) -> str:
    """
    Shortest positional decimal for `value` (no exponent), or
    `format(value, float_format)` when a format spec is given.
    """
    if float_format:
        return format(value, float_format)
    if not math.isfinite(value):
        return repr(value)
    return format(Decimal(repr(value)), "f")


def to_display(value: Any, float_format: Optional[str] = None) -> str:
    """Convert one scalar cell into its display string."""
    if value is None:
        return ""
    if isinstance(value, str):
        return value
    if isinstance(value, bool):
        return str(value)
    if isinstance(value, int):
        return str(value)
    if isinstance(value, float):
        return format_float(value, float_format)
    raise UnsupportedInputType(type(value), "cell")


def _is_row(value: Any) -> bool:
    return isinstance(value, Sequence) and not isinstance(value, (str, bytes))


# ---------------- Grid variants ----------------

@dataclass(slots=True)
class StringGrid:
    rows: Sequence[Sequence[str]]

    def normalize(self) -> Normalized:
        return None, [list(row) for row in self.rows]


@dataclass(slots=True)
class NumericGrid:
    rows: Sequence[Sequence[int | float]]
    float_format: Optional[str] = None

    def normalize(self) -> Normalized:
        return None, [
            [to_display(cell, self.float_format) for cell in row]
            for row in self.rows
        ]


@dataclass(slots=True)
class BooleanGrid:
    rows: Sequence[Sequence[bool]]

    def normalize(self) -> Normalized:
        return None, [[str(cell) for cell in row] for row in self.rows]


@dataclass(slots=True)
class MixedGrid:
    """Rows of arbitrary scalars; unsupported cells are logged and str()'d."""
    rows: Sequence[Sequence[Any]]
    float_format: Optional[str] = None

    def _cell(self, value: Any) -> str:
        try:
            return to_display(value, self.float_format)
        except UnsupportedInputType as exc:
            logger.warning("%s; rendering with str()", exc)
            return str(value)

    def normalize(self) -> Normalized:
        return None, [[self._cell(cell) for cell in row] for row in self.rows]


@dataclass(slots=True)
class KeyedGrid:
    """
    Mapping of header -> column values.

    Keys become the header in insertion order. Row i holds the i-th value of
    every column; a short column leaves a gap that is filled with '' when a
    later column still has a value, and omitted otherwise.
    """
    columns: Mapping[str, Sequence[Any]]
    float_format: Optional[str] = None

    def normalize(self) -> Normalized:
        headers = [str(key) for key in self.columns]
        columns = [
            MixedGrid([list(values)], self.float_format).normalize()[1][0]
            for values in self.columns.values()
        ]
        depth = max((len(col) for col in columns), default=0)
        rows: List[List[str]] = []
        for row_idx in range(depth):
            cells = [col[row_idx] if row_idx < len(col) else None
                     for col in columns]
            while cells and cells[-1] is None:
                cells.pop()
            rows.append(["" if cell is None else cell for cell in cells])
        return headers, rows


Grid = StringGrid | NumericGrid | BooleanGrid | MixedGrid | KeyedGrid


def select_grid(data: Any, float_format: Optional[str] = None) -> Grid:
    """Pick the grid variant for `data`, raising UnsupportedInputType otherwise."""
    if isinstance(data, Mapping):
        for key, values in data.items():
            if not _is_row(values):
                raise UnsupportedInputType(type(values), f"column {key!r}")
        return KeyedGrid(data, float_format)

    if not _is_row(data):
        raise UnsupportedInputType(type(data), "table data")

    rows = list(data)
    if rows and not any(_is_row(item) for item in rows):
        rows = [rows]  # a single flat row
    for row in rows:
        if not _is_row(row):
            raise UnsupportedInputType(type(row), "row")

    cells = [cell for row in rows for cell in row]
    if all(isinstance(cell, str) for cell in cells):
        return StringGrid(rows)
    if all(isinstance(cell, bool) for cell in cells):
        return BooleanGrid(rows)
    if all(isinstance(cell, (int, float)) and not isinstance(cell, bool)
           for cell in cells):
        return NumericGrid(rows, float_format)
    return MixedGrid(rows, float_format)


def create(
    data: Any,
    headers: Optional[Sequence[str]] = None,
    *,
    float_format: Optional[str] = None,
    strict: bool = False,
    **table_options: Any,
) -> Table:
    """
    Build a Table from typed input.

    Unsupported input is logged and yields an empty table (rendering it
    raises NoData), unless `strict` is set, in which case
    UnsupportedInputType propagates. A non-empty `headers` wins over the
    keys of keyed input. Extra keyword arguments go to the Table constructor.
    """
    try:
        grid_headers, rows = select_grid(data, float_format).normalize()
    except UnsupportedInputType as exc:
        if strict:
            raise
        logger.warning("%s; creating an empty table", exc)
        grid_headers, rows = None, []
    return Table(rows, headers or grid_headers, **table_options)
