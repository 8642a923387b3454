#!/usr/bin/env python3
# lunartab/layout/engine.py
from __future__ import annotations

"""
Layout engine: column widths, cell padding/alignment and line building.

Widths are measured in Unicode code points (`len`). Cells are never
truncated; a cell wider than its target is emitted as-is.
"""

from typing import Callable, List, Optional, Sequence

from lunartab.formats import Line, Row

AlignFunc = Callable[[int, str], str]


def compute_widths(
    headers: Sequence[str],
    rows: Sequence[Sequence[str]],
) -> List[int]:
    """Return one content width per header column."""
    widths = [len(header) for header in headers]
    for row in rows:
        for col_idx, cell in enumerate(row[:len(widths)]):
            widths[col_idx] = max(widths[col_idx], len(cell))
    return widths


def padded_widths(widths: Sequence[int], padding: int) -> List[int]:
    """Add `padding` on both sides of every column width."""
    return [width + 2 * padding for width in widths]


# ---------------- Alignment ----------------

def pad_left(width: int, text: str) -> str:
    """Fill on the left (content right-aligned)."""
    return " " * (width - len(text)) + text


def pad_right(width: int, text: str) -> str:
    """Fill on the right (content left-aligned)."""
    return text + " " * (width - len(text))


def pad_center(width: int, text: str) -> str:
    """Center `text`; an odd deficit puts the extra space on the right."""
    deficit = max(0, width - len(text))
    left = deficit // 2
    return " " * left + text + " " * (deficit - left)


def get_align_func(align: Optional[str]) -> AlignFunc:
    """
    Select the pad function for an alignment mode.

    '' / None / 'right' -> pad_left, 'left' -> pad_right, anything else
    -> pad_center.
    """
    if not align or align == "right":
        return pad_left
    if align == "left":
        return pad_right
    return pad_center


def pad_row(cells: Sequence[str], padding: int) -> List[str]:
    """Surround every cell with `padding` literal spaces."""
    pad = " " * padding
    return [f"{pad}{cell}{pad}" for cell in cells]


# ---------------- Lines & rows ----------------

def build_line(widths: Sequence[int], line: Line) -> str:
    """Draw a border line; each column is `hline` repeated to its padded width."""
    cells = [line.hline * width for width in widths]
    return line.begin + line.sep.join(cells) + line.end


def build_row(
    elements: Sequence[str],
    widths: Sequence[int],
    row: Row,
    align_func: AlignFunc = pad_left,
    empty: str = "",
) -> str:
    """
    Draw one header or data row.

    Columns without an element get `empty`. Elements beyond the number of
    columns are ignored.
    """
    parts = []
    for col_idx, width in enumerate(widths):
        cell = elements[col_idx] if col_idx < len(elements) else empty
        parts.append(align_func(width, cell))
    return row.begin + row.sep.join(parts) + row.end
