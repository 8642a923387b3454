#!/usr/bin/env python3
# lunartab/formats/format_types.py
from __future__ import annotations

"""
Format descriptor data structures.

This module defines:
- Line: a border line (top, below header, between rows, bottom).
- Row: the glyphs framing header and data cells.
- TableFormat: a named bundle of lines, rows, padding and visibility flags.
"""

from dataclasses import dataclass, field


@dataclass(frozen=True, slots=True)
class Line:
    """
    A horizontal border line.

    Attributes:
        begin: Emitted once before the first column.
        hline: Repeated to fill each column.
        sep: Emitted between two columns.
        end: Emitted once after the last column.
    """
    begin: str = ""
    hline: str = ""
    sep: str = ""
    end: str = ""


@dataclass(frozen=True, slots=True)
class Row:
    """Glyphs around and between cells; the cell content fills the space."""
    begin: str = ""
    sep: str = ""
    end: str = ""


@dataclass(frozen=True, slots=True)
class TableFormat:
    """
    Declarative description of how a table is drawn.

    Important fields:
        padding: Spaces added on each side of every cell (>= 0).
        show_top / show_below_header / show_between_rows / show_bottom:
            Visibility of the corresponding border line.
        hide_header: Skip the header row and the line below it.
    """

    line_top: Line = field(default_factory=Line)
    line_below_header: Line = field(default_factory=Line)
    line_between_rows: Line = field(default_factory=Line)
    line_bottom: Line = field(default_factory=Line)
    header_row: Row = field(default_factory=Row)
    data_row: Row = field(default_factory=Row)
    padding: int = 0
    show_top: bool = True
    show_below_header: bool = True
    show_between_rows: bool = True
    show_bottom: bool = True
    hide_header: bool = False

    def __post_init__(self) -> None:
        if self.padding < 0:
            raise ValueError(f"padding must be >= 0, got {self.padding}")
