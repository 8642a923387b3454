#!/usr/bin/env python3
# lunartab/table/table.py
from __future__ import annotations

"""
The Table container and its renderer.

A Table owns a normalized grid of display strings plus an optional header,
and turns it into text using a TableFormat resolved from its registry.

Header adoption: when no header (or an empty one) has been set, the first
render pops the first data row and uses it as the header. This is a one-time
destructive mutation; later renders (and `rows`) no longer contain that row.
"""

import logging
from typing import Iterable, List, Optional, Sequence

from lunartab.errors import NoData
from lunartab.formats import FormatRegistry, TableFormat
from lunartab.layout import (
    build_line,
    build_row,
    compute_widths,
    get_align_func,
    pad_row,
    padded_widths,
)

logger = logging.getLogger(__name__)

DEFAULT_FORMAT = "simple"
DEFAULT_ALIGN = "right"

# Names accepted by `hide()` / `hide_lines`
LINE_TOP = "top"
LINE_BELOW_HEADER = "belowheader"
LINE_BETWEEN_ROWS = "betweenrows"
LINE_BOTTOM = "bottomLine"
SUPPRESSIBLE_LINES = frozenset(
    {LINE_TOP, LINE_BELOW_HEADER, LINE_BETWEEN_ROWS, LINE_BOTTOM})


class Table:
    """A renderable table of display strings."""

    def __init__(
        self,
        rows: Iterable[Sequence[str]] = (),
        headers: Optional[Sequence[str]] = None,
        *,
        fmt: str | TableFormat = DEFAULT_FORMAT,
        align: str = DEFAULT_ALIGN,
        empty: str = "",
        hide_lines: Iterable[str] = (),
        registry: Optional[FormatRegistry] = None,
    ) -> None:
        self.registry = registry if registry is not None else FormatRegistry()
        self.rows: List[List[str]] = [list(row) for row in rows]
        self.headers: Optional[List[str]] = None
        self.table_format: TableFormat = TableFormat()
        self.align = align
        self.empty = empty
        self.hide_lines: set[str] = set()
        self._header_adopted = False

        if headers is not None:
            self.set_headers(headers)
        self.set_format(fmt)
        self.hide(*hide_lines)

    # ---------------- Setters ----------------

    def set_headers(self, headers: Sequence[str]) -> "Table":
        self.headers = list(headers)
        return self

    def set_format(self, fmt: str | TableFormat) -> "Table":
        """Select a format by registry name or use a TableFormat directly."""
        self.table_format = self._resolve_format(fmt)
        return self

    def set_align(self, align: str) -> "Table":
        self.align = align
        return self

    def set_empty_string(self, empty: str) -> "Table":
        self.empty = empty
        return self

    def hide(self, *line_names: str) -> "Table":
        """Suppress border lines by name (see SUPPRESSIBLE_LINES)."""
        unknown = set(line_names) - SUPPRESSIBLE_LINES
        if unknown:
            raise ValueError(
                f"Unknown line name(s) {sorted(unknown)}; "
                f"expected any of {sorted(SUPPRESSIBLE_LINES)}")
        self.hide_lines.update(line_names)
        return self

    # ---------------- Rendering ----------------

    def _resolve_format(self, fmt: str | TableFormat) -> TableFormat:
        if isinstance(fmt, TableFormat):
            return fmt
        return self.registry.lookup(fmt)

    def _adopt_header(self) -> None:
        self.headers = self.rows.pop(0)
        self._header_adopted = True
        logger.debug("No header set; adopted first row as header: %r",
                     self.headers)

    def _line_visible(self, flag: bool, name: str) -> bool:
        return flag and name not in self.hide_lines

    def render(self, fmt: str | TableFormat | None = None) -> str:
        """
        Render the table to text, one line per border/row, each ending in '\\n'.

        `fmt` overrides the configured format for this call only.
        Raises NoData if the table holds no rows, UnknownFormat for an
        unregistered format name.
        """
        table_format = self.table_format if fmt is None else self._resolve_format(fmt)

        if not self.rows and not self._header_adopted:
            raise NoData()
        if not self.headers and not self._header_adopted:
            self._adopt_header()
        headers: List[str] = self.headers or []

        widths = compute_widths(headers, self.rows)
        # Columns with missing cells must also fit the placeholder
        for col_idx, width in enumerate(widths):
            if any(len(row) <= col_idx for row in self.rows):
                widths[col_idx] = max(width, len(self.empty))
        cell_widths = padded_widths(widths, table_format.padding)
        align_func = get_align_func(self.align)
        padding = table_format.padding
        empty = pad_row([self.empty], padding)[0]

        lines: List[str] = []
        if self._line_visible(table_format.show_top, LINE_TOP):
            lines.append(build_line(cell_widths, table_format.line_top))

        if not table_format.hide_header:
            lines.append(build_row(
                pad_row(headers, padding), cell_widths,
                table_format.header_row, align_func, empty))
            if self._line_visible(table_format.show_below_header, LINE_BELOW_HEADER):
                lines.append(build_line(
                    cell_widths, table_format.line_below_header))

        show_between = self._line_visible(
            table_format.show_between_rows, LINE_BETWEEN_ROWS)
        for index, row in enumerate(self.rows):
            lines.append(build_row(
                pad_row(row, padding), cell_widths,
                table_format.data_row, align_func, empty))
            if show_between and index < len(self.rows) - 1:
                lines.append(build_line(
                    cell_widths, table_format.line_between_rows))

        if self._line_visible(table_format.show_bottom, LINE_BOTTOM):
            lines.append(build_line(cell_widths, table_format.line_bottom))

        logger.debug("Rendered %d row(s) x %d column(s) into %d line(s)",
                     len(self.rows), len(cell_widths), len(lines))
        return "".join(f"{line}\n" for line in lines)

    def __repr__(self) -> str:
        return (f"Table(rows={len(self.rows)}, headers={self.headers!r}, "
                f"align={self.align!r})")
