#!/usr/bin/env python3
# lunartab/formats/registry.py
from __future__ import annotations

"""
Named table formats and the registry that resolves them.

This module provides:
- DEFAULT_FORMATS: read-only mapping of the built-in formats.
- FormatRegistry: per-owner name -> TableFormat mapping with upsert and lookup.
"""

import threading
from types import MappingProxyType
from typing import Dict, Iterator, Mapping, Optional

from lunartab.errors import UnknownFormat
from lunartab.formats.format_types import Line, Row, TableFormat

_TWO_SPACES = Row("", "  ", "")
_DASHES = Line("", "-", "  ", "")
_GRID_RULE = Line("+", "-", "+", "+")
_GRID_ROW = Row("|", "|", "|")
_BOX_ROW = Row("│", "│", "│")

DEFAULT_FORMATS: Mapping[str, TableFormat] = MappingProxyType({
    "plain": TableFormat(
        header_row=_TWO_SPACES,
        data_row=_TWO_SPACES,
        padding=1,
        show_top=False,
        show_below_header=False,
        show_between_rows=False,
        show_bottom=False,
    ),
    "simple": TableFormat(
        line_top=_DASHES,
        line_below_header=_DASHES,
        line_bottom=_DASHES,
        header_row=_TWO_SPACES,
        data_row=_TWO_SPACES,
        padding=1,
        show_between_rows=False,
    ),
    "grid": TableFormat(
        line_top=_GRID_RULE,
        line_below_header=Line("+", "=", "+", "+"),
        line_between_rows=_GRID_RULE,
        line_bottom=_GRID_RULE,
        header_row=_GRID_ROW,
        data_row=_GRID_ROW,
        padding=1,
    ),
    # Markdown-compatible: only the separator under the header.
    "pipe": TableFormat(
        line_below_header=Line("|", "-", "|", "|"),
        header_row=_GRID_ROW,
        data_row=_GRID_ROW,
        padding=1,
        show_top=False,
        show_between_rows=False,
        show_bottom=False,
    ),
    "box": TableFormat(
        line_top=Line("┌", "─", "┬", "┐"),
        line_below_header=Line("├", "─", "┼", "┤"),
        line_between_rows=Line("├", "─", "┼", "┤"),
        line_bottom=Line("└", "─", "┴", "┘"),
        header_row=_BOX_ROW,
        data_row=_BOX_ROW,
        padding=1,
        show_between_rows=False,
    ),
})


class FormatRegistry:
    """Holds named table formats and resolves them by name."""

    def __init__(self, formats: Optional[Mapping[str, TableFormat]] = None) -> None:
        self._lock = threading.RLock()
        self._formats: Dict[str, TableFormat] = dict(
            DEFAULT_FORMATS if formats is None else formats)

    # ---------------- Registration ----------------

    def register(self, name: str, table_format: TableFormat) -> None:
        """Add or replace the format stored under `name`."""
        if not isinstance(table_format, TableFormat):
            raise TypeError(
                f"Expected TableFormat, got {type(table_format).__name__}")
        with self._lock:
            self._formats[name] = table_format

    # ---------------- Lookup ----------------

    def lookup(self, name: str) -> TableFormat:
        """Return the format registered as `name` or raise UnknownFormat."""
        with self._lock:
            try:
                return self._formats[name]
            except KeyError:
                raise UnknownFormat(name, self._formats.keys()) from None

    def names(self) -> list[str]:
        """Return the registered format names, sorted."""
        with self._lock:
            return sorted(self._formats)

    def copy(self) -> "FormatRegistry":
        """Return an independent registry holding the same formats."""
        with self._lock:
            return FormatRegistry(self._formats)

    def __contains__(self, name: object) -> bool:
        with self._lock:
            return name in self._formats

    def __iter__(self) -> Iterator[str]:
        return iter(self.names())

    def __len__(self) -> int:
        with self._lock:
            return len(self._formats)
