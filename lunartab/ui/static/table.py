#!/usr/bin/env python3
# lunartab/ui/static/table.py
from __future__ import annotations

from typing import Iterable, Optional, Sequence

from lunartab.formats import TableFormat
from lunartab.table import create
from lunartab.ui.utils import print_block


def format_table(
    rows: Sequence[Sequence[object]],
    headers: Optional[Sequence[object]] = None,
    *,
    fmt: str | TableFormat = "simple",
    align: str = "right",
    empty: str = "",
    hide: Iterable[str] = (),
    float_format: Optional[str] = None,
) -> str:
    """Return a rendered table string for `rows` of any supported scalars."""
    str_headers = None if headers is None else [str(h) for h in headers]
    table = create(
        rows,
        str_headers,
        float_format=float_format,
        fmt=fmt,
        align=align,
        empty=empty,
        hide_lines=hide,
    )
    return table.render()


def print_table(
    rows: Sequence[Sequence[object]],
    headers: Optional[Sequence[object]] = None,
    *,
    fmt: str | TableFormat = "simple",
    align: str = "right",
    empty: str = "",
    hide: Iterable[str] = (),
    float_format: Optional[str] = None,
    file=None,
) -> None:
    """Print a formatted table to the given file (stdout by default)."""
    text = format_table(rows, headers, fmt=fmt, align=align, empty=empty,
                        hide=hide, float_format=float_format)
    print_block(text, file=file)
