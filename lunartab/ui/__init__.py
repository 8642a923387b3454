#!/usr/bin/env python3
# lunartab/ui/__init__.py
from __future__ import annotations
# Re-export convenient top-level API
from .utils import (
    ANSI,
    strip_ansi,
    enable_windows_vt,
    colorize,
    PRINT_MUTEX,
    print_line,
    print_block,
)
from .static import (
    format_table,
    print_table,
    init_logger,
    ColorizingStreamHandler,
    PlainFormatter,
)

__all__ = [
    "ANSI",
    "strip_ansi",
    "enable_windows_vt",
    "colorize",
    "PRINT_MUTEX",
    "print_line",
    "print_block",
    "format_table",
    "print_table",
    "init_logger",
    "ColorizingStreamHandler",
    "PlainFormatter",
]
