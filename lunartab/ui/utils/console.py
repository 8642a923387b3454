#!/usr/bin/env python3
# lunartab/ui/utils/console.py
from __future__ import annotations

import sys
import threading

# Single shared print mutex for all UI output (tables/logging).
PRINT_MUTEX = threading.Lock()


def print_line(text: str = "", *, file=None, flush: bool = False) -> None:
    """Thread-safe print of `text` followed by a newline."""
    out = sys.stdout if file is None else file
    with PRINT_MUTEX:
        out.write(f"{text}\n")
        if flush:
            out.flush()


def print_block(text: str, *, file=None, flush: bool = False) -> None:
    """Like print_line, but for text that already ends with its newline."""
    out = sys.stdout if file is None else file
    with PRINT_MUTEX:
        out.write(text if text.endswith("\n") else f"{text}\n")
        if flush:
            out.flush()
