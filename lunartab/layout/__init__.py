#!/usr/bin/env python3
# lunartab/layout/__init__.py
from __future__ import annotations

from .engine import (
    AlignFunc,
    build_line,
    build_row,
    compute_widths,
    get_align_func,
    pad_center,
    pad_left,
    pad_right,
    pad_row,
    padded_widths,
)

__all__ = [
    "AlignFunc",
    "build_line",
    "build_row",
    "compute_widths",
    "get_align_func",
    "pad_center",
    "pad_left",
    "pad_right",
    "pad_row",
    "padded_widths",
]
