#!/usr/bin/env python3
# lunartab/formats/__init__.py
from __future__ import annotations

"""
Package for table format descriptors and their registry.

Provides:
- Descriptor types (`Line`, `Row`, `TableFormat`).
- Built-in formats (`DEFAULT_FORMATS`) and the `FormatRegistry`.
"""

from .format_types import Line, Row, TableFormat
from .registry import DEFAULT_FORMATS, FormatRegistry

__all__ = [
    "Line",
    "Row",
    "TableFormat",
    "DEFAULT_FORMATS",
    "FormatRegistry",
]
