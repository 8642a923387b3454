#!/usr/bin/env python3
# lunartab/errors.py
from __future__ import annotations

"""
Error kinds raised while building and rendering tables.

All of them derive from `TabulateError` and from the builtin exception a
caller would naturally expect (ValueError / KeyError / TypeError), so
existing `except ValueError:` style handlers keep working.
"""

from typing import Iterable


class TabulateError(Exception):
    """Base class for every lunartab error."""


class NoData(TabulateError, ValueError):
    """Raised when a table is rendered without any data rows."""

    def __init__(self, message: str = "No data specified") -> None:
        super().__init__(message)


class UnknownFormat(TabulateError, KeyError):
    """Raised when a format name is not present in the registry."""

    def __init__(self, name: str, available: Iterable[str] = ()) -> None:
        self.name = name
        self.available = sorted(available)
        super().__init__(name)

    def __str__(self) -> str:
        known = ", ".join(self.available) if self.available else "(none)"
        return f"Unknown table format {self.name!r}. Available: {known}"


class UnsupportedInputType(TabulateError, TypeError):
    """Raised when the value normalizer receives a type it cannot convert."""

    def __init__(self, value_type: type, context: str = "") -> None:
        self.value_type = value_type
        self.context = context
        where = f" in {context}" if context else ""
        super().__init__(
            f"Unsupported input type{where}: {value_type.__name__}")
