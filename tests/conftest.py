# tests/conftest.py
from __future__ import annotations

import logging
import os

import pytest

from lunartab import Table


@pytest.fixture(autouse=True)
def _reset_lunartab_logger():
    """init_logger() disables propagation; undo it so caplog sees records."""
    yield
    logger = logging.getLogger("lunartab")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.propagate = True
    logger.setLevel(logging.NOTSET)


@pytest.fixture
def clean_env(monkeypatch, tmp_path):
    """Run in an empty directory without any LUNARTAB_* variables."""
    for key in list(os.environ):
        if key.startswith("LUNARTAB_"):
            monkeypatch.delenv(key)
    monkeypatch.chdir(tmp_path)
    return tmp_path


@pytest.fixture
def small_table():
    return Table([["1", "22"]], ["A", "BB"])
