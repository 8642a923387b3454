# tests/test_formats.py
"""Tests for format descriptors and the format registry."""

import dataclasses
import threading

import pytest

from lunartab import Table, UnknownFormat
from lunartab.errors import TabulateError
from lunartab.formats import DEFAULT_FORMATS, FormatRegistry, Line, Row, TableFormat


class TestTableFormat:

    def test_negative_padding_rejected(self):
        with pytest.raises(ValueError):
            TableFormat(padding=-1)

    def test_is_immutable(self):
        fmt = TableFormat()
        with pytest.raises(dataclasses.FrozenInstanceError):
            fmt.padding = 3  # type: ignore[misc]

    def test_defaults_are_empty(self):
        assert Line() == Line("", "", "", "")
        assert Row() == Row("", "", "")
        assert TableFormat().padding == 0


class TestDefaultFormats:

    def test_required_presets_exist(self):
        for name in ("plain", "simple", "grid"):
            assert name in DEFAULT_FORMATS
            assert DEFAULT_FORMATS[name].padding == 1

    def test_plain_has_no_lines(self):
        plain = DEFAULT_FORMATS["plain"]
        assert not (plain.show_top or plain.show_below_header
                    or plain.show_between_rows or plain.show_bottom)
        assert plain.data_row.sep == "  "

    def test_simple_has_no_vertical_separators(self):
        simple = DEFAULT_FORMATS["simple"]
        assert simple.line_top.hline == "-"
        assert simple.data_row == Row("", "  ", "")

    def test_grid_double_rule_below_header(self):
        grid = DEFAULT_FORMATS["grid"]
        assert grid.line_below_header == Line("+", "=", "+", "+")
        assert grid.header_row == Row("|", "|", "|")

    def test_mapping_is_read_only(self):
        with pytest.raises(TypeError):
            DEFAULT_FORMATS["mine"] = TableFormat()  # type: ignore[index]


class TestFormatRegistry:

    def test_lookup(self):
        registry = FormatRegistry()
        assert registry.lookup("grid") is DEFAULT_FORMATS["grid"]

    def test_lookup_unknown_raises(self):
        registry = FormatRegistry()
        with pytest.raises(UnknownFormat) as info:
            registry.lookup("fancy")
        assert info.value.name == "fancy"
        assert "grid" in info.value.available
        assert "fancy" in str(info.value)
        assert isinstance(info.value, KeyError)
        assert isinstance(info.value, TabulateError)

    def test_register_is_upsert(self):
        registry = FormatRegistry()
        custom = TableFormat(padding=2)
        registry.register("custom", custom)
        assert registry.lookup("custom") is custom
        replacement = TableFormat(padding=3)
        registry.register("custom", replacement)
        assert registry.lookup("custom") is replacement

    def test_register_rejects_other_types(self):
        with pytest.raises(TypeError):
            FormatRegistry().register("bad", {"padding": 1})  # type: ignore[arg-type]

    def test_registries_are_independent(self):
        first = FormatRegistry()
        second = FormatRegistry()
        first.register("custom", TableFormat())
        assert "custom" in first
        assert "custom" not in second
        assert "custom" not in DEFAULT_FORMATS

    def test_copy(self):
        original = FormatRegistry()
        clone = original.copy()
        clone.register("extra", TableFormat())
        assert "extra" not in original
        assert set(original.names()) <= set(clone.names())

    def test_custom_formats_source(self):
        registry = FormatRegistry({"only": TableFormat()})
        assert registry.names() == ["only"]
        assert len(registry) == 1
        assert list(registry) == ["only"]

    def test_tables_do_not_share_registry(self):
        first = Table([["x"]], ["h"])
        second = Table([["x"]], ["h"])
        first.registry.register("mine", TableFormat(padding=2))
        first.set_format("mine")
        with pytest.raises(UnknownFormat):
            second.set_format("mine")

    def test_concurrent_register_and_lookup(self):
        registry = FormatRegistry()
        errors = []
        start = threading.Barrier(8)

        def worker(worker_id):
            start.wait()
            try:
                for i in range(200):
                    name = f"w{worker_id}-{i}"
                    fmt = TableFormat(padding=i % 4)
                    registry.register(name, fmt)
                    assert registry.lookup(name) is fmt
                    assert registry.lookup("grid") is DEFAULT_FORMATS["grid"]
                    registry.names()
            except Exception as exc:  # collected for the main thread
                errors.append(exc)

        threads = [threading.Thread(target=worker, args=(n,)) for n in range(8)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        assert errors == []
        assert len(registry) == len(DEFAULT_FORMATS) + 8 * 200
