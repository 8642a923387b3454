# tests/test_table.py
"""Tests for Table rendering, header adoption and line suppression."""

import dataclasses

import pytest

from lunartab import NoData, Table, TableFormat, UnknownFormat
from lunartab.formats import DEFAULT_FORMATS

GRID_1X2 = (
    "+---+----+\n"
    "| A | BB |\n"
    "+===+====+\n"
    "| 1 | 22 |\n"
    "+---+----+\n"
)
SIMPLE_1X2 = (
    "---  ----\n"
    " A    BB \n"
    "---  ----\n"
    " 1    22 \n"
    "---  ----\n"
)
PLAIN_1X2 = (
    " A    BB \n"
    " 1    22 \n"
)
BORDERLESS_1X2 = "\nABB\n\n122\n\n"


class TestRenderPresets:
    """The fixed 1x2 example rendered byte-for-byte in each preset."""

    @pytest.mark.parametrize("fmt,expected", [
        ("grid", GRID_1X2),
        ("simple", SIMPLE_1X2),
        ("plain", PLAIN_1X2),
        (TableFormat(), BORDERLESS_1X2),
    ])
    def test_presets(self, small_table, fmt, expected):
        assert small_table.render(fmt) == expected

    def test_pipe(self, small_table):
        assert small_table.render("pipe") == (
            "| A | BB |\n"
            "|---|----|\n"
            "| 1 | 22 |\n"
        )

    def test_box(self, small_table):
        assert small_table.render("box") == (
            "┌───┬────┐\n"
            "│ A │ BB │\n"
            "├───┼────┤\n"
            "│ 1 │ 22 │\n"
            "└───┴────┘\n"
        )

    def test_default_format_is_simple(self, small_table):
        assert small_table.render() == SIMPLE_1X2


class TestRender:

    def test_between_rows_and_alignment(self):
        table = Table([["a", "1"], ["bb", "22"]], ["k", "v"], fmt="grid")
        assert table.render() == (
            "+----+----+\n"
            "|  k |  v |\n"
            "+====+====+\n"
            "|  a |  1 |\n"
            "+----+----+\n"
            "| bb | 22 |\n"
            "+----+----+\n"
        )

    def test_left_alignment(self):
        table = Table([["a", "1"], ["bb", "22"]], ["k", "v"], fmt="plain")
        table.set_align("left")
        assert table.render() == (
            " k     v  \n"
            " a     1  \n"
            " bb    22 \n"
        )

    def test_center_alignment(self):
        table = Table([["a"], ["abcde"]], ["h"], fmt="pipe", align="center")
        assert table.render() == (
            "|   h   |\n"
            "|-------|\n"
            "|   a   |\n"
            "| abcde |\n"
        )

    def test_missing_cells_use_placeholder(self):
        table = Table([["x"]], ["A", "B", "C"], fmt="grid")
        table.set_empty_string("None")
        assert table.render() == (
            "+---+------+------+\n"
            "| A |    B |    C |\n"
            "+===+======+======+\n"
            "| x | None | None |\n"
            "+---+------+------+\n"
        )

    def test_missing_cells_default_placeholder(self):
        table = Table([["x"]], ["A", "B", "C"], fmt="grid")
        assert table.render().splitlines()[3] == "| x |   |   |"

    def test_border_line_lengths(self):
        table = Table([["1", "two", "three"], ["four"]], ["a", "bb", "c"], fmt="grid")
        output = table.render().splitlines()
        widths = [4 + 2, 3 + 2, 5 + 2]
        expected = 1 + 1 + sum(widths) + (len(widths) - 1) * 1
        for line in output:
            assert len(line) == expected

    def test_render_is_idempotent(self, small_table):
        assert small_table.render("grid") == small_table.render("grid")

    def test_per_call_format_does_not_stick(self, small_table):
        small_table.render("grid")
        assert small_table.table_format is DEFAULT_FORMATS["simple"]

    def test_set_format_with_descriptor(self, small_table):
        small_table.set_format(DEFAULT_FORMATS["grid"])
        assert small_table.render() == GRID_1X2

    def test_hide_header(self, small_table):
        fmt = dataclasses.replace(DEFAULT_FORMATS["grid"], hide_header=True)
        assert small_table.render(fmt) == (
            "+---+----+\n"
            "| 1 | 22 |\n"
            "+---+----+\n"
        )

    def test_wider_padding(self, small_table):
        fmt = dataclasses.replace(DEFAULT_FORMATS["grid"], padding=2)
        assert small_table.render(fmt) == (
            "+-----+------+\n"
            "|  A  |  BB  |\n"
            "+=====+======+\n"
            "|  1  |  22  |\n"
            "+-----+------+\n"
        )

    def test_setters_chain(self):
        table = Table([["1"]]).set_headers(["n"]).set_align("left").set_empty_string("-")
        assert table.headers == ["n"]
        assert table.align == "left"
        assert table.empty == "-"

    def test_owns_copies_of_input(self):
        rows = [["1", "2"]]
        headers = ["a", "b"]
        table = Table(rows, headers)
        rows[0][0] = "changed"
        headers[0] = "changed"
        assert table.rows == [["1", "2"]]
        assert table.headers == ["a", "b"]


class TestSuppression:

    def test_hide_top_and_bottom(self, small_table):
        small_table.hide("top", "bottomLine")
        assert small_table.render("grid") == (
            "| A | BB |\n"
            "+===+====+\n"
            "| 1 | 22 |\n"
        )

    def test_hide_below_header(self, small_table):
        output = Table([["1", "22"]], ["A", "BB"],
                       hide_lines=["belowheader"]).render("grid")
        assert "+===+====+" not in output

    def test_hide_between_rows(self):
        table = Table([["1"], ["2"], ["3"]], ["n"], fmt="grid")
        table.hide("betweenrows")
        assert table.render().count("+---+") == 2

    def test_unknown_line_name(self, small_table):
        with pytest.raises(ValueError):
            small_table.hide("middle")


class TestHeaderAdoption:

    def test_first_row_becomes_header(self):
        table = Table([["h1", "h2"], ["a", "b"]])
        assert table.render("grid") == (
            "+----+----+\n"
            "| h1 | h2 |\n"
            "+====+====+\n"
            "|  a |  b |\n"
            "+----+----+\n"
        )
        assert table.headers == ["h1", "h2"]
        assert table.rows == [["a", "b"]]

    def test_adoption_happens_once(self):
        table = Table([["h1", "h2"], ["a", "b"], ["c", "d"]])
        first = table.render()
        assert table.render() == first
        assert table.rows == [["a", "b"], ["c", "d"]]

    def test_single_row_renders_header_only(self):
        table = Table([["only"]])
        expected = (
            "+------+\n"
            "| only |\n"
            "+======+\n"
            "+------+\n"
        )
        assert table.render("grid") == expected
        assert table.render("grid") == expected

    def test_empty_header_list_adopts_first_row(self):
        table = Table([["a", "b"], ["c", "d"]], [])
        assert table.render("grid") == (
            "+---+---+\n"
            "| a | b |\n"
            "+===+===+\n"
            "| c | d |\n"
            "+---+---+\n"
        )
        assert table.headers == ["a", "b"]
        assert table.rows == [["c", "d"]]

    def test_empty_header_via_setter(self):
        table = Table([["h"], ["x"]]).set_headers([])
        assert table.render("plain") == " h \n x \n"

    def test_empty_first_row_is_adopted_once(self):
        table = Table([[]])
        assert table.render("plain") == "\n"
        assert table.render("plain") == "\n"


class TestErrors:

    def test_no_rows(self):
        with pytest.raises(NoData):
            Table().render()

    def test_headers_without_rows(self):
        with pytest.raises(NoData):
            Table([], ["A"]).render()

    def test_no_data_is_value_error(self):
        with pytest.raises(ValueError):
            Table().render()

    def test_unknown_format_on_render(self, small_table):
        with pytest.raises(UnknownFormat):
            small_table.render("nope")

    def test_unknown_format_on_construction(self):
        with pytest.raises(UnknownFormat):
            Table([["1"]], ["a"], fmt="nope")
