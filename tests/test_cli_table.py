from __future__ import annotations

import io

from leaseweb.cli.table import (
    GAP,
    MIN_COLUMN_WIDTH,
    TableSpec,
    TableWriter,
    format_line,
    layout,
    truncate_cell,
)


def _spec(truncation_priority: list[int]) -> TableSpec:
    # Column 0 is 28 wide, column 1 is 30 wide with a 10-character header.
    return TableSpec(
        headers=["NAME", "DESCRIPTOR"],
        rows=[["n" * 28, "d" * 30]],
        truncation_priority=truncation_priority,
    )


def test_layout_returns_natural_widths_when_table_fits() -> None:
    spec = _spec([1])
    assert layout(spec, 120) == [28, 30]


def test_layout_shrinks_priority_column_by_exact_excess() -> None:
    spec = _spec([1])
    assert layout(spec, 40) == [28, 10]


def test_layout_never_goes_below_header_or_minimum() -> None:
    spec = _spec([1, 0])
    widths = layout(spec, 10)
    assert widths[1] == 10
    assert widths[0] == max(MIN_COLUMN_WIDTH, len("NAME"))


def test_layout_leaves_unlisted_columns_and_overflows() -> None:
    spec = _spec([])
    assert layout(spec, 40) == [28, 30]


def test_layout_walks_priority_list_in_order() -> None:
    spec = TableSpec(
        headers=["A", "B", "C"],
        rows=[["a" * 20, "b" * 20, "c" * 20]],
        truncation_priority=[2, 0],
    )
    # Natural total 64; width 40 needs 24: column 2 gives 15, column 0 gives 9.
    assert layout(spec, 40) == [11, 20, 5]


def test_layout_ignores_out_of_range_priorities() -> None:
    spec = _spec([7, -1, 1])
    assert layout(spec, 40) == [28, 10]


def test_truncate_cell() -> None:
    assert truncate_cell("short", 10) == "short"
    assert truncate_cell("exactly10!", 10) == "exactly10!"
    assert truncate_cell("this is too long", 10) == "this is..."
    assert truncate_cell("abcdef", 3) == "abc"


def test_format_line_pads_all_but_last_column() -> None:
    line = format_line(["a", "b", "c"], [3, 3, 3])
    assert line == "a" + " " * (2 + GAP) + "b" + " " * (2 + GAP) + "c"


def test_rows_are_fitted_to_header_count() -> None:
    spec = TableSpec(headers=["A", "B"], rows=[["1"], ["1", "2", "3"]])
    assert spec.rows == [["1", ""], ["1", "2"]]


def test_table_writer_renders_truncated_cells_with_ellipsis() -> None:
    table = TableWriter("NAME", "DESCRIPTOR", truncation_priority=[1])
    table.add_row("n" * 28, "d" * 30)
    buf = io.StringIO()
    table.render(buf, width=40)
    lines = buf.getvalue().splitlines()
    assert lines[0] == "NAME" + " " * 26 + "DESCRIPTOR"
    assert lines[1] == "n" * 28 + "  " + "d" * 7 + "..."
    assert len(table) == 1


def test_table_writer_probes_width_from_environment(monkeypatch) -> None:
    monkeypatch.setattr("sys.stderr", io.StringIO())
    monkeypatch.setenv("COLUMNS", "40")
    table = TableWriter("NAME", "DESCRIPTOR", truncation_priority=[1])
    table.add_row("n" * 28, "d" * 30)
    buf = io.StringIO()
    table.render(buf)
    assert buf.getvalue().splitlines()[1].endswith("ddddddd...")
