"""
Fixed-width text tables.

Column widths start at their natural size (widest of header and cells). When
the table does not fit the terminal, only the columns named in
`truncation_priority` are narrowed, in that order, and never below
`max(MIN_COLUMN_WIDTH, len(header))`. Tables whose unlisted columns alone are
too wide are allowed to overflow.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import IO

from .terminal import terminal_width

GAP = 2
MIN_COLUMN_WIDTH = 5
ELLIPSIS = "..."


@dataclass(slots=True)
class TableSpec:
    headers: list[str]
    rows: list[list[str]] = field(default_factory=list)
    truncation_priority: list[int] = field(default_factory=list)

    def __post_init__(self) -> None:
        self.rows = [self._fit_row(row) for row in self.rows]

    def _fit_row(self, cells: Sequence[str]) -> list[str]:
        row = [str(cell) for cell in cells[: len(self.headers)]]
        row.extend("" for _ in range(len(self.headers) - len(row)))
        return row

    def add_row(self, *cells: str) -> None:
        """Append a row; short rows are padded with empty cells, long rows cut."""
        self.rows.append(self._fit_row(cells))

    def natural_widths(self) -> list[int]:
        widths = [len(h) for h in self.headers]
        for row in self.rows:
            for i, cell in enumerate(row):
                if len(cell) > widths[i]:
                    widths[i] = len(cell)
        return widths


def _total(widths: Sequence[int]) -> int:
    if not widths:
        return 0
    return sum(widths) + GAP * (len(widths) - 1)


def layout(spec: TableSpec, width: int) -> list[int]:
    """Final column widths for `spec` under a budget of `width` columns."""
    widths = spec.natural_widths()
    if _total(widths) <= width:
        return widths

    n = len(widths)
    for col in spec.truncation_priority:
        if col < 0 or col >= n:
            continue
        excess = _total(widths) - width
        if excess <= 0:
            break
        floor = max(MIN_COLUMN_WIDTH, len(spec.headers[col]))
        shrinkable = widths[col] - floor
        if shrinkable <= 0:
            continue
        widths[col] -= min(excess, shrinkable)
    return widths


def truncate_cell(text: str, width: int) -> str:
    if len(text) <= width:
        return text
    if width <= len(ELLIPSIS):
        return text[:width]
    return text[: width - len(ELLIPSIS)] + ELLIPSIS


def format_line(cells: Sequence[str], widths: Sequence[int]) -> str:
    last = len(widths) - 1
    parts: list[str] = []
    for i, cell in enumerate(cells):
        text = truncate_cell(cell, widths[i])
        parts.append(text if i == last else text.ljust(widths[i] + GAP))
    return "".join(parts)


def render_table(
    spec: TableSpec,
    widths: Sequence[int],
    writer: IO[str],
    *,
    indent: str = "",
) -> None:
    """Write the header line and one line per row, left-aligned and gapped."""
    writer.write(indent + format_line(spec.headers, widths) + "\n")
    for row in spec.rows:
        writer.write(indent + format_line(row, widths) + "\n")


class TableWriter:
    """
    Accumulate rows, then render them sized to the terminal.

    Example:
        ```python
        table = TableWriter("ID", "REFERENCE", "SITE", truncation_priority=[1])
        table.add_row("12345", "my-server", "AMS-01")
        table.render(sys.stdout)
        ```
    """

    def __init__(self, *headers: str, truncation_priority: Sequence[int] = ()):
        self.spec = TableSpec(headers=list(headers), truncation_priority=list(truncation_priority))

    def add_row(self, *cells: str) -> None:
        self.spec.add_row(*cells)

    def __len__(self) -> int:
        return len(self.spec.rows)

    def render(self, writer: IO[str], *, width: int | None = None) -> None:
        budget = width if width is not None else terminal_width(stdout=writer)
        render_table(self.spec, layout(self.spec, budget), writer)
