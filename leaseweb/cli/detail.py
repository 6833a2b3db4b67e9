"""
Detail view: schema-less rendering of an arbitrary JSON document.

Scalar fields of an object become an aligned `Label  value` block; every
object- or array-valued field becomes a section with a header, rendered
recursively. Arrays of small flat objects are laid out as tables, other object
arrays as one block per element separated by `---`.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import IO, Any

import click

from .labels import column_header, format_value, humanize, raw_text
from .table import TableSpec, layout, render_table
from .terminal import RenderContext

MAX_TABLE_COLUMNS = 6
FLAT_TABLES_ONLY = True

DIVIDER = "---"
EMPTY_MARKER = "(none)"
BULLET = "• "
INDENT = "  "

Field = tuple[str, Any]


@dataclass(frozen=True, slots=True)
class _Options:
    context: RenderContext
    max_table_columns: int
    flat_tables_only: bool


def _is_container(value: Any) -> bool:
    return isinstance(value, (dict, list))


def _partition(obj: dict[str, Any]) -> tuple[list[Field], list[Field]]:
    scalars: list[Field] = []
    containers: list[Field] = []
    for key, value in obj.items():
        (containers if _is_container(value) else scalars).append((str(key), value))
    return scalars, containers


def _header(name: str, opts: _Options) -> str:
    title = humanize(name)
    return click.style(title, bold=True) if opts.context.color else title


def _write_block(writer: IO[str], fields: list[Field], indent: str) -> None:
    if not fields:
        return
    labels = [humanize(key) for key, _ in fields]
    label_width = max(len(label) for label in labels)
    for label, (_, value) in zip(labels, fields):
        writer.write(f"{indent}{label.ljust(label_width)}  {format_value(value)}\n")


def _write_object_body(
    writer: IO[str], obj: dict[str, Any], depth: int, indent: str, opts: _Options
) -> None:
    scalars, containers = _partition(obj)
    _write_block(writer, scalars, indent)
    for key, value in containers:
        _render_section(writer, key, value, depth, opts)


def _table_priority(spec: TableSpec) -> list[int]:
    # Widest columns give up space first; ties keep left-to-right order.
    widths = spec.natural_widths()
    return sorted(range(len(widths)), key=lambda i: -widths[i])


def _render_object_array(
    writer: IO[str], items: list[dict[str, Any]], depth: int, opts: _Options
) -> None:
    inner = INDENT * (depth + 1)
    keys: list[str] = []
    seen: set[str] = set()
    has_nested = False
    for item in items:
        for key, value in item.items():
            if key not in seen:
                seen.add(key)
                keys.append(key)
            if _is_container(value):
                has_nested = True

    if not keys:
        writer.write(f"{inner}{EMPTY_MARKER}\n")
        return

    if (not has_nested or not opts.flat_tables_only) and len(keys) <= opts.max_table_columns:
        spec = TableSpec(
            headers=[column_header(key) for key in keys],
            rows=[[format_value(item.get(key)) for key in keys] for item in items],
        )
        spec.truncation_priority = _table_priority(spec)
        widths = layout(spec, max(opts.context.width - len(inner), 0))
        render_table(spec, widths, writer, indent=inner)
        return

    for i, item in enumerate(items):
        if i > 0:
            writer.write(f"{inner}{DIVIDER}\n")
        _write_object_body(writer, item, depth + 1, inner, opts)


def _render_section(
    writer: IO[str], name: str, value: list[Any] | dict[str, Any], depth: int, opts: _Options
) -> None:
    indent = INDENT * depth
    inner = indent + INDENT
    writer.write(f"\n{indent}{_header(name, opts)}\n")

    if isinstance(value, list):
        if not value:
            writer.write(f"{inner}{EMPTY_MARKER}\n")
        elif all(isinstance(item, dict) for item in value):
            _render_object_array(writer, value, depth, opts)
        else:
            for item in value:
                writer.write(f"{inner}{BULLET}{format_value(item)}\n")
        return

    _write_object_body(writer, value, depth + 1, inner, opts)


def render_detail(
    root: Any,
    writer: IO[str],
    context: RenderContext | None = None,
    *,
    max_table_columns: int = MAX_TABLE_COLUMNS,
    flat_tables_only: bool = FLAT_TABLES_ONLY,
) -> None:
    """
    Render `root` as human-readable text on `writer`.

    Args:
        root: Parsed JSON (dicts keep the document's key order)
        writer: Text sink, usually `sys.stdout`
        context: Width and color settings; probed from `writer` when omitted
        max_table_columns: Object arrays with more distinct keys are not tabulated
        flat_tables_only: Only tabulate object arrays without nested values

    Non-object roots are printed as raw JSON. Never raises for JSON input.
    """
    if not isinstance(root, dict):
        writer.write(raw_text(root) + "\n")
        return

    opts = _Options(
        context=context if context is not None else RenderContext.detect(writer),
        max_table_columns=max_table_columns,
        flat_tables_only=flat_tables_only,
    )
    _write_object_body(writer, root, 0, "", opts)
