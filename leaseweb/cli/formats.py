"""
Output formats and the `--transform` path selector.

`auto` goes through the detail renderer; every other format is a passthrough
serialization of the (optionally transformed) document.
"""

from __future__ import annotations

import json
from typing import IO, Any, Literal

import yaml
from rich.console import Console

from .detail import render_detail
from .terminal import RenderContext, use_colors

OutputFormat = Literal["auto", "json", "jsonline", "pretty", "raw", "yaml"]
OUTPUT_FORMATS: tuple[str, ...] = ("auto", "json", "jsonline", "pretty", "raw", "yaml")

_MISSING = object()


def _split_path(path: str) -> list[str]:
    parts: list[str] = []
    current: list[str] = []
    escaped = False
    for ch in path:
        if escaped:
            current.append(ch)
            escaped = False
        elif ch == "\\":
            escaped = True
        elif ch == ".":
            parts.append("".join(current))
            current = []
        else:
            current.append(ch)
    parts.append("".join(current))
    return parts


def _lookup(value: Any, parts: list[str]) -> Any:
    if not parts:
        return value
    head, rest = parts[0], parts[1:]

    if head == "#" and isinstance(value, list):
        if not rest:
            return len(value)
        mapped = [_lookup(item, rest) for item in value]
        return [item for item in mapped if item is not _MISSING]

    if isinstance(value, dict):
        if head not in value:
            return _MISSING
        return _lookup(value[head], rest)

    if isinstance(value, list):
        try:
            index = int(head)
        except ValueError:
            return _MISSING
        if index < 0 or index >= len(value):
            return _MISSING
        return _lookup(value[index], rest)

    return _MISSING


def apply_transform(document: Any, path: str | None) -> Any:
    """
    Narrow `document` to the value at a dotted `path`.

    Components are dict keys or array indices; `\\.` escapes a dot, `#` gives
    an array's length and `#.rest` maps `rest` over the elements. Paths that
    do not resolve return the document unchanged.
    """
    if not path:
        return document
    found = _lookup(document, _split_path(path))
    return document if found is _MISSING else found


def show(
    document: Any,
    *,
    fmt: str,
    writer: IO[str],
    transform: str | None = None,
    context: RenderContext | None = None,
) -> None:
    """Write `document` to `writer` in output format `fmt`."""
    value = apply_transform(document, transform)
    fmt = fmt.lower()

    if fmt == "auto":
        render_detail(value, writer, context)
    elif fmt == "json":
        color = context.color if context is not None else use_colors(writer)
        if color:
            console = Console(file=writer, force_terminal=True, soft_wrap=True)
            console.print_json(data=value, ensure_ascii=False)
        else:
            writer.write(json.dumps(value, ensure_ascii=False, indent=2) + "\n")
    elif fmt == "pretty":
        writer.write(json.dumps(value, ensure_ascii=False, indent=2) + "\n")
    elif fmt in ("jsonline", "raw"):
        writer.write(json.dumps(value, ensure_ascii=False, separators=(",", ":")) + "\n")
    elif fmt == "yaml":
        writer.write(
            yaml.safe_dump(value, sort_keys=False, allow_unicode=True, default_flow_style=False)
        )
    else:
        raise ValueError(
            f"invalid format: {fmt}, valid formats are: {', '.join(OUTPUT_FORMATS)}"
        )
