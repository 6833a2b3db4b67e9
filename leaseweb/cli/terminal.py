"""Terminal capability probes: usable width and whether to emit styling."""

from __future__ import annotations

import os
import sys
from dataclasses import dataclass
from typing import IO, Any

DEFAULT_WIDTH = 120
WIDTH_ENV = "COLUMNS"
COLOR_ENV = "FORCE_COLOR"


def _isatty(stream: IO[Any] | None) -> bool:
    if stream is None:
        return False
    isatty = getattr(stream, "isatty", None)
    if isatty is None:
        return False
    try:
        return bool(isatty())
    except (ValueError, OSError):
        # Closed or detached streams.
        return False


def _stream_columns(stream: IO[Any] | None) -> int | None:
    if not _isatty(stream):
        return None
    try:
        columns = os.get_terminal_size(stream.fileno()).columns  # type: ignore[union-attr]
    except (AttributeError, ValueError, OSError):
        return None
    return columns if columns > 0 else None


def _env_columns() -> int | None:
    raw = os.environ.get(WIDTH_ENV, "").strip()
    if not raw:
        return None
    try:
        columns = int(raw)
    except ValueError:
        return None
    return columns if columns > 0 else None


def terminal_width(
    stdout: IO[Any] | None = None,
    stderr: IO[Any] | None = None,
) -> int:
    """
    Usable output width in columns.

    Tries the stdout terminal, then the stderr terminal, then `$COLUMNS`, and
    finally falls back to 120. Streams default to the current `sys.stdout` /
    `sys.stderr` so test runners that swap them are honoured.
    """
    for candidate in (
        _stream_columns(stdout if stdout is not None else sys.stdout),
        _stream_columns(stderr if stderr is not None else sys.stderr),
        _env_columns(),
    ):
        if candidate is not None:
            return candidate
    return DEFAULT_WIDTH


def use_colors(stream: IO[Any] | None) -> bool:
    """`FORCE_COLOR=1`/`0` wins; otherwise color iff `stream` is a terminal."""
    force = os.environ.get(COLOR_ENV)
    if force == "1":
        return True
    if force == "0":
        return False
    return _isatty(stream)


@dataclass(frozen=True, slots=True)
class RenderContext:
    width: int
    color: bool

    @classmethod
    def detect(cls, stream: IO[Any] | None) -> RenderContext:
        return cls(width=terminal_width(stdout=stream), color=use_colors(stream))
