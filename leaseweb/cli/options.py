from __future__ import annotations

import json
from collections.abc import Callable
from typing import Any, TypeVar

import click

from .context import CLIContext
from .errors import usage_error
from .formats import OUTPUT_FORMATS

F = TypeVar("F", bound=Callable[..., object])

DEFAULT_LIMIT = 20


def _store_on_context(attr: str, *, lower: bool = False) -> Callable[..., str | None]:
    # Per-command flags override the root options already stored on `ctx.obj`.
    def callback(ctx: click.Context, _param: click.Parameter, value: str | None) -> str | None:
        if value is not None and isinstance(ctx.obj, CLIContext):
            setattr(ctx.obj, attr, value.lower() if lower else value)
        return value

    return callback


def output_options(fn: F) -> F:
    fn = click.option(
        "--output",
        type=click.Choice(OUTPUT_FORMATS, case_sensitive=False),
        default=None,
        help="Override output format for this command.",
        callback=_store_on_context("output", lower=True),
        expose_value=False,
    )(fn)
    fn = click.option(
        "--transform",
        type=str,
        default=None,
        help="Dotted path selecting part of the response (e.g. servers.0.id).",
        callback=_store_on_context("transform"),
        expose_value=False,
    )(fn)
    return fn


def pagination_options(fn: F) -> F:
    fn = click.option(
        "--offset",
        type=click.IntRange(min=0),
        default=0,
        show_default=True,
        help="Number of results to skip.",
    )(fn)
    fn = click.option(
        "--limit",
        type=click.IntRange(min=1),
        default=DEFAULT_LIMIT,
        show_default=True,
        help="Maximum number of results to return.",
    )(fn)
    return fn


def page_params(limit: int, offset: int) -> dict[str, int]:
    return {"limit": limit, "offset": offset}


def parse_payload(raw: str, *, label: str = "--payload") -> Any:
    try:
        return json.loads(raw)
    except ValueError as exc:
        raise usage_error(f"{label} must be valid JSON: {exc}") from exc
