from __future__ import annotations

import json
import logging
import sys
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

import click
from rich.console import Console

from leaseweb.exceptions import APIError

from .context import CLIContext, exit_code_for_exception
from .errors import CLIError
from .formats import show
from .table import TableWriter

logger = logging.getLogger(__name__)

TableBuilder = Callable[[Any], TableWriter]


@dataclass(frozen=True, slots=True)
class CommandOutput:
    data: Any | None = None
    table: TableBuilder | None = None  # Summary table for `auto` output of list commands
    empty_message: str | None = None  # Printed to stderr when the table has no rows
    message: str | None = None  # Human notice for commands without a response body
    exit_code: int = 0


def _stderr() -> Console:
    return Console(file=sys.stderr, force_terminal=False, soft_wrap=True, highlight=False)


def _emit_message(ctx: CLIContext, message: str) -> None:
    if ctx.quiet:
        return
    _stderr().print(message, markup=False)


def emit_output(ctx: CLIContext, out: CommandOutput) -> None:
    if out.table is not None and ctx.output == "auto" and not ctx.transform:
        table = out.table(out.data)
        if len(table) == 0:
            if out.empty_message:
                _emit_message(ctx, out.empty_message)
        else:
            table.render(sys.stdout)
    elif out.data is not None:
        show(out.data, fmt=ctx.output, writer=sys.stdout, transform=ctx.transform)

    if out.message:
        _emit_message(ctx, out.message)


def emit_error(ctx: CLIContext, exc: Exception) -> None:
    stderr = _stderr()
    if isinstance(exc, APIError):
        stderr.print(exc.status_line, markup=False)
        if not exc.body:
            return
        try:
            body = json.loads(exc.body)
        except ValueError:
            stderr.print(exc.body, markup=False)
            return
        show(body, fmt=ctx.output, writer=sys.stdout, transform=ctx.transform)
        return

    message = exc.message if isinstance(exc, CLIError) else str(exc)
    stderr.print(f"Error: {message or exc.__class__.__name__}", markup=False)


CommandFn = Callable[[CLIContext], CommandOutput]


def run_command(ctx: CLIContext, *, command: str, fn: CommandFn) -> None:
    try:
        out = fn(ctx)
        emit_output(ctx, out)
        raise click.exceptions.Exit(out.exit_code)
    except click.exceptions.Exit:
        raise
    except Exception as exc:
        logger.debug("command %r failed", command, exc_info=True)
        emit_error(ctx, exc)
        raise click.exceptions.Exit(exit_code_for_exception(exc)) from exc
