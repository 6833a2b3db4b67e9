from __future__ import annotations

from pathlib import Path
from typing import Any

import click
from rich_click import RichCommand, RichGroup

from ..context import CLIContext
from ..errors import CLIError
from ..options import output_options, page_params, pagination_options
from ..runner import CommandOutput, run_command
from ..table import TableWriter
from ._fields import cell, date_only, dig, items, segment

_BASE = "/invoices/v1"


@click.group(name="invoices", cls=RichGroup)
def invoices_group() -> None:
    """Manage invoices."""


def _total(inv: dict[str, Any]) -> str:
    value = dig(inv, "total")
    if isinstance(value, str):
        try:
            value = float(value)
        except ValueError:
            value = 0
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        value = 0
    return f"{value:.2f}"


def _invoices_table(data: Any) -> TableWriter:
    table = TableWriter("ID", "DATE", "STATUS", "TOTAL", "CURRENCY", "DUE DATE")
    newest_first = sorted(items(data, "invoices"), key=lambda inv: cell(inv, "date"), reverse=True)
    for inv in newest_first:
        table.add_row(
            cell(inv, "id"),
            date_only(cell(inv, "date")),
            cell(inv, "status"),
            _total(inv),
            cell(inv, "currency"),
            date_only(cell(inv, "dueDate")),
        )
    return table


def _write_file(path: Path, content: bytes, *, what: str) -> None:
    try:
        path.write_bytes(content)
    except OSError as exc:
        raise CLIError(f"Writing {what}: {exc}", error_type="io_error") from exc


@invoices_group.command(name="list", cls=RichCommand)
@pagination_options
@output_options
@click.pass_obj
def invoices_list(ctx: CLIContext, *, limit: int, offset: int) -> None:
    """List invoices (newest first)."""

    def fn(ctx: CLIContext) -> CommandOutput:
        data = ctx.get_client().get(f"{_BASE}/invoices", params=page_params(limit, offset))
        return CommandOutput(
            data=data, table=_invoices_table, empty_message="No invoices found."
        )

    run_command(ctx, command="invoices list", fn=fn)


@invoices_group.command(name="get", cls=RichCommand)
@click.argument("invoice_id")
@output_options
@click.pass_obj
def invoices_get(ctx: CLIContext, invoice_id: str) -> None:
    """Get invoice details."""

    def fn(ctx: CLIContext) -> CommandOutput:
        return CommandOutput(
            data=ctx.get_client().get(f"{_BASE}/invoices/{segment(invoice_id)}")
        )

    run_command(ctx, command="invoices get", fn=fn)


@invoices_group.command(name="pdf", cls=RichCommand)
@click.argument("invoice_id")
@click.option(
    "-o",
    "--output",
    "output_path",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Output file path (default: <invoice-id>.pdf).",
)
@click.pass_obj
def invoices_pdf(ctx: CLIContext, invoice_id: str, *, output_path: Path | None) -> None:
    """Download an invoice PDF."""

    def fn(ctx: CLIContext) -> CommandOutput:
        content, _content_type = ctx.get_client().download(
            f"{_BASE}/invoices/{segment(invoice_id)}/pdf"
        )
        path = output_path or Path(f"{invoice_id}.pdf")
        _write_file(path, content, what="PDF")
        return CommandOutput(message=f"Downloaded invoice to {path}")

    run_command(ctx, command="invoices pdf", fn=fn)


@invoices_group.command(name="export-csv", cls=RichCommand)
@click.option(
    "-o",
    "--output",
    "output_path",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Output file path (default: invoices.csv).",
)
@click.pass_obj
def invoices_export_csv(ctx: CLIContext, *, output_path: Path | None) -> None:
    """Export invoices as CSV."""

    def fn(ctx: CLIContext) -> CommandOutput:
        content, _content_type = ctx.get_client().download(f"{_BASE}/invoices/export/csv")
        path = output_path or Path("invoices.csv")
        _write_file(path, content, what="CSV")
        return CommandOutput(message=f"Exported invoices to {path}")

    run_command(ctx, command="invoices export-csv", fn=fn)


@invoices_group.command(name="proforma", cls=RichCommand)
@output_options
@click.pass_obj
def invoices_proforma(ctx: CLIContext) -> None:
    """Get the pro forma invoice."""

    def fn(ctx: CLIContext) -> CommandOutput:
        return CommandOutput(data=ctx.get_client().get(f"{_BASE}/proforma"))

    run_command(ctx, command="invoices proforma", fn=fn)
