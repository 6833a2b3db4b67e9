from __future__ import annotations

from typing import Any

import click
from rich_click import RichCommand, RichGroup

from ..context import CLIContext
from ..options import output_options, page_params, pagination_options
from ..runner import CommandOutput, run_command
from ..table import TableWriter
from ._fields import cell, items, segment

_BASE = "/services/v1/services"


@click.group(name="services", cls=RichGroup)
def services_group() -> None:
    """Manage services."""


def _services_table(data: Any) -> TableWriter:
    table = TableWriter(
        "ID",
        "REFERENCE",
        "PRODUCT",
        "STATUS",
        "START DATE",
        "END DATE",
        truncation_priority=[2, 1],
    )
    for svc in items(data, "services"):
        table.add_row(
            cell(svc, "id"),
            cell(svc, "reference"),
            cell(svc, "productId"),
            cell(svc, "status"),
            cell(svc, "startDate"),
            cell(svc, "endDate"),
        )
    return table


@services_group.command(name="list", cls=RichCommand)
@pagination_options
@output_options
@click.pass_obj
def services_list(ctx: CLIContext, *, limit: int, offset: int) -> None:
    """List services."""

    def fn(ctx: CLIContext) -> CommandOutput:
        data = ctx.get_client().get(_BASE, params=page_params(limit, offset))
        return CommandOutput(
            data=data, table=_services_table, empty_message="No services found."
        )

    run_command(ctx, command="services list", fn=fn)


@services_group.command(name="get", cls=RichCommand)
@click.argument("service_id")
@output_options
@click.pass_obj
def services_get(ctx: CLIContext, service_id: str) -> None:
    """Get service details."""

    def fn(ctx: CLIContext) -> CommandOutput:
        return CommandOutput(data=ctx.get_client().get(f"{_BASE}/{segment(service_id)}"))

    run_command(ctx, command="services get", fn=fn)


@services_group.command(name="update", cls=RichCommand)
@click.argument("service_id")
@click.option("--reference", type=str, required=True, help="New reference.")
@output_options
@click.pass_obj
def services_update(ctx: CLIContext, service_id: str, *, reference: str) -> None:
    """Update a service reference."""

    def fn(ctx: CLIContext) -> CommandOutput:
        data = ctx.get_client().put(
            f"{_BASE}/{segment(service_id)}", json={"reference": reference}
        )
        return CommandOutput(data=data)

    run_command(ctx, command="services update", fn=fn)


@services_group.command(name="cancel", cls=RichCommand)
@click.argument("service_id")
@click.option("--reason", type=str, required=True, help="Cancellation reason.")
@click.option(
    "--reason-code",
    type=str,
    default=None,
    help="Cancellation reason code (see `lw services cancellation-reasons`).",
)
@output_options
@click.pass_obj
def services_cancel(
    ctx: CLIContext, service_id: str, *, reason: str, reason_code: str | None
) -> None:
    """Cancel a service."""

    def fn(ctx: CLIContext) -> CommandOutput:
        body: dict[str, Any] = {"reason": reason}
        if reason_code:
            body["reasonCode"] = reason_code
        ctx.get_client().post(f"{_BASE}/{segment(service_id)}/cancel", json=body)
        return CommandOutput(message=f"Cancelled service {service_id}")

    run_command(ctx, command="services cancel", fn=fn)


@services_group.command(name="uncancel", cls=RichCommand)
@click.argument("service_id")
@output_options
@click.pass_obj
def services_uncancel(ctx: CLIContext, service_id: str) -> None:
    """Revoke a pending service cancellation."""

    def fn(ctx: CLIContext) -> CommandOutput:
        ctx.get_client().post(f"{_BASE}/{segment(service_id)}/uncancel")
        return CommandOutput(message=f"Uncancelled service {service_id}")

    run_command(ctx, command="services uncancel", fn=fn)


@services_group.command(name="cancellation-reasons", cls=RichCommand)
@output_options
@click.pass_obj
def services_cancellation_reasons(ctx: CLIContext) -> None:
    """List cancellation reasons."""

    def fn(ctx: CLIContext) -> CommandOutput:
        return CommandOutput(data=ctx.get_client().get(f"{_BASE}/cancellationReasons"))

    run_command(ctx, command="services cancellation-reasons", fn=fn)
