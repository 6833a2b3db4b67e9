from __future__ import annotations

from typing import Any

import click
from rich_click import RichCommand, RichGroup

from ..context import CLIContext
from ..options import output_options, page_params, pagination_options, parse_payload
from ..runner import CommandOutput, run_command
from ..table import TableWriter
from ._fields import cell, items, segment

_BASE = "/ipMgmt/v2"


@click.group(name="ips", cls=RichGroup)
def ips_group() -> None:
    """Manage IP addresses."""


def _ips_table(data: Any) -> TableWriter:
    table = TableWriter(
        "IP",
        "VERSION",
        "TYPE",
        "REVERSE LOOKUP",
        "NULL ROUTED",
        "EQUIPMENT",
        truncation_priority=[3, 5],
    )
    for ip in items(data, "ips"):
        table.add_row(
            cell(ip, "ip"),
            f"v{cell(ip, 'version')}" if cell(ip, "version") else "",
            cell(ip, "type"),
            cell(ip, "reverseLookup"),
            cell(ip, "nullRouted") or "false",
            cell(ip, "equipmentId"),
        )
    return table


@ips_group.command(name="list", cls=RichCommand)
@pagination_options
@click.option("--version", "ip_version", type=click.Choice(["4", "6"]), default=None)
@click.option("--type", "ip_type", type=str, default=None, help="Filter by type.")
@click.option(
    "--null-routed",
    type=click.Choice(["true", "false"]),
    default=None,
    help="Filter by null routed status.",
)
@output_options
@click.pass_obj
def ips_list(
    ctx: CLIContext,
    *,
    limit: int,
    offset: int,
    ip_version: str | None,
    ip_type: str | None,
    null_routed: str | None,
) -> None:
    """List IP addresses."""

    def fn(ctx: CLIContext) -> CommandOutput:
        params: dict[str, Any] = {
            **page_params(limit, offset),
            "version": ip_version,
            "type": ip_type,
            "nullRouted": null_routed,
        }
        data = ctx.get_client().get(f"{_BASE}/ips", params=params)
        return CommandOutput(data=data, table=_ips_table, empty_message="No IPs found.")

    run_command(ctx, command="ips list", fn=fn)


@ips_group.command(name="get", cls=RichCommand)
@click.argument("ip")
@output_options
@click.pass_obj
def ips_get(ctx: CLIContext, ip: str) -> None:
    """Get IP details."""

    def fn(ctx: CLIContext) -> CommandOutput:
        return CommandOutput(data=ctx.get_client().get(f"{_BASE}/ips/{segment(ip)}"))

    run_command(ctx, command="ips get", fn=fn)


@ips_group.command(name="update", cls=RichCommand)
@click.argument("ip")
@click.option("--reverse-lookup", type=str, required=True, help="Reverse lookup hostname.")
@output_options
@click.pass_obj
def ips_update(ctx: CLIContext, ip: str, *, reverse_lookup: str) -> None:
    """Update IP (set reverse lookup)."""

    def fn(ctx: CLIContext) -> CommandOutput:
        data = ctx.get_client().put(
            f"{_BASE}/ips/{segment(ip)}", json={"reverseLookup": reverse_lookup}
        )
        return CommandOutput(data=data)

    run_command(ctx, command="ips update", fn=fn)


@ips_group.command(name="null-route", cls=RichCommand)
@click.argument("ip")
@click.option("--comment", type=str, default=None, help="Comment for the null route.")
@output_options
@click.pass_obj
def ips_null_route(ctx: CLIContext, ip: str, *, comment: str | None) -> None:
    """Null route an IP."""

    def fn(ctx: CLIContext) -> CommandOutput:
        body = {"comment": comment} if comment else {}
        data = ctx.get_client().post(f"{_BASE}/ips/{segment(ip)}/nullRoute", json=body)
        return CommandOutput(data=data)

    run_command(ctx, command="ips null-route", fn=fn)


@ips_group.command(name="remove-null-route", cls=RichCommand)
@click.argument("ip")
@output_options
@click.pass_obj
def ips_remove_null_route(ctx: CLIContext, ip: str) -> None:
    """Remove the null route of an IP."""

    def fn(ctx: CLIContext) -> CommandOutput:
        ctx.get_client().delete(f"{_BASE}/ips/{segment(ip)}/nullRoute")
        return CommandOutput(message=f"Removed null route for {ip}")

    run_command(ctx, command="ips remove-null-route", fn=fn)


@ips_group.command(name="null-route-history", cls=RichCommand)
@pagination_options
@output_options
@click.pass_obj
def ips_null_route_history(ctx: CLIContext, *, limit: int, offset: int) -> None:
    """List null route history."""

    def fn(ctx: CLIContext) -> CommandOutput:
        data = ctx.get_client().get(f"{_BASE}/nullRoutes", params=page_params(limit, offset))
        return CommandOutput(data=data)

    run_command(ctx, command="ips null-route-history", fn=fn)


@ips_group.command(name="null-route-get", cls=RichCommand)
@click.argument("null_route_id")
@output_options
@click.pass_obj
def ips_null_route_get(ctx: CLIContext, null_route_id: str) -> None:
    """Get null route details."""

    def fn(ctx: CLIContext) -> CommandOutput:
        data = ctx.get_client().get(f"{_BASE}/nullRoutes/{segment(null_route_id)}")
        return CommandOutput(data=data)

    run_command(ctx, command="ips null-route-get", fn=fn)


@ips_group.command(name="null-route-update", cls=RichCommand)
@click.argument("null_route_id")
@click.option("--comment", type=str, default="", help="Comment for the null route.")
@output_options
@click.pass_obj
def ips_null_route_update(ctx: CLIContext, null_route_id: str, *, comment: str) -> None:
    """Update the comment of a null route."""

    def fn(ctx: CLIContext) -> CommandOutput:
        data = ctx.get_client().put(
            f"{_BASE}/nullRoutes/{segment(null_route_id)}", json={"comment": comment}
        )
        return CommandOutput(data=data)

    run_command(ctx, command="ips null-route-update", fn=fn)


@ips_group.command(name="null-routed-ipv6", cls=RichCommand)
@click.argument("ip")
@output_options
@click.pass_obj
def ips_null_routed_ipv6(ctx: CLIContext, ip: str) -> None:
    """List null routed addresses inside an IPv6 range."""

    def fn(ctx: CLIContext) -> CommandOutput:
        return CommandOutput(data=ctx.get_client().get(f"{_BASE}/ips/{segment(ip)}/nullRouted"))

    run_command(ctx, command="ips null-routed-ipv6", fn=fn)


@ips_group.command(name="reverse-lookup", cls=RichCommand)
@click.argument("ip")
@output_options
@click.pass_obj
def ips_reverse_lookup(ctx: CLIContext, ip: str) -> None:
    """Show reverse lookup records of an IPv6 range."""

    def fn(ctx: CLIContext) -> CommandOutput:
        return CommandOutput(
            data=ctx.get_client().get(f"{_BASE}/ips/{segment(ip)}/reverseLookup")
        )

    run_command(ctx, command="ips reverse-lookup", fn=fn)


@ips_group.command(name="reverse-lookup-update", cls=RichCommand)
@click.argument("ip")
@click.option(
    "--records", type=str, required=True, help="JSON array of reverse lookup records."
)
@output_options
@click.pass_obj
def ips_reverse_lookup_update(ctx: CLIContext, ip: str, *, records: str) -> None:
    """Replace reverse lookup records of an IPv6 range."""

    def fn(ctx: CLIContext) -> CommandOutput:
        body = parse_payload(records, label="--records")
        data = ctx.get_client().put(f"{_BASE}/ips/{segment(ip)}/reverseLookup", json=body)
        return CommandOutput(data=data)

    run_command(ctx, command="ips reverse-lookup-update", fn=fn)
