from __future__ import annotations

import click
from rich_click import RichCommand, RichGroup

from ..context import CLIContext
from ..options import output_options, page_params, pagination_options, parse_payload
from ..runner import CommandOutput, run_command
from ._fields import segment

_BASE = "/floatingIps/v2/ranges"


def _definition_path(range_id: str, definition_id: str | None = None) -> str:
    path = f"{_BASE}/{segment(range_id)}/floatingIpDefinitions"
    if definition_id is not None:
        path = f"{path}/{segment(definition_id)}"
    return path


@click.group(name="floating-ips", cls=RichGroup)
def floating_ips_group() -> None:
    """Manage floating IP ranges (alias: fip)."""


@floating_ips_group.command(name="list", cls=RichCommand)
@pagination_options
@output_options
@click.pass_obj
def fip_list(ctx: CLIContext, *, limit: int, offset: int) -> None:
    """List floating IP ranges."""

    def fn(ctx: CLIContext) -> CommandOutput:
        return CommandOutput(data=ctx.get_client().get(_BASE, params=page_params(limit, offset)))

    run_command(ctx, command="floating-ips list", fn=fn)


@floating_ips_group.command(name="create", cls=RichCommand)
@click.option("--payload", type=str, required=True, help="JSON request body.")
@output_options
@click.pass_obj
def fip_create(ctx: CLIContext, *, payload: str) -> None:
    """Create a floating IP range."""

    def fn(ctx: CLIContext) -> CommandOutput:
        body = parse_payload(payload)
        return CommandOutput(data=ctx.get_client().post(_BASE, json=body))

    run_command(ctx, command="floating-ips create", fn=fn)


@floating_ips_group.command(name="get", cls=RichCommand)
@click.argument("range_id")
@output_options
@click.pass_obj
def fip_get(ctx: CLIContext, range_id: str) -> None:
    """Get a floating IP range."""

    def fn(ctx: CLIContext) -> CommandOutput:
        return CommandOutput(data=ctx.get_client().get(f"{_BASE}/{segment(range_id)}"))

    run_command(ctx, command="floating-ips get", fn=fn)


@floating_ips_group.command(name="update", cls=RichCommand)
@click.argument("range_id")
@click.option("--comment", type=str, required=True, help="Range comment.")
@output_options
@click.pass_obj
def fip_update(ctx: CLIContext, range_id: str, *, comment: str) -> None:
    """Update a floating IP range."""

    def fn(ctx: CLIContext) -> CommandOutput:
        data = ctx.get_client().put(f"{_BASE}/{segment(range_id)}", json={"comment": comment})
        return CommandOutput(data=data)

    run_command(ctx, command="floating-ips update", fn=fn)


@floating_ips_group.command(name="delete", cls=RichCommand)
@click.argument("range_id")
@output_options
@click.pass_obj
def fip_delete(ctx: CLIContext, range_id: str) -> None:
    """Delete a floating IP range."""

    def fn(ctx: CLIContext) -> CommandOutput:
        ctx.get_client().delete(f"{_BASE}/{segment(range_id)}")
        return CommandOutput(message=f"Deleted range {range_id}")

    run_command(ctx, command="floating-ips delete", fn=fn)


@floating_ips_group.command(name="definitions", cls=RichCommand)
@click.argument("range_id")
@pagination_options
@output_options
@click.pass_obj
def fip_definitions(ctx: CLIContext, range_id: str, *, limit: int, offset: int) -> None:
    """List floating IP definitions of a range."""

    def fn(ctx: CLIContext) -> CommandOutput:
        data = ctx.get_client().get(_definition_path(range_id), params=page_params(limit, offset))
        return CommandOutput(data=data)

    run_command(ctx, command="floating-ips definitions", fn=fn)


@floating_ips_group.command(name="assign", cls=RichCommand)
@click.argument("range_id")
@click.argument("definition_id")
@click.option("--anchor-ip", type=str, required=True, help="Anchor IP to route to.")
@output_options
@click.pass_obj
def fip_assign(ctx: CLIContext, range_id: str, definition_id: str, *, anchor_ip: str) -> None:
    """Point a floating IP definition at an anchor IP."""

    def fn(ctx: CLIContext) -> CommandOutput:
        data = ctx.get_client().put(
            _definition_path(range_id, definition_id), json={"anchorIp": anchor_ip}
        )
        return CommandOutput(data=data)

    run_command(ctx, command="floating-ips assign", fn=fn)


@floating_ips_group.command(name="unassign", cls=RichCommand)
@click.argument("range_id")
@click.argument("definition_id")
@output_options
@click.pass_obj
def fip_unassign(ctx: CLIContext, range_id: str, definition_id: str) -> None:
    """Remove a floating IP definition."""

    def fn(ctx: CLIContext) -> CommandOutput:
        ctx.get_client().delete(_definition_path(range_id, definition_id))
        return CommandOutput(message=f"Unassigned {definition_id} from range {range_id}")

    run_command(ctx, command="floating-ips unassign", fn=fn)
