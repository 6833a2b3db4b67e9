from __future__ import annotations

from typing import Any

import click
from rich_click import RichCommand, RichGroup

from ..context import CLIContext
from ..options import output_options, page_params, pagination_options, parse_payload
from ..runner import CommandOutput, run_command
from ..table import TableWriter
from ._fields import cell, items, segment

_BASE = "/bareMetals/v2"


def _server_path(server_id: str, *rest: str) -> str:
    return "/".join([f"{_BASE}/servers/{segment(server_id)}", *rest])


@click.group(name="dedicated-servers", cls=RichGroup)
def dedicated_servers_group() -> None:
    """Manage dedicated servers (alias: ds)."""


# =============================================================================
# Servers
# =============================================================================


def _servers_table(data: Any) -> TableWriter:
    table = TableWriter(
        "ID",
        "REFERENCE",
        "SITE",
        "CHASSIS",
        "CPU",
        "RAM",
        "PUBLIC IP",
        truncation_priority=[3, 4, 6],
    )
    for server in items(data, "servers"):
        ram = f"{cell(server, 'specs.ram.size')} {cell(server, 'specs.ram.unit')}".strip()
        table.add_row(
            cell(server, "id"),
            cell(server, "reference"),
            cell(server, "location.site"),
            cell(server, "specs.chassis"),
            cell(server, "specs.cpu.type"),
            ram,
            cell(server, "networkInterfaces.public.ip"),
        )
    return table


@dedicated_servers_group.command(name="list", cls=RichCommand)
@pagination_options
@click.option("--reference", type=str, default=None, help="Filter by reference.")
@output_options
@click.pass_obj
def ds_list(ctx: CLIContext, *, limit: int, offset: int, reference: str | None) -> None:
    """List dedicated servers."""

    def fn(ctx: CLIContext) -> CommandOutput:
        client = ctx.get_client()
        params: dict[str, Any] = {**page_params(limit, offset), "reference": reference}
        data = client.get(f"{_BASE}/servers", params=params)
        return CommandOutput(
            data=data, table=_servers_table, empty_message="No dedicated servers found."
        )

    run_command(ctx, command="dedicated-servers list", fn=fn)


@dedicated_servers_group.command(name="get", cls=RichCommand)
@click.argument("server_id")
@output_options
@click.pass_obj
def ds_get(ctx: CLIContext, server_id: str) -> None:
    """Get dedicated server details."""

    def fn(ctx: CLIContext) -> CommandOutput:
        return CommandOutput(data=ctx.get_client().get(_server_path(server_id)))

    run_command(ctx, command="dedicated-servers get", fn=fn)


@dedicated_servers_group.command(name="update", cls=RichCommand)
@click.argument("server_id")
@click.option("--reference", type=str, required=True, help="New reference string.")
@output_options
@click.pass_obj
def ds_update(ctx: CLIContext, server_id: str, *, reference: str) -> None:
    """Update dedicated server reference."""

    def fn(ctx: CLIContext) -> CommandOutput:
        data = ctx.get_client().put(_server_path(server_id), json={"reference": reference})
        return CommandOutput(data=data)

    run_command(ctx, command="dedicated-servers update", fn=fn)


# =============================================================================
# IPs
# =============================================================================


def _ips_table(data: Any) -> TableWriter:
    table = TableWriter(
        "IP", "VERSION", "TYPE", "REVERSE LOOKUP", "NULL ROUTED", truncation_priority=[3]
    )
    for ip in items(data, "ips"):
        table.add_row(
            cell(ip, "ip"),
            f"v{cell(ip, 'version')}" if cell(ip, "version") else "",
            cell(ip, "type"),
            cell(ip, "reverseLookup"),
            cell(ip, "nullRouted") or "false",
        )
    return table


@dedicated_servers_group.command(name="ips", cls=RichCommand)
@click.argument("server_id")
@pagination_options
@output_options
@click.pass_obj
def ds_ips(ctx: CLIContext, server_id: str, *, limit: int, offset: int) -> None:
    """List IPs for a dedicated server."""

    def fn(ctx: CLIContext) -> CommandOutput:
        data = ctx.get_client().get(
            _server_path(server_id, "ips"), params=page_params(limit, offset)
        )
        return CommandOutput(data=data, table=_ips_table, empty_message="No IPs found.")

    run_command(ctx, command="dedicated-servers ips", fn=fn)


@dedicated_servers_group.command(name="ip-get", cls=RichCommand)
@click.argument("server_id")
@click.argument("ip")
@output_options
@click.pass_obj
def ds_ip_get(ctx: CLIContext, server_id: str, ip: str) -> None:
    """Get IP details for a dedicated server."""

    def fn(ctx: CLIContext) -> CommandOutput:
        return CommandOutput(data=ctx.get_client().get(_server_path(server_id, "ips", segment(ip))))

    run_command(ctx, command="dedicated-servers ip-get", fn=fn)


@dedicated_servers_group.command(name="ip-update", cls=RichCommand)
@click.argument("server_id")
@click.argument("ip")
@click.option("--reverse-lookup", type=str, required=True, help="Reverse lookup hostname.")
@output_options
@click.pass_obj
def ds_ip_update(ctx: CLIContext, server_id: str, ip: str, *, reverse_lookup: str) -> None:
    """Set the reverse lookup of a server IP."""

    def fn(ctx: CLIContext) -> CommandOutput:
        data = ctx.get_client().put(
            _server_path(server_id, "ips", segment(ip)), json={"reverseLookup": reverse_lookup}
        )
        return CommandOutput(data=data)

    run_command(ctx, command="dedicated-servers ip-update", fn=fn)


def _ip_action(name: str, action: str, verb: str, help_text: str) -> click.Command:
    @click.command(name=name, cls=RichCommand, help=help_text)
    @click.argument("server_id")
    @click.argument("ip")
    @output_options
    @click.pass_obj
    def command(ctx: CLIContext, server_id: str, ip: str) -> None:
        def fn(ctx: CLIContext) -> CommandOutput:
            ctx.get_client().post(_server_path(server_id, "ips", segment(ip), action))
            return CommandOutput(message=f"{verb} {ip} on server {server_id}")

        run_command(ctx, command=f"dedicated-servers {name}", fn=fn)

    return command


dedicated_servers_group.add_command(
    _ip_action("ip-null", "null", "Null routed", "Null route a server IP.")
)
dedicated_servers_group.add_command(
    _ip_action("ip-unnull", "unnull", "Removed null route for", "Remove a server IP null route.")
)


# =============================================================================
# Power
# =============================================================================


def _power_action(name: str, action: str, notice: str, help_text: str) -> click.Command:
    @click.command(name=name, cls=RichCommand, help=help_text)
    @click.argument("server_id")
    @output_options
    @click.pass_obj
    def command(ctx: CLIContext, server_id: str) -> None:
        def fn(ctx: CLIContext) -> CommandOutput:
            ctx.get_client().post(_server_path(server_id, action))
            return CommandOutput(message=f"{notice} for {server_id}")

        run_command(ctx, command=f"dedicated-servers {name}", fn=fn)

    return command


dedicated_servers_group.add_command(
    _power_action("power-on", "powerOn", "Power on initiated", "Power on a dedicated server.")
)
dedicated_servers_group.add_command(
    _power_action("power-off", "powerOff", "Power off initiated", "Power off a dedicated server.")
)
dedicated_servers_group.add_command(
    _power_action(
        "power-cycle", "powerCycle", "Power cycle initiated", "Power cycle a dedicated server."
    )
)


@dedicated_servers_group.command(name="power-status", cls=RichCommand)
@click.argument("server_id")
@output_options
@click.pass_obj
def ds_power_status(ctx: CLIContext, server_id: str) -> None:
    """Show the power status of a dedicated server."""

    def fn(ctx: CLIContext) -> CommandOutput:
        return CommandOutput(data=ctx.get_client().get(_server_path(server_id, "powerInfo")))

    run_command(ctx, command="dedicated-servers power-status", fn=fn)


# =============================================================================
# Jobs
# =============================================================================


def _jobs_table(data: Any) -> TableWriter:
    table = TableWriter("ID", "TYPE", "STATUS", "CREATED")
    for job in items(data, "jobs"):
        table.add_row(
            cell(job, "uuid"), cell(job, "type"), cell(job, "status"), cell(job, "createdAt")
        )
    return table


@dedicated_servers_group.command(name="jobs", cls=RichCommand)
@click.argument("server_id")
@pagination_options
@output_options
@click.pass_obj
def ds_jobs(ctx: CLIContext, server_id: str, *, limit: int, offset: int) -> None:
    """List jobs for a dedicated server."""

    def fn(ctx: CLIContext) -> CommandOutput:
        data = ctx.get_client().get(
            _server_path(server_id, "jobs"), params=page_params(limit, offset)
        )
        return CommandOutput(data=data, table=_jobs_table, empty_message="No jobs found.")

    run_command(ctx, command="dedicated-servers jobs", fn=fn)


@dedicated_servers_group.command(name="job-get", cls=RichCommand)
@click.argument("server_id")
@click.argument("job_id")
@output_options
@click.pass_obj
def ds_job_get(ctx: CLIContext, server_id: str, job_id: str) -> None:
    """Get job details."""

    def fn(ctx: CLIContext) -> CommandOutput:
        data = ctx.get_client().get(_server_path(server_id, "jobs", segment(job_id)))
        return CommandOutput(data=data)

    run_command(ctx, command="dedicated-servers job-get", fn=fn)


@dedicated_servers_group.command(name="job-cancel", cls=RichCommand)
@click.argument("server_id")
@output_options
@click.pass_obj
def ds_job_cancel(ctx: CLIContext, server_id: str) -> None:
    """Cancel the active job of a dedicated server."""

    def fn(ctx: CLIContext) -> CommandOutput:
        data = ctx.get_client().post(_server_path(server_id, "cancelActiveJob"))
        return CommandOutput(data=data, message=f"Cancelled active job for {server_id}")

    run_command(ctx, command="dedicated-servers job-cancel", fn=fn)


@dedicated_servers_group.command(name="job-retry", cls=RichCommand)
@click.argument("server_id")
@click.argument("job_id")
@output_options
@click.pass_obj
def ds_job_retry(ctx: CLIContext, server_id: str, job_id: str) -> None:
    """Retry a job."""

    def fn(ctx: CLIContext) -> CommandOutput:
        data = ctx.get_client().post(_server_path(server_id, "jobs", segment(job_id), "retry"))
        return CommandOutput(data=data, message=f"Retrying job {job_id}")

    run_command(ctx, command="dedicated-servers job-retry", fn=fn)


# =============================================================================
# Hardware, credentials, history
# =============================================================================


@dedicated_servers_group.command(name="hardware-info", cls=RichCommand)
@click.argument("server_id")
@output_options
@click.pass_obj
def ds_hardware_info(ctx: CLIContext, server_id: str) -> None:
    """Show hardware information of a dedicated server."""

    def fn(ctx: CLIContext) -> CommandOutput:
        return CommandOutput(data=ctx.get_client().get(_server_path(server_id, "hardwareInfo")))

    run_command(ctx, command="dedicated-servers hardware-info", fn=fn)


def _credentials_table(data: Any) -> TableWriter:
    table = TableWriter("TYPE", "USERNAME", truncation_priority=[1])
    for credential in items(data, "credentials"):
        table.add_row(cell(credential, "type"), cell(credential, "username"))
    return table


@dedicated_servers_group.command(name="credentials", cls=RichCommand)
@click.argument("server_id")
@click.option("--type", "credential_type", type=str, default=None, help="Credential type.")
@output_options
@click.pass_obj
def ds_credentials(ctx: CLIContext, server_id: str, *, credential_type: str | None) -> None:
    """List stored credentials of a dedicated server."""

    def fn(ctx: CLIContext) -> CommandOutput:
        parts = ["credentials"]
        if credential_type:
            parts.append(segment(credential_type))
        data = ctx.get_client().get(_server_path(server_id, *parts))
        return CommandOutput(
            data=data, table=_credentials_table, empty_message="No credentials found."
        )

    run_command(ctx, command="dedicated-servers credentials", fn=fn)


@dedicated_servers_group.command(name="null-route-history", cls=RichCommand)
@click.argument("server_id")
@output_options
@click.pass_obj
def ds_null_route_history(ctx: CLIContext, server_id: str) -> None:
    """Show the null route history of a dedicated server."""

    def fn(ctx: CLIContext) -> CommandOutput:
        data = ctx.get_client().get(_server_path(server_id, "nullRouteHistory"))
        return CommandOutput(data=data)

    run_command(ctx, command="dedicated-servers null-route-history", fn=fn)


@dedicated_servers_group.command(name="credential-get", cls=RichCommand)
@click.argument("server_id")
@click.argument("credential_type")
@click.argument("username")
@output_options
@click.pass_obj
def ds_credential_get(ctx: CLIContext, server_id: str, credential_type: str, username: str) -> None:
    """Show one stored credential, password included."""

    def fn(ctx: CLIContext) -> CommandOutput:
        path = _server_path(server_id, "credentials", segment(credential_type), segment(username))
        return CommandOutput(data=ctx.get_client().get(path))

    run_command(ctx, command="dedicated-servers credential-get", fn=fn)


@dedicated_servers_group.command(name="credential-create", cls=RichCommand)
@click.argument("server_id")
@click.option("--type", "credential_type", type=str, required=True, help="Credential type.")
@click.option("--username", type=str, required=True, help="Username.")
@click.option("--password", type=str, required=True, help="Password.")
@output_options
@click.pass_obj
def ds_credential_create(
    ctx: CLIContext, server_id: str, *, credential_type: str, username: str, password: str
) -> None:
    """Store a new credential for a dedicated server."""

    def fn(ctx: CLIContext) -> CommandOutput:
        body = {"type": credential_type, "username": username, "password": password}
        data = ctx.get_client().post(_server_path(server_id, "credentials"), json=body)
        return CommandOutput(data=data)

    run_command(ctx, command="dedicated-servers credential-create", fn=fn)


@dedicated_servers_group.command(name="credential-update", cls=RichCommand)
@click.argument("server_id")
@click.argument("credential_type")
@click.argument("username")
@click.option("--password", type=str, required=True, help="New password.")
@output_options
@click.pass_obj
def ds_credential_update(
    ctx: CLIContext, server_id: str, credential_type: str, username: str, *, password: str
) -> None:
    """Change the password of a stored credential."""

    def fn(ctx: CLIContext) -> CommandOutput:
        path = _server_path(server_id, "credentials", segment(credential_type), segment(username))
        return CommandOutput(data=ctx.get_client().put(path, json={"password": password}))

    run_command(ctx, command="dedicated-servers credential-update", fn=fn)


@dedicated_servers_group.command(name="credential-delete", cls=RichCommand)
@click.argument("server_id")
@click.argument("credential_type")
@click.argument("username")
@output_options
@click.pass_obj
def ds_credential_delete(
    ctx: CLIContext, server_id: str, credential_type: str, username: str
) -> None:
    """Delete a stored credential."""

    def fn(ctx: CLIContext) -> CommandOutput:
        path = _server_path(server_id, "credentials", segment(credential_type), segment(username))
        ctx.get_client().delete(path)
        return CommandOutput(message=f"Deleted {credential_type} credential {username}")

    run_command(ctx, command="dedicated-servers credential-delete", fn=fn)


# =============================================================================
# Installation and rescue
# =============================================================================


@dedicated_servers_group.command(name="install", cls=RichCommand)
@click.argument("server_id")
@click.option("--os", "os_id", type=str, required=True, help="Operating system ID.")
@click.option("--hostname", type=str, default=None, help="Server hostname.")
@output_options
@click.pass_obj
def ds_install(ctx: CLIContext, server_id: str, *, os_id: str, hostname: str | None) -> None:
    """Launch an operating system installation."""

    def fn(ctx: CLIContext) -> CommandOutput:
        body: dict[str, Any] = {"operatingSystemId": os_id}
        if hostname:
            body["hostname"] = hostname
        data = ctx.get_client().post(_server_path(server_id, "install"), json=body)
        return CommandOutput(data=data)

    run_command(ctx, command="dedicated-servers install", fn=fn)


@dedicated_servers_group.command(name="rescue", cls=RichCommand)
@click.argument("server_id")
@click.option("--os", "image_id", type=str, required=True, help="Rescue image, e.g. RESCUE_GRML.")
@click.option(
    "--power-cycle",
    type=click.Choice(["true", "false"]),
    default="false",
    show_default=True,
    help="Power cycle once rescue mode is set.",
)
@output_options
@click.pass_obj
def ds_rescue(ctx: CLIContext, server_id: str, *, image_id: str, power_cycle: str) -> None:
    """Launch rescue mode."""

    def fn(ctx: CLIContext) -> CommandOutput:
        body = {"rescueImageId": image_id, "powerCycle": power_cycle == "true"}
        data = ctx.get_client().post(_server_path(server_id, "rescueMode"), json=body)
        return CommandOutput(data=data)

    run_command(ctx, command="dedicated-servers rescue", fn=fn)


@dedicated_servers_group.command(name="rescue-images", cls=RichCommand)
@output_options
@click.pass_obj
def ds_rescue_images(ctx: CLIContext) -> None:
    """List available rescue images."""

    def fn(ctx: CLIContext) -> CommandOutput:
        return CommandOutput(data=ctx.get_client().get(f"{_BASE}/rescueImages"))

    run_command(ctx, command="dedicated-servers rescue-images", fn=fn)


@dedicated_servers_group.command(name="os-list", cls=RichCommand)
@pagination_options
@output_options
@click.pass_obj
def ds_os_list(ctx: CLIContext, *, limit: int, offset: int) -> None:
    """List installable operating systems."""

    def fn(ctx: CLIContext) -> CommandOutput:
        data = ctx.get_client().get(f"{_BASE}/operatingSystems", params=page_params(limit, offset))
        return CommandOutput(data=data)

    run_command(ctx, command="dedicated-servers os-list", fn=fn)


@dedicated_servers_group.command(name="os-get", cls=RichCommand)
@click.argument("os_id")
@output_options
@click.pass_obj
def ds_os_get(ctx: CLIContext, os_id: str) -> None:
    """Show an operating system."""

    def fn(ctx: CLIContext) -> CommandOutput:
        path = f"{_BASE}/operatingSystems/{segment(os_id)}"
        return CommandOutput(data=ctx.get_client().get(path))

    run_command(ctx, command="dedicated-servers os-get", fn=fn)


@dedicated_servers_group.command(name="os-control-panels", cls=RichCommand)
@click.argument("os_id")
@output_options
@click.pass_obj
def ds_os_control_panels(ctx: CLIContext, os_id: str) -> None:
    """List control panels for an operating system."""

    def fn(ctx: CLIContext) -> CommandOutput:
        path = f"{_BASE}/operatingSystems/{segment(os_id)}/controlPanels"
        return CommandOutput(data=ctx.get_client().get(path))

    run_command(ctx, command="dedicated-servers os-control-panels", fn=fn)


@dedicated_servers_group.command(name="control-panels", cls=RichCommand)
@output_options
@click.pass_obj
def ds_control_panels(ctx: CLIContext) -> None:
    """List all control panels."""

    def fn(ctx: CLIContext) -> CommandOutput:
        return CommandOutput(data=ctx.get_client().get(f"{_BASE}/controlPanels"))

    run_command(ctx, command="dedicated-servers control-panels", fn=fn)


dedicated_servers_group.add_command(
    _power_action("ipmi-reset", "ipmiReset", "IPMI reset initiated", "Launch an IPMI reset.")
)
dedicated_servers_group.add_command(
    _power_action(
        "hardware-scan", "hardwareScan", "Hardware scan initiated", "Launch a hardware scan."
    )
)
dedicated_servers_group.add_command(
    _power_action(
        "job-expire", "expireActiveJob", "Expired active job", "Expire the active job of a server."
    )
)


# =============================================================================
# Monitoring and metrics
# =============================================================================


@dedicated_servers_group.command(name="hardware-monitoring", cls=RichCommand)
@click.argument("server_id")
@output_options
@click.pass_obj
def ds_hardware_monitoring(ctx: CLIContext, server_id: str) -> None:
    """Show hardware monitoring data of a dedicated server."""

    def fn(ctx: CLIContext) -> CommandOutput:
        data = ctx.get_client().get(_server_path(server_id, "hardwareMonitoring"))
        return CommandOutput(data=data)

    run_command(ctx, command="dedicated-servers hardware-monitoring", fn=fn)


@dedicated_servers_group.command(name="hardware-monitoring-all", cls=RichCommand)
@output_options
@click.pass_obj
def ds_hardware_monitoring_all(ctx: CLIContext) -> None:
    """Show hardware monitoring data for all servers."""

    def fn(ctx: CLIContext) -> CommandOutput:
        return CommandOutput(data=ctx.get_client().get(f"{_BASE}/hardwareMonitoring"))

    run_command(ctx, command="dedicated-servers hardware-monitoring-all", fn=fn)


def _metrics_command(name: str, metric: str, aggregations: list[str]) -> click.Command:
    @click.command(name=name, cls=RichCommand, help=f"Show {metric} metrics.")
    @click.argument("server_id")
    @click.option("--from", "start", type=str, required=True, help="Start date (YYYY-MM-DD).")
    @click.option("--to", "end", type=str, required=True, help="End date (YYYY-MM-DD).")
    @click.option(
        "--aggregation",
        type=click.Choice(aggregations, case_sensitive=False),
        default=aggregations[0],
        show_default=True,
    )
    @output_options
    @click.pass_obj
    def command(ctx: CLIContext, server_id: str, *, start: str, end: str, aggregation: str) -> None:
        def fn(ctx: CLIContext) -> CommandOutput:
            params = {"from": start, "to": end, "aggregation": aggregation.upper()}
            data = ctx.get_client().get(_server_path(server_id, "metrics", metric), params=params)
            return CommandOutput(data=data)

        run_command(ctx, command=f"dedicated-servers {name}", fn=fn)

    return command


dedicated_servers_group.add_command(
    _metrics_command("metrics-bandwidth", "bandwidth", ["AVG", "95TH", "SUM"])
)
dedicated_servers_group.add_command(
    _metrics_command("metrics-datatraffic", "datatraffic", ["SUM", "AVG"])
)


# =============================================================================
# Network
# =============================================================================


@dedicated_servers_group.command(name="network-interfaces", cls=RichCommand)
@click.argument("server_id")
@click.option(
    "--action",
    type=click.Choice(["open", "close"], case_sensitive=False),
    default=None,
    help="Open or close the interfaces instead of listing them.",
)
@click.option(
    "--interface",
    "interface_type",
    type=str,
    default=None,
    help="Interface type (public, internal, remoteManagement).",
)
@output_options
@click.pass_obj
def ds_network_interfaces(
    ctx: CLIContext, server_id: str, *, action: str | None, interface_type: str | None
) -> None:
    """List network interfaces, or open/close them with --action."""

    def fn(ctx: CLIContext) -> CommandOutput:
        parts = ["networkInterfaces"]
        if interface_type:
            parts.append(segment(interface_type))
        client = ctx.get_client()
        if action:
            verb = action.lower()
            client.post(_server_path(server_id, *parts, verb))
            return CommandOutput(
                message=f"Network interface {verb} action completed for {server_id}"
            )
        return CommandOutput(data=client.get(_server_path(server_id, *parts)))

    run_command(ctx, command="dedicated-servers network-interfaces", fn=fn)


@dedicated_servers_group.command(name="private-network-add", cls=RichCommand)
@click.argument("server_id")
@click.argument("private_network_id")
@output_options
@click.pass_obj
def ds_private_network_add(ctx: CLIContext, server_id: str, private_network_id: str) -> None:
    """Add a server to a private network."""

    def fn(ctx: CLIContext) -> CommandOutput:
        path = _server_path(server_id, "privateNetworks", segment(private_network_id))
        data = ctx.get_client().put(path, json={})
        return CommandOutput(
            data=data,
            message=f"Added server {server_id} to private network {private_network_id}",
        )

    run_command(ctx, command="dedicated-servers private-network-add", fn=fn)


@dedicated_servers_group.command(name="private-network-remove", cls=RichCommand)
@click.argument("server_id")
@click.argument("private_network_id")
@output_options
@click.pass_obj
def ds_private_network_remove(ctx: CLIContext, server_id: str, private_network_id: str) -> None:
    """Remove a server from a private network."""

    def fn(ctx: CLIContext) -> CommandOutput:
        path = _server_path(server_id, "privateNetworks", segment(private_network_id))
        ctx.get_client().delete(path)
        return CommandOutput(
            message=f"Removed server {server_id} from private network {private_network_id}"
        )

    run_command(ctx, command="dedicated-servers private-network-remove", fn=fn)


# =============================================================================
# DHCP leases
# =============================================================================


@dedicated_servers_group.command(name="leases", cls=RichCommand)
@click.argument("server_id")
@output_options
@click.pass_obj
def ds_leases(ctx: CLIContext, server_id: str) -> None:
    """List DHCP reservations of a dedicated server."""

    def fn(ctx: CLIContext) -> CommandOutput:
        return CommandOutput(data=ctx.get_client().get(_server_path(server_id, "leases")))

    run_command(ctx, command="dedicated-servers leases", fn=fn)


@dedicated_servers_group.command(name="lease-create", cls=RichCommand)
@click.argument("server_id")
@click.option("--payload", type=str, required=True, help="JSON body of the reservation.")
@output_options
@click.pass_obj
def ds_lease_create(ctx: CLIContext, server_id: str, *, payload: str) -> None:
    """Create a DHCP reservation."""

    def fn(ctx: CLIContext) -> CommandOutput:
        body = parse_payload(payload)
        data = ctx.get_client().post(_server_path(server_id, "leases"), json=body)
        return CommandOutput(data=data, message=f"Created DHCP reservation for {server_id}")

    run_command(ctx, command="dedicated-servers lease-create", fn=fn)


@dedicated_servers_group.command(name="lease-delete", cls=RichCommand)
@click.argument("server_id")
@output_options
@click.pass_obj
def ds_lease_delete(ctx: CLIContext, server_id: str) -> None:
    """Delete the DHCP reservation of a dedicated server."""

    def fn(ctx: CLIContext) -> CommandOutput:
        ctx.get_client().delete(_server_path(server_id, "leases"))
        return CommandOutput(message=f"Deleted DHCP reservation for {server_id}")

    run_command(ctx, command="dedicated-servers lease-delete", fn=fn)


# =============================================================================
# Notification settings
# =============================================================================


def _add_notification_commands(kind: str, label: str) -> None:
    """Register list/get/create/update/delete for one notification setting kind."""
    prefix = f"notif-{kind}"

    def base(server_id: str, *rest: str) -> str:
        return _server_path(server_id, "notificationSettings", kind, *rest)

    @dedicated_servers_group.command(
        name=f"{prefix}-list", cls=RichCommand, help=f"List {label} notification settings."
    )
    @click.argument("server_id")
    @output_options
    @click.pass_obj
    def list_cmd(ctx: CLIContext, server_id: str) -> None:
        def fn(ctx: CLIContext) -> CommandOutput:
            return CommandOutput(data=ctx.get_client().get(base(server_id)))

        run_command(ctx, command=f"dedicated-servers {prefix}-list", fn=fn)

    @dedicated_servers_group.command(
        name=f"{prefix}-get", cls=RichCommand, help=f"Get a {label} notification setting."
    )
    @click.argument("server_id")
    @click.argument("notification_id")
    @output_options
    @click.pass_obj
    def get_cmd(ctx: CLIContext, server_id: str, notification_id: str) -> None:
        def fn(ctx: CLIContext) -> CommandOutput:
            return CommandOutput(
                data=ctx.get_client().get(base(server_id, segment(notification_id)))
            )

        run_command(ctx, command=f"dedicated-servers {prefix}-get", fn=fn)

    @dedicated_servers_group.command(
        name=f"{prefix}-create", cls=RichCommand, help=f"Create a {label} notification setting."
    )
    @click.argument("server_id")
    @click.option("--payload", type=str, required=True, help="JSON request body.")
    @output_options
    @click.pass_obj
    def create_cmd(ctx: CLIContext, server_id: str, *, payload: str) -> None:
        def fn(ctx: CLIContext) -> CommandOutput:
            body = parse_payload(payload)
            return CommandOutput(data=ctx.get_client().post(base(server_id), json=body))

        run_command(ctx, command=f"dedicated-servers {prefix}-create", fn=fn)

    @dedicated_servers_group.command(
        name=f"{prefix}-update", cls=RichCommand, help=f"Update a {label} notification setting."
    )
    @click.argument("server_id")
    @click.argument("notification_id")
    @click.option("--payload", type=str, required=True, help="JSON request body.")
    @output_options
    @click.pass_obj
    def update_cmd(ctx: CLIContext, server_id: str, notification_id: str, *, payload: str) -> None:
        def fn(ctx: CLIContext) -> CommandOutput:
            body = parse_payload(payload)
            path = base(server_id, segment(notification_id))
            return CommandOutput(data=ctx.get_client().put(path, json=body))

        run_command(ctx, command=f"dedicated-servers {prefix}-update", fn=fn)

    @dedicated_servers_group.command(
        name=f"{prefix}-delete", cls=RichCommand, help=f"Delete a {label} notification setting."
    )
    @click.argument("server_id")
    @click.argument("notification_id")
    @output_options
    @click.pass_obj
    def delete_cmd(ctx: CLIContext, server_id: str, notification_id: str) -> None:
        def fn(ctx: CLIContext) -> CommandOutput:
            ctx.get_client().delete(base(server_id, segment(notification_id)))
            return CommandOutput(
                message=f"Deleted {label} notification setting {notification_id}"
            )

        run_command(ctx, command=f"dedicated-servers {prefix}-delete", fn=fn)


_add_notification_commands("bandwidth", "bandwidth")
_add_notification_commands("datatraffic", "data traffic")


@dedicated_servers_group.command(name="notif-ddos-get", cls=RichCommand)
@click.argument("server_id")
@output_options
@click.pass_obj
def ds_notif_ddos_get(ctx: CLIContext, server_id: str) -> None:
    """Show DDoS notification settings."""

    def fn(ctx: CLIContext) -> CommandOutput:
        path = _server_path(server_id, "notificationSettings", "ddos")
        return CommandOutput(data=ctx.get_client().get(path))

    run_command(ctx, command="dedicated-servers notif-ddos-get", fn=fn)


@dedicated_servers_group.command(name="notif-ddos-update", cls=RichCommand)
@click.argument("server_id")
@click.option("--payload", type=str, required=True, help="JSON request body.")
@output_options
@click.pass_obj
def ds_notif_ddos_update(ctx: CLIContext, server_id: str, *, payload: str) -> None:
    """Update DDoS notification settings."""

    def fn(ctx: CLIContext) -> CommandOutput:
        body = parse_payload(payload)
        path = _server_path(server_id, "notificationSettings", "ddos")
        return CommandOutput(data=ctx.get_client().put(path, json=body))

    run_command(ctx, command="dedicated-servers notif-ddos-update", fn=fn)
