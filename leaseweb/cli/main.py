from __future__ import annotations

import click
import rich_click

import leaseweb

from .context import CLIContext
from .formats import OUTPUT_FORMATS
from .logging import configure_logging, restore_logging


@click.group(
    name="lw",
    invoke_without_command=True,
    context_settings={"help_option_names": ["-h", "--help"]},
    cls=rich_click.RichGroup,
)
@click.option(
    "-o",
    "--output",
    type=click.Choice(OUTPUT_FORMATS, case_sensitive=False),
    default="auto",
    show_default=True,
    help="Output format.",
)
@click.option("--transform", type=str, default=None, help="Dotted path narrowing the response.")
@click.option("-p", "--profile", type=str, default=None, help="Config profile to use.")
@click.option("--api-key", type=str, default=None, help="API key (overrides env and profile).")
@click.option("--base-url", type=str, default=None, help="Override the API base URL.")
@click.option("--timeout", type=float, default=None, help="Per-request timeout in seconds.")
@click.option(
    "--readonly",
    is_flag=True,
    help="Disallow write operations (blocked before any request is sent).",
)
@click.option("--debug", is_flag=True, help="Log HTTP requests and responses to stderr.")
@click.option("-v", "verbose", count=True, help="Increase verbosity (-v, -vv).")
@click.option("-q", "--quiet", is_flag=True, help="Suppress non-essential stderr output.")
@click.version_option(
    version=leaseweb.__version__, prog_name="lw", message="%(prog)s version %(version)s"
)
@click.pass_context
def cli(
    click_ctx: click.Context,
    *,
    output: str,
    transform: str | None,
    profile: str | None,
    api_key: str | None,
    base_url: str | None,
    timeout: float | None,
    readonly: bool,
    debug: bool,
    verbose: int,
    quiet: bool,
) -> None:
    """CLI for the Leaseweb API."""
    if click_ctx.invoked_subcommand is None:
        # No args: show help; no network calls.
        click.echo(click_ctx.get_help())
        raise click.exceptions.Exit(0)

    click_ctx.obj = CLIContext(
        output=output.lower(),  # type: ignore[arg-type]
        transform=transform,
        quiet=quiet,
        verbosity=verbose,
        debug=debug,
        profile=profile,
        api_key=api_key,
        base_url=base_url,
        timeout=timeout,
        readonly=readonly,
    )
    click_ctx.call_on_close(click_ctx.obj.close)

    previous_logging = configure_logging(verbosity=verbose, debug=debug)
    click_ctx.call_on_close(lambda: restore_logging(previous_logging))


# Register commands
from .commands.completion_cmd import completion_cmd as _completion_cmd  # noqa: E402
from .commands.config_cmds import config_group as _config_group  # noqa: E402
from .commands.dedicated_server_cmds import (  # noqa: E402
    dedicated_servers_group as _dedicated_servers_group,
)
from .commands.floating_ip_cmds import floating_ips_group as _floating_ips_group  # noqa: E402
from .commands.invoice_cmds import invoices_group as _invoices_group  # noqa: E402
from .commands.ip_cmds import ips_group as _ips_group  # noqa: E402
from .commands.service_cmds import services_group as _services_group  # noqa: E402
from .commands.version_cmd import version_cmd as _version_cmd  # noqa: E402

cli.add_command(_completion_cmd)
cli.add_command(_version_cmd)
cli.add_command(_config_group)
cli.add_command(_dedicated_servers_group)
cli.add_command(_dedicated_servers_group, name="ds")
cli.add_command(_floating_ips_group)
cli.add_command(_floating_ips_group, name="fip")
cli.add_command(_invoices_group)
cli.add_command(_ips_group)
cli.add_command(_services_group)


def main() -> None:
    cli()
