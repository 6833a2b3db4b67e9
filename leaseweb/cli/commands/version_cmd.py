from __future__ import annotations

import platform
import sys

import click
import rich_click

import leaseweb

from ..context import CLIContext
from ..options import output_options
from ..runner import CommandOutput, run_command


@click.command(name="version", cls=rich_click.RichCommand)
@output_options
@click.pass_obj
def version_cmd(ctx: CLIContext) -> None:
    """Show the CLI version."""
    if ctx.output == "auto" and not ctx.transform:
        sys.stdout.write(f"lw version {leaseweb.__version__}\n")
        raise click.exceptions.Exit(0)

    def fn(_: CLIContext) -> CommandOutput:
        data = {
            "version": leaseweb.__version__,
            "pythonVersion": platform.python_version(),
            "platform": platform.platform(),
        }
        return CommandOutput(data=data)

    run_command(ctx, command="version", fn=fn)
