from __future__ import annotations

import sys

import click
from rich_click import RichCommand

from ..context import CLIContext
from ..options import output_options
from ..runner import CommandOutput, run_command

_SCRIPTS = {
    "bash": 'eval "$(_LW_COMPLETE=bash_source lw)"\n',
    "zsh": 'eval "$(_LW_COMPLETE=zsh_source lw)"\n',
    "fish": "eval (env _LW_COMPLETE=fish_source lw)\n",
}


@click.command(name="completion", cls=RichCommand)
@click.argument("shell", type=click.Choice(sorted(_SCRIPTS)))
@output_options
@click.pass_obj
def completion_cmd(ctx: CLIContext, shell: str) -> None:
    """Print the shell snippet that enables tab completion."""
    script = _SCRIPTS[shell]
    if ctx.output == "auto" and not ctx.transform:
        sys.stdout.write(script)
        raise click.exceptions.Exit(0)

    def fn(_: CLIContext) -> CommandOutput:
        return CommandOutput(data={"shell": shell, "script": script})

    run_command(ctx, command="completion", fn=fn)
