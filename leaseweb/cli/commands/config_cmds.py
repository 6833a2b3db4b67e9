from __future__ import annotations

import sys

import click
from rich_click import RichCommand, RichGroup

from ..config import CLIConfig, ProfileConfig, mask_key, write_config
from ..context import CLIContext
from ..errors import CLIError, usage_error
from ..options import output_options
from ..runner import CommandOutput, run_command
from ..table import TableWriter


@click.group(name="config", cls=RichGroup)
def config_group() -> None:
    """Configuration and profiles."""


@config_group.command(name="path", cls=RichCommand)
@output_options
@click.pass_obj
def config_path(ctx: CLIContext) -> None:
    """Show the path to the configuration file."""

    def fn(_: CLIContext) -> CommandOutput:
        path = ctx.paths.config_path
        return CommandOutput(data={"path": str(path), "exists": path.exists()})

    run_command(ctx, command="config path", fn=fn)


def _prompt_profiles(cfg: CLIConfig) -> None:
    while True:
        name = click.prompt(
            "Profile name (or 'done' to finish)", default="default", show_default=True
        ).strip()
        if name.lower() == "done":
            return
        if not name:
            continue

        existing = cfg.profiles.get(name)
        api_key = click.prompt(
            f'API key for "{name}"',
            default=existing.api_key if existing else "",
            show_default=False,
            hide_input=True,
        ).strip()
        if not api_key:
            click.echo("Skipping profile (no API key provided)")
            continue

        cfg.profiles[name] = ProfileConfig(api_key=api_key)
        click.echo(f'Profile "{name}" saved.')
        if not cfg.default_profile:
            cfg.default_profile = name


@config_group.command(name="init", cls=RichCommand)
@click.pass_obj
def config_init(ctx: CLIContext) -> None:
    """Create or update profiles interactively."""

    def fn(ctx: CLIContext) -> CommandOutput:
        path = ctx.paths.config_path
        cfg = ctx.load_config().model_copy(deep=True)

        click.echo("Leaseweb CLI Configuration\n")
        if cfg.profiles:
            click.echo(f"Existing profiles: {', '.join(cfg.profiles)}\n")

        _prompt_profiles(cfg)

        if len(cfg.profiles) > 1:
            default = click.prompt(
                "Default profile", default=cfg.default_profile or "", show_default=True
            ).strip()
            if default:
                if default not in cfg.profiles:
                    raise usage_error(f'Unknown profile "{default}".')
                cfg.default_profile = default

        try:
            write_config(path, cfg)
        except OSError as exc:
            raise CLIError(f"Writing config: {exc}", error_type="io_error") from exc
        return CommandOutput(message=f"Configuration written to {path}")

    run_command(ctx, command="config init", fn=fn)


@config_group.command(name="show", cls=RichCommand)
@click.pass_obj
def config_show(ctx: CLIContext) -> None:
    """Show profiles and which one is active."""

    def fn(ctx: CLIContext) -> CommandOutput:
        cfg = ctx.load_config()
        if not cfg.profiles:
            return CommandOutput(message="No profiles configured. Run 'lw config init' to set up.")

        sys.stdout.write(f"Config file: {ctx.paths.config_path}\n")
        sys.stdout.write(f"Default profile: {cfg.default_profile or ''}\n")
        sys.stdout.write(f"Active profile: {ctx.effective_profile() or ''}\n\n")

        table = TableWriter("PROFILE", "API KEY", "DEFAULT")
        for name, profile in cfg.profiles.items():
            marker = "*" if name == cfg.default_profile else ""
            table.add_row(name, mask_key(profile.api_key), marker)
        table.render(sys.stdout)
        return CommandOutput()

    run_command(ctx, command="config show", fn=fn)
