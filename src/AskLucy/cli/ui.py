"""Click CLI interface definitions.

Defines the command-line interface structure and routes commands
to their respective runners.
"""

from __future__ import annotations

from pathlib import Path

import click

from AskLucy.cli.runner import CommandRunner
from AskLucy.config import load_config

CONFIG_ENVVAR = "ASKLUCY_CONFIG"


@click.group(help="AskLucy: build Lucene query strings from YAML clause definitions.")
@click.option(
    "--config",
    "config_path",
    type=click.Path(path_type=Path, dir_okay=False),
    default=Path("config/default.yml"),
    show_default=True,
    envvar=CONFIG_ENVVAR,
    show_envvar=True,
    help="Path to YAML config file.",
)
@click.pass_context
def cli(ctx: click.Context, config_path: Path) -> None:
    """CLI entry group.

    Args:
        ctx: Click context.
        config_path: Path to YAML config file.

    Raises:
        click.ClickException: When the config cannot be loaded.
    """
    try:
        cfg = load_config(config_path)
    except (OSError, TypeError, ValueError) as e:
        raise click.ClickException(f"Invalid config {config_path}: {e}") from e
    ctx.obj = cfg


@cli.command("render")
@click.pass_context
def render_cmd(ctx: click.Context) -> None:
    """Render the configured queries.

    All parameters are read from the YAML config passed to the root command.

    Args:
        ctx: Click context.
    """
    runner = CommandRunner(ctx.obj)
    runner.run_render(action=ctx.command.name)
