"""Command runner for coordinating CLI execution.

Manages logging configuration, component creation and error handling for
command execution.
"""

from __future__ import annotations

import click

from AskLucy.cli.commands import RenderCommand
from AskLucy.config import AppConfig
from AskLucy.renderers import create_output_writer
from AskLucy.utils.log import configure_logging, log


class CommandRunner:
    """Orchestrates command execution."""

    def __init__(self, config: AppConfig) -> None:
        """Initialize command runner.

        Args:
            config: Application configuration.
        """
        self.config = config

    def run_render(self, action: str) -> None:
        """Execute the render command.

        Args:
            action: The CLI command name (e.g., 'render').

        Raises:
            click.Abort: When rendering fails.
        """
        configure_logging(
            level=self.config.runtime.level,
            action=action,
            log_to_file=self.config.runtime.to_file,
            log_dir=self.config.runtime.dir,
        )
        try:
            output_writer = create_output_writer(self.config)
            command = RenderCommand(config=self.config, output_writer=output_writer)
            count = command.execute()
            output_writer.finalize(action)
            log.debug("Rendered %d queries", count)
        except Exception as e:  # noqa: BLE001 - cli boundary
            log.error("Render failed: %s", e)
            raise click.Abort from e
