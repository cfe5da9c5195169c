"""Output writers for rendered queries.

The module exports the OutputWriter base for new output formats, and a
factory function to instantiate writers based on configuration.
"""

from __future__ import annotations

from AskLucy.config import AppConfig
from AskLucy.renderers.base import MultiOutputWriter, OutputWriter
from AskLucy.renderers.console import ConsoleOutputWriter, render_text
from AskLucy.renderers.json import JsonFileWriter, render_json


def create_output_writer(config: AppConfig) -> OutputWriter:
    """Create output writer based on config.

    Args:
        config: Application configuration.

    Returns:
        A writer fanning out to every configured format.

    Raises:
        ValueError: If no known format is configured.
    """
    writers: list[OutputWriter] = []
    if "console" in config.output.formats:
        writers.append(ConsoleOutputWriter())
    if "json" in config.output.formats:
        writers.append(JsonFileWriter(config.output.base_dir))

    if not writers:
        raise ValueError("No output writers configured")
    return MultiOutputWriter(writers)


__all__ = [
    "OutputWriter",
    "ConsoleOutputWriter",
    "JsonFileWriter",
    "MultiOutputWriter",
    "render_json",
    "render_text",
    "create_output_writer",
]
