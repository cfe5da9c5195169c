"""CLI package for AskLucy command orchestration."""

from __future__ import annotations

__all__ = ["CommandRunner", "main"]

from dotenv import find_dotenv, load_dotenv

from AskLucy.cli.runner import CommandRunner
from AskLucy.cli.ui import cli


def main() -> None:
    """Run AskLucy CLI.

    Entry point referenced by console script in pyproject.toml. A ``.env``
    file in the working directory is loaded first, so it can set
    ``ASKLUCY_CONFIG``; variables already in the environment win.
    """
    load_dotenv(find_dotenv(usecwd=True))
    cli()
