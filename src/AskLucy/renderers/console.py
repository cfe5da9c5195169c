"""Console output of rendered queries."""

from __future__ import annotations

from AskLucy.renderers.base import OutputWriter
from AskLucy.utils.log import log


def render_text(name: str | None, rendered: str) -> str:
    """Format one rendered query as a console line."""
    if name:
        return f"{name}: {rendered}"
    return rendered


class ConsoleOutputWriter(OutputWriter):
    """Write rendered queries to console via logging."""

    def write_query(self, name: str | None, rendered: str) -> None:
        log.info(render_text(name, rendered))

    def finalize(self, action: str) -> None:
        """No-op for console output."""
