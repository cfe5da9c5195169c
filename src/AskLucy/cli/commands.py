"""Command implementations for the AskLucy CLI.

Encapsulates the render logic, separated from CLI parameter handling and
output formatting.
"""

from __future__ import annotations

from dataclasses import dataclass

from AskLucy.config import AppConfig
from AskLucy.renderers import OutputWriter
from AskLucy.utils.log import log


@dataclass(slots=True)
class RenderCommand:
    """Render every configured query and hand the text to the output writer."""

    config: AppConfig
    output_writer: OutputWriter

    def execute(self) -> int:
        """Render all configured queries.

        Returns:
            Number of queries rendered.
        """
        total = len(self.config.queries)
        for idx, named in enumerate(self.config.queries, start=1):
            log.debug("Rendering query %d/%d name=%s clauses=%d", idx, total, named.name, len(named.query))
            rendered = named.query.render()
            if not rendered:
                log.warning("Query %d/%d (%s) rendered empty", idx, total, named.name or "unnamed")
            self.output_writer.write_query(named.name, rendered)
        return total
