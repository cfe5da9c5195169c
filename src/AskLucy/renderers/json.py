"""JSON output of rendered queries.

Provides JsonFileWriter, which accumulates rendered queries and writes them
as one JSON document when the command finishes.
"""

from __future__ import annotations

import json
from datetime import datetime
from pathlib import Path

from AskLucy.renderers.base import OutputWriter
from AskLucy.utils.log import log


def render_json(name: str | None, rendered: str) -> dict:
    """Render one query into a JSON-serializable object."""
    return {"name": name, "query": rendered}


class JsonFileWriter(OutputWriter):
    """Accumulate rendered queries and write to JSON file on finalize."""

    def __init__(self, base_dir: str) -> None:
        """Initialize JSON writer.

        Args:
            base_dir: Base output directory.
        """
        self.output_dir = Path(base_dir) / "json"
        self.all_results: list[dict] = []

    def write_query(self, name: str | None, rendered: str) -> None:
        """Accumulate a rendered query for later writing."""
        self.all_results.append(render_json(name, rendered))

    def finalize(self, action: str) -> Path:
        """Write accumulated queries to a JSON file.

        Args:
            action: The CLI command name (used in filename).

        Returns:
            Path of the written file.
        """
        payload = json.dumps(self.all_results, ensure_ascii=False, indent=2)
        self.output_dir.mkdir(parents=True, exist_ok=True)
        timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
        output_path = self.output_dir / f"{action}_{timestamp}.json"
        output_path.write_text(payload, encoding="utf-8")
        log.info("JSON saved to %s", output_path)
        return output_path
