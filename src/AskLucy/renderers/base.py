"""Base classes for output writers.

Separates where rendered queries go from how the command produces them.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Sequence


class OutputWriter(ABC):
    """Abstract base class for command output writers."""

    @abstractmethod
    def write_query(self, name: str | None, rendered: str) -> None:
        """Write one rendered query.

        Args:
            name: Optional configured query name.
            rendered: Query text produced by the clause renderer.
        """

    @abstractmethod
    def finalize(self, action: str) -> None:
        """Finalize output (e.g., write accumulated results to file).

        Args:
            action: The CLI command name (e.g., 'render').
        """


@dataclass(slots=True)
class MultiOutputWriter(OutputWriter):
    """Delegate output to multiple writers."""

    writers: Sequence[OutputWriter]

    def write_query(self, name: str | None, rendered: str) -> None:
        """Send a rendered query to all writers."""
        for writer in self.writers:
            writer.write_query(name, rendered)

    def finalize(self, action: str) -> None:
        """Finalize all writers."""
        for writer in self.writers:
            writer.finalize(action)
