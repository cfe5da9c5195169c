"""Render domain configuration."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping

from AskLucy.config.common import expect_bool, get_optional_value, get_section


@dataclass(frozen=True, slots=True)
class RenderConfig:
    """Store rendering options applied to every configured clause.

    Attributes:
        escape: Backslash-escape Lucene special characters in clause text.
    """

    escape: bool = False


def load_render(raw: Mapping[str, Any]) -> RenderConfig:
    """Load the optional ``render`` section.

    Raises:
        TypeError: If config types are invalid.
    """
    section = get_section(raw, "render", required=False)
    return RenderConfig(escape=expect_bool(get_optional_value(section, "escape", False), "render.escape"))
