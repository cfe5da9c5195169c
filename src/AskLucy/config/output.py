"""Output domain configuration."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping

from AskLucy.config.common import (
    expect_str,
    expect_str_list,
    get_optional_value,
    get_section,
)

_ALLOWED_FORMATS = {"console", "json"}


@dataclass(frozen=True, slots=True)
class OutputConfig:
    """Output configuration."""

    base_dir: str = "output"
    formats: tuple[str, ...] = ("console",)


def load_output(raw: Mapping[str, Any]) -> OutputConfig:
    """Load output domain config from raw mapping.

    Args:
        raw: Root configuration mapping.

    Returns:
        Parsed output configuration.

    Raises:
        TypeError: If config types are invalid.
    """
    section = get_section(raw, "output", required=False)
    formats = tuple(
        item.strip().lower()
        for item in expect_str_list(get_optional_value(section, "formats", ["console"]), "output.formats")
    )
    return OutputConfig(
        base_dir=expect_str(get_optional_value(section, "base_dir", "output"), "output.base_dir"),
        formats=formats,
    )


def check_output(config: OutputConfig) -> None:
    """Validate output domain constraints.

    Raises:
        ValueError: If values violate output constraints.
    """
    if not config.formats:
        raise ValueError("output.formats must include at least one format")

    unknown = set(config.formats) - _ALLOWED_FORMATS
    if unknown:
        raise ValueError(f"output.formats has unknown formats: {sorted(unknown)}")

    if "json" in config.formats and not config.base_dir.strip():
        raise ValueError("output.base_dir must not be empty")
