from __future__ import annotations

"""Public configuration API for AskLucy."""

from AskLucy.config.app import (
    AppConfig,
    load_config,
    load_config_with_defaults,
    parse_config_dict,
)
from AskLucy.config.output import OutputConfig
from AskLucy.config.queries import NamedQuery
from AskLucy.config.render import RenderConfig
from AskLucy.config.runtime import RuntimeConfig

__all__ = [
    "RuntimeConfig",
    "RenderConfig",
    "OutputConfig",
    "NamedQuery",
    "AppConfig",
    "load_config",
    "load_config_with_defaults",
    "parse_config_dict",
]
