from __future__ import annotations

"""Public configuration API for CardSearch."""

from CardSearch.config.api import ApiConfig
from CardSearch.config.app import (
    AppConfig,
    load_config,
    load_config_with_defaults,
    parse_config_dict,
)
from CardSearch.config.output import OutputConfig
from CardSearch.config.runtime import RuntimeConfig
from CardSearch.config.search import SearchConfig, build_options

__all__ = [
    "RuntimeConfig",
    "ApiConfig",
    "SearchConfig",
    "OutputConfig",
    "AppConfig",
    "build_options",
    "load_config",
    "load_config_with_defaults",
    "parse_config_dict",
]
