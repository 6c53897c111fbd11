"""API domain configuration (endpoint, timeouts, request pacing)."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Any, Mapping, Optional
from urllib.parse import urlparse

from CardSearch.config.common import (
    check_non_empty,
    expect_float,
    expect_optional_str,
    expect_str,
    get_optional_value,
    get_required_value,
    get_section,
)


@dataclass(frozen=True, slots=True)
class ApiConfig:
    """Store validated settings for the Scryfall client.

    `user_agent` is resolved from the environment variable named by
    `user_agent_env` when that variable is set, else taken from the file.
    """

    base_url: str
    timeout: float
    request_interval: float
    user_agent: Optional[str]
    user_agent_env: str


def load_api(raw: Mapping[str, Any]) -> ApiConfig:
    """Load api domain config from raw mapping.

    Args:
        raw: Root configuration mapping.

    Returns:
        Parsed API configuration.

    Raises:
        TypeError: If config types are invalid.
        ValueError: If required keys are missing.
    """
    section = get_section(raw, "api", required=True)
    user_agent_env = expect_str(
        get_optional_value(section, "user_agent_env", "CARDSEARCH_USER_AGENT"),
        "api.user_agent_env",
    )
    user_agent = _load_from_env(user_agent_env) or expect_optional_str(
        get_optional_value(section, "user_agent", None),
        "api.user_agent",
    )
    return ApiConfig(
        base_url=expect_str(get_required_value(section, "base_url", "api.base_url"), "api.base_url"),
        timeout=expect_float(get_required_value(section, "timeout", "api.timeout"), "api.timeout"),
        request_interval=expect_float(
            get_optional_value(section, "request_interval", 0.1),
            "api.request_interval",
        ),
        user_agent=user_agent,
        user_agent_env=user_agent_env,
    )


def check_api(config: ApiConfig) -> None:
    """Validate api domain constraints.

    Raises:
        ValueError: If values violate API constraints.
    """
    check_non_empty(config.base_url, "api.base_url")
    parsed = urlparse(config.base_url)
    if parsed.scheme not in {"http", "https"} or not parsed.netloc:
        raise ValueError("api.base_url must be an http(s) URL")
    if config.timeout <= 0:
        raise ValueError("api.timeout must be positive")
    if config.request_interval < 0:
        raise ValueError("api.request_interval must be >= 0")
    if config.user_agent is not None:
        check_non_empty(config.user_agent, "api.user_agent")


def _load_from_env(name: str) -> str:
    """Read an environment variable, stripped; empty when unset."""
    if not name.strip():
        return ""
    return os.getenv(name, "").strip()
