"""Search domain configuration: default options applied to every search."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Mapping, Optional, TypeVar

from CardSearch.config.common import (
    expect_bool,
    expect_optional_int,
    expect_optional_str,
    get_optional_value,
    get_section,
)
from CardSearch.search.options import SearchOptions, SortDirection, SortMethod, UniqueStrategy
from CardSearch.search.query import QueryLike

E = TypeVar("E", bound=Enum)


@dataclass(frozen=True, slots=True)
class SearchConfig:
    """Store validated default search options.

    Attributes:
        order: Default sort method, or None for the service default.
        direction: Default sort direction, or None for the service default.
        unique: Default uniqueness strategy, or None for the service default.
        include_extras: Include extra cards such as tokens.
        include_multilingual: Include non-English printings.
        include_variations: Include rare printing variations.
        max_results: Stop collecting after this many cards; None for all.
    """

    order: Optional[SortMethod]
    direction: Optional[SortDirection]
    unique: Optional[UniqueStrategy]
    include_extras: bool
    include_multilingual: bool
    include_variations: bool
    max_results: Optional[int]


def load_search(raw: Mapping[str, Any]) -> SearchConfig:
    """Load search domain config from raw mapping.

    Args:
        raw: Root configuration mapping.

    Returns:
        Parsed search configuration.

    Raises:
        TypeError: If config types are invalid.
        ValueError: If an option names an unknown value.
    """
    section = get_section(raw, "search", required=False)
    return SearchConfig(
        order=_parse_enum(SortMethod, get_optional_value(section, "order", None), "search.order"),
        direction=_parse_enum(SortDirection, get_optional_value(section, "direction", None), "search.direction"),
        unique=_parse_enum(UniqueStrategy, get_optional_value(section, "unique", None), "search.unique"),
        include_extras=expect_bool(
            get_optional_value(section, "include_extras", False),
            "search.include_extras",
        ),
        include_multilingual=expect_bool(
            get_optional_value(section, "include_multilingual", False),
            "search.include_multilingual",
        ),
        include_variations=expect_bool(
            get_optional_value(section, "include_variations", False),
            "search.include_variations",
        ),
        max_results=expect_optional_int(
            get_optional_value(section, "max_results", None),
            "search.max_results",
        ),
    )


def check_search(config: SearchConfig) -> None:
    """Validate search domain constraints.

    Raises:
        ValueError: If values violate search constraints.
    """
    if config.max_results is not None and config.max_results <= 0:
        raise ValueError("search.max_results must be positive")
    if config.direction is not None and config.order is None:
        raise ValueError("search.direction requires search.order")


def build_options(config: SearchConfig, query: QueryLike) -> SearchOptions:
    """Build `SearchOptions` for `query` with the configured defaults applied."""
    options = SearchOptions().query(query)
    if config.order is not None:
        options.sort(config.order)
    if config.direction is not None:
        options.direction(config.direction)
    if config.unique is not None:
        options.unique(config.unique)
    if config.include_extras:
        options.extras()
    if config.include_multilingual:
        options.multilingual()
    if config.include_variations:
        options.variations()
    return options


def _parse_enum(enum_type: type[E], value: Any, config_key: str) -> Optional[E]:
    """Parse an enum member from its wire value, e.g. `released` -> SortMethod.RELEASED."""
    text = expect_optional_str(value, config_key)
    if text is None:
        return None
    try:
        return enum_type(text.strip().lower())
    except ValueError:
        allowed = sorted(member.value for member in enum_type)
        raise ValueError(f"{config_key} must be one of {allowed}") from None
