"""Command implementations for CardSearch CLI.

Encapsulates what each command does, separated from CLI parameter handling
and output formatting.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from CardSearch.config import AppConfig, build_options
from CardSearch.renderers import OutputWriter
from CardSearch.services.search import CardSearchService
from CardSearch.utils.log import log


@dataclass(slots=True)
class SearchCommand:
    """Run a full-text search and write every matching card."""

    config: AppConfig
    search_service: CardSearchService
    output_writer: OutputWriter
    query: str
    limit: Optional[int] = None

    def execute(self) -> None:
        options = build_options(self.config.search, self.query)
        limit = self.limit if self.limit is not None else self.config.search.max_results
        log.debug("Search options: %s limit=%s", options.query_string(), limit)
        cards = self.search_service.search_all(options, limit=limit)
        log.info("Fetched %d cards", len(cards))
        self.output_writer.write_result(cards, self.query)


@dataclass(slots=True)
class RandomCommand:
    """Pick one random card, optionally restricted by a query."""

    config: AppConfig
    search_service: CardSearchService
    output_writer: OutputWriter
    query: Optional[str] = None

    def execute(self) -> None:
        search = build_options(self.config.search, self.query) if self.query else None
        card = self.search_service.random(search)
        self.output_writer.write_result([card], self.query or "random")


@dataclass(slots=True)
class NamedCommand:
    """Look up a single card by name."""

    search_service: CardSearchService
    output_writer: OutputWriter
    name: str
    fuzzy: bool = False
    set_code: Optional[str] = None

    def execute(self) -> None:
        card = self.search_service.named(self.name, fuzzy=self.fuzzy, set_code=self.set_code)
        self.output_writer.write_result([card], self.name)
