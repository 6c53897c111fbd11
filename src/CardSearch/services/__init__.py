"""Card service layer for CardSearch.

Provides the card lookup service and a factory that wires it to a client
built from configuration.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from CardSearch.services.search import CardSearchService

if TYPE_CHECKING:
    from CardSearch.config import AppConfig


def create_search_service(config: AppConfig) -> CardSearchService:
    """Create a card service whose client uses the configured API settings.

    Args:
        config: Application configuration containing the `api` section.

    Returns:
        Configured CardSearchService instance.
    """
    from CardSearch.sources.scryfall.client import ScryfallApiClient

    client = ScryfallApiClient(
        base_url=config.api.base_url,
        timeout=config.api.timeout,
        request_interval=config.api.request_interval,
        user_agent=config.api.user_agent,
    )
    return CardSearchService(client=client)


__all__ = [
    "CardSearchService",
    "create_search_service",
]
