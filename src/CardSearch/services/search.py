"""Card lookup service built on the Scryfall client."""

from __future__ import annotations

from dataclasses import dataclass
from itertools import islice
from typing import Optional, Union
from uuid import UUID

from CardSearch.core.catalog import SetCode
from CardSearch.core.models import Card
from CardSearch.search.base import SearchLike
from CardSearch.sources.scryfall.client import ScryfallApiClient
from CardSearch.sources.scryfall.pagination import ListIter
from CardSearch.sources.scryfall.parser import parse_card
from CardSearch.utils.log import log


@dataclass(slots=True)
class CardSearchService:
    """Application service for searching and looking up cards."""

    client: ScryfallApiClient

    @classmethod
    def with_client(cls, client: ScryfallApiClient | None = None) -> CardSearchService:
        """Wrap `client`, or a client with default settings when omitted."""
        return cls(client=client or ScryfallApiClient())

    def search(self, search: SearchLike) -> ListIter[Card]:
        """Lazily iterate over every card matching `search`.

        No request is made until the first item is pulled.
        """
        url = self.client.search_url(search)
        log.debug("Card search: %s", url)
        return ListIter(lambda page_url: self.client.fetch_page(page_url, parse_card), url)

    def search_all(self, search: SearchLike, limit: Optional[int] = None) -> list[Card]:
        """Collect matching cards into a list.

        Args:
            search: Query, options or raw query text.
            limit: Stop after this many cards; None collects everything.

        Returns:
            Cards in service order.

        Raises:
            FetchError: The first fetch failure; cards gathered before it are discarded.
        """
        if limit is not None and limit < 0:
            raise ValueError("limit must be non-negative")
        results = self.search(search)
        cards = list(results if limit is None else islice(results, limit))
        log.info(
            "Card search completed: count=%d total=%s pages=%d",
            len(cards),
            results.total_cards,
            results.pages_fetched,
        )
        return cards

    def random(self, search: Optional[SearchLike] = None) -> Card:
        """Fetch one random card, optionally restricted by `search`."""
        return self.client.fetch_card(self.client.random_url(search))

    def named(self, name: str, *, fuzzy: bool = False, set_code: Union[SetCode, str, None] = None) -> Card:
        """Fetch a card by name.

        Args:
            name: Exact card name, or a fragment when `fuzzy` is set.
            fuzzy: Let the service resolve partial or misspelled names.
            set_code: Restrict to a printing from this set.

        Raises:
            ServiceError: `not_found`, or `ambiguous` for fuzzy names that match several cards.
        """
        if not name or not name.strip():
            raise ValueError("name must be a non-empty string")
        params = {"fuzzy" if fuzzy else "exact": name}
        if set_code is not None:
            params["set"] = str(set_code if isinstance(set_code, SetCode) else SetCode(set_code))
        return self.client.fetch_card(self.client.endpoint_url("/cards/named"), params)

    def by_id(self, card_id: Union[UUID, str]) -> Card:
        """Fetch a printing by its Scryfall id."""
        return self._by_path("/cards", str(UUID(str(card_id))))

    def by_multiverse_id(self, multiverse_id: int) -> Card:
        return self._by_path("/cards/multiverse", _expect_id(multiverse_id, "multiverse_id"))

    def by_mtgo_id(self, mtgo_id: int) -> Card:
        return self._by_path("/cards/mtgo", _expect_id(mtgo_id, "mtgo_id"))

    def by_arena_id(self, arena_id: int) -> Card:
        return self._by_path("/cards/arena", _expect_id(arena_id, "arena_id"))

    def by_tcgplayer_id(self, tcgplayer_id: int) -> Card:
        return self._by_path("/cards/tcgplayer", _expect_id(tcgplayer_id, "tcgplayer_id"))

    def close(self) -> None:
        """Close the client and release its connections."""
        self.client.close()

    def __enter__(self) -> CardSearchService:
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()

    def _by_path(self, prefix: str, key: str) -> Card:
        return self.client.fetch_card(self.client.endpoint_url(f"{prefix}/{key}"))


def _expect_id(value: int, name: str) -> str:
    if isinstance(value, bool) or not isinstance(value, int) or value < 0:
        raise ValueError(f"{name} must be a non-negative integer")
    return str(value)
