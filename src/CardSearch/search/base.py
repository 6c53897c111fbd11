"""The `Search` contract: anything that can be rendered as the query string of
a card search request.

`Query` and `SearchOptions` implement it. Plain strings are accepted wherever
a `Search` is expected and are treated as raw query text in the service's own
syntax (see `as_search`).
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Union
from urllib.parse import urlencode

if TYPE_CHECKING:
    from CardSearch.core.models import Card
    from CardSearch.sources.scryfall.client import ScryfallApiClient
    from CardSearch.sources.scryfall.pagination import ListIter


class Search(ABC):
    """Base class for objects that render into a search query string."""

    @abstractmethod
    def query_pairs(self) -> list[tuple[str, str]]:
        """Return the query parameters as ordered key/value pairs."""

    def query_string(self) -> str:
        """Render the URL query string (without the leading `?`).

        Values are percent-encoded exactly once, with spaces as `+`.
        """
        return urlencode(self.query_pairs())

    def search(self, client: ScryfallApiClient | None = None) -> ListIter[Card]:
        """Run this search and lazily iterate over all matching cards.

        Args:
            client: Client to use; a default client is created when omitted.

        Returns:
            Lazy iterator over every matching card.
        """
        from CardSearch.services.search import CardSearchService

        return CardSearchService.with_client(client).search(self)

    def search_all(self, client: ScryfallApiClient | None = None) -> list[Card]:
        """Run this search and collect every matching card into a list.

        A client created here is closed before returning.
        """
        from CardSearch.services.search import CardSearchService

        if client is not None:
            return CardSearchService(client).search_all(self)
        with CardSearchService.with_client() as service:
            return service.search_all(self)

    def random(self, client: ScryfallApiClient | None = None) -> Card:
        """Fetch one random card matching this search."""
        from CardSearch.services.search import CardSearchService

        if client is not None:
            return CardSearchService(client).random(self)
        with CardSearchService.with_client() as service:
            return service.random(self)


SearchLike = Union[Search, str]


def as_search(value: SearchLike) -> Search:
    """Coerce a raw query string into a `Search`.

    Args:
        value: A `Search`, or query text in the service's syntax.

    Returns:
        The same `Search`, or a raw-text `Query` leaf for strings.

    Raises:
        TypeError: For any other type.
    """
    if isinstance(value, Search):
        return value
    if isinstance(value, str):
        from CardSearch.search.query import Query

        return Query.custom(value)
    raise TypeError(f"Expected a Search or str, got {type(value).__name__}")
