"""Request options for card searches.

`SearchOptions` wraps a `Query` with sorting, uniqueness and inclusion
settings. Options left unset are omitted from the query string so the
service's own defaults apply.

    SearchOptions().query(exact("Black Lotus")).unique(UniqueStrategy.PRINTS).sorted(
        SortMethod.RELEASED, SortDirection.ASCENDING
    ).query_string()
    -> 'q=%21%22Black+Lotus%22&order=released&dir=asc&unique=prints'
"""

from __future__ import annotations

from enum import Enum
from typing import Optional

from CardSearch.search.base import Search
from CardSearch.search.query import Query, QueryLike, as_query


class SortMethod(Enum):
    """Field the result list is ordered by (`order`)."""

    NAME = "name"
    SET = "set"
    RELEASED = "released"
    RARITY = "rarity"
    COLOR = "color"
    USD = "usd"
    TIX = "tix"
    EUR = "eur"
    CMC = "cmc"
    POWER = "power"
    TOUGHNESS = "toughness"
    EDHREC = "edhrec"
    PENNY = "penny"
    ARTIST = "artist"
    REVIEW = "review"


class SortDirection(Enum):
    """Direction of the sort (`dir`)."""

    ASCENDING = "asc"
    DESCENDING = "desc"


class UniqueStrategy(Enum):
    """How duplicate printings are rolled up (`unique`).

    - CARDS: one result per card, reprints removed (service default)
    - ART: one result per unique illustration
    - PRINTS: every printing
    """

    CARDS = "cards"
    ART = "art"
    PRINTS = "prints"


class SearchOptions(Search):
    """Mutable builder for an advanced search.

    Every setter returns the same object so calls can be chained. Rendering
    never changes the object.
    """

    def __init__(self) -> None:
        self._query: Optional[Query] = None
        self._order: Optional[SortMethod] = None
        self._direction: Optional[SortDirection] = None
        self._unique: Optional[UniqueStrategy] = None
        self._include_extras = False
        self._include_multilingual = False
        self._include_variations = False
        self._page: Optional[int] = None

    def query(self, query: QueryLike) -> SearchOptions:
        self._query = as_query(query)
        return self

    def sort(self, method: SortMethod) -> SearchOptions:
        self._order = method
        return self

    def direction(self, direction: SortDirection) -> SearchOptions:
        self._direction = direction
        return self

    def sorted(self, method: SortMethod, direction: SortDirection = SortDirection.ASCENDING) -> SearchOptions:
        """Set sort method and direction together."""
        self._order = method
        self._direction = direction
        return self

    def unique(self, strategy: UniqueStrategy) -> SearchOptions:
        self._unique = strategy
        return self

    def extras(self, include: bool = True) -> SearchOptions:
        """Include tokens, planes, emblems and other extra cards."""
        self._include_extras = include
        return self

    def multilingual(self, include: bool = True) -> SearchOptions:
        """Include printings in every language, not only English."""
        self._include_multilingual = include
        return self

    def variations(self, include: bool = True) -> SearchOptions:
        """Include rare printing variations (e.g. misprints)."""
        self._include_variations = include
        return self

    def page(self, page: int) -> SearchOptions:
        """Start at this page of results (1-based)."""
        if isinstance(page, bool) or not isinstance(page, int) or page < 1:
            raise ValueError("page must be a positive integer")
        self._page = page
        return self

    def get_query(self) -> Optional[Query]:
        return self._query

    def query_pairs(self) -> list[tuple[str, str]]:
        pairs: list[tuple[str, str]] = []
        if self._query is not None:
            pairs.append(("q", self._query.render()))
        if self._order is not None:
            pairs.append(("order", self._order.value))
        if self._direction is not None:
            pairs.append(("dir", self._direction.value))
        if self._unique is not None:
            pairs.append(("unique", self._unique.value))
        if self._include_extras:
            pairs.append(("include_extras", "true"))
        if self._include_multilingual:
            pairs.append(("include_multilingual", "true"))
        if self._include_variations:
            pairs.append(("include_variations", "true"))
        if self._page is not None:
            pairs.append(("page", str(self._page)))
        return pairs

    def __repr__(self) -> str:
        return f"SearchOptions({self.query_string()!r})"
