"""Lazy iteration over paginated list endpoints.

`ListIter` flattens a chain of list pages into a single forward sequence of
items. Pages are fetched on demand: the next page is requested only after the
items of the current page have all been handed out.

A failed fetch is raised from the `__next__` call that needed the page. The
error is raised once; afterwards the iterator is exhausted and keeps raising
`StopIteration`.
"""

from __future__ import annotations

from collections import deque
from collections.abc import Callable
from enum import Enum
from typing import Iterator, Optional, Sequence, TypeVar

from CardSearch.core.models import ListPage
from CardSearch.utils.log import log

T = TypeVar("T")

PageFetcher = Callable[[str], ListPage[T]]


class _State(Enum):
    FRESH = "fresh"
    DRAINING = "draining"
    EXHAUSTED = "exhausted"


class ListIter(Iterator[T]):
    """Demand-driven iterator over every item of a paginated list.

    Args:
        fetch_page: Fetches and decodes the page at a URL.
        root_url: URL of the first page.
    """

    def __init__(self, fetch_page: PageFetcher[T], root_url: str) -> None:
        self._fetch_page = fetch_page
        self._state = _State.FRESH
        self._next_url: Optional[str] = root_url
        self._buffer: deque[T] = deque()
        self._pages_fetched = 0
        self._total_cards: Optional[int] = None
        self._warnings: tuple[str, ...] = ()

    @property
    def total_cards(self) -> Optional[int]:
        """Total match count reported by the most recent page, if any."""
        return self._total_cards

    @property
    def warnings(self) -> Sequence[str]:
        """Warnings reported by the most recent page."""
        return self._warnings

    @property
    def pages_fetched(self) -> int:
        return self._pages_fetched

    @property
    def exhausted(self) -> bool:
        return self._state is _State.EXHAUSTED

    def __iter__(self) -> ListIter[T]:
        return self

    def __next__(self) -> T:
        while True:
            if self._state is _State.EXHAUSTED:
                raise StopIteration

            if self._state is _State.DRAINING and self._buffer:
                return self._buffer.popleft()

            if self._next_url is None:
                self._state = _State.EXHAUSTED
                raise StopIteration

            self._load(self._next_url)

    def _load(self, url: str) -> None:
        """Fetch the page at `url` into the buffer.

        Any fetch error leaves the iterator exhausted and is re-raised.
        """
        try:
            page = self._fetch_page(url)
        except Exception:
            self._state = _State.EXHAUSTED
            self._next_url = None
            self._buffer.clear()
            raise

        self._pages_fetched += 1
        self._total_cards = page.total_cards
        self._warnings = tuple(page.warnings)
        self._buffer.extend(page.data)
        self._next_url = page.next_url
        self._state = _State.DRAINING
        log.debug(
            "Fetched page %d: items=%d has_more=%s",
            self._pages_fetched,
            len(page.data),
            page.has_more,
        )

    def __repr__(self) -> str:
        return (
            f"ListIter(state={self._state.value}, buffered={len(self._buffer)}, "
            f"pages_fetched={self._pages_fetched})"
        )
