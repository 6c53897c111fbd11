"""Scryfall API client.

Issues single GET requests against the Scryfall REST API and maps every
failure into the `FetchError` taxonomy. Requests are never retried.
"""

from __future__ import annotations

import threading
import time
from collections.abc import Callable
from typing import Any, Mapping, Optional, TypeVar

import requests

from CardSearch.core.errors import DecodeError, ServiceError, TransportError
from CardSearch.core.models import Card, ListPage
from CardSearch.search.base import SearchLike, as_search
from CardSearch.sources.scryfall.parser import parse_card, parse_error_body, parse_list_page
from CardSearch.utils.log import log

T = TypeVar("T")

SCRYFALL_API_URL = "https://api.scryfall.com"
DEFAULT_TIMEOUT = 30.0
# Scryfall asks clients to keep 50-100 ms between requests.
DEFAULT_REQUEST_INTERVAL = 0.1
DEFAULT_USER_AGENT = "card-search/0.1"

HEADERS = {
    "User-Agent": DEFAULT_USER_AGENT,
    "Accept": "application/json",
}


class ScryfallApiClient:
    """Low-level HTTP client for the Scryfall API.

    Responsible only for making network requests and decoding the JSON body.
    Mapping payloads to domain objects is delegated to `parser`.

    One client may be shared by several threads; only the spacing between
    requests is shared state.
    """

    def __init__(
        self,
        *,
        base_url: str = SCRYFALL_API_URL,
        timeout: float = DEFAULT_TIMEOUT,
        request_interval: float = DEFAULT_REQUEST_INTERVAL,
        user_agent: Optional[str] = None,
        session: Optional[requests.Session] = None,
    ) -> None:
        """Initialize the client with a reusable HTTP session.

        Args:
            base_url: API root, without a trailing slash.
            timeout: Request timeout in seconds.
            request_interval: Minimum seconds between two requests.
            user_agent: Overrides the default User-Agent header.
            session: Session to use instead of a new one.
        """
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.request_interval = max(0.0, request_interval)
        self._headers = dict(HEADERS)
        if user_agent:
            self._headers["User-Agent"] = user_agent
        self._session = session or requests.Session()
        self._lock = threading.Lock()
        self._last_request_at: Optional[float] = None

    def close(self) -> None:
        """Close the underlying HTTP session and release pooled connections."""
        self._session.close()

    def __enter__(self) -> ScryfallApiClient:
        """Enter context manager."""
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        """Exit context manager and close session."""
        self.close()

    def search_url(self, search: SearchLike) -> str:
        """Build the `/cards/search` URL for a search."""
        return self._url("/cards/search", as_search(search).query_string())

    def random_url(self, search: Optional[SearchLike] = None) -> str:
        """Build the `/cards/random` URL, optionally restricted by a search."""
        query = as_search(search).query_string() if search is not None else ""
        return self._url("/cards/random", query)

    def endpoint_url(self, path: str) -> str:
        """Join an API path onto the base URL."""
        return f"{self.base_url}/{path.lstrip('/')}"

    def fetch_json(self, url: str, params: Optional[Mapping[str, str]] = None) -> Any:
        """Perform one GET and decode the JSON body.

        Args:
            url: Absolute URL, possibly already carrying a query string.
            params: Extra query parameters.

        Returns:
            Decoded JSON body.

        Raises:
            TransportError: On connection problems, or a non-2xx response
                without a structured error body.
            ServiceError: On a non-2xx response with a structured error body.
            DecodeError: When a 2xx body is not valid JSON.
        """
        self._wait_turn()
        log.debug("Scryfall GET %s params=%s", url, dict(params) if params else {})
        try:
            resp = self._session.get(url, params=params, headers=self._headers, timeout=self.timeout)
        except requests.RequestException as e:
            log.debug("Scryfall request failed: %s", e)
            raise TransportError(f"Request failed: {e}", url=url) from e

        log.debug("Scryfall response: status=%s bytes=%s", resp.status_code, len(resp.content or b""))
        if not 200 <= resp.status_code < 300:
            raise self._error_for(resp, url)

        try:
            return resp.json()
        except ValueError as e:
            raise DecodeError(f"Response body is not valid JSON: {e}", url=url) from e

    def fetch_page(self, url: str, decode: Callable[[Mapping[str, Any]], T]) -> ListPage[T]:
        """Fetch one list page and decode its items.

        Decode failures of individual items fail the whole page.
        """
        payload = self.fetch_json(url)
        try:
            return parse_list_page(payload, decode)
        except DecodeError as e:
            e.url = e.url or url
            raise

    def fetch_card(self, url: str, params: Optional[Mapping[str, str]] = None) -> Card:
        """Fetch a single card object."""
        payload = self.fetch_json(url, params)
        try:
            return parse_card(payload)
        except DecodeError as e:
            e.url = e.url or url
            raise

    def _url(self, path: str, query: str) -> str:
        url = self.endpoint_url(path)
        return f"{url}?{query}" if query else url

    def _wait_turn(self) -> None:
        """Sleep until `request_interval` has passed since the previous request."""
        if self.request_interval <= 0:
            return
        with self._lock:
            now = time.monotonic()
            if self._last_request_at is not None:
                delay = self._last_request_at + self.request_interval - now
                if delay > 0:
                    time.sleep(delay)
                    now = time.monotonic()
            self._last_request_at = now

    @staticmethod
    def _error_for(resp: requests.Response, url: str) -> Exception:
        try:
            payload = resp.json()
        except ValueError:
            payload = None

        body = parse_error_body(payload)
        if body is None:
            return TransportError(f"HTTP {resp.status_code} without an error body", url=url)

        log.debug("Scryfall error: status=%s code=%s details=%s", body.status, body.code, body.details)
        return ServiceError(
            status=body.status,
            code=body.code,
            details=body.details,
            type=body.type,
            warnings=body.warnings,
            url=url,
        )
