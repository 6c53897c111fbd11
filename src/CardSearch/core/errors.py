"""Error taxonomy for talking to the card catalog service.

Every failure of a fetch is one of three kinds so callers can tell "the
network broke" apart from "the service rejected the request" and from "the
response did not have the expected shape".
"""

from __future__ import annotations

from typing import Sequence


class CardSearchError(Exception):
    """Base class for all CardSearch errors."""


class FetchError(CardSearchError):
    """A single GET against the catalog service failed."""

    def __init__(self, message: str, *, url: str | None = None) -> None:
        super().__init__(message)
        self.url = url


class TransportError(FetchError):
    """Network or connection failure, or a non-2xx response without an error body."""


class ServiceError(FetchError):
    """The service answered with a structured error object.

    Attributes:
        status: HTTP status reported in the error body.
        code: Machine-readable error code (e.g. `not_found`, `bad_request`).
        details: Human-readable explanation from the service.
        type: Optional error subtype (e.g. `ambiguous`).
        warnings: Non-fatal problems the service found in the query.
    """

    def __init__(
        self,
        *,
        status: int,
        code: str,
        details: str,
        type: str | None = None,  # noqa: A002 - mirrors the wire field name
        warnings: Sequence[str] = (),
        url: str | None = None,
    ) -> None:
        super().__init__(f"{status} {code}: {details}", url=url)
        self.status = status
        self.code = code
        self.details = details
        self.type = type
        self.warnings = tuple(warnings)


class DecodeError(FetchError):
    """The response body is not valid JSON or does not match the expected shape."""
