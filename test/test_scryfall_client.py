"""Tests for the Scryfall HTTP client error mapping."""

from __future__ import annotations

import json
import sys
import unittest
from pathlib import Path
from typing import Any
from unittest import mock

import requests

REPO_ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(REPO_ROOT / "src"))

from CardSearch.core.errors import DecodeError, FetchError, ServiceError, TransportError
from CardSearch.search import SearchOptions, UniqueStrategy, cmc, name
from CardSearch.sources.scryfall.client import ScryfallApiClient
from CardSearch.sources.scryfall.parser import parse_card


class _StubResponse:
    def __init__(self, status_code: int, body: Any = None, *, text: str | None = None) -> None:
        self.status_code = status_code
        self.content = (text if text is not None else json.dumps(body)).encode("utf-8")

    def json(self) -> Any:
        return json.loads(self.content.decode("utf-8"))


class _StubSession:
    def __init__(self, responses: list[Any]) -> None:
        self.responses = list(responses)
        self.calls: list[dict[str, Any]] = []
        self.closed = False

    def get(self, url: str, *, params=None, headers=None, timeout=None) -> _StubResponse:
        self.calls.append({"url": url, "params": params, "headers": headers, "timeout": timeout})
        response = self.responses.pop(0)
        if isinstance(response, Exception):
            raise response
        return response

    def close(self) -> None:
        self.closed = True


def _client(responses: list[Any], **kwargs: Any) -> tuple[ScryfallApiClient, _StubSession]:
    session = _StubSession(responses)
    return ScryfallApiClient(session=session, request_interval=0, **kwargs), session


_CARD = {"object": "card", "id": "c1", "name": "Yargle, Glutton of Urborg", "cmc": 5.0}


class TestScryfallUrls(unittest.TestCase):
    def test_search_url(self) -> None:
        client, _ = _client([])
        url = client.search_url(cmc(4) & name("Yargle"))
        self.assertEqual(url, "https://api.scryfall.com/cards/search?q=%28cmc%3A4+AND+name%3A%22Yargle%22%29")

    def test_search_url_with_raw_text(self) -> None:
        client, _ = _client([], base_url="https://example.test/")
        self.assertEqual(client.search_url("t:goblin"), "https://example.test/cards/search?q=t%3Agoblin")

    def test_random_url(self) -> None:
        client, _ = _client([])
        self.assertEqual(client.random_url(), "https://api.scryfall.com/cards/random")
        options = SearchOptions().query(cmc(1)).unique(UniqueStrategy.ART)
        self.assertEqual(client.random_url(options), "https://api.scryfall.com/cards/random?q=cmc%3A1&unique=art")


class TestScryfallFetch(unittest.TestCase):
    def test_success_returns_json(self) -> None:
        client, session = _client([_StubResponse(200, {"object": "list", "data": []})], user_agent="tests/1.0")
        self.assertEqual(client.fetch_json("https://api.scryfall.com/x"), {"object": "list", "data": []})
        self.assertEqual(session.calls[0]["headers"]["User-Agent"], "tests/1.0")
        self.assertEqual(session.calls[0]["headers"]["Accept"], "application/json")

    def test_network_failure_is_transport_error(self) -> None:
        client, _ = _client([requests.ConnectionError("refused")])
        with self.assertRaises(TransportError) as ctx:
            client.fetch_json("https://api.scryfall.com/x")
        self.assertEqual(ctx.exception.url, "https://api.scryfall.com/x")
        self.assertIsInstance(ctx.exception, FetchError)

    def test_error_body_is_service_error(self) -> None:
        body = {
            "object": "error",
            "status": 400,
            "code": "bad_request",
            "details": "All of your terms were ignored.",
            "warnings": ["Invalid expression \"foo:bar\" was ignored."],
        }
        client, _ = _client([_StubResponse(400, body)])
        with self.assertRaises(ServiceError) as ctx:
            client.fetch_json("https://api.scryfall.com/cards/search?q=foo%3Abar")
        error = ctx.exception
        self.assertEqual(error.status, 400)
        self.assertEqual(error.code, "bad_request")
        self.assertEqual(error.details, "All of your terms were ignored.")
        self.assertEqual(error.warnings, ('Invalid expression "foo:bar" was ignored.',))
        self.assertIsNone(error.type)

    def test_not_found_with_type(self) -> None:
        body = {"object": "error", "status": 404, "code": "not_found", "type": "ambiguous", "details": "Too many cards"}
        client, _ = _client([_StubResponse(404, body)])
        with self.assertRaises(ServiceError) as ctx:
            client.fetch_json("https://api.scryfall.com/cards/named")
        self.assertEqual(ctx.exception.type, "ambiguous")

    def test_error_status_without_body_is_transport_error(self) -> None:
        client, _ = _client([_StubResponse(502, text="<html>Bad Gateway</html>")])
        with self.assertRaises(TransportError):
            client.fetch_json("https://api.scryfall.com/x")

    def test_invalid_json_is_decode_error(self) -> None:
        client, _ = _client([_StubResponse(200, text="not json")])
        with self.assertRaises(DecodeError):
            client.fetch_json("https://api.scryfall.com/x")

    def test_no_retries(self) -> None:
        client, session = _client([requests.Timeout("slow"), _StubResponse(200, {})])
        with self.assertRaises(TransportError):
            client.fetch_json("https://api.scryfall.com/x")
        self.assertEqual(len(session.calls), 1)

    def test_fetch_page_decodes_items(self) -> None:
        body = {"object": "list", "has_more": True, "next_page": "https://next", "total_cards": 2, "data": [_CARD]}
        client, _ = _client([_StubResponse(200, body)])
        page = client.fetch_page("https://api.scryfall.com/cards/search?q=x", parse_card)
        self.assertEqual([card.name for card in page.data], ["Yargle, Glutton of Urborg"])
        self.assertEqual(page.next_url, "https://next")
        self.assertEqual(page.total_cards, 2)

    def test_fetch_page_bad_item_fails_page(self) -> None:
        body = {"object": "list", "has_more": False, "data": [{"object": "card", "name": "no id"}]}
        client, _ = _client([_StubResponse(200, body)])
        with self.assertRaises(DecodeError) as ctx:
            client.fetch_page("https://api.scryfall.com/p", parse_card)
        self.assertEqual(ctx.exception.url, "https://api.scryfall.com/p")

    def test_context_manager_closes_session(self) -> None:
        client, session = _client([])
        with client:
            pass
        self.assertTrue(session.closed)


class TestRequestSpacing(unittest.TestCase):
    def _spaced_client(self) -> ScryfallApiClient:
        session = _StubSession([_StubResponse(200, {}), _StubResponse(200, {})])
        return ScryfallApiClient(session=session, request_interval=0.1)

    def test_waits_out_the_remaining_interval(self) -> None:
        client = self._spaced_client()
        with mock.patch("CardSearch.sources.scryfall.client.time") as fake_time:
            fake_time.monotonic.side_effect = [10.0, 10.03, 10.1]
            client.fetch_json("https://api.scryfall.com/a")
            client.fetch_json("https://api.scryfall.com/b")
        fake_time.sleep.assert_called_once()
        self.assertAlmostEqual(fake_time.sleep.call_args.args[0], 0.07)

    def test_no_wait_once_interval_has_passed(self) -> None:
        client = self._spaced_client()
        with mock.patch("CardSearch.sources.scryfall.client.time") as fake_time:
            fake_time.monotonic.side_effect = [10.0, 10.5]
            client.fetch_json("https://api.scryfall.com/a")
            client.fetch_json("https://api.scryfall.com/b")
        fake_time.sleep.assert_not_called()

    def test_zero_interval_never_sleeps(self) -> None:
        client, _ = _client([_StubResponse(200, {}), _StubResponse(200, {})])
        with mock.patch("CardSearch.sources.scryfall.client.time") as fake_time:
            client.fetch_json("https://api.scryfall.com/a")
            client.fetch_json("https://api.scryfall.com/b")
        fake_time.monotonic.assert_not_called()
        fake_time.sleep.assert_not_called()


if __name__ == "__main__":
    unittest.main()
