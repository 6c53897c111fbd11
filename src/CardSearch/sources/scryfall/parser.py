"""Scryfall payload parser.

Decodes JSON payloads (already loaded into Python objects) into list pages,
error bodies and `Card` records. Any shape mismatch raises `DecodeError`.
"""

from __future__ import annotations

from collections.abc import Callable
from datetime import date
from typing import Any, Mapping, Optional, TypeVar

from dateutil import parser as dt_parser

from CardSearch.core.errors import DecodeError
from CardSearch.core.models import ApiErrorBody, Card, ListPage

T = TypeVar("T")

_CARD_FIELDS = frozenset(
    {
        "id",
        "oracle_id",
        "name",
        "lang",
        "released_at",
        "set",
        "set_name",
        "collector_number",
        "rarity",
        "type_line",
        "oracle_text",
        "mana_cost",
        "cmc",
        "power",
        "toughness",
        "loyalty",
        "colors",
        "color_identity",
        "prices",
        "legalities",
        "scryfall_uri",
    }
)


def parse_list_page(payload: Any, decode: Callable[[Mapping[str, Any]], T]) -> ListPage[T]:
    """Parse a paginated list envelope.

    Args:
        payload: Decoded JSON body.
        decode: Converts each item of `data` into `T`.

    Returns:
        The page with decoded items.

    Raises:
        DecodeError: If the envelope or any item does not have the expected shape.
    """
    body = _expect_mapping(payload, "list")
    if body.get("object", "list") != "list":
        raise DecodeError(f"Expected a list object, got {body.get('object')!r}")

    data = body.get("data")
    if not isinstance(data, list):
        raise DecodeError("List object has no data array")

    has_more = body.get("has_more", False)
    if not isinstance(has_more, bool):
        raise DecodeError("List object has_more must be a boolean")

    next_page = body.get("next_page")
    if next_page is not None and not isinstance(next_page, str):
        raise DecodeError("List object next_page must be a string")

    total_cards = body.get("total_cards")
    if total_cards is not None and (isinstance(total_cards, bool) or not isinstance(total_cards, int)):
        raise DecodeError("List object total_cards must be an integer")

    items = [decode(_expect_mapping(item, "list item")) for item in data]
    return ListPage(
        data=tuple(items),
        has_more=has_more,
        next_page=next_page,
        total_cards=total_cards,
        warnings=_str_list(body.get("warnings"), "warnings"),
    )


def parse_error_body(payload: Any) -> Optional[ApiErrorBody]:
    """Parse a service error object.

    Returns:
        The error body, or None when the payload is not an error object.
    """
    if not isinstance(payload, Mapping) or payload.get("object") != "error":
        return None
    status = payload.get("status")
    code = payload.get("code")
    details = payload.get("details")
    if isinstance(status, bool) or not isinstance(status, int):
        return None
    if not isinstance(code, str) or not isinstance(details, str):
        return None
    error_type = payload.get("type")
    return ApiErrorBody(
        status=status,
        code=code,
        details=details,
        type=error_type if isinstance(error_type, str) else None,
        warnings=_str_list(payload.get("warnings"), "warnings"),
    )


def parse_card(payload: Mapping[str, Any]) -> Card:
    """Parse a card object into a `Card`.

    Raises:
        DecodeError: If required fields are missing or mistyped.
    """
    body = _expect_mapping(payload, "card")
    if body.get("object", "card") != "card":
        raise DecodeError(f"Expected a card object, got {body.get('object')!r}")

    card_id = body.get("id")
    card_name = body.get("name")
    if not isinstance(card_id, str) or not isinstance(card_name, str):
        raise DecodeError("Card object requires string id and name")

    cmc_value = body.get("cmc", 0.0)
    if isinstance(cmc_value, bool) or not isinstance(cmc_value, (int, float)):
        raise DecodeError(f"Card {card_name!r} has a non-numeric cmc")

    return Card(
        id=card_id,
        name=card_name,
        oracle_id=_opt_str(body.get("oracle_id")),
        lang=_opt_str(body.get("lang")) or "en",
        released_at=_parse_date(body.get("released_at")),
        set=_opt_str(body.get("set")) or "",
        set_name=_opt_str(body.get("set_name")) or "",
        collector_number=_opt_str(body.get("collector_number")) or "",
        rarity=_opt_str(body.get("rarity")) or "",
        type_line=_opt_str(body.get("type_line")),
        oracle_text=_opt_str(body.get("oracle_text")),
        mana_cost=_opt_str(body.get("mana_cost")),
        cmc=float(cmc_value),
        power=_opt_str(body.get("power")),
        toughness=_opt_str(body.get("toughness")),
        loyalty=_opt_str(body.get("loyalty")),
        colors=_str_list(body.get("colors"), "colors"),
        color_identity=_str_list(body.get("color_identity"), "color_identity"),
        prices={k: _opt_str(p) for k, p in _opt_mapping(body.get("prices")).items()},
        legalities={k: str(l) for k, l in _opt_mapping(body.get("legalities")).items()},
        scryfall_uri=_opt_str(body.get("scryfall_uri")),
        extra={k: val for k, val in body.items() if k not in _CARD_FIELDS},
    )


def _expect_mapping(value: Any, what: str) -> Mapping[str, Any]:
    if not isinstance(value, Mapping):
        raise DecodeError(f"Expected {what} to be an object, got {type(value).__name__}")
    return value


def _opt_mapping(value: Any) -> Mapping[str, Any]:
    return value if isinstance(value, Mapping) else {}


def _opt_str(value: Any) -> Optional[str]:
    return value if isinstance(value, str) else None


def _str_list(value: Any, field_name: str) -> tuple[str, ...]:
    if value is None:
        return ()
    if not isinstance(value, list) or not all(isinstance(item, str) for item in value):
        raise DecodeError(f"{field_name} must be a list of strings")
    return tuple(value)


def _parse_date(value: Any) -> Optional[date]:
    if not isinstance(value, str) or not value.strip():
        return None
    try:
        return dt_parser.isoparse(value).date()
    except (ValueError, OverflowError) as e:
        raise DecodeError(f"Invalid date: {value!r}") from e
