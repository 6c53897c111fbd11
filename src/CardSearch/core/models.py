from __future__ import annotations

from dataclasses import dataclass
from dataclasses import field
from datetime import date
from types import MappingProxyType
from typing import Any, Generic, Mapping, Optional, Sequence, TypeVar

T = TypeVar("T")


@dataclass(frozen=True, slots=True)
class ListPage(Generic[T]):
    """One page of a paginated list returned by the catalog service.

    Attributes:
        data: Items on this page, in service order.
        has_more: Whether the service reports further pages.
        next_page: URL of the next page, if any.
        total_cards: Total number of matches across all pages, if reported.
        warnings: Non-fatal problems the service found in the query.
    """

    data: Sequence[T]
    has_more: bool = False
    next_page: Optional[str] = None
    total_cards: Optional[int] = None
    warnings: Sequence[str] = ()

    @property
    def next_url(self) -> Optional[str]:
        """Locator of the next page, or None when this is the last page."""
        if not self.has_more:
            return None
        return self.next_page or None


@dataclass(frozen=True, slots=True)
class ApiErrorBody:
    """Structured error object returned with non-success responses."""

    status: int
    code: str
    details: str
    type: Optional[str] = None
    warnings: Sequence[str] = ()


@dataclass(frozen=True, slots=True)
class Card:
    """Catalog card printing.

    Only the commonly used fields are typed; everything else the service
    sends is kept in `extra`.

    Attributes:
        id: Printing identifier.
        oracle_id: Identifier shared by all printings of the same card.
        name: Card name.
        lang: Printing language code.
        released_at: Release date of this printing.
        set: Set code.
        set_name: Full set name.
        collector_number: Collector number within the set.
        rarity: Printing rarity.
        type_line: Full type line.
        oracle_text: Rules text.
        mana_cost: Mana cost in symbol notation.
        cmc: Converted mana cost.
        power: Power, if any (may be non-numeric such as `*`).
        toughness: Toughness, if any.
        loyalty: Starting loyalty, if any.
        colors: Color symbols.
        color_identity: Color identity symbols.
        prices: Currency code to price string.
        legalities: Format name to legality.
        scryfall_uri: Human-facing page for this printing.
        extra: Remaining payload fields.
    """

    id: str
    name: str
    oracle_id: Optional[str] = None
    lang: str = "en"
    released_at: Optional[date] = None
    set: str = ""
    set_name: str = ""
    collector_number: str = ""
    rarity: str = ""
    type_line: Optional[str] = None
    oracle_text: Optional[str] = None
    mana_cost: Optional[str] = None
    cmc: float = 0.0
    power: Optional[str] = None
    toughness: Optional[str] = None
    loyalty: Optional[str] = None
    colors: Sequence[str] = ()
    color_identity: Sequence[str] = ()
    prices: Mapping[str, Optional[str]] = field(default_factory=dict)
    legalities: Mapping[str, str] = field(default_factory=dict)
    scryfall_uri: Optional[str] = None
    extra: Mapping[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "prices", MappingProxyType(dict(self.prices)))
        object.__setattr__(self, "legalities", MappingProxyType(dict(self.legalities)))
        object.__setattr__(self, "extra", MappingProxyType(dict(self.extra)))
