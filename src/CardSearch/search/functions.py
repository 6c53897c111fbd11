"""Helper functions that build search parameters, one per search key.

Each function checks its argument against the value family of its key and
returns a leaf `Query`, ready to be combined with `&`, `|`, `~`:

    name("lightning") & cmc(lte(2)) & ~prop(Criterion.IS_FUNNY)

Ordered keys also accept a comparison (`eq`, `ne`, `lt`, `lte`, `gt`, `gte`).
Passing a value of the wrong type raises `TypeError`.
"""

from __future__ import annotations

from typing import Any

from CardSearch.search import value as v
from CardSearch.search.criteria import Criterion
from CardSearch.search.param import Param
from CardSearch.search.query import ParamQuery
from CardSearch.search.value import NumProperty, ValueFamily, ValueKind


def _leaf(kind: v.Kind, value: Any, family: ValueFamily) -> ParamQuery:
    return ParamQuery(v.to_param(kind, value, family))


def prop(criterion: Criterion) -> ParamQuery:
    """Match cards that have a boolean property, e.g. `is:firstprint`."""
    if not isinstance(criterion, Criterion):
        raise TypeError(f"prop expects a Criterion, got {type(criterion).__name__}")
    return ParamQuery(Param.of_criterion(criterion))


def exact(card_name: str) -> ParamQuery:
    """Match the card with exactly this name: `!"Black Lotus"`."""
    if not isinstance(card_name, str):
        raise TypeError(f"exact expects a str, got {type(card_name).__name__}")
    return ParamQuery(Param.exact(card_name))


# Colors and mana.


def color(value: Any) -> ParamQuery:
    """Cards of a color or color combination. Supports comparisons."""
    return _leaf(ValueKind.COLOR, value, v.COLOR)


def color_identity(value: Any) -> ParamQuery:
    """Cards whose color identity matches (useful for Commander)."""
    return _leaf(ValueKind.COLOR_IDENTITY, value, v.COLOR)


def mana(value: Any) -> ParamQuery:
    """Cards with these symbols in their mana cost."""
    return _leaf(ValueKind.MANA, value, v.COLOR)


def devotion(value: Any) -> ParamQuery:
    """Permanents that contribute devotion; see `Devotion`."""
    return _leaf(ValueKind.DEVOTION, value, v.DEVOTION)


def produces(value: Any) -> ParamQuery:
    """Cards that can produce mana of these colors."""
    return _leaf(ValueKind.PRODUCES, value, v.COLOR)


# Text.


def name(value: Any) -> ParamQuery:
    """Cards whose name contains the text, or matches the `Regex`."""
    return _leaf(ValueKind.NAME, value, v.TEXT_OR_REGEX)


def type_line(value: Any) -> ParamQuery:
    return _leaf(ValueKind.TYPE, value, v.TEXT_OR_REGEX)


def oracle_text(value: Any) -> ParamQuery:
    return _leaf(ValueKind.ORACLE, value, v.TEXT_OR_REGEX)


def full_oracle_text(value: Any) -> ParamQuery:
    """Like `oracle_text`, but also searches reminder text."""
    return _leaf(ValueKind.FULL_ORACLE, value, v.TEXT_OR_REGEX)


def keyword(value: Any) -> ParamQuery:
    return _leaf(ValueKind.KEYWORD, value, v.TEXT)


def flavor_text(value: Any) -> ParamQuery:
    return _leaf(ValueKind.FLAVOR, value, v.TEXT_OR_REGEX)


def artist(value: Any) -> ParamQuery:
    return _leaf(ValueKind.ARTIST, value, v.TEXT)


def watermark(value: Any) -> ParamQuery:
    return _leaf(ValueKind.WATERMARK, value, v.TEXT)


# Rarity, sets and printings.


def rarity(value: Any) -> ParamQuery:
    """Printings of a rarity. Supports comparisons: `rarity(gte(Rarity.RARE))`."""
    return _leaf(ValueKind.RARITY, value, v.RARITY)


def in_rarity(value: Any) -> ParamQuery:
    """Cards that have ever been printed at this rarity."""
    return _leaf(ValueKind.IN_RARITY, value, v.RARITY)


def set(value: Any) -> ParamQuery:  # noqa: A001 - the service calls this key "set"
    return _leaf(ValueKind.SET, value, v.SET)


def in_set(value: Any) -> ParamQuery:
    """Cards that have ever been printed in this set."""
    return _leaf(ValueKind.IN_SET, value, v.SET)


def collector_number(value: Any) -> ParamQuery:
    return _leaf(ValueKind.NUMBER, value, v.NUMERIC)


def block(value: Any) -> ParamQuery:
    """Cards in any set of the block that contains this set."""
    return _leaf(ValueKind.BLOCK, value, v.SET)


def set_type(value: Any) -> ParamQuery:
    return _leaf(ValueKind.SET_TYPE, value, v.SET_TYPE)


def in_set_type(value: Any) -> ParamQuery:
    return _leaf(ValueKind.IN_SET_TYPE, value, v.SET_TYPE)


def cube(value: Any) -> ParamQuery:
    return _leaf(ValueKind.CUBE, value, v.CUBE)


def border_color(value: Any) -> ParamQuery:
    return _leaf(ValueKind.BORDER_COLOR, value, v.BORDER_COLOR)


def frame(value: Any) -> ParamQuery:
    return _leaf(ValueKind.FRAME, value, v.FRAME)


def frame_effect(value: Any) -> ParamQuery:
    """Frame effects share the `frame` key."""
    return _leaf(ValueKind.FRAME, value, v.FRAME)


def date(value: Any) -> ParamQuery:
    """Printings released on a date, or with a set's release date. Supports comparisons."""
    return _leaf(ValueKind.DATE, value, v.DATE)


def game(value: Any) -> ParamQuery:
    return _leaf(ValueKind.GAME, value, v.GAME)


def in_game(value: Any) -> ParamQuery:
    return _leaf(ValueKind.IN_GAME, value, v.GAME)


def language(value: Any) -> ParamQuery:
    return _leaf(ValueKind.LANGUAGE, value, v.LANGUAGE)


def in_language(value: Any) -> ParamQuery:
    return _leaf(ValueKind.IN_LANGUAGE, value, v.LANGUAGE)


# Formats and prices.


def format(value: Any) -> ParamQuery:  # noqa: A001 - the service calls this key "format"
    """Cards legal in a format."""
    return _leaf(ValueKind.FORMAT, value, v.FORMAT)


def banned(value: Any) -> ParamQuery:
    return _leaf(ValueKind.BANNED, value, v.FORMAT)


def restricted(value: Any) -> ParamQuery:
    return _leaf(ValueKind.RESTRICTED, value, v.FORMAT)


def cheapest(value: Any) -> ParamQuery:
    """The cheapest printing of each card in the given currency."""
    return _leaf(ValueKind.CHEAPEST, value, v.CURRENCY)


# Numeric properties. Each accepts a number, another `NumProperty`, or a
# comparison of either.


def power(value: Any) -> ParamQuery:
    return _leaf(NumProperty.POWER, value, v.NUMERIC_COMPARABLE)


def toughness(value: Any) -> ParamQuery:
    return _leaf(NumProperty.TOUGHNESS, value, v.NUMERIC_COMPARABLE)


def pow_tou(value: Any) -> ParamQuery:
    """Power plus toughness."""
    return _leaf(NumProperty.POW_TOU, value, v.NUMERIC_COMPARABLE)


def loyalty(value: Any) -> ParamQuery:
    return _leaf(NumProperty.LOYALTY, value, v.NUMERIC_COMPARABLE)


def cmc(value: Any) -> ParamQuery:
    return _leaf(NumProperty.CMC, value, v.NUMERIC_COMPARABLE)


def artist_count(value: Any) -> ParamQuery:
    return _leaf(NumProperty.ARTIST_COUNT, value, v.NUMERIC_COMPARABLE)


def usd(value: Any) -> ParamQuery:
    return _leaf(NumProperty.USD, value, v.NUMERIC_COMPARABLE)


def usd_foil(value: Any) -> ParamQuery:
    return _leaf(NumProperty.USD_FOIL, value, v.NUMERIC_COMPARABLE)


def eur(value: Any) -> ParamQuery:
    return _leaf(NumProperty.EUR, value, v.NUMERIC_COMPARABLE)


def tix(value: Any) -> ParamQuery:
    return _leaf(NumProperty.TIX, value, v.NUMERIC_COMPARABLE)


def illustration_count(value: Any) -> ParamQuery:
    return _leaf(NumProperty.ILLUSTRATION_COUNT, value, v.NUMERIC_COMPARABLE)


def print_count(value: Any) -> ParamQuery:
    return _leaf(NumProperty.PRINT_COUNT, value, v.NUMERIC_COMPARABLE)


def set_count(value: Any) -> ParamQuery:
    return _leaf(NumProperty.SET_COUNT, value, v.NUMERIC_COMPARABLE)


def paper_print_count(value: Any) -> ParamQuery:
    return _leaf(NumProperty.PAPER_PRINT_COUNT, value, v.NUMERIC_COMPARABLE)


def paper_set_count(value: Any) -> ParamQuery:
    return _leaf(NumProperty.PAPER_SET_COUNT, value, v.NUMERIC_COMPARABLE)


def year(value: Any) -> ParamQuery:
    return _leaf(NumProperty.YEAR, value, v.NUMERIC_COMPARABLE)
