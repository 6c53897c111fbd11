"""Public search API for CardSearch.

    from CardSearch.search import *

    cards = (
        SearchOptions()
        .query(name("lightning") & name("helix") & cmc(eq(2)))
        .unique(UniqueStrategy.PRINTS)
        .search_all()
    )
"""

from __future__ import annotations

from CardSearch.core.catalog import (
    BorderColor,
    Color,
    Colors,
    Currency,
    Format,
    Frame,
    FrameEffect,
    Game,
    Multicolored,
    Rarity,
    SetCode,
    SetType,
)
from CardSearch.search.base import Search, SearchLike, as_search
from CardSearch.search.compare import Compare, CompareOp, eq, gt, gte, lt, lte, ne
from CardSearch.search.criteria import Criterion
from CardSearch.search.functions import (
    artist,
    artist_count,
    banned,
    block,
    border_color,
    cheapest,
    cmc,
    collector_number,
    color,
    color_identity,
    cube,
    date,
    devotion,
    eur,
    exact,
    flavor_text,
    format,
    frame,
    frame_effect,
    full_oracle_text,
    game,
    illustration_count,
    in_game,
    in_language,
    in_rarity,
    in_set,
    in_set_type,
    keyword,
    language,
    loyalty,
    mana,
    name,
    oracle_text,
    paper_print_count,
    paper_set_count,
    pow_tou,
    power,
    print_count,
    produces,
    prop,
    rarity,
    restricted,
    set,
    set_count,
    set_type,
    tix,
    toughness,
    type_line,
    usd,
    usd_foil,
    watermark,
    year,
)
from CardSearch.search.options import SearchOptions, SortDirection, SortMethod, UniqueStrategy
from CardSearch.search.param import Param
from CardSearch.search.query import And, Custom, Not, Or, ParamQuery, Query, all_of, any_of, not_
from CardSearch.search.value import Devotion, NumProperty, Quoted, Regex, ValueKind

__all__ = [
    # Catalog vocabulary.
    "BorderColor",
    "Color",
    "Colors",
    "Currency",
    "Format",
    "Frame",
    "FrameEffect",
    "Game",
    "Multicolored",
    "Rarity",
    "SetCode",
    "SetType",
    # Building blocks.
    "Search",
    "SearchLike",
    "as_search",
    "Compare",
    "CompareOp",
    "eq",
    "ne",
    "lt",
    "lte",
    "gt",
    "gte",
    "Criterion",
    "Param",
    "Query",
    "ParamQuery",
    "Custom",
    "And",
    "Or",
    "Not",
    "all_of",
    "any_of",
    "not_",
    "Devotion",
    "NumProperty",
    "Quoted",
    "Regex",
    "ValueKind",
    "SearchOptions",
    "SortDirection",
    "SortMethod",
    "UniqueStrategy",
    # Parameter functions.
    "artist",
    "artist_count",
    "banned",
    "block",
    "border_color",
    "cheapest",
    "cmc",
    "collector_number",
    "color",
    "color_identity",
    "cube",
    "date",
    "devotion",
    "eur",
    "exact",
    "flavor_text",
    "format",
    "frame",
    "frame_effect",
    "full_oracle_text",
    "game",
    "illustration_count",
    "in_game",
    "in_language",
    "in_rarity",
    "in_set",
    "in_set_type",
    "keyword",
    "language",
    "loyalty",
    "mana",
    "name",
    "oracle_text",
    "paper_print_count",
    "paper_set_count",
    "pow_tou",
    "power",
    "print_count",
    "produces",
    "prop",
    "rarity",
    "restricted",
    "set",
    "set_count",
    "set_type",
    "tix",
    "toughness",
    "type_line",
    "usd",
    "usd_foil",
    "watermark",
    "year",
]
