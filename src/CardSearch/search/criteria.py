"""Boolean search criteria.

A criterion is a flag a card or printing either has or does not, such as
`is:firstprint` or `has:watermark`. Searching by a criterion only matches
cards that carry the flag; negate it with `not_()` to exclude them.
"""

from __future__ import annotations

from enum import Enum


class Criterion(Enum):
    """All boolean `is:`/`has:` flags understood by the service."""

    # Card layouts and faces.
    IS_SPLIT = "is:split"
    IS_FLIP = "is:flip"
    IS_TRANSFORM = "is:transform"
    IS_MELD = "is:meld"
    IS_LEVELER = "is:leveler"
    IS_DFC = "is:dfc"
    IS_MDFC = "is:mdfc"

    # Card types and roles.
    IS_SPELL = "is:spell"
    IS_PERMANENT = "is:permanent"
    IS_HISTORIC = "is:historic"
    IS_PARTY = "is:party"
    IS_MODAL = "is:modal"
    IS_VANILLA = "is:vanilla"
    IS_FRENCH_VANILLA = "is:frenchvanilla"
    IS_FUNNY = "is:funny"
    IS_BEAR = "is:bear"
    IS_COMMANDER = "is:commander"
    IS_BRAWLER = "is:brawler"
    IS_COMPANION = "is:companion"
    IS_PARTNER = "is:partner"
    IS_RESERVED = "is:reserved"
    IS_ODD_CMC = "is:oddcmc"
    IS_EVEN_CMC = "is:evencmc"

    # Land cycles.
    IS_BOUNCE_LAND = "is:bounceland"
    IS_CANOPY_LAND = "is:canopyland"
    IS_CHECK_LAND = "is:checkland"
    IS_DUAL = "is:dual"
    IS_FAST_LAND = "is:fastland"
    IS_FETCH_LAND = "is:fetchland"
    IS_FILTER_LAND = "is:filterland"
    IS_GAIN_LAND = "is:gainland"
    IS_PAIN_LAND = "is:painland"
    IS_SCRY_LAND = "is:scryland"
    IS_SHADOW_LAND = "is:shadowland"
    IS_SHOCK_LAND = "is:shockland"
    IS_STORAGE_LAND = "is:storageland"
    IS_CREATURE_LAND = "is:creatureland"
    IS_TRI_LAND = "is:triland"
    IS_BATTLE_LAND = "is:battleland"

    # Printing properties.
    IS_FIRST_PRINT = "is:firstprint"
    IS_REPRINT = "is:reprint"
    IS_PROMO = "is:promo"
    IS_DIGITAL = "is:digital"
    IS_FULL_ART = "is:full"
    IS_FOIL = "is:foil"
    IS_NONFOIL = "is:nonfoil"
    IS_ETCHED = "is:etched"
    IS_HIRES = "is:hires"
    IS_SPOTLIGHT = "is:spotlight"
    IS_BOOSTER = "is:booster"
    IS_DATESTAMPED = "is:datestamped"
    IS_PRERELEASE = "is:prerelease"
    IS_OVERSIZED = "is:oversized"
    IS_COLORSHIFTED = "is:colorshifted"
    IS_VARIATION = "is:variation"
    IS_UNIVERSES_BEYOND = "is:universesbeyond"
    HAS_WATERMARK = "has:watermark"
    HAS_INDICATOR = "has:indicator"
    HAS_FLAVOR = "has:flavor"

    def __str__(self) -> str:
        return self.value
