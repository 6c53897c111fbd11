"""Card catalog vocabulary.

Closed sets of values the catalog service understands (colors, rarities,
frames, games, formats, ...). Each member renders as the exact token the
service expects in a search expression.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum
from typing import Iterable

_SET_CODE_RE = re.compile(r"^[a-z0-9]{2,6}$")


class _Token(str, Enum):
    """String enum whose `str()` is the service token."""

    def __str__(self) -> str:
        return self.value


class Color(_Token):
    """One of the five colors of mana."""

    WHITE = "W"
    BLUE = "U"
    BLACK = "B"
    RED = "R"
    GREEN = "G"


_COLOR_ORDER = {color: idx for idx, color in enumerate(Color)}


@dataclass(frozen=True, slots=True)
class Colors:
    """A combination of colors, rendered in WUBRG order.

    An empty combination stands for colorless and renders as `C`.
    """

    colors: frozenset[Color] = frozenset()

    def __post_init__(self) -> None:
        for color in self.colors:
            if not isinstance(color, Color):
                raise TypeError(f"Colors members must be Color, got {color!r}")

    @classmethod
    def of(cls, colors: Iterable[Color]) -> Colors:
        return cls(frozenset(colors))

    @classmethod
    def colorless(cls) -> Colors:
        return cls()

    def is_colorless(self) -> bool:
        return not self.colors

    def __str__(self) -> str:
        if not self.colors:
            return "C"
        return "".join(c.value for c in sorted(self.colors, key=_COLOR_ORDER.__getitem__))


class Multicolored(_Token):
    """Matches any card with two or more colors."""

    MULTICOLORED = "M"


class Rarity(_Token):
    COMMON = "common"
    UNCOMMON = "uncommon"
    RARE = "rare"
    SPECIAL = "special"
    MYTHIC = "mythic"
    BONUS = "bonus"


class BorderColor(_Token):
    BLACK = "black"
    BORDERLESS = "borderless"
    GOLD = "gold"
    SILVER = "silver"
    WHITE = "white"


class Frame(_Token):
    """Frame layout by the year it was introduced."""

    Y1993 = "1993"
    Y1997 = "1997"
    Y2003 = "2003"
    Y2015 = "2015"
    FUTURE = "future"


class FrameEffect(_Token):
    LEGENDARY = "legendary"
    MIRACLE = "miracle"
    NYXTOUCHED = "nyxtouched"
    DRAFT = "draft"
    DEVOID = "devoid"
    TOMBSTONE = "tombstone"
    COLORSHIFTED = "colorshifted"
    INVERTED = "inverted"
    SUNMOONDFC = "sunmoondfc"
    COMPASSLANDDFC = "compasslanddfc"
    ORIGINPWDFC = "originpwdfc"
    MOONELDRAZIDFC = "mooneldrazidfc"
    WAXINGANDWANINGMOONDFC = "waxingandwaningmoondfc"
    SHOWCASE = "showcase"
    EXTENDEDART = "extendedart"
    COMPANION = "companion"
    ETCHED = "etched"
    SNOW = "snow"
    LESSON = "lesson"
    SHATTEREDGLASS = "shatteredglass"
    CONVERTDFC = "convertdfc"
    FANDFC = "fandfc"
    UPSIDEDOWNDFC = "upsidedowndfc"


class Game(_Token):
    PAPER = "paper"
    ARENA = "arena"
    MTGO = "mtgo"


class Format(_Token):
    STANDARD = "standard"
    FUTURE = "future"
    HISTORIC = "historic"
    GLADIATOR = "gladiator"
    PIONEER = "pioneer"
    EXPLORER = "explorer"
    MODERN = "modern"
    LEGACY = "legacy"
    PAUPER = "pauper"
    VINTAGE = "vintage"
    PENNY = "penny"
    COMMANDER = "commander"
    OATHBREAKER = "oathbreaker"
    BRAWL = "brawl"
    HISTORICBRAWL = "historicbrawl"
    ALCHEMY = "alchemy"
    PAUPERCOMMANDER = "paupercommander"
    DUEL = "duel"
    OLDSCHOOL = "oldschool"
    PREMODERN = "premodern"
    PREDH = "predh"


class SetType(_Token):
    CORE = "core"
    EXPANSION = "expansion"
    MASTERS = "masters"
    ALCHEMY = "alchemy"
    MASTERPIECE = "masterpiece"
    ARSENAL = "arsenal"
    FROM_THE_VAULT = "from_the_vault"
    SPELLBOOK = "spellbook"
    PREMIUM_DECK = "premium_deck"
    DUEL_DECK = "duel_deck"
    DRAFT_INNOVATION = "draft_innovation"
    TREASURE_CHEST = "treasure_chest"
    COMMANDER = "commander"
    PLANECHASE = "planechase"
    ARCHENEMY = "archenemy"
    VANGUARD = "vanguard"
    FUNNY = "funny"
    STARTER = "starter"
    BOX = "box"
    PROMO = "promo"
    TOKEN = "token"
    MEMORABILIA = "memorabilia"
    MINIGAME = "minigame"


class Currency(_Token):
    USD = "usd"
    EUR = "eur"
    TIX = "tix"


@dataclass(frozen=True, slots=True)
class SetCode:
    """A set code such as `lea` or `ktk`.

    Raises:
        ValueError: If the code is not 2-6 alphanumeric characters.
    """

    code: str

    def __post_init__(self) -> None:
        normalized = self.code.strip().lower()
        if not _SET_CODE_RE.match(normalized):
            raise ValueError(f"Invalid set code: {self.code!r}")
        object.__setattr__(self, "code", normalized)

    def __str__(self) -> str:
        return self.code
