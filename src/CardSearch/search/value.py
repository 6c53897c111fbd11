"""Search keys and the values they accept.

A search parameter is a key (`ValueKind` or `NumProperty`) paired with a value.
Which Python types are legal for a key is decided by the key's *value family*:
`rarity(...)` accepts `Rarity` members and free text, `power(...)` accepts
numbers and other numeric properties, and so on. The family check happens
when the `Param` is built, so an illegal pairing never reaches the query
string.

Rendering rules
- numbers, catalog enums, numeric properties, dates: bare (`cmc:3`, `rarity:rare`)
- free text: double-quoted (`name:"lightning bolt"`), never quoted twice
- `Regex`: slash-delimited (`oracle:/^draw/`)
- `Devotion`: repeated mana symbols (`devotion:{G}{G}{G}`), `0` for a zero count

Embedded quote or slash characters are passed through unchanged; the service
has no escape syntax for them.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from enum import Enum
from typing import Any, Optional, Union

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
from CardSearch.search.compare import Compare
from CardSearch.search.param import Param


class ValueKind(Enum):
    """Key of a `key:value` parameter.

    Members prefixed with `IN_` are indirection keys: they all render as `in`
    and match cards that have *ever* been printed with the given value.
    """

    COLOR = "color"
    COLOR_IDENTITY = "identity"
    TYPE = "type"
    ORACLE = "oracle"
    FULL_ORACLE = "fulloracle"
    KEYWORD = "keyword"
    MANA = "mana"
    DEVOTION = "devotion"
    PRODUCES = "produces"
    RARITY = "rarity"
    IN_RARITY = "in:rarity"
    SET = "set"
    IN_SET = "in:set"
    NUMBER = "number"
    BLOCK = "block"
    SET_TYPE = "settype"
    IN_SET_TYPE = "in:settype"
    CUBE = "cube"
    FORMAT = "format"
    BANNED = "banned"
    RESTRICTED = "restricted"
    CHEAPEST = "cheapest"
    ARTIST = "artist"
    FLAVOR = "flavor"
    WATERMARK = "watermark"
    BORDER_COLOR = "border"
    FRAME = "frame"
    DATE = "date"
    GAME = "game"
    IN_GAME = "in:game"
    LANGUAGE = "language"
    IN_LANGUAGE = "in:language"
    NAME = "name"

    @property
    def key(self) -> str:
        if self.value.startswith("in:"):
            return "in"
        return self.value

    def __str__(self) -> str:
        return self.key


class NumProperty(Enum):
    """Numeric card properties. They can be compared against numbers or against
    one another, e.g. `power(gt(NumProperty.TOUGHNESS))`.
    """

    POWER = "power"
    TOUGHNESS = "toughness"
    POW_TOU = "powtou"
    # '0' also matches non-numeric loyalties such as 'X'.
    LOYALTY = "loyalty"
    CMC = "cmc"
    # Artists credited on this printing, not across all printings.
    ARTIST_COUNT = "artists"
    USD = "usd"
    USD_FOIL = "usdfoil"
    EUR = "eur"
    TIX = "tix"
    ILLUSTRATION_COUNT = "illustrations"
    PRINT_COUNT = "prints"
    SET_COUNT = "sets"
    PAPER_PRINT_COUNT = "paperprints"
    PAPER_SET_COUNT = "papersets"
    YEAR = "year"

    @property
    def key(self) -> str:
        return self.value

    def __str__(self) -> str:
        return self.value


Kind = Union[ValueKind, NumProperty]


@dataclass(frozen=True, slots=True)
class Quoted:
    """Text that renders in double quotes."""

    text: str

    def __str__(self) -> str:
        return f'"{self.text}"'


@dataclass(frozen=True, slots=True)
class Regex:
    """A regular expression, rendered between slashes instead of quotes."""

    pattern: str

    def __str__(self) -> str:
        return f"/{self.pattern}/"


@dataclass(frozen=True, slots=True)
class Devotion:
    """Devotion to one color, or to a hybrid pair of colors, with a count."""

    color: Color
    hybrid_with: Optional[Color] = None
    count: int = 1

    def __post_init__(self) -> None:
        if not isinstance(self.color, Color):
            raise TypeError(f"Devotion color must be a Color, got {self.color!r}")
        if self.hybrid_with is not None and not isinstance(self.hybrid_with, Color):
            raise TypeError(f"Devotion hybrid color must be a Color, got {self.hybrid_with!r}")
        if isinstance(self.count, bool) or not isinstance(self.count, int):
            raise TypeError("Devotion count must be an integer")
        if self.count < 0:
            raise ValueError("Devotion count must be >= 0")

    @classmethod
    def monocolor(cls, color: Color, count: int) -> Devotion:
        return cls(color, None, count)

    @classmethod
    def hybrid(cls, color_a: Color, color_b: Color, count: int) -> Devotion:
        return cls(color_a, color_b, count)

    def __str__(self) -> str:
        if self.count == 0:
            # A bare "devotion:" matches names containing "devotion".
            return "0"
        if self.hybrid_with is not None and self.hybrid_with != self.color:
            symbol = f"{{{self.color}/{self.hybrid_with}}}"
        else:
            symbol = f"{{{self.color}}}"
        return symbol * self.count


@dataclass(frozen=True, slots=True)
class ValueFamily:
    """The set of Python types a group of search keys accepts.

    Attributes:
        name: Family name used in error messages.
        types: Accepted value types. `str` means plain text only, not
            string-valued enum members.
        comparable: Whether `Compare` values are accepted.
    """

    name: str
    types: tuple[type, ...]
    comparable: bool = False

    def accepts(self, value: Any) -> bool:
        for accepted in self.types:
            if accepted is str:
                if isinstance(value, str) and not isinstance(value, Enum):
                    return True
            elif accepted in (int, float, Decimal):
                if isinstance(value, accepted) and not isinstance(value, bool):
                    return True
            elif isinstance(value, accepted):
                return True
        return False


_TEXT = (str, Quoted)
_NUMBERS = (int, float, Decimal)

NUMERIC = ValueFamily("numeric", _NUMBERS)
NUMERIC_COMPARABLE = ValueFamily("numeric-comparable", _NUMBERS + (NumProperty,), comparable=True)
TEXT = ValueFamily("text", _TEXT)
TEXT_OR_REGEX = ValueFamily("text-or-regex", _TEXT + (Regex,))
COLOR = ValueFamily("color", (Color, Colors, Multicolored) + _TEXT, comparable=True)
DEVOTION = ValueFamily("devotion", (Devotion,), comparable=True)
RARITY = ValueFamily("rarity", (Rarity,) + _TEXT, comparable=True)
SET = ValueFamily("set", (SetCode,) + _TEXT)
CUBE = ValueFamily("cube", _TEXT)
FORMAT = ValueFamily("format", (Format,) + _TEXT)
CURRENCY = ValueFamily("currency", (Currency,) + _TEXT)
SET_TYPE = ValueFamily("set-type", (SetType,) + _TEXT)
BORDER_COLOR = ValueFamily("border-color", (BorderColor,) + _TEXT)
FRAME = ValueFamily("frame", (Frame, FrameEffect) + _TEXT)
DATE = ValueFamily("date", (date, SetCode) + _TEXT, comparable=True)
GAME = ValueFamily("game", (Game,) + _TEXT)
LANGUAGE = ValueFamily("language", _TEXT)


def render_value(value: Any) -> str:
    """Render a parameter value according to its type.

    Args:
        value: An already family-checked value.

    Returns:
        The value as it appears after the key and operator.

    Raises:
        TypeError: If the value has no rendering.
    """
    if isinstance(value, bool):
        raise TypeError("Boolean values are not search values; use a criterion")
    if isinstance(value, (NumProperty, Enum)):
        return str(value)
    if isinstance(value, (Quoted, Regex, Devotion, Colors, SetCode)):
        return str(value)
    if isinstance(value, str):
        return str(Quoted(value))
    if isinstance(value, float):
        if value.is_integer():
            return str(int(value))
        return _positional(Decimal(repr(value)))
    if isinstance(value, Decimal):
        return _positional(value)
    if isinstance(value, int):
        return str(value)
    if isinstance(value, date):
        return value.strftime("%Y-%m-%d")
    raise TypeError(f"Unsupported search value type: {type(value).__name__}")


def _positional(value: Decimal) -> str:
    # The query grammar has no exponent notation.
    if not value.is_finite():
        raise ValueError(f"Search numbers must be finite, got {value}")
    return format(value, "f")


def to_param(kind: Kind, value: Any, family: ValueFamily) -> Param:
    """Build a `Param` for `kind` after checking `value` against `family`.

    Args:
        kind: Search key.
        value: Bare value or `Compare`.
        family: Value family the key belongs to.

    Returns:
        A value param, or a comparison param for `Compare` values.

    Raises:
        TypeError: If the value (or compared value) is not legal for the family.
        ValueError: If a number is not finite.
    """
    if isinstance(value, Compare):
        if not family.comparable:
            raise TypeError(f"{kind.key} does not support comparison operators")
        _require(kind, value.value, family)
        return Param.comparison(kind, value.op, render_value(value.value))
    _require(kind, value, family)
    return Param.value_of(kind, render_value(value))


def _require(kind: Kind, value: Any, family: ValueFamily) -> None:
    if not family.accepts(value):
        raise TypeError(
            f"{kind.key} expects a {family.name} value, got {type(value).__name__}: {value!r}"
        )
