"""Comparison operators for search parameters.

Parameters whose values are ordered (numbers, rarities, colors, dates, ...)
accept a `Compare` instead of a bare value:

    cmc(gte(3))          -> cmc>=3
    rarity(gt(Rarity.MYTHIC)) -> rarity>mythic
    power(eq(NumProperty.TOUGHNESS)) -> power:toughness
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional


class CompareOp(Enum):
    """Comparison operator of a `key<op>value` parameter."""

    EQUAL = "eq"
    NOT_EQUAL = "ne"
    LESS = "lt"
    LESS_OR_EQUAL = "lte"
    GREATER = "gt"
    GREATER_OR_EQUAL = "gte"

    @property
    def symbol(self) -> str:
        """Canonical rendering. Equality renders as `:` like a plain value."""
        return _SYMBOLS[self]

    @property
    def alt_symbol(self) -> str:
        """Alternate rendering; only equality has one (`=`)."""
        if self is CompareOp.EQUAL:
            return "="
        return _SYMBOLS[self]

    def __str__(self) -> str:
        return self.symbol


_SYMBOLS = {
    CompareOp.EQUAL: ":",
    CompareOp.NOT_EQUAL: "!=",
    CompareOp.LESS: "<",
    CompareOp.LESS_OR_EQUAL: "<=",
    CompareOp.GREATER: ">",
    CompareOp.GREATER_OR_EQUAL: ">=",
}


def compare_op_str(op: Optional[CompareOp], *, strict_equal: bool = False) -> str:
    """Render an operator, treating a missing operator as equality.

    Args:
        op: Operator, or None for a plain `key:value` parameter.
        strict_equal: Render equality as `=` instead of `:`.

    Returns:
        Operator symbol.
    """
    op = op or CompareOp.EQUAL
    return op.alt_symbol if strict_equal else op.symbol


@dataclass(frozen=True, slots=True)
class Compare:
    """A value paired with a comparison operator."""

    op: CompareOp
    value: Any

    def __post_init__(self) -> None:
        if isinstance(self.value, Compare):
            raise TypeError("Cannot nest comparisons")

    def __str__(self) -> str:
        return f"{self.op.symbol}{self.value}"


def eq(value: Any) -> Compare:
    return Compare(CompareOp.EQUAL, value)


def ne(value: Any) -> Compare:
    return Compare(CompareOp.NOT_EQUAL, value)


def lt(value: Any) -> Compare:
    return Compare(CompareOp.LESS, value)


def lte(value: Any) -> Compare:
    return Compare(CompareOp.LESS_OR_EQUAL, value)


def gt(value: Any) -> Compare:
    return Compare(CompareOp.GREATER, value)


def gte(value: Any) -> Compare:
    return Compare(CompareOp.GREATER_OR_EQUAL, value)
