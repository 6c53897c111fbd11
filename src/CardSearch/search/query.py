"""Boolean search expressions.

A `Query` is an immutable tree whose leaves are single parameters (or raw
query text) and whose inner nodes are `And`, `Or` and `Not`:

    (cmc(4) & name("Yargle")).render()
        -> (cmc:4 AND name:"Yargle")
    not_(rarity(Rarity.COMMON) | rarity(Rarity.UNCOMMON)).render()
        -> -(rarity:common OR rarity:uncommon)

Rendering rules
- leaf            -> the parameter or raw text
- And/Or, 1 child -> the child, without parentheses
- And/Or, 2+      -> `(a AND b AND c)` / `(a OR b)`
- And/Or, empty   -> `""` (callers should not send this)
- Not             -> `-` followed by the child; a multi-child child already
                     carries its own parentheses

The rendered text is sent as the `q` parameter and percent-encoded once, after
the whole tree is rendered.
"""

from __future__ import annotations

from abc import abstractmethod
from dataclasses import dataclass
from typing import Any, Iterable, Union

from CardSearch.search.base import Search
from CardSearch.search.criteria import Criterion
from CardSearch.search.param import Param


class Query(Search):
    """Base class of all expression nodes."""

    __slots__ = ()

    @abstractmethod
    def render(self) -> str:
        """Render this expression in the service's query syntax."""

    def query_pairs(self) -> list[tuple[str, str]]:
        return [("q", self.render())]

    @staticmethod
    def custom(text: str) -> Custom:
        """Wrap raw query text as a leaf."""
        return Custom(text)

    @staticmethod
    def of(param: Union[Param, Criterion]) -> ParamQuery:
        """Wrap a single parameter as a leaf."""
        return ParamQuery(_as_param(param))

    def and_(self, other: QueryLike) -> And:
        """Conjoin with `other`, flattening nested conjunctions in order."""
        return And(_flatten(And, (self, as_query(other))))

    def or_(self, other: QueryLike) -> Or:
        """Disjoin with `other`, flattening nested disjunctions in order."""
        return Or(_flatten(Or, (self, as_query(other))))

    def negate(self) -> Not:
        return Not(self)

    def __and__(self, other: QueryLike) -> And:
        return self.and_(other)

    def __or__(self, other: QueryLike) -> Or:
        return self.or_(other)

    def __invert__(self) -> Not:
        return self.negate()

    def __str__(self) -> str:
        return self.render()


@dataclass(frozen=True, slots=True)
class ParamQuery(Query):
    """Leaf wrapping a single `Param`."""

    param: Param

    def render(self) -> str:
        return self.param.render()


@dataclass(frozen=True, slots=True)
class Custom(Query):
    """Leaf wrapping raw, pre-rendered query text."""

    text: str

    def render(self) -> str:
        return self.text


@dataclass(frozen=True, slots=True)
class And(Query):
    """All children must match."""

    children: tuple[Query, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "children", tuple(as_query(c) for c in self.children))

    def render(self) -> str:
        return _render_group(self.children, "AND")


@dataclass(frozen=True, slots=True)
class Or(Query):
    """At least one child must match."""

    children: tuple[Query, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "children", tuple(as_query(c) for c in self.children))

    def render(self) -> str:
        return _render_group(self.children, "OR")


@dataclass(frozen=True, slots=True)
class Not(Query):
    """The child must not match."""

    child: Query

    def __post_init__(self) -> None:
        object.__setattr__(self, "child", as_query(self.child))

    def render(self) -> str:
        return f"-{self.child.render()}"


QueryLike = Union[Query, Param, Criterion, str]


def as_query(value: Any) -> Query:
    """Coerce a param, criterion or raw string into a `Query` node.

    Raises:
        TypeError: For values that cannot appear in an expression.
    """
    if isinstance(value, Query):
        return value
    if isinstance(value, (Param, Criterion)):
        return ParamQuery(_as_param(value))
    if isinstance(value, str):
        return Custom(value)
    raise TypeError(f"Cannot use {type(value).__name__} in a query expression")


def all_of(*queries: QueryLike) -> And:
    return And(tuple(queries))


def any_of(*queries: QueryLike) -> Or:
    return Or(tuple(queries))


def not_(query: QueryLike) -> Not:
    return Not(as_query(query))


def _as_param(value: Union[Param, Criterion]) -> Param:
    if isinstance(value, Criterion):
        return Param.of_criterion(value)
    return value


def _flatten(node_type: type, queries: Iterable[Query]) -> tuple[Query, ...]:
    out: list[Query] = []
    for query in queries:
        if isinstance(query, node_type):
            out.extend(query.children)
        else:
            out.append(query)
    return tuple(out)


def _render_group(children: tuple[Query, ...], joiner: str) -> str:
    if not children:
        return ""
    if len(children) == 1:
        return children[0].render()
    return "(" + f" {joiner} ".join(child.render() for child in children) + ")"
