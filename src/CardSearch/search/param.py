"""A single search parameter.

There are two kinds of `Param`: boolean criteria (`is:firstprint`), and
parameters that take a value (`name:"lightning"`, `cmc>=3`). Params are
normally built by the helper functions in `CardSearch.search.functions`,
which check the value type against the key before building the param.

Rendering
- criterion   -> `is:firstprint`
- exact name  -> `!"Black Lotus"`
- value       -> `<key>:<value>`
- comparison  -> `<key><op><value>`
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Optional

from CardSearch.search.compare import CompareOp, compare_op_str
from CardSearch.search.criteria import Criterion

if TYPE_CHECKING:
    from CardSearch.search.value import Kind


@dataclass(frozen=True, slots=True)
class Param:
    """Immutable search predicate.

    Exactly one shape is populated: `criterion`, `exact_name`, or `kind` with
    `value` (and `op` for comparisons). Build instances through the class
    methods rather than the constructor.
    """

    criterion: Optional[Criterion] = None
    exact_name: Optional[str] = None
    kind: Optional[Kind] = None
    op: Optional[CompareOp] = None
    value: Optional[str] = None

    @classmethod
    def of_criterion(cls, criterion: Criterion) -> Param:
        return cls(criterion=criterion)

    @classmethod
    def exact(cls, name: str) -> Param:
        return cls(exact_name=name)

    @classmethod
    def value_of(cls, kind: Kind, value: str) -> Param:
        return cls(kind=kind, value=value)

    @classmethod
    def comparison(cls, kind: Kind, op: CompareOp, value: str) -> Param:
        return cls(kind=kind, op=op, value=value)

    def render(self) -> str:
        if self.criterion is not None:
            return str(self.criterion)
        if self.exact_name is not None:
            return f'!"{self.exact_name}"'
        if self.kind is None or self.value is None:
            raise ValueError("Param has no criterion, name, or key/value")
        if self.op is None:
            return f"{self.kind.key}:{self.value}"
        return f"{self.kind.key}{compare_op_str(self.op)}{self.value}"

    def __str__(self) -> str:
        return self.render()

