from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Optional, Tuple, Union


OPERATORS = ("=", "!=", "<", "<=", ">", ">=")
VALUE_KINDS = {"int": int, "text": str}


@dataclass(frozen=True)
class WhereValue:
    """
    Predicate operand restricted to the kinds every dialect can render:
    `int` or `text`. `WhereValue.of` picks the kind from a plain value.
    """

    kind: str
    value: Union[int, str]

    def __post_init__(self):
        expected = VALUE_KINDS.get(self.kind)
        if expected is None:
            raise TypeError(f"Predicate value kind must be one of {sorted(VALUE_KINDS)}, got {self.kind!r}")
        # bool is an int subclass but not a valid operand
        if isinstance(self.value, bool) or not isinstance(self.value, expected):
            raise TypeError(
                f"Predicate value of kind '{self.kind}' must be {expected.__name__}, "
                f"got {type(self.value).__name__}"
            )

    @classmethod
    def of(cls, value: Any) -> "WhereValue":
        if isinstance(value, WhereValue):
            return value
        if isinstance(value, bool):
            raise TypeError("Predicate value must be int or str, got bool")
        if isinstance(value, int):
            return cls("int", value)
        if isinstance(value, str):
            return cls("text", value)
        raise TypeError(f"Predicate value must be int or str, got {type(value).__name__}")

    @property
    def is_text(self) -> bool:
        return self.kind == "text"


@dataclass(frozen=True)
class Predicate:
    column: str
    operator: str
    value: WhereValue


@dataclass(frozen=True)
class OrderBy:
    column: str
    descending: bool = False


@dataclass(frozen=True)
class QuerySpec:
    """Dialect-agnostic fields of a finalized query."""

    table: str
    columns: Tuple[str, ...] = ()
    predicate: Optional[Predicate] = None
    limit: Optional[int] = None
    order_by: Tuple[OrderBy, ...] = field(default_factory=tuple)

    def as_dict(self) -> Dict[str, Any]:
        out: Dict[str, Any] = {"table": self.table, "columns": list(self.columns)}
        if self.predicate is not None:
            out["where"] = {
                "column": self.predicate.column,
                "operator": self.predicate.operator,
                "value": self.predicate.value.value,
            }
        if self.limit is not None:
            out["limit"] = self.limit
        if self.order_by:
            out["order_by"] = [(o.column, "desc" if o.descending else "asc") for o in self.order_by]
        return out
