from __future__ import annotations

import copy
import logging
from dataclasses import dataclass, field
from typing import Callable, List, Optional, Sequence, Tuple

from fabrica.core.errors import QueryValidationError
from fabrica.core.interfaces.query import Query
from fabrica.query.values import OPERATORS, OrderBy, Predicate, QuerySpec, WhereValue
from fabrica.utils.logging_utils import get_logger


@dataclass
class BuilderState:
    table: Optional[str] = None
    columns: Tuple[str, ...] = ()
    predicate: Optional[Predicate] = None
    limit: Optional[int] = None
    order_by: List[OrderBy] = field(default_factory=list)
    errors: List[str] = field(default_factory=list)


class QueryBuilder:
    """
    Fluent builder for one query at a time.

    Every chained call validates its own argument and returns the builder
    itself. Invalid input is recorded rather than raised; `finalize` raises
    the first recorded failure. A successful `finalize` seals the builder:
    calling it again returns the same query, and further chained calls are
    recorded as failures until `reset()`. Use `clone()` to branch a
    partially built query.

    Builders are not thread-safe; each one belongs to a single construction
    flow.
    """

    def __init__(self, dialect: str, query_factory: Callable[[QuerySpec], Query], log_level=logging.INFO):
        self.dialect = dialect
        self._query_factory = query_factory
        self._log_level = log_level
        self._state = BuilderState()
        self._result: Optional[Query] = None
        self.logger = get_logger(f"{self.__class__.__name__}[{dialect}]", log_level)

    # ------------------------------------------------------------------
    # Chained configuration
    # ------------------------------------------------------------------
    def table(self, name: str) -> "QueryBuilder":
        if not self._writable("table"):
            return self
        if not isinstance(name, str) or not name.strip():
            return self._fail("table name must be a non-empty string")
        self._state.table = name
        return self

    def select(self, columns: Sequence[str]) -> "QueryBuilder":
        if not self._writable("select"):
            return self
        if isinstance(columns, str):
            return self._fail("select() expects a sequence of column names, not a string")
        columns = tuple(columns)
        for col in columns:
            if not isinstance(col, str) or not col.strip():
                return self._fail(f"column names must be non-empty strings, got {col!r}")
        if len(set(columns)) != len(columns):
            return self._fail(f"duplicate column in select: {list(columns)}")
        self._state.columns = columns
        return self

    def limit(self, value: int) -> "QueryBuilder":
        if not self._writable("limit"):
            return self
        if isinstance(value, bool) or not isinstance(value, int):
            return self._fail(f"limit must be an int, got {type(value).__name__}")
        if value < 0:
            return self._fail(f"limit must be non-negative, got {value}")
        self._state.limit = value
        return self

    def where(self, column: str, value, operator: str = "=") -> "QueryBuilder":
        if not self._writable("where"):
            return self
        if not isinstance(column, str) or not column.strip():
            return self._fail("where() column must be a non-empty string")
        if operator not in OPERATORS:
            return self._fail(f"unsupported operator {operator!r}; expected one of {', '.join(OPERATORS)}")
        try:
            operand = WhereValue.of(value)
        except TypeError as exc:
            return self._fail(str(exc))
        self._state.predicate = Predicate(column, operator, operand)
        return self

    def order_by(self, column: str, descending: bool = False) -> "QueryBuilder":
        if not self._writable("order_by"):
            return self
        if not isinstance(column, str) or not column.strip():
            return self._fail("order_by() column must be a non-empty string")
        if any(o.column == column for o in self._state.order_by):
            return self._fail(f"duplicate column in order_by: {column!r}")
        self._state.order_by.append(OrderBy(column, bool(descending)))
        return self

    # ------------------------------------------------------------------
    # Finalize / lifecycle
    # ------------------------------------------------------------------
    def finalize(self) -> Query:
        state = self._state
        if state.errors:
            raise QueryValidationError(state.errors[0], state.errors)
        if self._result is not None:
            return self._result
        if state.table is None:
            raise QueryValidationError("table is required")

        spec = QuerySpec(
            table=state.table,
            columns=state.columns,
            predicate=state.predicate,
            limit=state.limit,
            order_by=tuple(state.order_by),
        )
        self._result = self._query_factory(spec)
        self.logger.debug("Finalized %s query: %s", self.dialect, spec)
        return self._result

    def reset(self) -> "QueryBuilder":
        self._state = BuilderState()
        self._result = None
        return self

    def clone(self) -> "QueryBuilder":
        other = QueryBuilder(self.dialect, self._query_factory, log_level=self._log_level)
        other._state = copy.deepcopy(self._state)
        return other

    @property
    def finalized(self) -> bool:
        return self._result is not None

    @property
    def errors(self) -> Tuple[str, ...]:
        return tuple(self._state.errors)

    def _writable(self, op: str) -> bool:
        if self._result is None:
            return True
        self._fail(f"{op}() called on a finalized builder; call reset() or clone() first")
        return False

    def _fail(self, message: str) -> "QueryBuilder":
        self._state.errors.append(message)
        self.logger.debug("Recorded validation failure: %s", message)
        return self

    def __repr__(self):
        return f"QueryBuilder(dialect={self.dialect!r}, state={self._state!r}, finalized={self.finalized})"
