from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from fabrica.query.values import QuerySpec


class Query(ABC):
    """
    Immutable result of a finalized builder.

    `spec` holds the dialect-agnostic fields (table, columns, predicate,
    limit, ordering); `render` is the only dialect-specific step.
    """

    dialect: str

    @property
    @abstractmethod
    def spec(self) -> "QuerySpec":
        pass

    @abstractmethod
    def render(self) -> str:
        pass
