from __future__ import annotations

from typing import Callable, Optional

import dill

from fabrica.core.interfaces.prototype import Prototype

CACHED_SUFFIX = " (cached)"


class Book(Prototype):
    """
    A book whose content is expensive to fetch. Fetch it once on a
    prototype, then `clone()` copies instead of fetching again.
    """

    def __init__(self, title: str, price: float, content: str = "", metadata: Optional[dict] = None):
        if price < 0:
            raise ValueError(f"Book price must be non-negative, got {price}")
        self.title = title
        self.price = float(price)
        self.content = content
        self.metadata = dict(metadata or {})

    def fetch_content(self, source: Callable[[str], str]) -> "Book":
        """Load content through `source(title)`; stands in for the database read."""
        self.content = source(self.title)
        return self

    def clone(self) -> "Book":
        # dill round-trip so lambdas stored in metadata are copied too
        copied = dill.loads(dill.dumps(self))
        copied.content = self.content + CACHED_SUFFIX
        return copied

    def __eq__(self, other):
        if not isinstance(other, Book):
            return NotImplemented
        return (self.title, self.price, self.content) == (other.title, other.price, other.content)

    def __repr__(self):
        return f"Book(title={self.title!r}, price={self.price}, content={self.content!r})"
