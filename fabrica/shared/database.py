from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ConnectionDescriptor:
    """Connection details only. No live connection is ever opened."""

    url: str
    api_key: str = ""

    def __post_init__(self):
        if not self.url:
            raise ValueError("Connection descriptor requires a url")

    @property
    def masked_api_key(self) -> str:
        if not self.api_key:
            return "<none>"
        return "*" * max(len(self.api_key) - 4, 4) + self.api_key[-4:]

    def connection_info(self) -> str:
        return f"URL: {self.url}, API: {self.masked_api_key}"

    def __repr__(self):
        return f"ConnectionDescriptor(url={self.url!r}, api_key={self.masked_api_key!r})"


class Database:
    """Process-wide database handle; owns one immutable descriptor."""

    def __init__(self, connection: ConnectionDescriptor):
        self._connection = connection

    @property
    def connection(self) -> ConnectionDescriptor:
        return self._connection

    def connection_info(self) -> str:
        return self._connection.connection_info()

    @classmethod
    def connect(cls, provider) -> "Database":
        return cls(provider.describe())

    def __repr__(self):
        return f"Database({self._connection!r})"
