from __future__ import annotations

import os
from abc import ABC, abstractmethod
from typing import Mapping, Optional

from fabrica.shared.database import ConnectionDescriptor

URL_ENV = "FABRICA_DB_URL"
API_KEY_ENV = "FABRICA_DB_API_KEY"


class ConnectionProvider(ABC):

    @abstractmethod
    def describe(self) -> ConnectionDescriptor:
        """Return the descriptor the shared database is built from."""
        pass


class StaticConnectionProvider(ConnectionProvider):
    def __init__(self, url: str, api_key: str = ""):
        self.url = url
        self.api_key = api_key

    def describe(self) -> ConnectionDescriptor:
        return ConnectionDescriptor(url=self.url, api_key=self.api_key)


class EnvConnectionProvider(ConnectionProvider):
    def __init__(self, environ: Optional[Mapping[str, str]] = None):
        self.environ = os.environ if environ is None else environ

    def describe(self) -> ConnectionDescriptor:
        url = self.environ.get(URL_ENV)
        if not url:
            raise KeyError(f"{URL_ENV} is not set")
        return ConnectionDescriptor(url=url, api_key=self.environ.get(API_KEY_ENV, ""))


def create_connection_provider(cfg_database) -> ConnectionProvider:
    """
    cfg_database.provider: "static" (url / api_key from config) or "env".
    """
    name = (cfg_database.get("provider") or "static").lower()
    if name == "static":
        return StaticConnectionProvider(cfg_database.get("url"), cfg_database.get("api_key") or "")
    if name == "env":
        return EnvConnectionProvider()
    raise ValueError(f"Unknown connection provider: {name}")
