from __future__ import annotations

import logging
import threading
from dataclasses import dataclass, field
from typing import Optional

from fabrica.shared.database import Database
from fabrica.shared.providers import ConnectionProvider, EnvConnectionProvider, create_connection_provider
from fabrica.utils.lazy import LazySingleton


@dataclass
class SharedContext:
    """
    Holder for the process-wide shared resources. Build one during start-up
    and pass it along; the database inside is constructed on first access.
    """

    provider: ConnectionProvider
    log_level: int = logging.INFO
    database: LazySingleton = field(init=False, repr=False)

    def __post_init__(self):
        provider = self.provider
        self.database = LazySingleton(lambda: Database.connect(provider), name="database", log_level=self.log_level)


def build_shared_context(cfg_database, log_level=logging.INFO) -> SharedContext:
    return SharedContext(provider=create_connection_provider(cfg_database), log_level=log_level)


_DEFAULT_CONTEXT: Optional[SharedContext] = None
_DEFAULT_LOCK = threading.Lock()


def default_context() -> SharedContext:
    """Context used when no explicit one is passed; reads the environment."""
    global _DEFAULT_CONTEXT
    if _DEFAULT_CONTEXT is None:
        with _DEFAULT_LOCK:
            if _DEFAULT_CONTEXT is None:
                _DEFAULT_CONTEXT = SharedContext(provider=EnvConnectionProvider())
    return _DEFAULT_CONTEXT


def get_shared_instance(context: Optional[SharedContext] = None) -> Database:
    """
    The shared `Database`. Raises `InitializationFailure` if it could not be
    built; the same failure is raised again on every later call.
    """
    return (context or default_context()).database.get()
