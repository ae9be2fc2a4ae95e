from __future__ import annotations

import logging
import threading
from typing import Callable, Generic, Optional, TypeVar

from fabrica.core.errors import InitializationFailure
from fabrica.utils.logging_utils import get_logger


T = TypeVar("T")


class LazySingleton(Generic[T]):
    """
    Thread-safe lazily constructed instance.

    The factory runs at most once. Racing first callers block on the lock
    until it returns, then all of them get the same object. A factory that
    raises is never retried: the failure is wrapped once and the very same
    `InitializationFailure` is raised to every later caller.

    Usage:
        _database = LazySingleton(lambda: Database.connect(provider), name="database")

        def get_database() -> Database:
            return _database.get()
    """

    def __init__(self, factory: Callable[[], T], name: str = "singleton", log_level=logging.INFO) -> None:
        self._factory = factory
        self._name = name
        self._lock = threading.Lock()
        self._initialized = False
        self._instance: Optional[T] = None
        self._failure: Optional[InitializationFailure] = None
        self.logger = get_logger(f"{self.__class__.__name__}[{name}]", log_level)

    @property
    def name(self) -> str:
        return self._name

    @property
    def initialized(self) -> bool:
        return self._initialized

    @property
    def failed(self) -> bool:
        return self._failure is not None

    def get(self) -> T:
        if not self._initialized:
            with self._lock:
                if not self._initialized:
                    self._construct()
        if self._failure is not None:
            raise self._failure.with_traceback(None)
        return self._instance

    def _construct(self) -> None:
        # Caller holds self._lock.
        self.logger.info("Creating shared '%s' instance", self._name)
        try:
            self._instance = self._factory()
        except Exception as exc:
            self._failure = InitializationFailure(self._name, exc)
            self._failure.__cause__ = exc
            self.logger.error("Construction of '%s' failed, caching failure: %s", self._name, exc)
        self._initialized = True

    def reset(self) -> None:
        """Forget the cached outcome. Only meant for test isolation."""
        with self._lock:
            self._initialized = False
            self._instance = None
            self._failure = None

    def __repr__(self) -> str:
        return f"LazySingleton(name={self._name!r}, initialized={self._initialized}, failed={self.failed})"
