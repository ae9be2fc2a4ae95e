from __future__ import annotations

import threading
from typing import Callable, Dict, Generic, Optional, TypeVar

from fabrica.utils.logging_utils import get_logger


T = TypeVar("T")


class Registry(Generic[T]):
    """
    Minimal string-to-constructor registry.

    Keeps factory modules tidy and lets components self-register. When a
    `default` key is given, unknown selectors resolve to it (with a warning)
    instead of raising, so callers always get something usable back.
    """

    def __init__(self, name: str, default: Optional[str] = None) -> None:
        self._name = name
        self._default = self.normalize(default) if default else None
        self._registry: Dict[str, Callable[..., T]] = {}
        self._instances: Dict[str, T] = {}
        self._lock = threading.Lock()
        self.logger = get_logger(f"{self.__class__.__name__}[{name}]")

    @property
    def name(self) -> str:
        return self._name

    @property
    def default(self) -> Optional[str]:
        return self._default

    @staticmethod
    def normalize(key: Optional[str]) -> str:
        return (key or "").strip().lower()

    def register(self, key: str, builder: Callable[..., T]) -> None:
        normalized = self.normalize(key)
        with self._lock:
            if normalized in self._registry:
                raise ValueError(f"{self._name} registry: '{key}' already registered")
            self._registry[normalized] = builder
        self.logger.debug("Registered '%s' -> %s", normalized, getattr(builder, "__name__", builder))

    def resolve(self, key: Optional[str]) -> str:
        normalized = self.normalize(key)
        if normalized in self._registry:
            return normalized
        available = ", ".join(self.keys())
        if self._default is None or self._default not in self._registry:
            raise KeyError(f"{self._name} registry: '{key}' not found. Available: {available}")
        self.logger.warning(
            "%s registry: '%s' not found (available: %s); falling back to '%s'",
            self._name,
            key,
            available,
            self._default,
        )
        return self._default

    def build(self, key: Optional[str], *args, **kwargs) -> T:
        return self._registry[self.resolve(key)](*args, **kwargs)

    def get(self, key: Optional[str]) -> T:
        """Shared instance for `key`, built on first request."""
        normalized = self.resolve(key)
        instance = self._instances.get(normalized)
        if instance is None:
            with self._lock:
                instance = self._instances.get(normalized)
                if instance is None:
                    instance = self._registry[normalized]()
                    self._instances[normalized] = instance
                    self.logger.debug("Cached shared '%s' instance", normalized)
        return instance

    def keys(self):
        return tuple(sorted(self._registry.keys()))

    def __contains__(self, key: str) -> bool:
        return self.normalize(key) in self._registry
