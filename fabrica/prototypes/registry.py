from __future__ import annotations

import threading
from typing import Dict

from fabrica.core.interfaces.prototype import Prototype


class PrototypeRegistry:
    """Named prototypes; `spawn` hands out clones, never the originals."""

    def __init__(self) -> None:
        self._prototypes: Dict[str, Prototype] = {}
        self._lock = threading.Lock()

    def register(self, name: str, prototype: Prototype) -> None:
        if not isinstance(prototype, Prototype):
            raise TypeError(f"{type(prototype).__name__} does not implement Prototype")
        with self._lock:
            self._prototypes[name] = prototype

    def spawn(self, name: str):
        prototype = self._prototypes.get(name)
        if prototype is None:
            available = ", ".join(sorted(self._prototypes))
            raise KeyError(f"prototype '{name}' not found. Available: {available}")
        return prototype.clone()

    def keys(self):
        return tuple(sorted(self._prototypes))
