from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Callable, Optional


ClickHandler = Callable[[], None]


class Button(ABC):
    """A clickable, renderable UI component."""

    label: str

    @abstractmethod
    def render(self) -> str:
        """Return the markup for this button."""
        pass

    @abstractmethod
    def on_click(self, handler: Optional[ClickHandler]) -> "Button":
        """Return an equivalent button with `handler` bound to clicks."""
        pass

    @abstractmethod
    def click(self) -> None:
        pass


class TextInput(ABC):

    name: str
    placeholder: str

    @abstractmethod
    def render(self) -> str:
        pass
