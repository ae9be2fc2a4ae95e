from abc import ABC, abstractmethod

from fabrica.core.interfaces.component import Button, TextInput


class ComponentFactory(ABC):
    """
    Creates the UI components of one theme. Callers only ever see the
    `Button` / `TextInput` contracts, never the theme-specific classes.
    """

    theme: str

    @abstractmethod
    def create_button(self, label: str) -> Button:
        pass

    @abstractmethod
    def create_input(self, name: str, placeholder: str = "") -> TextInput:
        pass
