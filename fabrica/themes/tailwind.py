from __future__ import annotations

from dataclasses import dataclass, replace
from html import escape
from typing import Optional

from fabrica.core.interfaces.component import Button, ClickHandler, TextInput
from fabrica.core.interfaces.component_factory import ComponentFactory
from fabrica.themes import register_theme

BUTTON_CLASSES = "px-4 py-2 bg-blue-500 text-white rounded hover:bg-blue-600"
INPUT_CLASSES = "border rounded px-3 py-2 focus:outline-none focus:ring"


@dataclass(frozen=True)
class TailwindButton(Button):
    label: str
    classes: str = BUTTON_CLASSES
    handler: Optional[ClickHandler] = None

    def render(self) -> str:
        return f'<button class="{escape(self.classes)}">{escape(self.label)}</button>'

    def on_click(self, handler):
        return replace(self, handler=handler)

    def click(self) -> None:
        if self.handler is not None:
            self.handler()


@dataclass(frozen=True)
class TailwindInput(TextInput):
    name: str
    placeholder: str = ""
    classes: str = INPUT_CLASSES

    def render(self) -> str:
        return (
            f'<input class="{escape(self.classes)}" type="text"'
            f' name="{escape(self.name)}" placeholder="{escape(self.placeholder)}">'
        )


class TailwindFactory(ComponentFactory):
    theme = "tailwind"

    def __init__(self, classes: str = BUTTON_CLASSES, input_classes: str = INPUT_CLASSES):
        self.classes = classes
        self.input_classes = input_classes

    def create_button(self, label: str) -> Button:
        return TailwindButton(label=label, classes=self.classes)

    def create_input(self, name: str, placeholder: str = "") -> TextInput:
        return TailwindInput(name=name, placeholder=placeholder, classes=self.input_classes)


@register_theme("tailwind")
def _build_tailwind_factory(**options):
    return TailwindFactory(**options)
