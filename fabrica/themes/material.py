from __future__ import annotations

from dataclasses import dataclass, replace
from html import escape
from typing import Optional

from fabrica.core.interfaces.component import Button, ClickHandler, TextInput
from fabrica.core.interfaces.component_factory import ComponentFactory
from fabrica.themes import register_theme


@dataclass(frozen=True)
class MaterialButton(Button):
    """Google Material Design raised button."""

    label: str
    ripple: bool = True
    elevation: int = 2
    handler: Optional[ClickHandler] = None

    def render(self) -> str:
        ripple = '\n    <span class="mdc-button__ripple"></span>' if self.ripple else ""
        return (
            f'<button class="mdc-button mdc-button--raised" style="elevation: {self.elevation}">'
            f"{ripple}"
            f'\n    <span class="mdc-button__label">{escape(self.label)}</span>'
            "\n</button>"
        )

    def on_click(self, handler):
        return replace(self, handler=handler)

    def click(self) -> None:
        if self.handler is not None:
            self.handler()


@dataclass(frozen=True)
class MaterialInput(TextInput):
    name: str
    placeholder: str = ""

    def render(self) -> str:
        return (
            '<label class="mdc-text-field mdc-text-field--filled">'
            f'\n    <input class="mdc-text-field__input" name="{escape(self.name)}"'
            f' placeholder="{escape(self.placeholder)}">'
            "\n</label>"
        )


class MaterialFactory(ComponentFactory):
    theme = "material"

    def __init__(self, ripple: bool = True, elevation: int = 2):
        self.ripple = ripple
        self.elevation = int(elevation)

    def create_button(self, label: str) -> Button:
        return MaterialButton(label=label, ripple=self.ripple, elevation=self.elevation)

    def create_input(self, name: str, placeholder: str = "") -> TextInput:
        return MaterialInput(name=name, placeholder=placeholder)


@register_theme("material")
def _build_material_factory(**options):
    return MaterialFactory(**options)
