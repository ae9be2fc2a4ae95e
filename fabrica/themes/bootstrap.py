from __future__ import annotations

from dataclasses import dataclass, replace
from html import escape
from typing import Optional

from fabrica.core.interfaces.component import Button, ClickHandler, TextInput
from fabrica.core.interfaces.component_factory import ComponentFactory
from fabrica.themes import register_theme

VARIANTS = ("primary", "secondary", "success", "danger", "warning", "info", "light", "dark")
SIZES = ("sm", "md", "lg")


@dataclass(frozen=True)
class BootstrapButton(Button):
    label: str
    variant: str = "primary"
    size: str = "md"
    handler: Optional[ClickHandler] = None

    def render(self) -> str:
        return f'<button class="btn btn-{self.variant} btn-{self.size}">{escape(self.label)}</button>'

    def on_click(self, handler):
        return replace(self, handler=handler)

    def click(self) -> None:
        if self.handler is not None:
            self.handler()


@dataclass(frozen=True)
class BootstrapInput(TextInput):
    name: str
    placeholder: str = ""
    size: str = "md"

    def render(self) -> str:
        return (
            f'<input class="form-control form-control-{self.size}" type="text"'
            f' name="{escape(self.name)}" placeholder="{escape(self.placeholder)}">'
        )


class BootstrapFactory(ComponentFactory):
    """
    Bootstrap components. Variant and size are bound once here so every
    `create_*` call is a plain allocation.
    """

    theme = "bootstrap"

    def __init__(self, variant: str = "primary", size: str = "md"):
        if variant not in VARIANTS:
            raise ValueError(f"Unknown bootstrap variant: {variant}")
        if size not in SIZES:
            raise ValueError(f"Unknown bootstrap size: {size}")
        self.default_variant = variant
        self.default_size = size

    def create_button(self, label: str) -> Button:
        return BootstrapButton(label=label, variant=self.default_variant, size=self.default_size)

    def create_input(self, name: str, placeholder: str = "") -> TextInput:
        return BootstrapInput(name=name, placeholder=placeholder, size=self.default_size)


@register_theme("bootstrap")
def _build_bootstrap_factory(**options):
    return BootstrapFactory(**options)
