import itertools

import pytest
from omegaconf import OmegaConf

from fabrica.client import render_login_form
from fabrica.core.interfaces.component import Button, TextInput
from fabrica.core.interfaces.component_factory import ComponentFactory
from fabrica.themes import THEME_REGISTRY, create_component_factory, get_factory
from fabrica.themes.bootstrap import BootstrapFactory
from fabrica.themes.material import MaterialButton
from _helpers import race

THEMES = ("material", "bootstrap", "tailwind")


@pytest.mark.parametrize("theme", THEMES)
def test_every_theme_produces_interface_products(theme):
    factory = get_factory(theme)
    assert isinstance(factory, ComponentFactory)
    assert factory.theme == theme
    button = factory.create_button("Sign In")
    assert isinstance(button, Button)
    assert "Sign In" in button.render()
    assert isinstance(factory.create_input("email", "Email"), TextInput)


def test_registered_themes_render_differently():
    rendered = {theme: get_factory(theme).create_button("Go").render() for theme in THEMES}
    for a, b in itertools.combinations(THEMES, 2):
        assert rendered[a] != rendered[b]
    assert set(THEME_REGISTRY.keys()) >= set(THEMES)


def test_unknown_theme_returns_default_factory():
    factory = get_factory("unknown-xyz")
    assert isinstance(factory, BootstrapFactory)
    assert factory is get_factory("bootstrap")
    assert get_factory(None) is factory


def test_unknown_theme_in_config_drops_foreign_options():
    factory = create_component_factory(OmegaConf.create({"name": "materiall", "elevation": 4}))
    assert isinstance(factory, BootstrapFactory)
    assert factory.create_button("Go").render() == '<button class="btn btn-primary btn-md">Go</button>'


def test_known_theme_still_gets_its_options():
    factory = create_component_factory(OmegaConf.create({"name": " Material ", "elevation": 4}))
    assert 'style="elevation: 4"' in factory.create_button("Go").render()


def test_bootstrap_defaults_are_bound_at_construction():
    button = get_factory("bootstrap").create_button("Cancel")
    assert button.render() == '<button class="btn btn-primary btn-md">Cancel</button>'


def test_create_component_factory_applies_config_overrides():
    factory = create_component_factory(OmegaConf.create({"name": "bootstrap", "variant": "danger", "size": "lg"}))
    assert factory.create_button("Delete").render() == '<button class="btn btn-danger btn-lg">Delete</button>'
    assert factory is not get_factory("bootstrap")


def test_bootstrap_rejects_unknown_variant():
    with pytest.raises(ValueError, match="variant"):
        BootstrapFactory(variant="neon")


def test_material_markup_and_escaping():
    html = get_factory("material").create_button("<b>Save</b>").render()
    assert 'style="elevation: 2"' in html
    assert "mdc-button__ripple" in html
    assert "&lt;b&gt;Save&lt;/b&gt;" in html


def test_products_are_immutable_and_on_click_returns_new_button():
    button = get_factory("material").create_button("Go")
    clicks = []
    bound = button.on_click(lambda: clicks.append("go"))
    assert bound is not button
    assert isinstance(bound, MaterialButton)
    button.click()
    bound.click()
    assert clicks == ["go"]
    with pytest.raises(AttributeError):
        button.label = "Stop"


def test_repeated_creates_are_equivalent():
    factory = get_factory("tailwind")
    assert factory.create_button("Ok") == factory.create_button("Ok")


@pytest.mark.parametrize("theme", THEMES)
def test_login_form_renders_with_any_theme(theme):
    form = render_login_form(get_factory(theme))
    assert form.startswith("<form>")
    assert "Sign In" in form and "Cancel" in form
    assert 'name="username"' in form


@pytest.mark.parametrize("theme", THEMES)
def test_shared_factory_handles_concurrent_creates(theme):
    factory = get_factory(theme)
    results = race(lambda: factory.create_button("Save").render(), callers=16)
    assert all(exc is None for _, exc in results)
    assert {html for html, _ in results} == {factory.create_button("Save").render()}
