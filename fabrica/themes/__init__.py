from fabrica.utils.registry import Registry

THEME_REGISTRY = Registry("theme", default="bootstrap")


def register_theme(name):
    def decorator(builder):
        THEME_REGISTRY.register(name, builder)
        return builder
    return decorator


def get_factory(selector=None):
    """
    Shared component factory for `selector` ("material", "bootstrap",
    "tailwind"). Unknown or missing selectors get the bootstrap factory.
    """
    _load_default_themes()
    return THEME_REGISTRY.get(selector)


def create_component_factory(cfg_theme, **overrides):
    """
    Fresh factory from a config section: `cfg_theme.name` picks the theme,
    the remaining keys override that theme's defaults. Options written for a
    theme that is not registered are dropped along with the fallback.
    """
    _load_default_themes()
    if isinstance(cfg_theme, str):
        name, options = cfg_theme, {}
    else:
        name = cfg_theme.get("name")
        options = {k: v for k, v in cfg_theme.items() if k != "name"}
    options.update(overrides)

    resolved = THEME_REGISTRY.resolve(name)
    if options and resolved != THEME_REGISTRY.normalize(name):
        THEME_REGISTRY.logger.warning(
            "Ignoring options %s meant for theme '%s'; using '%s' defaults",
            sorted(options),
            name,
            resolved,
        )
        options = {}
    return THEME_REGISTRY.build(resolved, **options)


_THEMES_LOADED = False


def _load_default_themes():
    global _THEMES_LOADED
    if _THEMES_LOADED:
        return
    # Import modules that register themes via decorators.
    from fabrica.themes import bootstrap, material, tailwind  # noqa: F401

    _THEMES_LOADED = True
