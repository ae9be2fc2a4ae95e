import logging

from fabrica.utils.registry import Registry

BUILDER_REGISTRY = Registry("query_builder", default="mysql")


def register_dialect(name):
    def decorator(builder):
        BUILDER_REGISTRY.register(name, builder)
        return builder
    return decorator


def create_query_builder(selector=None, log_level=logging.INFO):
    """
    Fresh builder for the given dialect ("mysql", "mongo"). Builders carry
    per-query state, so unlike component factories they are never shared.
    """
    _load_default_dialects()
    if selector is not None and not isinstance(selector, str):
        selector = selector.get("dialect")
    return BUILDER_REGISTRY.build(selector, log_level=log_level)


_DIALECTS_LOADED = False


def _load_default_dialects():
    global _DIALECTS_LOADED
    if _DIALECTS_LOADED:
        return
    from fabrica.query import mongo, mysql  # noqa: F401

    _DIALECTS_LOADED = True
