from fabrica.utils.registry import Registry

DEVICE_REGISTRY = Registry("device", default="samsung")


def register_device_family(name):
    def decorator(builder):
        DEVICE_REGISTRY.register(name, builder)
        return builder
    return decorator


def get_device_factory(selector=None):
    _load_default_families()
    if selector is not None and not isinstance(selector, str):
        selector = selector.get("name")
    return DEVICE_REGISTRY.get(selector)


_FAMILIES_LOADED = False


def _load_default_families():
    global _FAMILIES_LOADED
    if _FAMILIES_LOADED:
        return
    from fabrica.devices import apple, samsung  # noqa: F401

    _FAMILIES_LOADED = True
