import logging

from fabrica.utils.registry import Registry

NOTIFIER_REGISTRY = Registry("notifier", default="console")


def register_notifier(name):
    def decorator(builder):
        NOTIFIER_REGISTRY.register(name, builder)
        return builder
    return decorator


def create_notifier(cfg_notifier=None, log_level=logging.INFO, **deps):
    """
    cfg_notifier: selector string or config section with a `name` field
    ("console", "sms"). Unknown names fall back to the console notifier.
    """
    _load_default_notifiers()
    if cfg_notifier is None or isinstance(cfg_notifier, str):
        return NOTIFIER_REGISTRY.build(cfg_notifier, None, log_level=log_level, **deps)
    return NOTIFIER_REGISTRY.build(cfg_notifier.get("name"), cfg_notifier, log_level=log_level, **deps)


def notify_users(notifier, recipients, message):
    """Send `message` to every recipient through any `Notification`."""
    for recipient in recipients:
        notifier.send(recipient, message)
    return len(recipients)


_NOTIFIERS_LOADED = False


def _load_default_notifiers():
    global _NOTIFIERS_LOADED
    if _NOTIFIERS_LOADED:
        return
    from fabrica.notifications import console, sms  # noqa: F401

    _NOTIFIERS_LOADED = True
