import logging

from fabrica.core.interfaces.notification import Notification
from fabrica.notifications import register_notifier
from fabrica.utils.logging_utils import get_logger


class ConsoleNotifier(Notification):
    def __init__(self, log_level=logging.INFO):
        self.sent = []
        self.logger = get_logger(self.__class__.__name__, log_level)

    def send(self, recipient: str, message: str) -> None:
        self.logger.info("Notify %s: %s", recipient, message)
        self.sent.append((recipient, message))


@register_notifier("console")
def _build_console_notifier(cfg=None, log_level=logging.INFO, **_):
    return ConsoleNotifier(log_level=log_level)
