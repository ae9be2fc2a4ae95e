from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List, Optional

from fabrica.core.interfaces.notification import Notification
from fabrica.notifications import register_notifier
from fabrica.utils.logging_utils import get_logger

DEFAULT_PORT = 404


@dataclass(frozen=True)
class SmsMessage:
    number: str
    text: str
    port: int


class SmsGateway:
    """
    Stand-in for a third-party SMS client with its own call surface. It
    talks to nothing; delivered messages are appended to `outbox`.
    """

    def __init__(self, log_level=logging.INFO):
        self.logged_in = False
        self.port: Optional[int] = None
        self.outbox: List[SmsMessage] = []
        self.logger = get_logger(self.__class__.__name__, log_level)

    def login(self) -> bool:
        self.logged_in = True
        return True

    def set_port(self, port: int) -> int:
        self.port = port
        return port

    def send_sms(self, number: str, text: str) -> None:
        if not self.logged_in:
            raise RuntimeError("SMS gateway: login() required before send_sms()")
        if self.port is None:
            raise RuntimeError("SMS gateway: set_port() required before send_sms()")
        self.logger.info("Sending SMS to %s ...", number)
        self.outbox.append(SmsMessage(number=number, text=text, port=self.port))


class SmsNotifier(Notification):
    """
    Exposes an `SmsGateway` as a `Notification`. Only the call surface is
    translated; recipient and message go through untouched.
    """

    def __init__(self, gateway: SmsGateway, port: int = DEFAULT_PORT):
        self._gateway = gateway
        self._port = port
        self._ready = False

    def send(self, recipient: str, message: str) -> None:
        if not self._ready:
            self._gateway.login()
            self._gateway.set_port(self._port)
            self._ready = True
        self._gateway.send_sms(recipient, message)


@register_notifier("sms")
def _build_sms_notifier(cfg=None, log_level=logging.INFO, gateway=None, **_):
    port = cfg.get("port", DEFAULT_PORT) if cfg is not None else DEFAULT_PORT
    return SmsNotifier(gateway or SmsGateway(log_level=log_level), port=port)
