from omegaconf import OmegaConf

from fabrica.core.interfaces.notification import Notification
from fabrica.notifications import create_notifier, notify_users
from fabrica.notifications.console import ConsoleNotifier
from fabrica.notifications.sms import SmsGateway, SmsMessage, SmsNotifier


def test_sms_adapter_translates_the_call_surface():
    gateway = SmsGateway()
    notifier = SmsNotifier(gateway, port=2775)
    assert isinstance(notifier, Notification)

    notify_users(notifier, ["+15550100", "+15550101"], "Deploy finished")

    assert gateway.logged_in
    assert gateway.port == 2775
    assert gateway.outbox == [
        SmsMessage("+15550100", "Deploy finished", 2775),
        SmsMessage("+15550101", "Deploy finished", 2775),
    ]


def test_sms_gateway_requires_login_without_adapter():
    gateway = SmsGateway()
    try:
        gateway.send_sms("+15550100", "hi")
    except RuntimeError as exc:
        assert "login()" in str(exc)
    else:
        raise AssertionError("send_sms should require login")


def test_create_notifier_from_config_uses_port():
    gateway = SmsGateway()
    notifier = create_notifier(OmegaConf.create({"name": "sms", "port": 8080}), gateway=gateway)
    notifier.send("+15550100", "ping")
    assert gateway.outbox[0].port == 8080


def test_unknown_notifier_falls_back_to_console():
    notifier = create_notifier("pager")
    assert isinstance(notifier, ConsoleNotifier)
    assert notify_users(notifier, ["ops"], "disk full") == 1
    assert notifier.sent == [("ops", "disk full")]
