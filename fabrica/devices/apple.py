from dataclasses import dataclass

from fabrica.core.interfaces.device import DeviceFactory, SmartPhone, Tablet
from fabrica.devices import register_device_family
from fabrica.utils.logging_utils import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class AppleSmartPhone(SmartPhone):
    model: str = "iPhone"
    brand: str = "apple"

    def switch_on(self) -> bool:
        logger.info("%s turning on ...", self.model)
        return True

    def ring(self) -> str:
        return "Opening"


@dataclass(frozen=True)
class AppleTablet(Tablet):
    model: str = "iPad"
    brand: str = "apple"

    def switch_on(self) -> bool:
        logger.info("%s turning on ...", self.model)
        return True


class AppleFactory(DeviceFactory):
    def create_smartphone(self) -> SmartPhone:
        return AppleSmartPhone()

    def create_tablet(self) -> Tablet:
        return AppleTablet()


@register_device_family("apple")
def _build_apple_factory():
    return AppleFactory()
