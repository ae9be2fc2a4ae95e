from dataclasses import dataclass

from fabrica.core.interfaces.device import DeviceFactory, SmartPhone, Tablet
from fabrica.devices import register_device_family
from fabrica.utils.logging_utils import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class SamsungSmartPhone(SmartPhone):
    model: str = "Galaxy S"
    brand: str = "samsung"

    def switch_on(self) -> bool:
        logger.info("%s turning on ...", self.model)
        return True

    def ring(self) -> str:
        return "Over the Horizon"


@dataclass(frozen=True)
class SamsungTablet(Tablet):
    model: str = "Galaxy Tab"
    brand: str = "samsung"

    def switch_on(self) -> bool:
        logger.info("%s turning on ...", self.model)
        return True


class SamsungFactory(DeviceFactory):
    def create_smartphone(self) -> SmartPhone:
        return SamsungSmartPhone()

    def create_tablet(self) -> Tablet:
        return SamsungTablet()


@register_device_family("samsung")
def _build_samsung_factory():
    return SamsungFactory()
