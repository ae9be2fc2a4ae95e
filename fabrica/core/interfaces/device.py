from abc import ABC, abstractmethod


class SmartPhone(ABC):

    brand: str

    @abstractmethod
    def switch_on(self) -> bool:
        pass

    @abstractmethod
    def ring(self) -> str:
        """Return the ringtone played."""
        pass


class Tablet(ABC):

    brand: str

    @abstractmethod
    def switch_on(self) -> bool:
        pass


class DeviceFactory(ABC):
    """Produces a smartphone and a tablet from the same product family."""

    @abstractmethod
    def create_smartphone(self) -> SmartPhone:
        pass

    @abstractmethod
    def create_tablet(self) -> Tablet:
        pass
