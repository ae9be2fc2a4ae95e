from abc import ABC, abstractmethod


class Notification(ABC):

    @abstractmethod
    def send(self, recipient: str, message: str) -> None:
        """Deliver `message` to `recipient`."""
        pass
