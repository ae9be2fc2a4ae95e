from abc import ABC, abstractmethod


class Prototype(ABC):

    @abstractmethod
    def clone(self):
        """Return an independent copy of this object."""
        pass
