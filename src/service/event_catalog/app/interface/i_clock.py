from abc import ABC, abstractmethod
from datetime import date


class IClock(ABC):
    """Source of "today" for status derivation."""

    @abstractmethod
    def today(self) -> date:
        pass
