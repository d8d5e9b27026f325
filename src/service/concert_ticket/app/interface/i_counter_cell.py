from abc import ABC, abstractmethod


class ICounterCell(ABC):
    """A single durable integer. A fresh cell loads 0."""

    @abstractmethod
    def load(self) -> int:
        pass

    @abstractmethod
    def save(self, value: int) -> None:
        """Persist value; must be durable before returning."""
        pass
