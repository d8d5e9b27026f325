from src.service.concert_ticket.app.interface.i_counter_cell import ICounterCell


class InMemoryCounterCell(ICounterCell):
    """Process-local counter; durable only for the lifetime of the object."""

    def __init__(self, initial: int = 0) -> None:
        self._value = initial

    def load(self) -> int:
        return self._value

    def save(self, value: int) -> None:
        self._value = value
