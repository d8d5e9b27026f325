from src.platform.exception.exceptions import CustomBaseError
from src.platform.logging.loguru_io import Logger
from src.service.concert_ticket.app.interface.i_counter_cell import ICounterCell


U64_MAX = 2**64 - 1


class IdAllocatorExhaustedError(CustomBaseError):
    def __init__(self, max_id: int) -> None:
        super().__init__(f'Ticket id counter exhausted (max_id={max_id})', 500)
        self.max_id = max_id


class IdAllocator:
    """Hands out strictly increasing ids, starting at 1 for a fresh counter cell.

    The counter is saved before the id is returned, so an issued id is never
    handed out again, even across restarts or after the ticket is deleted.
    """

    def __init__(self, counter_cell: ICounterCell, *, max_id: int = U64_MAX) -> None:
        self.counter_cell = counter_cell
        self.max_id = max_id

    @Logger.io
    def next_id(self) -> int:
        next_value = self.counter_cell.load() + 1
        if next_value > self.max_id:
            raise IdAllocatorExhaustedError(self.max_id)
        self.counter_cell.save(next_value)
        return next_value
