import math

import attrs

from src.platform.logging.loguru_io import Logger
from src.service.concert_ticket.domain.ticket_error import InvalidTicketInputError


def _is_empty(value: str) -> bool:
    # Whitespace is content; only the empty string is rejected
    return not isinstance(value, str) or value == ''


@attrs.frozen
class TicketPayload:
    """Client-supplied ticket fields for create and update."""

    concert_name: str
    seat_number: str
    price: float

    @Logger.io
    def validate(self) -> None:
        if _is_empty(self.concert_name):
            raise InvalidTicketInputError('concert_name must not be empty')
        if _is_empty(self.seat_number):
            raise InvalidTicketInputError('seat_number must not be empty')
        # bool is an int subclass; NaN and inf fail isfinite
        if (
            isinstance(self.price, bool)
            or not isinstance(self.price, (int, float))
            or not math.isfinite(self.price)
            or self.price <= 0
        ):
            raise InvalidTicketInputError('price must be a positive number')
