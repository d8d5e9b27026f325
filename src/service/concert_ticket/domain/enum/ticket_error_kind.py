from enum import StrEnum


class TicketErrorKind(StrEnum):
    """Closed set of failure kinds a ticket store operation can report."""

    NOT_FOUND = 'not_found'
    INVALID_INPUT = 'invalid_input'
    ALREADY_BOOKED = 'already_booked'
