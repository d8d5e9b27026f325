"""
Ticket store errors

Every failure a store operation reports is one of three kinds. Each concrete
error carries its TicketErrorKind plus a user-safe message, so callers can
either catch a specific class or match on `error.kind`.
"""

from src.platform.exception.exceptions import CustomBaseError
from src.service.concert_ticket.domain.enum.ticket_error_kind import TicketErrorKind


class TicketStoreError(CustomBaseError):
    kind: TicketErrorKind

    def __init__(self, message: str, status_code: int) -> None:
        super().__init__(message, status_code)

    def __str__(self) -> str:
        return f'{self.kind.value}: {self.message}'


class TicketNotFoundError(TicketStoreError):
    kind = TicketErrorKind.NOT_FOUND

    def __init__(self, ticket_id: int, message: str | None = None) -> None:
        super().__init__(message or f'A ticket with id={ticket_id} not found', 404)
        self.ticket_id = ticket_id


class InvalidTicketInputError(TicketStoreError):
    kind = TicketErrorKind.INVALID_INPUT

    def __init__(self, reason: str) -> None:
        super().__init__(f'All fields must be provided and valid: {reason}', 400)
        self.reason = reason


class TicketAlreadyBookedError(TicketStoreError):
    kind = TicketErrorKind.ALREADY_BOOKED

    def __init__(self, ticket_id: int) -> None:
        super().__init__(f'Ticket with id={ticket_id} is already booked', 409)
        self.ticket_id = ticket_id
