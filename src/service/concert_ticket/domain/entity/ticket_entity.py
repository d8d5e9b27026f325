from datetime import datetime
from typing import Optional

import attrs

from src.platform.logging.loguru_io import Logger
from src.service.concert_ticket.domain.enum.booking_status import BookingStatus
from src.service.concert_ticket.domain.ticket_error import TicketAlreadyBookedError
from src.service.concert_ticket.domain.value_object.ticket_payload import TicketPayload


@attrs.define
class TicketEntity:
    id: int
    concert_name: str
    seat_number: str
    price: float
    created_at: datetime
    booking_status: BookingStatus = attrs.field(
        default=BookingStatus.AVAILABLE, validator=attrs.validators.instance_of(BookingStatus)
    )
    updated_at: Optional[datetime] = None

    @classmethod
    @Logger.io
    def create(cls, *, ticket_id: int, payload: TicketPayload, now: datetime) -> 'TicketEntity':
        return cls(
            id=ticket_id,
            concert_name=payload.concert_name,
            seat_number=payload.seat_number,
            price=payload.price,
            created_at=now,
            booking_status=BookingStatus.AVAILABLE,
            updated_at=None,
        )

    @Logger.io
    def with_payload(self, *, payload: TicketPayload, now: datetime) -> 'TicketEntity':
        """Return a copy with the client fields replaced; id, created_at and status are kept."""
        return attrs.evolve(
            self,
            concert_name=payload.concert_name,
            seat_number=payload.seat_number,
            price=payload.price,
            updated_at=now,
        )

    @Logger.io
    def booked(self, *, now: datetime) -> 'TicketEntity':
        """Return a booked copy. Raises TicketAlreadyBookedError if this ticket is booked."""
        if self.booking_status != BookingStatus.AVAILABLE:
            raise TicketAlreadyBookedError(self.id)
        return attrs.evolve(self, booking_status=BookingStatus.BOOKED, updated_at=now)
