from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict

from src.service.concert_ticket.domain.entity.ticket_entity import TicketEntity
from src.service.concert_ticket.domain.value_object.ticket_payload import TicketPayload


class TicketPayloadRequest(BaseModel):
    # Only shape is checked here; TicketStore owns the business rules (non-empty, price > 0)
    concert_name: str
    seat_number: str
    price: float

    model_config = ConfigDict(
        json_schema_extra={
            'example': {
                'concert_name': 'Rock Night',
                'seat_number': 'A1',
                'price': 50.0,
            }
        }
    )

    def to_payload(self) -> TicketPayload:
        return TicketPayload(
            concert_name=self.concert_name,
            seat_number=self.seat_number,
            price=self.price,
        )


class TicketResponse(BaseModel):
    id: int
    concert_name: str
    seat_number: str
    price: float
    booking_status: str
    created_at: datetime
    updated_at: Optional[datetime] = None

    model_config = ConfigDict(
        json_schema_extra={
            'example': {
                'id': 1,
                'concert_name': 'Rock Night',
                'seat_number': 'A1',
                'price': 50.0,
                'booking_status': 'available',
                'created_at': '2026-01-01T20:00:00Z',
                'updated_at': None,
            }
        }
    )

    @classmethod
    def from_entity(cls, ticket: TicketEntity) -> 'TicketResponse':
        return cls(
            id=ticket.id,
            concert_name=ticket.concert_name,
            seat_number=ticket.seat_number,
            price=ticket.price,
            booking_status=ticket.booking_status.value,
            created_at=ticket.created_at,
            updated_at=ticket.updated_at,
        )
