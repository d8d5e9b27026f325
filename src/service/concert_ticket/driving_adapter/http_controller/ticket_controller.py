from typing import Annotated

from dependency_injector.wiring import Provide, inject
from fastapi import APIRouter, Depends, Path, status

from src.platform.config.di import Container
from src.platform.logging.loguru_io import Logger
from src.service.concert_ticket.app.id_allocator import U64_MAX
from src.service.concert_ticket.app.ticket_store import TicketStore
from src.service.concert_ticket.driving_adapter.schema.ticket_schema import (
    TicketPayloadRequest,
    TicketResponse,
)


# === API Router ===

router = APIRouter()

# Store ids are unsigned 64-bit
TicketId = Annotated[int, Path(ge=0, le=U64_MAX, description='Ticket id')]


@router.get('/{ticket_id}', response_model=TicketResponse)
@Logger.io
@inject
def get_ticket(
    ticket_id: TicketId,
    ticket_store: TicketStore = Depends(Provide[Container.ticket_store]),
) -> TicketResponse:
    """Fetch one ticket by id."""
    return TicketResponse.from_entity(ticket_store.get(ticket_id))


@router.post('', response_model=TicketResponse, status_code=status.HTTP_201_CREATED)
@Logger.io
@inject
def create_ticket(
    request: TicketPayloadRequest,
    ticket_store: TicketStore = Depends(Provide[Container.ticket_store]),
) -> TicketResponse:
    """Create an available ticket under the next id."""
    return TicketResponse.from_entity(ticket_store.create(request.to_payload()))


@router.put('/{ticket_id}', response_model=TicketResponse)
@Logger.io
@inject
def update_ticket(
    request: TicketPayloadRequest,
    ticket_id: TicketId,
    ticket_store: TicketStore = Depends(Provide[Container.ticket_store]),
) -> TicketResponse:
    """Replace the concert name, seat and price. Booking status is kept."""
    return TicketResponse.from_entity(ticket_store.update(ticket_id, request.to_payload()))


@router.delete('/{ticket_id}', response_model=TicketResponse)
@Logger.io
@inject
def delete_ticket(
    ticket_id: TicketId,
    ticket_store: TicketStore = Depends(Provide[Container.ticket_store]),
) -> TicketResponse:
    """Delete a ticket and return the removed record. Its id is never reissued."""
    return TicketResponse.from_entity(ticket_store.delete(ticket_id))


@router.post('/{ticket_id}/book', response_model=TicketResponse)
@Logger.io
@inject
def book_ticket(
    ticket_id: TicketId,
    ticket_store: TicketStore = Depends(Provide[Container.ticket_store]),
) -> TicketResponse:
    """Book an available ticket. A second booking is rejected with 409."""
    return TicketResponse.from_entity(ticket_store.book(ticket_id))
