"""Concert Ticket Domain Value Objects"""

from src.service.concert_ticket.domain.value_object.ticket_payload import TicketPayload

__all__ = ['TicketPayload']
