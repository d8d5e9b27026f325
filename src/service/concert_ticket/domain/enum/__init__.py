"""Concert Ticket Domain Enums"""

from src.service.concert_ticket.domain.enum.booking_status import BookingStatus
from src.service.concert_ticket.domain.enum.ticket_error_kind import TicketErrorKind

__all__ = ['BookingStatus', 'TicketErrorKind']
