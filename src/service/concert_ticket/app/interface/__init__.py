from src.service.concert_ticket.app.interface.i_counter_cell import ICounterCell
from src.service.concert_ticket.app.interface.i_ticket_map import ITicketMap

__all__ = ['ICounterCell', 'ITicketMap']
