"""
Database Models

Import all models here to ensure they are registered with SQLAlchemy
"""

from src.service.concert_ticket.driven_adapter.model.id_counter_model import IdCounterModel
from src.service.concert_ticket.driven_adapter.model.ticket_model import TicketModel

__all__ = [
    'IdCounterModel',
    'TicketModel',
]
