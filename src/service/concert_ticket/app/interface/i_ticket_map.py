from abc import ABC, abstractmethod
from typing import Optional

from src.service.concert_ticket.domain.entity.ticket_entity import TicketEntity


class ITicketMap(ABC):
    """Durable map from ticket id to ticket record.

    Implementations hand out copies: mutating a returned entity never changes
    what is stored.
    """

    @abstractmethod
    def get(self, ticket_id: int) -> Optional[TicketEntity]:
        pass

    @abstractmethod
    def insert(self, ticket: TicketEntity) -> None:
        """Insert or overwrite the record keyed by ticket.id."""
        pass

    @abstractmethod
    def remove(self, ticket_id: int) -> Optional[TicketEntity]:
        """Remove and return the record, or None if it was absent."""
        pass
