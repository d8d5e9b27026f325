from typing import Optional

import attrs

from src.service.concert_ticket.app.interface.i_ticket_map import ITicketMap
from src.service.concert_ticket.domain.entity.ticket_entity import TicketEntity


class InMemoryTicketMap(ITicketMap):
    def __init__(self) -> None:
        self._tickets: dict[int, TicketEntity] = {}

    def get(self, ticket_id: int) -> Optional[TicketEntity]:
        ticket = self._tickets.get(ticket_id)
        return attrs.evolve(ticket) if ticket is not None else None

    def insert(self, ticket: TicketEntity) -> None:
        self._tickets[ticket.id] = attrs.evolve(ticket)

    def remove(self, ticket_id: int) -> Optional[TicketEntity]:
        return self._tickets.pop(ticket_id, None)

