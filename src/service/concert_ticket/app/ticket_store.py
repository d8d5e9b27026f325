"""
Ticket Store

The single owner of ticket records. It holds the id allocator, the ticket map
and the clock, and exposes the five ticket operations:

- get:    point lookup
- create: validate -> allocate id -> insert
- update: validate -> lookup -> overwrite client fields
- delete: remove and return
- book:   lookup -> AVAILABLE -> BOOKED (rejects a second booking)

Every operation checks first and writes last, so a failed call leaves the map
untouched. One re-entrant lock covers each whole operation: update and book
are read-modify-write, and create must not interleave two allocator calls.
"""

from datetime import datetime, timezone
import threading
from typing import Callable

from src.platform.logging.loguru_io import Logger
from src.service.concert_ticket.app.id_allocator import IdAllocator
from src.service.concert_ticket.app.interface.i_ticket_map import ITicketMap
from src.service.concert_ticket.domain.entity.ticket_entity import TicketEntity
from src.service.concert_ticket.domain.ticket_error import TicketNotFoundError
from src.service.concert_ticket.domain.value_object.ticket_payload import TicketPayload


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


class TicketStore:
    def __init__(
        self,
        *,
        id_allocator: IdAllocator,
        ticket_map: ITicketMap,
        clock: Callable[[], datetime] = utc_now,
    ) -> None:
        self.id_allocator = id_allocator
        self.ticket_map = ticket_map
        self.clock = clock
        self._lock = threading.RLock()

    @Logger.io
    def get(self, ticket_id: int) -> TicketEntity:
        with self._lock:
            ticket = self.ticket_map.get(ticket_id)
            if ticket is None:
                raise TicketNotFoundError(ticket_id)
            return ticket

    @Logger.io
    def create(self, payload: TicketPayload) -> TicketEntity:
        with self._lock:
            # Validate before allocating: a rejected payload never burns an id
            payload.validate()

            ticket = TicketEntity.create(
                ticket_id=self.id_allocator.next_id(),
                payload=payload,
                now=self.clock(),
            )
            self.ticket_map.insert(ticket)
            Logger.base.info(f'🎫 [TicketStore] Created ticket {ticket.id}')
            return ticket

    @Logger.io
    def update(self, ticket_id: int, payload: TicketPayload) -> TicketEntity:
        with self._lock:
            payload.validate()

            ticket = self.ticket_map.get(ticket_id)
            if ticket is None:
                raise TicketNotFoundError(
                    ticket_id,
                    f"Couldn't update a ticket with id={ticket_id}. Ticket not found",
                )

            updated = ticket.with_payload(payload=payload, now=self.clock())
            self.ticket_map.insert(updated)
            return updated

    @Logger.io
    def delete(self, ticket_id: int) -> TicketEntity:
        with self._lock:
            removed = self.ticket_map.remove(ticket_id)
            if removed is None:
                raise TicketNotFoundError(
                    ticket_id,
                    f"Couldn't delete a ticket with id={ticket_id}. Ticket not found.",
                )
            Logger.base.info(f'🗑️  [TicketStore] Deleted ticket {ticket_id}')
            return removed

    @Logger.io
    def book(self, ticket_id: int) -> TicketEntity:
        with self._lock:
            ticket = self.ticket_map.get(ticket_id)
            if ticket is None:
                raise TicketNotFoundError(
                    ticket_id,
                    f"Couldn't book a ticket with id={ticket_id}. Ticket not found",
                )

            booked = ticket.booked(now=self.clock())
            self.ticket_map.insert(booked)
            Logger.base.info(f'✅ [TicketStore] Booked ticket {ticket_id}')
            return booked
