#!/usr/bin/env python3
"""
Database Seed Script
Populate sample concert tickets through the TicketStore

Features:
1. Create Tickets - a handful of seats for two concerts
2. Book One - mark the first seat as booked

Notes:
- Goes through TicketStore, so ids come from the persisted counter
- Run `python script/reset_database.py` first for ids starting at 1
"""

from dataclasses import dataclass
import sys

from src.platform.config import di
from src.platform.config.di import container
from src.service.concert_ticket.domain.value_object.ticket_payload import TicketPayload


@dataclass
class TicketConfig:
    """Ticket seed configuration"""
    concert_name: str
    seat_number: str
    price: float


SEED_TICKETS = [
    TicketConfig(concert_name='Rock Night', seat_number='A1', price=50.0),
    TicketConfig(concert_name='Rock Night', seat_number='A2', price=50.0),
    TicketConfig(concert_name='Rock Night', seat_number='B1', price=35.0),
    TicketConfig(concert_name='Jazz Night', seat_number='VIP-1', price=120.0),
    TicketConfig(concert_name='Jazz Night', seat_number='C7', price=60.0),
]


def seed_tickets() -> list[int]:
    ticket_store = container.ticket_store()
    created_ids = []
    for config in SEED_TICKETS:
        ticket = ticket_store.create(
            TicketPayload(
                concert_name=config.concert_name,
                seat_number=config.seat_number,
                price=config.price,
            )
        )
        created_ids.append(ticket.id)
        print(f'   🎫 #{ticket.id} {ticket.concert_name} / {ticket.seat_number} @ {ticket.price}')

    booked = ticket_store.book(created_ids[0])
    print(f'   ✅ #{booked.id} booked')
    return created_ids


def main() -> None:
    print('🌱 Starting data seeding...')
    print('=' * 50)

    try:
        di.setup()
        created_ids = seed_tickets()
        print('=' * 50)
        print(f'🌱 Data seeding completed! ({len(created_ids)} tickets)')
    except Exception as e:
        print(f'❌ Seeding failed: {e}')
        sys.exit(1)
    finally:
        di.cleanup()


if __name__ == '__main__':
    main()
