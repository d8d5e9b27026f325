"""
Wire Modules Configuration

Defines the modules that need dependency injection wiring.
Shared between production and test environments.
"""

from types import ModuleType

from src.service.concert_ticket.driving_adapter.http_controller import ticket_controller


WIRE_MODULES: list[ModuleType] = [
    ticket_controller,
]
