"""
Booking Status Enum - Domain Value Object

A ticket starts AVAILABLE and can only move to BOOKED; there is no way back.
"""

from enum import StrEnum


class BookingStatus(StrEnum):
    AVAILABLE = 'available'
    BOOKED = 'booked'
