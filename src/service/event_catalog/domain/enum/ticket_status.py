"""
Ticket status values.

Only declared: no transition rules are enforced for tickets yet.
"""

from enum import StrEnum


class TicketStatus(StrEnum):
    VALID = 'VALID'
    EXPIRED = 'EXPIRED'
    CANCELLED = 'CANCELLED'
    USED = 'USED'
