from enum import StrEnum


class EventStatus(StrEnum):
    ACTIVE = 'ACTIVE'
    UPCOMING = 'UPCOMING'
    COMPLETED = 'COMPLETED'
    CANCELLED = 'CANCELLED'
