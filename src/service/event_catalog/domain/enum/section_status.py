from enum import StrEnum


class SectionStatus(StrEnum):
    ACTIVE = 'ACTIVE'
    INACTIVE = 'INACTIVE'
    CLOSED = 'CLOSED'
