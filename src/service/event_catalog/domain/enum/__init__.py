from src.service.event_catalog.domain.enum.event_status import EventStatus
from src.service.event_catalog.domain.enum.section_status import SectionStatus
from src.service.event_catalog.domain.enum.ticket_status import TicketStatus
from src.service.event_catalog.domain.enum.transaction_status import (
    PaymentMethod,
    TransactionStatus,
)
from src.service.event_catalog.domain.enum.user_role import UserRole

__all__ = [
    'EventStatus',
    'PaymentMethod',
    'SectionStatus',
    'TicketStatus',
    'TransactionStatus',
    'UserRole',
]
