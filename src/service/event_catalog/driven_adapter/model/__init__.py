"""
Database Models

Import all models here to ensure they are registered with SQLAlchemy
"""

from src.service.event_catalog.driven_adapter.model.category_model import CategoryModel
from src.service.event_catalog.driven_adapter.model.event_model import EventModel
from src.service.event_catalog.driven_adapter.model.section_model import SectionModel
from src.service.event_catalog.driven_adapter.model.ticket_model import TicketModel
from src.service.event_catalog.driven_adapter.model.transaction_model import TransactionModel
from src.service.event_catalog.driven_adapter.model.user_model import UserModel

__all__ = [
    'CategoryModel',
    'EventModel',
    'SectionModel',
    'TicketModel',
    'TransactionModel',
    'UserModel',
]
