"""Application layer interfaces (Ports)"""

from src.service.event_catalog.app.interface.i_category_repo import ICategoryRepo
from src.service.event_catalog.app.interface.i_clock import IClock
from src.service.event_catalog.app.interface.i_event_repo import IEventRepo
from src.service.event_catalog.app.interface.i_section_repo import ISectionRepo

__all__ = [
    'ICategoryRepo',
    'IClock',
    'IEventRepo',
    'ISectionRepo',
]
