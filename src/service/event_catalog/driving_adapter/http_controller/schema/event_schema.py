import datetime as dt
from typing import Optional

from pydantic import BaseModel

from src.service.event_catalog.domain.enum.event_status import EventStatus


class EventRequest(BaseModel):
    # Missing fields are reported by the domain validation, not by pydantic
    name: Optional[str] = None
    date: Optional[dt.date] = None
    time: Optional[dt.time] = None
    location: Optional[str] = None
    capacity: Optional[int] = None
    category_id: Optional[int] = None
    status: Optional[EventStatus] = None
    description: Optional[str] = None
    image: Optional[str] = None

    class Config:
        json_schema_extra = {
            'example': {
                'name': 'Spring Gala',
                'date': '2026-05-02',
                'time': '19:30',
                'location': 'Main Hall',
                'capacity': 800,
                'category_id': 1,
                'description': 'Annual gala evening',
            }
        }


class CapacityUpdateRequest(BaseModel):
    capacity: Optional[int] = None


class EventResponse(BaseModel):
    id: int
    name: str
    date: dt.date
    time: dt.time
    location: str
    capacity: int
    status: EventStatus
    description: Optional[str] = None
    image: Optional[str] = None
    category_id: int
    category_name: Optional[str] = None

    class Config:
        json_schema_extra = {
            'example': {
                'id': 1,
                'name': 'Spring Gala',
                'date': '2026-05-02',
                'time': '19:30:00',
                'location': 'Main Hall',
                'capacity': 800,
                'status': 'UPCOMING',
                'description': 'Annual gala evening',
                'image': None,
                'category_id': 1,
                'category_name': 'Galas',
            }
        }
