from typing import Optional

from pydantic import BaseModel

from src.service.event_catalog.domain.enum.section_status import SectionStatus


class SectionRequest(BaseModel):
    name: Optional[str] = None
    row_count: Optional[int] = None
    seat_count: Optional[int] = None
    event_id: Optional[int] = None
    status: Optional[SectionStatus] = None

    class Config:
        json_schema_extra = {
            'example': {'name': 'Balcony', 'row_count': 20, 'seat_count': 30, 'event_id': 1}
        }


class SectionResponse(BaseModel):
    id: int
    name: str
    row_count: int
    seat_count: int
    total_seats: int
    status: SectionStatus
    event_id: int
