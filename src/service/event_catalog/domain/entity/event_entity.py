import datetime as dt
from typing import Optional

import attrs

from src.platform.exception.exceptions import IllegalStateError
from src.platform.logging.loguru_io import Logger
from src.service.event_catalog.domain.entity.category_entity import Category
from src.service.event_catalog.domain.enum.event_status import EventStatus
from src.service.event_catalog.domain.event_lifecycle_domain import (
    EventDraft,
    derive_event_status,
    validate_capacity,
)


@attrs.define
class Event:
    name: str
    date: dt.date
    time: dt.time
    location: str
    capacity: int
    category_id: int
    status: EventStatus = EventStatus.ACTIVE
    description: Optional[str] = None
    image: Optional[str] = None
    id: Optional[int] = None
    category: Optional[Category] = None

    @classmethod
    def from_draft(
        cls, *, draft: EventDraft, category: Category, existing: Optional['Event'] = None
    ) -> 'Event':
        """
        Build the event a validated draft describes.

        A draft without a status keeps the existing event's status, or ACTIVE for a
        brand new event. Either way the result still needs ``with_derived_status``.
        """
        if draft.status is not None:
            status = draft.status
        elif existing is not None:
            status = existing.status
        else:
            status = EventStatus.ACTIVE

        return cls(
            name=draft.name,  # type: ignore[arg-type]
            date=draft.date,  # type: ignore[arg-type]
            time=draft.time,  # type: ignore[arg-type]
            location=draft.location,  # type: ignore[arg-type]
            capacity=draft.capacity,  # type: ignore[arg-type]
            category_id=category.id,  # type: ignore[arg-type]
            status=status,
            description=draft.description,
            image=draft.image,
            id=existing.id if existing else None,
            category=category,
        )

    def with_derived_status(self, *, today: dt.date) -> 'Event':
        status = derive_event_status(event_date=self.date, current_status=self.status, today=today)
        if status == EventStatus.COMPLETED and self.status != EventStatus.COMPLETED:
            Logger.base.info(f'Event date {self.date} is in the past, status set to COMPLETED')
        return attrs.evolve(self, status=status)

    @Logger.io
    def cancel(self) -> 'Event':
        if self.status == EventStatus.COMPLETED:
            raise IllegalStateError('Cannot cancel a completed event')
        return attrs.evolve(self, status=EventStatus.CANCELLED)

    @Logger.io
    def complete(self) -> 'Event':
        if self.status == EventStatus.CANCELLED:
            raise IllegalStateError('Cannot complete a cancelled event')
        return attrs.evolve(self, status=EventStatus.COMPLETED)

    def change_capacity(self, *, capacity: int) -> 'Event':
        return attrs.evolve(self, capacity=validate_capacity(capacity))

    @property
    def accepts_section_changes(self) -> bool:
        return self.status not in (EventStatus.CANCELLED, EventStatus.COMPLETED)
