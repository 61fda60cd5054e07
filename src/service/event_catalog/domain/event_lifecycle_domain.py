"""
Event lifecycle rules.

[Status derivation]
Outside of a manual cancel, an event's status follows its date:

    CANCELLED stays CANCELLED
    date > today  -> UPCOMING
    date < today  -> COMPLETED
    date == today -> ACTIVE

The derivation only runs when an event is created or updated. Cancel and
complete are manual overrides applied directly on the entity.

[Validation order]
required fields -> category lookup -> business rules -> duplicate check
"""

import datetime as dt
from datetime import date
from typing import TYPE_CHECKING, Optional

import attrs

from src.platform.exception.exceptions import ValidationError
from src.service.event_catalog.domain.enum.event_status import EventStatus


if TYPE_CHECKING:
    from src.service.event_catalog.domain.entity.event_entity import Event


EVENT_NAME_MAX_LENGTH = 100
EVENT_LOCATION_MAX_LENGTH = 150


@attrs.define(frozen=True)
class EventDraft:
    """Caller-supplied event fields, any of which may be missing."""

    name: Optional[str] = None
    date: Optional[dt.date] = None
    time: Optional[dt.time] = None
    location: Optional[str] = None
    capacity: Optional[int] = None
    category_id: Optional[int] = None
    status: Optional[EventStatus] = None
    description: Optional[str] = None
    image: Optional[str] = None


def derive_event_status(
    *, event_date: date, current_status: EventStatus, today: date
) -> EventStatus:
    if current_status == EventStatus.CANCELLED:
        return EventStatus.CANCELLED
    if event_date > today:
        return EventStatus.UPCOMING
    if event_date < today:
        return EventStatus.COMPLETED
    return EventStatus.ACTIVE


def _is_blank(value: Optional[str]) -> bool:
    return value is None or not value.strip()


def validate_event_required_fields(draft: EventDraft) -> None:
    if _is_blank(draft.name):
        raise ValidationError('Event name is required')
    if draft.date is None:
        raise ValidationError('Event date is required')
    if draft.time is None:
        raise ValidationError('Event time is required')
    if _is_blank(draft.location):
        raise ValidationError('Event location is required')
    if draft.category_id is None:
        raise ValidationError('Category is required')
    if draft.capacity is None or draft.capacity <= 0:
        raise ValidationError('Event capacity must be greater than 0')


def validate_event_business_rules(draft: EventDraft) -> None:
    """Assumes required fields were already checked."""
    if draft.capacity is None or draft.capacity <= 0:
        raise ValidationError('Event capacity must be greater than 0')
    if len(draft.name or '') > EVENT_NAME_MAX_LENGTH:
        raise ValidationError(f'Event name cannot exceed {EVENT_NAME_MAX_LENGTH} characters')
    if len(draft.location or '') > EVENT_LOCATION_MAX_LENGTH:
        raise ValidationError(
            f'Event location cannot exceed {EVENT_LOCATION_MAX_LENGTH} characters'
        )


def validate_capacity(capacity: Optional[int]) -> int:
    if capacity is None or capacity <= 0:
        raise ValidationError('Capacity must be greater than 0')
    return capacity


def has_identity_changed(existing: 'Event', draft: EventDraft) -> bool:
    """True when an update touches name (case-insensitive), date or time."""
    return (
        (draft.name or '').lower() != existing.name.lower()
        or draft.date != existing.date
        or draft.time != existing.time
    )


def parse_event_status(value: str) -> EventStatus:
    try:
        return EventStatus(value.strip().upper())
    except ValueError as e:
        valid = ', '.join(EventStatus)
        raise ValidationError(f'Invalid status. Valid statuses: [{valid}]') from e
