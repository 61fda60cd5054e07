"""
Section consistency rules.

A section lives inside an event and may only be created or edited while that
event is still open (neither CANCELLED nor COMPLETED). Reactivating an
INACTIVE section additionally requires the event to be ACTIVE; this guard is
applied on update only, a section may be created ACTIVE under an UPCOMING event.
"""

from typing import TYPE_CHECKING, Optional

import attrs

from src.platform.exception.exceptions import IllegalStateError, ValidationError
from src.service.event_catalog.domain.enum.event_status import EventStatus
from src.service.event_catalog.domain.enum.section_status import SectionStatus


if TYPE_CHECKING:
    from src.service.event_catalog.domain.entity.event_entity import Event
    from src.service.event_catalog.domain.entity.section_entity import Section


SECTION_NAME_MAX_LENGTH = 100
MAX_SEATS_PER_SECTION = 10_000


@attrs.define(frozen=True)
class SectionDraft:
    name: Optional[str] = None
    row_count: Optional[int] = None
    seat_count: Optional[int] = None
    event_id: Optional[int] = None
    status: Optional[SectionStatus] = None


def validate_section_required_fields(draft: SectionDraft) -> None:
    if draft.name is None or not draft.name.strip():
        raise ValidationError('Section name is required')
    if draft.row_count is None or draft.row_count <= 0:
        raise ValidationError('Row count is required and must be > 0')
    if draft.seat_count is None or draft.seat_count <= 0:
        raise ValidationError('Seat count is required and must be > 0')
    if draft.event_id is None:
        raise ValidationError('Event is required for section')


def validate_section_business_rules(draft: SectionDraft, *, event: 'Event') -> None:
    if draft.row_count is None or draft.row_count <= 0:
        raise ValidationError('Row count must be greater than 0')
    if draft.seat_count is None or draft.seat_count <= 0:
        raise ValidationError('Seat count must be greater than 0')
    if len(draft.name or '') > SECTION_NAME_MAX_LENGTH:
        raise ValidationError(f'Name cannot exceed {SECTION_NAME_MAX_LENGTH} chars')
    if draft.row_count * draft.seat_count > MAX_SEATS_PER_SECTION:
        raise ValidationError('Total seats cannot exceed 10,000')
    if not event.accepts_section_changes:
        raise IllegalStateError('Cannot create/update sections for cancelled or completed events')


def ensure_section_activation_allowed(
    *, existing: 'Section', incoming_status: SectionStatus, event: 'Event'
) -> None:
    if (
        existing.status == SectionStatus.INACTIVE
        and incoming_status == SectionStatus.ACTIVE
        and event.status != EventStatus.ACTIVE
    ):
        raise IllegalStateError('Cannot activate section because parent event is not ACTIVE')


def has_name_changed(existing: 'Section', draft: SectionDraft) -> bool:
    return (draft.name or '').lower() != existing.name.lower()


def parse_section_status(value: str) -> SectionStatus:
    try:
        return SectionStatus(value.strip().upper())
    except ValueError as e:
        valid = ', '.join(SectionStatus)
        raise ValidationError(f'Invalid status. Valid values: [{valid}]') from e
