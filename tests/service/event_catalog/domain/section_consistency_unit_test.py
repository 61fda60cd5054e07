import pytest

from src.platform.exception.exceptions import IllegalStateError, ValidationError
from src.service.event_catalog.domain.entity.section_entity import Section
from src.service.event_catalog.domain.enum.event_status import EventStatus
from src.service.event_catalog.domain.enum.section_status import SectionStatus
from src.service.event_catalog.domain.section_consistency_domain import (
    ensure_section_activation_allowed,
    has_name_changed,
    parse_section_status,
    validate_section_business_rules,
    validate_section_required_fields,
)
from tests.factories import make_event, make_section, make_section_draft


class TestSectionRequiredFields:
    @pytest.mark.parametrize(
        'overrides, message',
        [
            ({'name': None}, 'Section name is required'),
            ({'name': ' '}, 'Section name is required'),
            ({'row_count': None}, 'Row count is required and must be > 0'),
            ({'row_count': 0}, 'Row count is required and must be > 0'),
            ({'seat_count': -1}, 'Seat count is required and must be > 0'),
            ({'event_id': None}, 'Event is required for section'),
        ],
    )
    def test_missing_field_is_reported(self, overrides, message):
        with pytest.raises(ValidationError, match=message):
            validate_section_required_fields(make_section_draft(**overrides))


class TestSectionBusinessRules:
    def test_seat_cap_reached_exactly(self):
        validate_section_business_rules(
            make_section_draft(row_count=100, seat_count=100), event=make_event()
        )

    def test_seat_cap_exceeded(self):
        with pytest.raises(ValidationError, match='Total seats cannot exceed 10,000'):
            validate_section_business_rules(
                make_section_draft(row_count=101, seat_count=100), event=make_event()
            )

    def test_name_over_limit(self):
        with pytest.raises(ValidationError, match='Name cannot exceed 100 chars'):
            validate_section_business_rules(make_section_draft(name='s' * 101), event=make_event())

    @pytest.mark.parametrize('status', [EventStatus.CANCELLED, EventStatus.COMPLETED])
    def test_closed_parent_event_rejects_changes(self, status):
        with pytest.raises(IllegalStateError, match='cancelled or completed events'):
            validate_section_business_rules(make_section_draft(), event=make_event(status=status))

    def test_upcoming_parent_event_allows_changes(self):
        validate_section_business_rules(
            make_section_draft(), event=make_event(status=EventStatus.UPCOMING)
        )


class TestSectionActivationGuard:
    def test_reactivation_under_upcoming_event_fails(self):
        with pytest.raises(IllegalStateError, match='parent event is not ACTIVE'):
            ensure_section_activation_allowed(
                existing=make_section(status=SectionStatus.INACTIVE),
                incoming_status=SectionStatus.ACTIVE,
                event=make_event(status=EventStatus.UPCOMING),
            )

    def test_reactivation_under_active_event_passes(self):
        ensure_section_activation_allowed(
            existing=make_section(status=SectionStatus.INACTIVE),
            incoming_status=SectionStatus.ACTIVE,
            event=make_event(status=EventStatus.ACTIVE),
        )

    def test_other_transitions_are_not_guarded(self):
        ensure_section_activation_allowed(
            existing=make_section(status=SectionStatus.ACTIVE),
            incoming_status=SectionStatus.CLOSED,
            event=make_event(status=EventStatus.UPCOMING),
        )
        ensure_section_activation_allowed(
            existing=make_section(status=SectionStatus.CLOSED),
            incoming_status=SectionStatus.ACTIVE,
            event=make_event(status=EventStatus.UPCOMING),
        )


class TestSectionEntity:
    def test_new_section_defaults_to_active(self):
        section = Section.from_draft(draft=make_section_draft(), event_id=10)
        assert section.status == SectionStatus.ACTIVE
        assert section.id is None

    def test_update_keeps_existing_status_when_omitted(self):
        existing = make_section(status=SectionStatus.INACTIVE)
        section = Section.from_draft(draft=make_section_draft(), event_id=10, existing=existing)

        assert section.status == SectionStatus.INACTIVE
        assert section.id == existing.id

    def test_total_seats(self):
        assert make_section(row_count=12, seat_count=25).total_seats == 300

    def test_name_change_is_case_insensitive(self):
        existing = make_section(name='Balcony')
        assert not has_name_changed(existing, make_section_draft(name='BALCONY'))
        assert has_name_changed(existing, make_section_draft(name='Stalls'))

    def test_name_change_uses_plain_lowercasing(self):
        existing = make_section(name='Straße')
        assert has_name_changed(existing, make_section_draft(name='STRASSE'))


class TestParseSectionStatus:
    def test_accepts_any_case(self):
        assert parse_section_status('inactive') == SectionStatus.INACTIVE
        assert parse_section_status('Closed') == SectionStatus.CLOSED

    def test_unknown_status_fails(self):
        with pytest.raises(
            ValidationError, match=r'Invalid status\. Valid values: \[ACTIVE, INACTIVE, CLOSED\]'
        ):
            parse_section_status('archived')
