import pytest

from src.platform.exception.exceptions import IllegalStateError, NotFoundError, ValidationError
from src.service.event_catalog.app.command.create_section_use_case import CreateSectionUseCase
from src.service.event_catalog.app.command.delete_section_use_case import DeleteSectionUseCase
from src.service.event_catalog.app.command.update_section_use_case import UpdateSectionUseCase
from src.service.event_catalog.domain.enum.event_status import EventStatus
from src.service.event_catalog.domain.enum.section_status import SectionStatus
from tests.factories import make_event, make_section, make_section_draft


class TestCreateSection:
    @pytest.fixture
    def use_case(self, section_repo, event_repo) -> CreateSectionUseCase:
        event_repo.get_by_id.return_value = make_event(status=EventStatus.ACTIVE)
        return CreateSectionUseCase(section_repo=section_repo, event_repo=event_repo)

    @pytest.mark.asyncio
    async def test_create_defaults_to_active(self, use_case, section_repo):
        section = await use_case.execute(draft=make_section_draft(row_count=100, seat_count=100))

        assert section.id == 1
        assert section.status == SectionStatus.ACTIVE
        assert section.total_seats == 10_000
        section_repo.create.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_too_many_seats(self, use_case, section_repo):
        with pytest.raises(ValidationError, match='Total seats cannot exceed 10,000'):
            await use_case.execute(draft=make_section_draft(row_count=101, seat_count=100))

        section_repo.create.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_unknown_event(self, use_case, event_repo, section_repo):
        event_repo.get_by_id.return_value = None

        with pytest.raises(NotFoundError, match='Event not found with ID: 10'):
            await use_case.execute(draft=make_section_draft())

        section_repo.exists_by_name_and_event.assert_not_awaited()

    @pytest.mark.asyncio
    @pytest.mark.parametrize('status', [EventStatus.CANCELLED, EventStatus.COMPLETED])
    async def test_closed_event(self, use_case, event_repo, section_repo, status):
        event_repo.get_by_id.return_value = make_event(status=status)

        with pytest.raises(IllegalStateError):
            await use_case.execute(draft=make_section_draft())

        section_repo.create.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_active_section_under_upcoming_event_is_allowed(self, use_case, event_repo):
        event_repo.get_by_id.return_value = make_event(status=EventStatus.UPCOMING)

        section = await use_case.execute(draft=make_section_draft(status=SectionStatus.ACTIVE))

        assert section.status == SectionStatus.ACTIVE

    @pytest.mark.asyncio
    async def test_duplicate_name_in_event(self, use_case, section_repo):
        section_repo.exists_by_name_and_event.return_value = True

        with pytest.raises(ValidationError, match='already exists for this event'):
            await use_case.execute(draft=make_section_draft())

    @pytest.mark.asyncio
    async def test_missing_name_stops_before_event_lookup(self, use_case, event_repo):
        with pytest.raises(ValidationError, match='Section name is required'):
            await use_case.execute(draft=make_section_draft(name=None))

        event_repo.get_by_id.assert_not_awaited()


class TestUpdateSection:
    @pytest.fixture
    def use_case(self, section_repo, event_repo) -> UpdateSectionUseCase:
        return UpdateSectionUseCase(section_repo=section_repo, event_repo=event_repo)

    @pytest.mark.asyncio
    async def test_reactivation_under_upcoming_event_fails(
        self, use_case, section_repo, event_repo
    ):
        section_repo.get_by_id.return_value = make_section(status=SectionStatus.INACTIVE)
        event_repo.get_by_id.return_value = make_event(status=EventStatus.UPCOMING)

        with pytest.raises(IllegalStateError, match='parent event is not ACTIVE'):
            await use_case.execute(
                section_id=20, draft=make_section_draft(status=SectionStatus.ACTIVE)
            )

        section_repo.update.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_reactivation_under_active_event(self, use_case, section_repo, event_repo):
        section_repo.get_by_id.return_value = make_section(status=SectionStatus.INACTIVE)
        event_repo.get_by_id.return_value = make_event(status=EventStatus.ACTIVE)

        section = await use_case.execute(
            section_id=20, draft=make_section_draft(status=SectionStatus.ACTIVE)
        )

        assert section.status == SectionStatus.ACTIVE

    @pytest.mark.asyncio
    async def test_omitted_status_keeps_existing(self, use_case, section_repo, event_repo):
        section_repo.get_by_id.return_value = make_section(status=SectionStatus.INACTIVE)
        event_repo.get_by_id.return_value = make_event(status=EventStatus.UPCOMING)

        section = await use_case.execute(section_id=20, draft=make_section_draft(row_count=5))

        assert section.status == SectionStatus.INACTIVE
        assert section.row_count == 5

    @pytest.mark.asyncio
    async def test_same_name_skips_duplicate_check(self, use_case, section_repo, event_repo):
        section_repo.get_by_id.return_value = make_section(name='Balcony')
        section_repo.exists_by_name_and_event.return_value = True
        event_repo.get_by_id.return_value = make_event()

        await use_case.execute(section_id=20, draft=make_section_draft(name='balcony'))

        section_repo.exists_by_name_and_event.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_rename_to_taken_name(self, use_case, section_repo, event_repo):
        section_repo.get_by_id.return_value = make_section(name='Balcony')
        section_repo.exists_by_name_and_event.return_value = True
        event_repo.get_by_id.return_value = make_event()

        with pytest.raises(ValidationError):
            await use_case.execute(section_id=20, draft=make_section_draft(name='Stalls'))

    @pytest.mark.asyncio
    async def test_missing_section(self, use_case, section_repo, event_repo):
        section_repo.get_by_id.return_value = None

        with pytest.raises(NotFoundError, match='Section not found with ID: 20'):
            await use_case.execute(section_id=20, draft=make_section_draft())

        event_repo.get_by_id.assert_not_awaited()


class TestDeleteSection:
    @pytest.mark.asyncio
    async def test_delete(self, section_repo):
        section_repo.delete.return_value = True

        await DeleteSectionUseCase(section_repo=section_repo).execute(section_id=20)

        section_repo.delete.assert_awaited_once_with(section_id=20)

    @pytest.mark.asyncio
    async def test_delete_missing(self, section_repo):
        section_repo.delete.return_value = False

        with pytest.raises(NotFoundError):
            await DeleteSectionUseCase(section_repo=section_repo).execute(section_id=20)
