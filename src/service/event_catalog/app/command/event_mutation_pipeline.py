from typing import Optional

from src.platform.exception.exceptions import NotFoundError, ValidationError
from src.service.event_catalog.app.command.mutation_pipeline import MutationPipeline
from src.service.event_catalog.app.interface.i_category_repo import ICategoryRepo
from src.service.event_catalog.app.interface.i_clock import IClock
from src.service.event_catalog.app.interface.i_event_repo import IEventRepo
from src.service.event_catalog.domain.entity.category_entity import Category
from src.service.event_catalog.domain.entity.event_entity import Event
from src.service.event_catalog.domain.event_lifecycle_domain import (
    EventDraft,
    has_identity_changed,
    validate_event_business_rules,
    validate_event_required_fields,
)


class EventMutationPipeline(MutationPipeline[EventDraft, Category, Event]):
    def __init__(
        self, *, event_repo: IEventRepo, category_repo: ICategoryRepo, clock: IClock
    ) -> None:
        self.event_repo = event_repo
        self.category_repo = category_repo
        self.clock = clock

    def check_required_fields(self, draft: EventDraft) -> None:
        validate_event_required_fields(draft)

    async def resolve_references(self, draft: EventDraft) -> Category:
        category = await self.category_repo.get_by_id(category_id=draft.category_id)  # type: ignore[arg-type]
        if category is None:
            raise NotFoundError(f'Category not found with ID: {draft.category_id}')
        return category

    def check_business_rules(
        self, draft: EventDraft, *, ref: Category, existing: Optional[Event]
    ) -> None:
        validate_event_business_rules(draft)

    async def check_duplicates(self, draft: EventDraft, *, existing: Optional[Event]) -> None:
        if existing is not None and not has_identity_changed(existing, draft):
            return
        if await self.event_repo.exists_by_name_date_time(
            name=draft.name,  # type: ignore[arg-type]
            date=draft.date,  # type: ignore[arg-type]
            time=draft.time,  # type: ignore[arg-type]
        ):
            raise ValidationError('An event with this name, date, and time already exists')

    def build(self, draft: EventDraft, *, ref: Category, existing: Optional[Event]) -> Event:
        return Event.from_draft(draft=draft, category=ref, existing=existing)

    def derive_state(self, entity: Event) -> Event:
        return entity.with_derived_status(today=self.clock.today())

    async def persist(self, entity: Event, *, is_new: bool) -> Event:
        if is_new:
            return await self.event_repo.create(event=entity)
        return await self.event_repo.update(event=entity)
