from typing import Optional

from src.platform.exception.exceptions import NotFoundError, ValidationError
from src.service.event_catalog.app.command.mutation_pipeline import MutationPipeline
from src.service.event_catalog.app.interface.i_event_repo import IEventRepo
from src.service.event_catalog.app.interface.i_section_repo import ISectionRepo
from src.service.event_catalog.domain.entity.event_entity import Event
from src.service.event_catalog.domain.entity.section_entity import Section
from src.service.event_catalog.domain.section_consistency_domain import (
    SectionDraft,
    ensure_section_activation_allowed,
    has_name_changed,
    validate_section_business_rules,
    validate_section_required_fields,
)


class SectionMutationPipeline(MutationPipeline[SectionDraft, Event, Section]):
    def __init__(self, *, section_repo: ISectionRepo, event_repo: IEventRepo) -> None:
        self.section_repo = section_repo
        self.event_repo = event_repo

    def check_required_fields(self, draft: SectionDraft) -> None:
        validate_section_required_fields(draft)

    async def resolve_references(self, draft: SectionDraft) -> Event:
        event = await self.event_repo.get_by_id(event_id=draft.event_id)  # type: ignore[arg-type]
        if event is None:
            raise NotFoundError(f'Event not found with ID: {draft.event_id}')
        return event

    def check_business_rules(
        self, draft: SectionDraft, *, ref: Event, existing: Optional[Section]
    ) -> None:
        validate_section_business_rules(draft, event=ref)
        if existing is not None:
            ensure_section_activation_allowed(
                existing=existing,
                incoming_status=draft.status or existing.status,
                event=ref,
            )

    async def check_duplicates(self, draft: SectionDraft, *, existing: Optional[Section]) -> None:
        if existing is not None and not has_name_changed(existing, draft):
            return
        if await self.section_repo.exists_by_name_and_event(
            name=draft.name,  # type: ignore[arg-type]
            event_id=draft.event_id,  # type: ignore[arg-type]
        ):
            raise ValidationError('Section with this name already exists for this event')

    def build(self, draft: SectionDraft, *, ref: Event, existing: Optional[Section]) -> Section:
        return Section.from_draft(draft=draft, event_id=ref.id, existing=existing)  # type: ignore[arg-type]

    async def persist(self, entity: Section, *, is_new: bool) -> Section:
        if is_new:
            return await self.section_repo.create(section=entity)
        return await self.section_repo.update(section=entity)
