from typing import Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.di import Container
from src.platform.exception.exceptions import NotFoundError
from src.platform.logging.loguru_io import Logger
from src.service.event_catalog.app.command.section_mutation_pipeline import (
    SectionMutationPipeline,
)
from src.service.event_catalog.app.interface.i_event_repo import IEventRepo
from src.service.event_catalog.app.interface.i_section_repo import ISectionRepo
from src.service.event_catalog.domain.entity.section_entity import Section
from src.service.event_catalog.domain.section_consistency_domain import SectionDraft


class UpdateSectionUseCase:
    """
    Replace every editable field of a section.

    Reactivating an INACTIVE section is checked against the parent event the
    draft points at, which may differ from the current one.
    """

    def __init__(self, *, section_repo: ISectionRepo, event_repo: IEventRepo) -> None:
        self.section_repo = section_repo
        self.pipeline = SectionMutationPipeline(section_repo=section_repo, event_repo=event_repo)

    @classmethod
    @inject
    def depends(
        cls,
        section_repo: ISectionRepo = Depends(Provide[Container.section_repo]),
        event_repo: IEventRepo = Depends(Provide[Container.event_repo]),
    ) -> Self:
        return cls(section_repo=section_repo, event_repo=event_repo)

    @Logger.io
    async def execute(self, *, section_id: int, draft: SectionDraft) -> Section:
        existing = await self.section_repo.get_by_id(section_id=section_id)
        if existing is None:
            raise NotFoundError(f'Section not found with ID: {section_id}')

        section = await self.pipeline.run(draft=draft, existing=existing)
        Logger.base.info(f'[UPDATE_SECTION] Section {section_id} updated, status {section.status}')
        return section
