from typing import Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.di import Container
from src.platform.logging.loguru_io import Logger
from src.service.event_catalog.app.command.section_mutation_pipeline import (
    SectionMutationPipeline,
)
from src.service.event_catalog.app.interface.i_event_repo import IEventRepo
from src.service.event_catalog.app.interface.i_section_repo import ISectionRepo
from src.service.event_catalog.domain.entity.section_entity import Section
from src.service.event_catalog.domain.section_consistency_domain import SectionDraft


class CreateSectionUseCase:
    def __init__(self, *, section_repo: ISectionRepo, event_repo: IEventRepo) -> None:
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
    async def execute(self, *, draft: SectionDraft) -> Section:
        section = await self.pipeline.run(draft=draft)
        Logger.base.info(
            f'[CREATE_SECTION] Section {section.id} created for event {section.event_id} '
            f'({section.total_seats} seats)'
        )
        return section
