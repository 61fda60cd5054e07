from typing import List, Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.di import Container
from src.platform.exception.exceptions import NotFoundError
from src.platform.logging.loguru_io import Logger
from src.service.event_catalog.app.interface.i_event_repo import IEventRepo
from src.service.event_catalog.app.interface.i_section_repo import ISectionRepo
from src.service.event_catalog.domain.entity.section_entity import Section
from src.service.event_catalog.domain.enum.section_status import SectionStatus


class ListSectionsUseCase:
    def __init__(self, *, section_repo: ISectionRepo, event_repo: IEventRepo) -> None:
        self.section_repo = section_repo
        self.event_repo = event_repo

    @classmethod
    @inject
    def depends(
        cls,
        section_repo: ISectionRepo = Depends(Provide[Container.section_repo]),
        event_repo: IEventRepo = Depends(Provide[Container.event_repo]),
    ) -> Self:
        return cls(section_repo=section_repo, event_repo=event_repo)

    @Logger.io
    async def list_all(self) -> List[Section]:
        return await self.section_repo.list_all()

    @Logger.io
    async def list_by_event(self, *, event_id: int) -> List[Section]:
        if await self.event_repo.get_by_id(event_id=event_id) is None:
            raise NotFoundError(f'Event not found with ID: {event_id}')
        return await self.section_repo.list_by_event(event_id=event_id)

    @Logger.io
    async def list_by_status(self, *, status: SectionStatus) -> List[Section]:
        return await self.section_repo.list_by_status(status=status)
