from typing import Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.di import Container
from src.platform.exception.exceptions import NotFoundError
from src.platform.logging.loguru_io import Logger
from src.service.event_catalog.app.interface.i_section_repo import ISectionRepo


class DeleteSectionUseCase:
    def __init__(self, *, section_repo: ISectionRepo) -> None:
        self.section_repo = section_repo

    @classmethod
    @inject
    def depends(
        cls, section_repo: ISectionRepo = Depends(Provide[Container.section_repo])
    ) -> Self:
        return cls(section_repo=section_repo)

    @Logger.io
    async def execute(self, *, section_id: int) -> None:
        if not await self.section_repo.delete(section_id=section_id):
            raise NotFoundError(f'Section not found with ID: {section_id}')
        Logger.base.info(f'[DELETE_SECTION] Section {section_id} deleted')
