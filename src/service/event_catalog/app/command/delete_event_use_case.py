from typing import Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.di import Container
from src.platform.exception.exceptions import NotFoundError
from src.platform.logging.loguru_io import Logger
from src.service.event_catalog.app.interface.i_event_repo import IEventRepo


class DeleteEventUseCase:
    def __init__(self, *, event_repo: IEventRepo) -> None:
        self.event_repo = event_repo

    @classmethod
    @inject
    def depends(cls, event_repo: IEventRepo = Depends(Provide[Container.event_repo])) -> Self:
        return cls(event_repo=event_repo)

    @Logger.io
    async def execute(self, *, event_id: int) -> None:
        if not await self.event_repo.delete(event_id=event_id):
            raise NotFoundError(f'Event not found with ID: {event_id}')
        Logger.base.info(f'[DELETE_EVENT] Event {event_id} deleted')
