from typing import Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.di import Container
from src.platform.exception.exceptions import NotFoundError
from src.platform.logging.loguru_io import Logger
from src.service.event_catalog.app.interface.i_event_repo import IEventRepo
from src.service.event_catalog.domain.entity.event_entity import Event
from src.service.event_catalog.domain.event_lifecycle_domain import validate_capacity


class UpdateEventCapacityUseCase:
    """Capacity-only edit; skips full validation and status derivation."""

    def __init__(self, *, event_repo: IEventRepo) -> None:
        self.event_repo = event_repo

    @classmethod
    @inject
    def depends(cls, event_repo: IEventRepo = Depends(Provide[Container.event_repo])) -> Self:
        return cls(event_repo=event_repo)

    @Logger.io
    async def execute(self, *, event_id: int, capacity: int) -> Event:
        # Rejected before the lookup
        validate_capacity(capacity)

        event = await self.event_repo.get_by_id(event_id=event_id)
        if event is None:
            raise NotFoundError(f'Event not found with ID: {event_id}')

        event = await self.event_repo.update(event=event.change_capacity(capacity=capacity))
        Logger.base.info(f'[UPDATE_CAPACITY] Event {event_id} capacity set to {capacity}')
        return event
