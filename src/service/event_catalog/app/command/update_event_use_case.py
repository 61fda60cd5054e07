from typing import Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.di import Container
from src.platform.exception.exceptions import NotFoundError
from src.platform.logging.loguru_io import Logger
from src.service.event_catalog.app.command.event_mutation_pipeline import EventMutationPipeline
from src.service.event_catalog.app.interface.i_category_repo import ICategoryRepo
from src.service.event_catalog.app.interface.i_clock import IClock
from src.service.event_catalog.app.interface.i_event_repo import IEventRepo
from src.service.event_catalog.domain.entity.event_entity import Event
from src.service.event_catalog.domain.event_lifecycle_domain import EventDraft


class UpdateEventUseCase:
    """
    Replace every editable field of an event.

    A draft without a status keeps the stored one, so editing a cancelled event
    leaves it cancelled. The status is re-derived from the (possibly new) date.
    """

    def __init__(
        self, *, event_repo: IEventRepo, category_repo: ICategoryRepo, clock: IClock
    ) -> None:
        self.event_repo = event_repo
        self.pipeline = EventMutationPipeline(
            event_repo=event_repo, category_repo=category_repo, clock=clock
        )

    @classmethod
    @inject
    def depends(
        cls,
        event_repo: IEventRepo = Depends(Provide[Container.event_repo]),
        category_repo: ICategoryRepo = Depends(Provide[Container.category_repo]),
        clock: IClock = Depends(Provide[Container.clock]),
    ) -> Self:
        return cls(event_repo=event_repo, category_repo=category_repo, clock=clock)

    @Logger.io
    async def execute(self, *, event_id: int, draft: EventDraft) -> Event:
        existing = await self.event_repo.get_by_id(event_id=event_id)
        if existing is None:
            raise NotFoundError(f'Event not found with ID: {event_id}')

        event = await self.pipeline.run(draft=draft, existing=existing)
        Logger.base.info(f'[UPDATE_EVENT] Event {event_id} updated, status {event.status}')
        return event
