from typing import Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.di import Container
from src.platform.logging.loguru_io import Logger
from src.service.event_catalog.app.command.event_mutation_pipeline import EventMutationPipeline
from src.service.event_catalog.app.interface.i_category_repo import ICategoryRepo
from src.service.event_catalog.app.interface.i_clock import IClock
from src.service.event_catalog.app.interface.i_event_repo import IEventRepo
from src.service.event_catalog.domain.entity.event_entity import Event
from src.service.event_catalog.domain.event_lifecycle_domain import EventDraft


class CreateEventUseCase:
    """
    Create an event.

    The status sent by the caller is only a starting point: unless it is
    CANCELLED, the stored status is derived from the event date.
    """

    def __init__(
        self, *, event_repo: IEventRepo, category_repo: ICategoryRepo, clock: IClock
    ) -> None:
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
    async def execute(self, *, draft: EventDraft) -> Event:
        event = await self.pipeline.run(draft=draft)
        Logger.base.info(f'[CREATE_EVENT] Event {event.id} created with status {event.status}')
        return event
