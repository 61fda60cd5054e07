from datetime import date
from typing import List, Optional, Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.di import Container
from src.platform.exception.exceptions import NotFoundError, ValidationError
from src.platform.logging.loguru_io import Logger
from src.service.event_catalog.app.interface.i_category_repo import ICategoryRepo
from src.service.event_catalog.app.interface.i_clock import IClock
from src.service.event_catalog.app.interface.i_event_repo import IEventRepo
from src.service.event_catalog.domain.entity.event_entity import Event
from src.service.event_catalog.domain.enum.event_status import EventStatus


class ListEventsUseCase:
    def __init__(
        self, *, event_repo: IEventRepo, category_repo: ICategoryRepo, clock: IClock
    ) -> None:
        self.event_repo = event_repo
        self.category_repo = category_repo
        self.clock = clock

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
    async def list_all(self) -> List[Event]:
        return await self.event_repo.list_all()

    @Logger.io
    async def list_by_category(self, *, category_id: int) -> List[Event]:
        if await self.category_repo.get_by_id(category_id=category_id) is None:
            raise NotFoundError(f'Category not found with ID: {category_id}')
        return await self.event_repo.list_by_category(category_id=category_id)

    @Logger.io
    async def list_by_status(self, *, status: EventStatus) -> List[Event]:
        return await self.event_repo.list_by_status(status=status)

    @Logger.io
    async def list_by_date(self, *, date: date) -> List[Event]:
        return await self.event_repo.list_by_date(date=date)

    @Logger.io
    async def list_upcoming(self, *, after: Optional[date] = None) -> List[Event]:
        """Events dated strictly after ``after``, which defaults to today."""
        return await self.event_repo.list_after(after=after or self.clock.today())

    @Logger.io
    async def list_between(self, *, start: Optional[date], end: Optional[date]) -> List[Event]:
        """
        Events dated within [start, end], ordered by date and time.

        The returned statuses are re-derived against today for display only;
        nothing is written back.
        """
        if start is None or end is None:
            raise ValidationError('Start and end dates must not be null')
        if end < start:
            raise ValidationError('End date cannot be before start date')

        today = self.clock.today()
        events = await self.event_repo.list_between(start=start, end=end)
        Logger.base.info(f'[LIST_BETWEEN] Found {len(events)} events between {start} and {end}')
        return [event.with_derived_status(today=today) for event in events]
