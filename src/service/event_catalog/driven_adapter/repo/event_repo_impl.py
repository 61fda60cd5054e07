from datetime import date, time
from typing import AsyncContextManager, Callable, List, Optional

from sqlalchemy import Select, delete, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from src.platform.logging.loguru_io import Logger
from src.service.event_catalog.app.interface.i_event_repo import IEventRepo
from src.service.event_catalog.domain.entity.category_entity import Category
from src.service.event_catalog.domain.entity.event_entity import Event
from src.service.event_catalog.domain.enum.event_status import EventStatus
from src.service.event_catalog.driven_adapter.model.event_model import EventModel
from src.service.event_catalog.driven_adapter.repo.category_repo_impl import CategoryRepoImpl


class EventRepoImpl(IEventRepo):
    def __init__(self, session_factory: Callable[..., AsyncContextManager[AsyncSession]]):
        self.session_factory = session_factory

    @Logger.io
    async def get_by_id(self, *, event_id: int) -> Optional[Event]:
        async with self.session_factory() as session:
            event_model = await session.get(EventModel, event_id)
            return self._model_to_entity(event_model) if event_model else None

    @Logger.io
    async def exists_by_name_date_time(self, *, name: str, date: date, time: time) -> bool:
        async with self.session_factory() as session:
            result = await session.execute(
                select(EventModel.id)
                .where(
                    func.lower(EventModel.name) == name.lower(),
                    EventModel.date == date,
                    EventModel.time == time,
                )
                .limit(1)
            )
            return result.scalar_one_or_none() is not None

    @Logger.io
    async def list_all(self) -> List[Event]:
        return await self._list(select(EventModel).order_by(EventModel.id))

    @Logger.io
    async def list_by_category(self, *, category_id: int) -> List[Event]:
        return await self._list(
            select(EventModel).where(EventModel.category_id == category_id).order_by(EventModel.id)
        )

    @Logger.io
    async def list_by_status(self, *, status: EventStatus) -> List[Event]:
        return await self._list(
            select(EventModel).where(EventModel.status == status.value).order_by(EventModel.id)
        )

    @Logger.io
    async def list_by_date(self, *, date: date) -> List[Event]:
        return await self._list(
            select(EventModel).where(EventModel.date == date).order_by(EventModel.time)
        )

    @Logger.io
    async def list_after(self, *, after: date) -> List[Event]:
        return await self._list(
            select(EventModel)
            .where(EventModel.date > after)
            .order_by(EventModel.date, EventModel.time)
        )

    @Logger.io
    async def list_between(self, *, start: date, end: date) -> List[Event]:
        return await self._list(
            select(EventModel)
            .where(EventModel.date.between(start, end))
            .order_by(EventModel.date, EventModel.time)
        )

    @Logger.io
    async def create(self, *, event: Event) -> Event:
        async with self.session_factory() as session:
            event_model = EventModel()
            self._copy_fields(event, event_model)
            session.add(event_model)
            await session.commit()
            await session.refresh(event_model)

            return self._model_to_entity(event_model, category=event.category)

    @Logger.io
    async def update(self, *, event: Event) -> Event:
        async with self.session_factory() as session:
            event_model = await session.get(EventModel, event.id)
            if event_model is None:
                raise ValueError(f'Event {event.id} vanished before update')

            self._copy_fields(event, event_model)
            await session.commit()
            await session.refresh(event_model)

            return self._model_to_entity(event_model, category=event.category)

    @Logger.io
    async def delete(self, *, event_id: int) -> bool:
        async with self.session_factory() as session:
            result = await session.execute(delete(EventModel).where(EventModel.id == event_id))
            await session.commit()
            return result.rowcount > 0

    async def _list(self, stmt: Select) -> List[Event]:
        async with self.session_factory() as session:
            result = await session.execute(stmt)
            return [self._model_to_entity(model) for model in result.scalars().all()]

    @staticmethod
    def _copy_fields(event: Event, event_model: EventModel) -> None:
        event_model.name = event.name
        event_model.date = event.date
        event_model.time = event.time
        event_model.location = event.location
        event_model.capacity = event.capacity
        event_model.status = event.status.value
        event_model.description = event.description
        event_model.image = event.image
        event_model.category_id = event.category_id

    @staticmethod
    def _model_to_entity(
        event_model: EventModel, *, category: Optional[Category] = None
    ) -> Event:
        if category is None and event_model.category is not None:
            category = CategoryRepoImpl._model_to_entity(event_model.category)

        return Event(
            id=event_model.id,
            name=event_model.name,
            date=event_model.date,
            time=event_model.time,
            location=event_model.location,
            capacity=event_model.capacity,
            category_id=event_model.category_id,
            status=EventStatus(event_model.status),
            description=event_model.description,
            image=event_model.image,
            category=category,
        )
