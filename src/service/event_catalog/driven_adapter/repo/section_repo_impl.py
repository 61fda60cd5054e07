from typing import AsyncContextManager, Callable, List, Optional

from sqlalchemy import Select, delete, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from src.platform.logging.loguru_io import Logger
from src.service.event_catalog.app.interface.i_section_repo import ISectionRepo
from src.service.event_catalog.domain.entity.section_entity import Section
from src.service.event_catalog.domain.enum.section_status import SectionStatus
from src.service.event_catalog.driven_adapter.model.section_model import SectionModel


class SectionRepoImpl(ISectionRepo):
    def __init__(self, session_factory: Callable[..., AsyncContextManager[AsyncSession]]):
        self.session_factory = session_factory

    @Logger.io
    async def get_by_id(self, *, section_id: int) -> Optional[Section]:
        async with self.session_factory() as session:
            section_model = await session.get(SectionModel, section_id)
            return self._model_to_entity(section_model) if section_model else None

    @Logger.io
    async def exists_by_name_and_event(self, *, name: str, event_id: int) -> bool:
        async with self.session_factory() as session:
            result = await session.execute(
                select(SectionModel.id)
                .where(
                    func.lower(SectionModel.name) == name.lower(),
                    SectionModel.event_id == event_id,
                )
                .limit(1)
            )
            return result.scalar_one_or_none() is not None

    @Logger.io
    async def list_all(self) -> List[Section]:
        return await self._list(select(SectionModel).order_by(SectionModel.id))

    @Logger.io
    async def list_by_event(self, *, event_id: int) -> List[Section]:
        return await self._list(
            select(SectionModel).where(SectionModel.event_id == event_id).order_by(SectionModel.id)
        )

    @Logger.io
    async def list_by_status(self, *, status: SectionStatus) -> List[Section]:
        return await self._list(
            select(SectionModel)
            .where(SectionModel.status == status.value)
            .order_by(SectionModel.id)
        )

    @Logger.io
    async def create(self, *, section: Section) -> Section:
        async with self.session_factory() as session:
            section_model = SectionModel(
                name=section.name,
                row_count=section.row_count,
                seat_count=section.seat_count,
                status=section.status.value,
                event_id=section.event_id,
            )
            session.add(section_model)
            await session.commit()
            await session.refresh(section_model)

            return self._model_to_entity(section_model)

    @Logger.io
    async def update(self, *, section: Section) -> Section:
        async with self.session_factory() as session:
            section_model = await session.get(SectionModel, section.id)
            if section_model is None:
                raise ValueError(f'Section {section.id} vanished before update')

            section_model.name = section.name
            section_model.row_count = section.row_count
            section_model.seat_count = section.seat_count
            section_model.status = section.status.value
            section_model.event_id = section.event_id
            await session.commit()
            await session.refresh(section_model)

            return self._model_to_entity(section_model)

    @Logger.io
    async def delete(self, *, section_id: int) -> bool:
        async with self.session_factory() as session:
            result = await session.execute(
                delete(SectionModel).where(SectionModel.id == section_id)
            )
            await session.commit()
            return result.rowcount > 0

    async def _list(self, stmt: Select) -> List[Section]:
        async with self.session_factory() as session:
            result = await session.execute(stmt)
            return [self._model_to_entity(model) for model in result.scalars().all()]

    @staticmethod
    def _model_to_entity(section_model: SectionModel) -> Section:
        return Section(
            id=section_model.id,
            name=section_model.name,
            row_count=section_model.row_count,
            seat_count=section_model.seat_count,
            event_id=section_model.event_id,
            status=SectionStatus(section_model.status),
        )
