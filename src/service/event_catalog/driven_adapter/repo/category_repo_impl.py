from typing import AsyncContextManager, Callable, List, Optional

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from src.platform.logging.loguru_io import Logger
from src.service.event_catalog.app.interface.i_category_repo import ICategoryRepo
from src.service.event_catalog.domain.entity.category_entity import Category
from src.service.event_catalog.driven_adapter.model.category_model import CategoryModel


class CategoryRepoImpl(ICategoryRepo):
    def __init__(self, session_factory: Callable[..., AsyncContextManager[AsyncSession]]):
        self.session_factory = session_factory

    @Logger.io
    async def get_by_id(self, *, category_id: int) -> Optional[Category]:
        async with self.session_factory() as session:
            category_model = await session.get(CategoryModel, category_id)
            return self._model_to_entity(category_model) if category_model else None

    @Logger.io
    async def get_by_name(self, *, name: str) -> Optional[Category]:
        async with self.session_factory() as session:
            result = await session.execute(select(CategoryModel).where(CategoryModel.name == name))
            category_model = result.scalar_one_or_none()
            return self._model_to_entity(category_model) if category_model else None

    @Logger.io
    async def list_all(self) -> List[Category]:
        async with self.session_factory() as session:
            result = await session.execute(select(CategoryModel).order_by(CategoryModel.id))
            return [self._model_to_entity(model) for model in result.scalars().all()]

    @Logger.io
    async def create(self, *, category: Category) -> Category:
        async with self.session_factory() as session:
            category_model = CategoryModel(name=category.name)
            session.add(category_model)
            await session.commit()
            await session.refresh(category_model)

            return self._model_to_entity(category_model)

    @Logger.io
    async def update(self, *, category: Category) -> Category:
        async with self.session_factory() as session:
            category_model = await session.get(CategoryModel, category.id)
            if category_model is None:
                raise ValueError(f'Category {category.id} vanished before update')

            category_model.name = category.name
            await session.commit()
            await session.refresh(category_model)

            return self._model_to_entity(category_model)

    @Logger.io
    async def delete(self, *, category_id: int) -> bool:
        async with self.session_factory() as session:
            result = await session.execute(
                delete(CategoryModel).where(CategoryModel.id == category_id)
            )
            await session.commit()
            return result.rowcount > 0

    @staticmethod
    def _model_to_entity(category_model: CategoryModel) -> Category:
        return Category(id=category_model.id, name=category_model.name)
