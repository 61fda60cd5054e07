"""
Category maintenance.

Names are unique; a clash is reported as a conflict rather than a validation
failure. Deleting a category does not check for events that still use it.
"""

from typing import Optional, Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.di import Container
from src.platform.exception.exceptions import ConflictError, NotFoundError
from src.platform.logging.loguru_io import Logger
from src.service.event_catalog.app.interface.i_category_repo import ICategoryRepo
from src.service.event_catalog.domain.entity.category_entity import Category


class CategoryCommandUseCase:
    def __init__(self, *, category_repo: ICategoryRepo) -> None:
        self.category_repo = category_repo

    @classmethod
    @inject
    def depends(
        cls, category_repo: ICategoryRepo = Depends(Provide[Container.category_repo])
    ) -> Self:
        return cls(category_repo=category_repo)

    @Logger.io
    async def create(self, *, name: Optional[str]) -> Category:
        category = Category.create(name=name)
        if await self.category_repo.get_by_name(name=category.name) is not None:
            raise ConflictError(f"Category with name '{category.name}' already exists")

        category = await self.category_repo.create(category=category)
        Logger.base.info(f'[CREATE_CATEGORY] Category {category.id} created')
        return category

    @Logger.io
    async def update(self, *, category_id: int, name: Optional[str]) -> Category:
        existing = await self.category_repo.get_by_id(category_id=category_id)
        if existing is None:
            raise NotFoundError(f'Category not found with ID: {category_id}')

        category = existing.rename(name=name)
        holder = await self.category_repo.get_by_name(name=category.name)
        if holder is not None and holder.id != category_id:
            raise ConflictError('Another category with the same name already exists')

        return await self.category_repo.update(category=category)

    @Logger.io
    async def delete(self, *, category_id: int) -> None:
        if not await self.category_repo.delete(category_id=category_id):
            raise NotFoundError(f'Category not found with ID: {category_id}')
        Logger.base.info(f'[DELETE_CATEGORY] Category {category_id} deleted')
