from typing import List, Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.di import Container
from src.platform.exception.exceptions import NotFoundError
from src.platform.logging.loguru_io import Logger
from src.service.event_catalog.app.interface.i_category_repo import ICategoryRepo
from src.service.event_catalog.domain.entity.category_entity import Category


class CategoryQueryUseCase:
    def __init__(self, *, category_repo: ICategoryRepo) -> None:
        self.category_repo = category_repo

    @classmethod
    @inject
    def depends(
        cls, category_repo: ICategoryRepo = Depends(Provide[Container.category_repo])
    ) -> Self:
        return cls(category_repo=category_repo)

    @Logger.io
    async def get_by_id(self, *, category_id: int) -> Category:
        category = await self.category_repo.get_by_id(category_id=category_id)
        if category is None:
            raise NotFoundError(f'Category not found with ID: {category_id}')
        return category

    @Logger.io
    async def get_by_name(self, *, name: str) -> Category:
        category = await self.category_repo.get_by_name(name=name)
        if category is None:
            raise NotFoundError(f'Category not found with name: {name}')
        return category

    @Logger.io
    async def list_all(self) -> List[Category]:
        return await self.category_repo.list_all()
