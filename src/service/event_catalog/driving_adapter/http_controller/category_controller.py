from typing import List

from fastapi import APIRouter, Depends, status

from src.platform.logging.loguru_io import Logger
from src.service.event_catalog.app.command.category_command_use_case import (
    CategoryCommandUseCase,
)
from src.service.event_catalog.app.query.category_query_use_case import CategoryQueryUseCase
from src.service.event_catalog.domain.entity.category_entity import Category
from src.service.event_catalog.driving_adapter.http_controller.schema.category_schema import (
    CategoryRequest,
    CategoryResponse,
)


router = APIRouter()


def _to_response(category: Category) -> CategoryResponse:
    return CategoryResponse(id=category.id, name=category.name)  # type: ignore[arg-type]


@router.post('', status_code=status.HTTP_201_CREATED)
@Logger.io
async def create_category(
    request: CategoryRequest,
    use_case: CategoryCommandUseCase = Depends(CategoryCommandUseCase.depends),
) -> CategoryResponse:
    return _to_response(await use_case.create(name=request.name))


@router.get('', status_code=status.HTTP_200_OK)
@Logger.io
async def list_categories(
    use_case: CategoryQueryUseCase = Depends(CategoryQueryUseCase.depends),
) -> List[CategoryResponse]:
    return [_to_response(category) for category in await use_case.list_all()]


@router.get('/name/{name}', status_code=status.HTTP_200_OK)
@Logger.io
async def get_category_by_name(
    name: str,
    use_case: CategoryQueryUseCase = Depends(CategoryQueryUseCase.depends),
) -> CategoryResponse:
    return _to_response(await use_case.get_by_name(name=name))


@router.get('/{category_id}', status_code=status.HTTP_200_OK)
@Logger.io
async def get_category(
    category_id: int,
    use_case: CategoryQueryUseCase = Depends(CategoryQueryUseCase.depends),
) -> CategoryResponse:
    return _to_response(await use_case.get_by_id(category_id=category_id))


@router.put('/{category_id}', status_code=status.HTTP_200_OK)
@Logger.io
async def update_category(
    category_id: int,
    request: CategoryRequest,
    use_case: CategoryCommandUseCase = Depends(CategoryCommandUseCase.depends),
) -> CategoryResponse:
    return _to_response(await use_case.update(category_id=category_id, name=request.name))


@router.delete('/{category_id}', status_code=status.HTTP_204_NO_CONTENT)
@Logger.io
async def delete_category(
    category_id: int,
    use_case: CategoryCommandUseCase = Depends(CategoryCommandUseCase.depends),
) -> None:
    await use_case.delete(category_id=category_id)
