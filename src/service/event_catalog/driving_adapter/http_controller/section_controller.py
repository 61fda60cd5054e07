from typing import List

from fastapi import APIRouter, Depends, status

from src.platform.logging.loguru_io import Logger
from src.service.event_catalog.app.command.create_section_use_case import CreateSectionUseCase
from src.service.event_catalog.app.command.delete_section_use_case import DeleteSectionUseCase
from src.service.event_catalog.app.command.update_section_use_case import UpdateSectionUseCase
from src.service.event_catalog.app.query.get_section_use_case import GetSectionUseCase
from src.service.event_catalog.app.query.list_sections_use_case import ListSectionsUseCase
from src.service.event_catalog.domain.entity.section_entity import Section
from src.service.event_catalog.domain.section_consistency_domain import (
    SectionDraft,
    parse_section_status,
)
from src.service.event_catalog.driving_adapter.http_controller.schema.section_schema import (
    SectionRequest,
    SectionResponse,
)


router = APIRouter()


def _to_response(section: Section) -> SectionResponse:
    return SectionResponse(
        id=section.id,  # type: ignore[arg-type]
        name=section.name,
        row_count=section.row_count,
        seat_count=section.seat_count,
        total_seats=section.total_seats,
        status=section.status,
        event_id=section.event_id,
    )


@router.post('', status_code=status.HTTP_201_CREATED)
@Logger.io
async def create_section(
    request: SectionRequest,
    use_case: CreateSectionUseCase = Depends(CreateSectionUseCase.depends),
) -> SectionResponse:
    section = await use_case.execute(draft=SectionDraft(**request.model_dump()))
    return _to_response(section)


@router.get('', status_code=status.HTTP_200_OK)
@Logger.io
async def list_sections(
    use_case: ListSectionsUseCase = Depends(ListSectionsUseCase.depends),
) -> List[SectionResponse]:
    return [_to_response(section) for section in await use_case.list_all()]


@router.get('/event/{event_id}', status_code=status.HTTP_200_OK)
@Logger.io
async def list_sections_by_event(
    event_id: int,
    use_case: ListSectionsUseCase = Depends(ListSectionsUseCase.depends),
) -> List[SectionResponse]:
    return [_to_response(section) for section in await use_case.list_by_event(event_id=event_id)]


@router.get('/status/{section_status}', status_code=status.HTTP_200_OK)
@Logger.io
async def list_sections_by_status(
    section_status: str,
    use_case: ListSectionsUseCase = Depends(ListSectionsUseCase.depends),
) -> List[SectionResponse]:
    sections = await use_case.list_by_status(status=parse_section_status(section_status))
    return [_to_response(section) for section in sections]


@router.get('/{section_id}', status_code=status.HTTP_200_OK)
@Logger.io
async def get_section(
    section_id: int,
    use_case: GetSectionUseCase = Depends(GetSectionUseCase.depends),
) -> SectionResponse:
    return _to_response(await use_case.get_by_id(section_id=section_id))


@router.put('/{section_id}', status_code=status.HTTP_200_OK)
@Logger.io
async def update_section(
    section_id: int,
    request: SectionRequest,
    use_case: UpdateSectionUseCase = Depends(UpdateSectionUseCase.depends),
) -> SectionResponse:
    section = await use_case.execute(
        section_id=section_id, draft=SectionDraft(**request.model_dump())
    )
    return _to_response(section)


@router.delete('/{section_id}', status_code=status.HTTP_204_NO_CONTENT)
@Logger.io
async def delete_section(
    section_id: int,
    use_case: DeleteSectionUseCase = Depends(DeleteSectionUseCase.depends),
) -> None:
    await use_case.execute(section_id=section_id)
