from datetime import date
from typing import List, Optional

from fastapi import APIRouter, Depends, status

from src.platform.logging.loguru_io import Logger
from src.service.event_catalog.app.command.cancel_event_use_case import CancelEventUseCase
from src.service.event_catalog.app.command.complete_event_use_case import CompleteEventUseCase
from src.service.event_catalog.app.command.create_event_use_case import CreateEventUseCase
from src.service.event_catalog.app.command.delete_event_use_case import DeleteEventUseCase
from src.service.event_catalog.app.command.update_event_capacity_use_case import (
    UpdateEventCapacityUseCase,
)
from src.service.event_catalog.app.command.update_event_use_case import UpdateEventUseCase
from src.service.event_catalog.app.query.get_event_use_case import GetEventUseCase
from src.service.event_catalog.app.query.list_events_use_case import ListEventsUseCase
from src.service.event_catalog.domain.entity.event_entity import Event
from src.service.event_catalog.domain.event_lifecycle_domain import EventDraft, parse_event_status
from src.service.event_catalog.driving_adapter.http_controller.schema.event_schema import (
    CapacityUpdateRequest,
    EventRequest,
    EventResponse,
)


router = APIRouter()


def _to_draft(request: EventRequest) -> EventDraft:
    return EventDraft(**request.model_dump())


def _to_response(event: Event) -> EventResponse:
    return EventResponse(
        id=event.id,  # type: ignore[arg-type]
        name=event.name,
        date=event.date,
        time=event.time,
        location=event.location,
        capacity=event.capacity,
        status=event.status,
        description=event.description,
        image=event.image,
        category_id=event.category_id,
        category_name=event.category.name if event.category else None,
    )


def _to_responses(events: List[Event]) -> List[EventResponse]:
    return [_to_response(event) for event in events]


@router.post('', status_code=status.HTTP_201_CREATED)
@Logger.io
async def create_event(
    request: EventRequest,
    use_case: CreateEventUseCase = Depends(CreateEventUseCase.depends),
) -> EventResponse:
    return _to_response(await use_case.execute(draft=_to_draft(request)))


@router.get('', status_code=status.HTTP_200_OK)
@Logger.io
async def list_events(
    use_case: ListEventsUseCase = Depends(ListEventsUseCase.depends),
) -> List[EventResponse]:
    return _to_responses(await use_case.list_all())


# Fixed paths go before /{event_id}


@router.get('/upcoming', status_code=status.HTTP_200_OK)
@Logger.io
async def list_upcoming_events(
    after: Optional[date] = None,
    use_case: ListEventsUseCase = Depends(ListEventsUseCase.depends),
) -> List[EventResponse]:
    return _to_responses(await use_case.list_upcoming(after=after))


@router.get('/between', status_code=status.HTTP_200_OK)
@Logger.io
async def list_events_between(
    start: Optional[date] = None,
    end: Optional[date] = None,
    use_case: ListEventsUseCase = Depends(ListEventsUseCase.depends),
) -> List[EventResponse]:
    return _to_responses(await use_case.list_between(start=start, end=end))


@router.get('/category/{category_id}', status_code=status.HTTP_200_OK)
@Logger.io
async def list_events_by_category(
    category_id: int,
    use_case: ListEventsUseCase = Depends(ListEventsUseCase.depends),
) -> List[EventResponse]:
    return _to_responses(await use_case.list_by_category(category_id=category_id))


@router.get('/status/{event_status}', status_code=status.HTTP_200_OK)
@Logger.io
async def list_events_by_status(
    event_status: str,
    use_case: ListEventsUseCase = Depends(ListEventsUseCase.depends),
) -> List[EventResponse]:
    return _to_responses(await use_case.list_by_status(status=parse_event_status(event_status)))


@router.get('/date/{event_date}', status_code=status.HTTP_200_OK)
@Logger.io
async def list_events_by_date(
    event_date: date,
    use_case: ListEventsUseCase = Depends(ListEventsUseCase.depends),
) -> List[EventResponse]:
    return _to_responses(await use_case.list_by_date(date=event_date))


@router.get('/{event_id}', status_code=status.HTTP_200_OK)
@Logger.io
async def get_event(
    event_id: int,
    use_case: GetEventUseCase = Depends(GetEventUseCase.depends),
) -> EventResponse:
    return _to_response(await use_case.get_by_id(event_id=event_id))


@router.put('/{event_id}', status_code=status.HTTP_200_OK)
@Logger.io
async def update_event(
    event_id: int,
    request: EventRequest,
    use_case: UpdateEventUseCase = Depends(UpdateEventUseCase.depends),
) -> EventResponse:
    return _to_response(await use_case.execute(event_id=event_id, draft=_to_draft(request)))


@router.patch('/{event_id}/cancel', status_code=status.HTTP_200_OK)
@Logger.io
async def cancel_event(
    event_id: int,
    use_case: CancelEventUseCase = Depends(CancelEventUseCase.depends),
) -> EventResponse:
    return _to_response(await use_case.execute(event_id=event_id))


@router.patch('/{event_id}/complete', status_code=status.HTTP_200_OK)
@Logger.io
async def complete_event(
    event_id: int,
    use_case: CompleteEventUseCase = Depends(CompleteEventUseCase.depends),
) -> EventResponse:
    return _to_response(await use_case.execute(event_id=event_id))


@router.patch('/{event_id}/capacity', status_code=status.HTTP_200_OK)
@Logger.io
async def update_event_capacity(
    event_id: int,
    request: CapacityUpdateRequest,
    use_case: UpdateEventCapacityUseCase = Depends(UpdateEventCapacityUseCase.depends),
) -> EventResponse:
    event = await use_case.execute(event_id=event_id, capacity=request.capacity)  # type: ignore[arg-type]
    return _to_response(event)


@router.delete('/{event_id}', status_code=status.HTTP_204_NO_CONTENT)
@Logger.io
async def delete_event(
    event_id: int,
    use_case: DeleteEventUseCase = Depends(DeleteEventUseCase.depends),
) -> None:
    await use_case.execute(event_id=event_id)
