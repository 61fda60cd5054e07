from abc import ABC, abstractmethod
from datetime import date, time
from typing import List, Optional

from src.service.event_catalog.domain.entity.event_entity import Event
from src.service.event_catalog.domain.enum.event_status import EventStatus


class IEventRepo(ABC):
    @abstractmethod
    async def get_by_id(self, *, event_id: int) -> Optional[Event]:
        pass

    @abstractmethod
    async def exists_by_name_date_time(self, *, name: str, date: date, time: time) -> bool:
        """Name is compared case-insensitively."""
        pass

    @abstractmethod
    async def list_all(self) -> List[Event]:
        pass

    @abstractmethod
    async def list_by_category(self, *, category_id: int) -> List[Event]:
        pass

    @abstractmethod
    async def list_by_status(self, *, status: EventStatus) -> List[Event]:
        pass

    @abstractmethod
    async def list_by_date(self, *, date: date) -> List[Event]:
        pass

    @abstractmethod
    async def list_after(self, *, after: date) -> List[Event]:
        """Events dated strictly after ``after``."""
        pass

    @abstractmethod
    async def list_between(self, *, start: date, end: date) -> List[Event]:
        """Events dated within [start, end], ordered by date then time."""
        pass

    @abstractmethod
    async def create(self, *, event: Event) -> Event:
        pass

    @abstractmethod
    async def update(self, *, event: Event) -> Event:
        pass

    @abstractmethod
    async def delete(self, *, event_id: int) -> bool:
        pass
