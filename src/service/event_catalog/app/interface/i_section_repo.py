from abc import ABC, abstractmethod
from typing import List, Optional

from src.service.event_catalog.domain.entity.section_entity import Section
from src.service.event_catalog.domain.enum.section_status import SectionStatus


class ISectionRepo(ABC):
    @abstractmethod
    async def get_by_id(self, *, section_id: int) -> Optional[Section]:
        pass

    @abstractmethod
    async def exists_by_name_and_event(self, *, name: str, event_id: int) -> bool:
        """Name is compared case-insensitively."""
        pass

    @abstractmethod
    async def list_all(self) -> List[Section]:
        pass

    @abstractmethod
    async def list_by_event(self, *, event_id: int) -> List[Section]:
        pass

    @abstractmethod
    async def list_by_status(self, *, status: SectionStatus) -> List[Section]:
        pass

    @abstractmethod
    async def create(self, *, section: Section) -> Section:
        pass

    @abstractmethod
    async def update(self, *, section: Section) -> Section:
        pass

    @abstractmethod
    async def delete(self, *, section_id: int) -> bool:
        pass
