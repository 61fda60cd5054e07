from typing import Optional

import attrs

from src.service.event_catalog.domain.enum.section_status import SectionStatus
from src.service.event_catalog.domain.section_consistency_domain import SectionDraft


@attrs.define
class Section:
    name: str
    row_count: int
    seat_count: int
    event_id: int
    status: SectionStatus = SectionStatus.ACTIVE
    id: Optional[int] = None

    @classmethod
    def from_draft(
        cls, *, draft: SectionDraft, event_id: int, existing: Optional['Section'] = None
    ) -> 'Section':
        if draft.status is not None:
            status = draft.status
        elif existing is not None:
            status = existing.status
        else:
            status = SectionStatus.ACTIVE

        return cls(
            name=draft.name,  # type: ignore[arg-type]
            row_count=draft.row_count,  # type: ignore[arg-type]
            seat_count=draft.seat_count,  # type: ignore[arg-type]
            event_id=event_id,
            status=status,
            id=existing.id if existing else None,
        )

    @property
    def total_seats(self) -> int:
        return self.row_count * self.seat_count
