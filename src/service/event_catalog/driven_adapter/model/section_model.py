from sqlalchemy import ForeignKey, Integer, String, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column

from src.platform.database.orm_db_setting import Base
from src.service.event_catalog.domain.enum.section_status import SectionStatus
from src.service.event_catalog.driven_adapter.model.enum_check import enum_check


class SectionModel(Base):
    __tablename__ = 'section'

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(100), nullable=False)
    row_count: Mapped[int] = mapped_column(Integer, nullable=False)
    seat_count: Mapped[int] = mapped_column(Integer, nullable=False)
    status: Mapped[str] = mapped_column(
        String(20), default=SectionStatus.ACTIVE.value, nullable=False
    )
    event_id: Mapped[int] = mapped_column(
        Integer, ForeignKey('event.id'), nullable=False, index=True
    )

    __table_args__ = (
        UniqueConstraint('name', 'event_id', name='uq_section_name_event'),
        enum_check('status', SectionStatus, name='ck_section_status'),
    )
