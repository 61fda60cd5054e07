import datetime as dt
from typing import TYPE_CHECKING, Optional

from sqlalchemy import Date, ForeignKey, Integer, String, Text, Time, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column, relationship

from src.platform.database.orm_db_setting import Base
from src.service.event_catalog.domain.enum.event_status import EventStatus
from src.service.event_catalog.driven_adapter.model.enum_check import enum_check

if TYPE_CHECKING:
    from src.service.event_catalog.driven_adapter.model.category_model import CategoryModel


class EventModel(Base):
    __tablename__ = 'event'

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(100), nullable=False)
    date: Mapped[dt.date] = mapped_column(Date, nullable=False, index=True)
    time: Mapped[dt.time] = mapped_column(Time, nullable=False)
    location: Mapped[str] = mapped_column(String(150), nullable=False)
    capacity: Mapped[int] = mapped_column(Integer, nullable=False)
    status: Mapped[str] = mapped_column(
        String(20), default=EventStatus.ACTIVE.value, nullable=False
    )
    description: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    image: Mapped[Optional[str]] = mapped_column(String(500), nullable=True)
    category_id: Mapped[int] = mapped_column(
        Integer, ForeignKey('category.id'), nullable=False, index=True
    )

    # Relationships
    category: Mapped['CategoryModel'] = relationship(
        'CategoryModel', foreign_keys=[category_id], lazy='selectin'
    )

    __table_args__ = (
        UniqueConstraint('name', 'date', 'time', name='uq_event_name_date_time'),
        enum_check('status', EventStatus, name='ck_event_status'),
    )
