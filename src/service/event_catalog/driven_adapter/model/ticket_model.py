from datetime import datetime, timezone
from decimal import Decimal
from typing import Optional

from sqlalchemy import DateTime, ForeignKey, Integer, Numeric, String
from sqlalchemy.orm import Mapped, mapped_column
from sqlalchemy.sql import func

from src.platform.database.orm_db_setting import Base
from src.service.event_catalog.domain.enum.ticket_status import TicketStatus
from src.service.event_catalog.driven_adapter.model.enum_check import enum_check


class TicketModel(Base):
    __tablename__ = 'ticket'

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    status: Mapped[str] = mapped_column(
        String(20), default=TicketStatus.VALID.value, nullable=False
    )
    price: Mapped[Decimal] = mapped_column(Numeric(10, 2), nullable=False)
    seat_number: Mapped[str] = mapped_column(String(20), nullable=False)
    purchase_date: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=lambda: datetime.now(timezone.utc),
        server_default=func.now(),
        nullable=False,
    )
    expiry_date: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)
    qr_code: Mapped[Optional[str]] = mapped_column(String(500), nullable=True)
    section_id: Mapped[int] = mapped_column(
        Integer, ForeignKey('section.id'), nullable=False, index=True
    )
    user_id: Mapped[int] = mapped_column(Integer, ForeignKey('user.id'), nullable=False, index=True)
    event_id: Mapped[int] = mapped_column(
        Integer, ForeignKey('event.id'), nullable=False, index=True
    )

    # No transition rules yet: only the value set is enforced
    __table_args__ = (enum_check('status', TicketStatus, name='ck_ticket_status'),)
