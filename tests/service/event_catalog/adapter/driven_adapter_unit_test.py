"""
Adapter tests that need no database: clock, model mapping, table definitions and DI resolution.
"""

from datetime import date, datetime, time, timedelta
from zoneinfo import ZoneInfo

from src.platform.config.di import Container
from src.service.event_catalog.domain.entity.category_entity import Category
from src.service.event_catalog.domain.enum.event_status import EventStatus
from src.service.event_catalog.domain.enum.section_status import SectionStatus
from src.service.event_catalog.domain.enum.ticket_status import TicketStatus
from src.service.event_catalog.domain.enum.transaction_status import (
    PaymentMethod,
    TransactionStatus,
)
from src.service.event_catalog.domain.enum.user_role import UserRole
from src.service.event_catalog.driven_adapter.clock.system_clock import SystemClock
from src.service.event_catalog.driven_adapter.model.category_model import CategoryModel
from src.service.event_catalog.driven_adapter.model.event_model import EventModel
from src.service.event_catalog.driven_adapter.model.section_model import SectionModel
from src.service.event_catalog.driven_adapter.model.ticket_model import TicketModel
from src.service.event_catalog.driven_adapter.model.transaction_model import TransactionModel
from src.service.event_catalog.driven_adapter.model.user_model import UserModel
from src.service.event_catalog.driven_adapter.repo.category_repo_impl import CategoryRepoImpl
from src.service.event_catalog.driven_adapter.repo.event_repo_impl import EventRepoImpl
from src.service.event_catalog.driven_adapter.repo.section_repo_impl import SectionRepoImpl


def _event_model(**overrides) -> EventModel:
    fields = {
        'id': 3,
        'name': 'Spring Gala',
        'date': date(2026, 5, 3),
        'time': time(19, 30),
        'location': 'Main Hall',
        'capacity': 800,
        'status': 'UPCOMING',
        'category_id': 1,
    }
    return EventModel(**(fields | overrides))


class TestSystemClock:
    def test_today_in_configured_zone(self):
        zone = 'Pacific/Kiritimati'
        before = datetime.now(ZoneInfo(zone)).date()

        today = SystemClock(timezone=zone).today()

        assert today in (before, datetime.now(ZoneInfo(zone)).date())


class TestModelMapping:
    def test_event_model_with_loaded_category(self):
        event_model = _event_model(category=CategoryModel(id=1, name='Galas'))

        event = EventRepoImpl._model_to_entity(event_model)

        assert event.id == 3
        assert event.status == EventStatus.UPCOMING
        assert event.category == Category(id=1, name='Galas')

    def test_explicit_category_wins(self):
        category = Category(id=1, name='Opera')

        event = EventRepoImpl._model_to_entity(_event_model(), category=category)

        assert event.category is category

    def test_section_model(self):
        section_model = SectionModel(
            id=7, name='Balcony', row_count=10, seat_count=12, status='INACTIVE', event_id=3
        )

        section = SectionRepoImpl._model_to_entity(section_model)

        assert section.status == SectionStatus.INACTIVE
        assert section.total_seats == 120

    def test_event_fields_copied_to_model(self):
        event = EventRepoImpl._model_to_entity(_event_model(), category=Category(id=1, name='x'))
        target = EventModel()

        EventRepoImpl._copy_fields(event, target)

        assert (target.name, target.status, target.category_id) == ('Spring Gala', 'UPCOMING', 1)



def _check_sql(model, name: str) -> str:
    constraints = {c.name: c for c in model.__table__.constraints}
    return str(constraints[name].sqltext)


class TestDataModelTables:
    def test_status_defaults_come_from_enums(self):
        defaults = [
            model.__table__.c[column].default.arg
            for model, column in [
                (EventModel, 'status'),
                (SectionModel, 'status'),
                (TicketModel, 'status'),
                (TransactionModel, 'status'),
                (UserModel, 'role'),
            ]
        ]

        assert defaults == [
            EventStatus.ACTIVE,
            SectionStatus.ACTIVE,
            TicketStatus.VALID,
            TransactionStatus.PENDING,
            UserRole.CUSTOMER,
        ]

    def test_status_columns_limited_to_enum_values(self):
        ticket_check = _check_sql(TicketModel, 'ck_ticket_status')
        payment_check = _check_sql(TransactionModel, 'ck_transaction_payment_method')

        assert ticket_check == "status IN ('VALID', 'EXPIRED', 'CANCELLED', 'USED')"
        assert all(f"'{method.value}'" in payment_check for method in PaymentMethod)
        assert "'REFUNDED'" in _check_sql(TransactionModel, 'ck_transaction_status')
        assert "'CLOSED'" in _check_sql(SectionModel, 'ck_section_status')
        assert "'CANCELLED'" in _check_sql(EventModel, 'ck_event_status')
        assert "'ADMIN'" in _check_sql(UserModel, 'ck_user_role')

    def test_purchase_and_transaction_dates_default_to_aware_now(self):
        before = datetime.now(ZoneInfo('UTC'))

        for column in (TicketModel.__table__.c.purchase_date, TransactionModel.__table__.c.date):
            value = column.default.arg(None)
            assert value.tzinfo is not None
            assert before <= value < before + timedelta(minutes=1)


class TestContainer:
    def test_repositories_and_clock_resolve_without_connecting(self):
        container = Container()

        assert isinstance(container.category_repo(), CategoryRepoImpl)
        assert isinstance(container.event_repo(), EventRepoImpl)
        assert isinstance(container.section_repo(), SectionRepoImpl)
        assert isinstance(container.clock(), SystemClock)
        assert container.event_repo() is container.event_repo()
