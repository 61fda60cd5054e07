"""
https://python-dependency-injector.ets-labs.org/index.html
https://python-dependency-injector.ets-labs.org/examples/fastapi-sqlalchemy.html
"""

from dependency_injector import containers, providers

from src.platform.config.core_setting import Settings
from src.platform.database.orm_db_setting import Database
from src.service.event_catalog.driven_adapter.clock.system_clock import SystemClock
from src.service.event_catalog.driven_adapter.repo.category_repo_impl import CategoryRepoImpl
from src.service.event_catalog.driven_adapter.repo.event_repo_impl import EventRepoImpl
from src.service.event_catalog.driven_adapter.repo.section_repo_impl import SectionRepoImpl


class Container(containers.DeclarativeContainer):
    # Configuration
    config_service = providers.Singleton(Settings)

    # Database (engine is built lazily by AsyncEngineManager)
    database = providers.Singleton(Database)

    # Source of "today" for event status derivation
    clock = providers.Singleton(SystemClock, timezone=config_service.provided.TIMEZONE)

    # Repositories (stateless - use session_factory per-request)
    category_repo = providers.Singleton(
        CategoryRepoImpl, session_factory=database.provided.session
    )
    event_repo = providers.Singleton(EventRepoImpl, session_factory=database.provided.session)
    section_repo = providers.Singleton(
        SectionRepoImpl, session_factory=database.provided.session
    )


container = Container()


def setup() -> None:
    container.config_service()


def cleanup() -> None:
    container.reset_singletons()
