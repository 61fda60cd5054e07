"""
Test Configuration and Fixtures

Everything here runs without PostgreSQL: repositories are AsyncMocks built
from the port interfaces, and "today" comes from a fixed clock.
"""

# Environment must be prepared before application modules read settings
import os
from pathlib import Path


def _early_setup_test_environment() -> None:
    os.environ['POSTGRES_DB'] = 'event_catalog_test_db'

    test_log_dir = Path(__file__).parent / 'test_log'
    test_log_dir.mkdir(exist_ok=True)
    os.environ['TEST_LOG_DIR'] = str(test_log_dir)


_early_setup_test_environment()


from unittest.mock import AsyncMock  # noqa: E402

import attrs  # noqa: E402
import pytest  # noqa: E402

from src.service.event_catalog.app.interface import (  # noqa: E402
    ICategoryRepo,
    IEventRepo,
    ISectionRepo,
)
from tests.factories import TODAY, FixedClock, make_category  # noqa: E402


@pytest.fixture
def clock() -> FixedClock:
    return FixedClock(TODAY)


@pytest.fixture
def category_repo() -> AsyncMock:
    repo = AsyncMock(spec=ICategoryRepo)
    repo.get_by_id.return_value = make_category()
    repo.get_by_name.return_value = None
    repo.create.side_effect = lambda *, category: attrs.evolve(category, id=1)
    repo.update.side_effect = lambda *, category: category
    return repo


@pytest.fixture
def event_repo() -> AsyncMock:
    repo = AsyncMock(spec=IEventRepo)
    repo.exists_by_name_date_time.return_value = False
    repo.create.side_effect = lambda *, event: attrs.evolve(event, id=1)
    repo.update.side_effect = lambda *, event: event
    return repo


@pytest.fixture
def section_repo() -> AsyncMock:
    repo = AsyncMock(spec=ISectionRepo)
    repo.exists_by_name_and_event.return_value = False
    repo.create.side_effect = lambda *, section: attrs.evolve(section, id=1)
    repo.update.side_effect = lambda *, section: section
    return repo
