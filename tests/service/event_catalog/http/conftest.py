from collections.abc import Generator
from unittest.mock import AsyncMock, Mock

from fastapi import FastAPI
from fastapi.testclient import TestClient
import pytest

from src.platform.app_factory import create_app


@pytest.fixture
def app() -> FastAPI:
    return create_app(title_suffix=' (Test)')


@pytest.fixture
def client(app: FastAPI) -> Generator[TestClient, None, None]:
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def override(app: FastAPI):
    """Replace a use case's ``depends`` provider with a mock and return the mock."""

    def _override(use_case_cls: type, **methods: AsyncMock) -> Mock:
        mock_use_case = Mock(spec=use_case_cls, **methods)
        app.dependency_overrides[use_case_cls.depends] = lambda: mock_use_case
        return mock_use_case

    return _override
