from unittest.mock import AsyncMock

from src.platform.exception.exceptions import ConflictError
from src.service.event_catalog.app.command.category_command_use_case import (
    CategoryCommandUseCase,
)
from src.service.event_catalog.app.query.category_query_use_case import CategoryQueryUseCase
from tests.factories import make_category


CATEGORIES = '/api/categories'


class TestCategoryEndpoints:
    def test_create(self, client, override):
        use_case = override(
            CategoryCommandUseCase, create=AsyncMock(return_value=make_category(name='Opera'))
        )

        response = client.post(CATEGORIES, json={'name': 'Opera'})

        assert response.status_code == 201
        assert response.json() == {'id': 1, 'name': 'Opera'}
        use_case.create.assert_awaited_once_with(name='Opera')

    def test_duplicate_maps_to_409(self, client, override):
        override(
            CategoryCommandUseCase,
            create=AsyncMock(side_effect=ConflictError("Category with name 'Opera' already exists")),
        )

        response = client.post(CATEGORIES, json={'name': 'Opera'})

        assert response.status_code == 409

    def test_get_by_name(self, client, override):
        use_case = override(
            CategoryQueryUseCase, get_by_name=AsyncMock(return_value=make_category(name='Opera'))
        )

        response = client.get(f'{CATEGORIES}/name/Opera')

        assert response.status_code == 200
        use_case.get_by_name.assert_awaited_once_with(name='Opera')

    def test_list(self, client, override):
        override(CategoryQueryUseCase, list_all=AsyncMock(return_value=[make_category()]))

        assert client.get(CATEGORIES).json() == [{'id': 1, 'name': 'Galas'}]

    def test_update(self, client, override):
        use_case = override(
            CategoryCommandUseCase, update=AsyncMock(return_value=make_category(name='Ballet'))
        )

        response = client.put(f'{CATEGORIES}/1', json={'name': 'Ballet'})

        assert response.json()['name'] == 'Ballet'
        use_case.update.assert_awaited_once_with(category_id=1, name='Ballet')

    def test_delete(self, client, override):
        use_case = override(CategoryCommandUseCase, delete=AsyncMock(return_value=None))

        assert client.delete(f'{CATEGORIES}/1').status_code == 204
        use_case.delete.assert_awaited_once_with(category_id=1)


def test_health(client):
    response = client.get('/health')

    assert response.status_code == 200
    assert response.json()['status'] == 'healthy'
