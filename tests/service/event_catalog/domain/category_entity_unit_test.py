import pytest

from src.platform.exception.exceptions import ValidationError
from src.service.event_catalog.domain.entity.category_entity import Category


class TestCategory:
    def test_create(self):
        assert Category.create(name='Opera') == Category(name='Opera')

    @pytest.mark.parametrize('name', [None, '', '   '])
    def test_blank_name_fails(self, name):
        with pytest.raises(ValidationError, match='Category name is required'):
            Category.create(name=name)

    def test_rename_keeps_id(self):
        renamed = Category(id=3, name='Ballet').rename(name='Opera')
        assert renamed == Category(id=3, name='Opera')
