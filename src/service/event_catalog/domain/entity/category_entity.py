from typing import Optional

import attrs

from src.platform.exception.exceptions import ValidationError


@attrs.define
class Category:
    name: str
    id: Optional[int] = None

    @classmethod
    def create(cls, *, name: Optional[str]) -> 'Category':
        return cls(name=cls.validate_name(name))

    def rename(self, *, name: Optional[str]) -> 'Category':
        return attrs.evolve(self, name=self.validate_name(name))

    @staticmethod
    def validate_name(name: Optional[str]) -> str:
        if name is None or not name.strip():
            raise ValidationError('Category name is required')
        return name
