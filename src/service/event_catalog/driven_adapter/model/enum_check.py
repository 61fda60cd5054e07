from enum import StrEnum
from typing import Type

from sqlalchemy import CheckConstraint


def enum_check(column: str, enum_cls: Type[StrEnum], *, name: str) -> CheckConstraint:
    """Restrict a plain string column to the values of ``enum_cls``."""
    allowed = ', '.join(f"'{member.value}'" for member in enum_cls)
    return CheckConstraint(f'{column} IN ({allowed})', name=name)
