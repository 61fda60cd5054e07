from enum import StrEnum


class UserRole(StrEnum):
    ADMIN = 'ADMIN'
    CUSTOMER = 'CUSTOMER'
