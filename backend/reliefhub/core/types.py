"""Custom SQLAlchemy types and column helpers shared by the relief models"""
from enum import Enum
from typing import Type
import uuid

from sqlalchemy import CheckConstraint, TypeDecorator, String


def generate_uuid():
    """Generate a UUID string"""
    return str(uuid.uuid4())


class GUID(TypeDecorator):
    """
    Platform-independent GUID type that stores UUIDs as VARCHAR(36).

    Identity-provider subjects arrive as UUID strings, so ids are compared
    as text on both PostgreSQL and SQLite.
    """
    impl = String(36)
    cache_ok = True

    def load_dialect_impl(self, dialect):
        return dialect.type_descriptor(String(36))

    def process_bind_param(self, value, dialect):
        if value is not None:
            return str(value)
        return value

    def process_result_value(self, value, dialect):
        if value is not None:
            return str(value)
        return value


def enum_values(enum_cls: Type[Enum]) -> list:
    """Stored values of a str enum, in declaration order"""
    return [member.value for member in enum_cls]


def enum_check(column: str, enum_cls: Type[Enum], name: str) -> CheckConstraint:
    """CHECK (column IN (...)) mirroring a str enum"""
    allowed = ", ".join(f"'{value}'" for value in enum_values(enum_cls))
    return CheckConstraint(f"{column} IN ({allowed})", name=name)
