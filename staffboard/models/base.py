# staffboard/models/base.py
"""
Базовые классы для всех ORM-моделей проекта.

Base — declarative base; BaseEntity — абстрактная сущность с UUID и soft-delete:
    from staffboard.models.base import Base, BaseEntity
"""
import uuid
from datetime import datetime, timezone

from sqlalchemy import Boolean, Column, DateTime, Uuid
from sqlalchemy.orm import declarative_base
from sqlalchemy.types import TypeDecorator

from staffboard.core.dates import as_utc

Base = declarative_base()


class UtcDateTime(TypeDecorator):
    """
    Дата-время, которое хранится в UTC и читается как aware UTC.

    В SQLite значение пишется без смещения, уже приведённым к UTC.
    """
    impl = DateTime(timezone=True)
    cache_ok = True

    def process_bind_param(self, value, dialect):
        if value is None:
            return None
        value = as_utc(value)
        if dialect.name == "sqlite":
            return value.replace(tzinfo=None)
        return value

    def process_result_value(self, value, dialect):
        if value is None:
            return None
        return as_utc(value)


class BaseEntity(Base):
    """
    BaseEntity — общие поля сущностей: id, is_deleted, deleted_at.
    Строки никогда не удаляются физически, только помечаются удалёнными.
    """
    __abstract__ = True

    id = Column(Uuid, primary_key=True, default=uuid.uuid4, doc="Идентификатор")
    is_deleted = Column(Boolean, default=False, nullable=False, index=True, doc="Soft-delete")
    deleted_at = Column(UtcDateTime, nullable=True, doc="Дата удаления")

    @classmethod
    def not_deleted(cls):
        """Критерий фильтра soft-delete для запросов по этой сущности."""
        return cls.is_deleted.is_(False)

    def mark_deleted(self) -> None:
        self.is_deleted = True
        self.deleted_at = datetime.now(timezone.utc)
