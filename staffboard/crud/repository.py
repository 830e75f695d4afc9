# staffboard/crud/repository.py
import logging
import uuid
from typing import Generic, Optional, Type, TypeVar

from sqlalchemy.orm import Query, Session

from staffboard.models.base import BaseEntity

logger = logging.getLogger("Staffboard.Repository")

ModelType = TypeVar("ModelType", bound=BaseEntity)


class Repository(Generic[ModelType]):
    """
    Обобщённый репозиторий для сущностей с soft-delete.

    Ничего не коммитит: add/update/soft_delete только ставят изменения в сессию,
    запись в БД происходит через UnitOfWork.save_changes()/commit_transaction().
    Все запросы по умолчанию отфильтрованы по is_deleted = False.
    """

    def __init__(self, session: Session, model: Type[ModelType]):
        self.session = session
        self.model = model

    def add(self, entity: ModelType) -> ModelType:
        self.session.add(entity)
        return entity

    def update(self, entity: ModelType) -> None:
        self.session.add(entity)

    def soft_delete(self, entity_id: uuid.UUID) -> None:
        """
        Помечает сущность удалённой. Если сущность не найдена — ничего не делает,
        проверка существования остаётся за сервисом.
        """
        entity = self.get(entity_id)
        if entity is None:
            return
        entity.mark_deleted()
        self.update(entity)
        logger.debug(f"Staged soft-delete of {self.model.__name__} {entity_id}")

    def get(self, entity_id: uuid.UUID, include_deleted: bool = False) -> Optional[ModelType]:
        return self.query(include_deleted=include_deleted).filter(self.model.id == entity_id).first()

    def exists(self, entity_id: uuid.UUID) -> bool:
        return self.any_matching(self.model.id == entity_id)

    def any_matching(self, *criteria) -> bool:
        """
        Есть ли хотя бы одна (неудалённая) строка, удовлетворяющая критериям.
        """
        subquery = self.query().filter(*criteria).exists()
        return bool(self.session.query(subquery).scalar())

    def query(self, include_deleted: bool = False) -> Query:
        """
        Составной запрос для сервисов (join/filter/options/add_columns).
        include_deleted=True — явный обход фильтра soft-delete.
        """
        query = self.session.query(self.model)
        if not include_deleted:
            query = query.filter(self.model.not_deleted())
        return query
