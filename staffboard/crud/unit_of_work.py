# staffboard/crud/unit_of_work.py
import logging
from contextlib import contextmanager
from typing import Callable, Iterator, Optional, TypeVar

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session, SessionTransaction

from staffboard.core.exceptions import (
    ConflictError,
    DuplicateValueError,
    ReferentialIntegrityError,
    TransactionStateError,
)
from staffboard.crud.repository import Repository
from staffboard.models import Department, Employee, Project

logger = logging.getLogger("Staffboard.UnitOfWork")

T = TypeVar("T")

# SQLSTATE: 23505 unique_violation, 23503 foreign_key_violation
_UNIQUE_SQLSTATES = {"23505"}
_FOREIGN_KEY_SQLSTATES = {"23503"}


def translate_integrity_error(exc: IntegrityError) -> ConflictError:
    """
    Различает нарушение уникальности и нарушение внешнего ключа.
    """
    orig = exc.orig
    sqlstate = getattr(orig, "pgcode", None) or getattr(orig, "sqlstate", None)
    message = str(orig)
    if sqlstate in _FOREIGN_KEY_SQLSTATES or "FOREIGN KEY" in message.upper():
        return ReferentialIntegrityError(detail=message)
    if sqlstate in _UNIQUE_SQLSTATES or "UNIQUE" in message.upper() or "DUPLICATE" in message.upper():
        return DuplicateValueError(detail=message)
    return ConflictError(detail=message)


class UnitOfWork:
    """
    Unit of Work — репозитории Employees/Departments/Projects поверх одной сессии
    и явная граница транзакции.

    Состояния: нет транзакции → активная → (commit | rollback) → нет транзакции.
    save_changes() работает только внутри активной транзакции; одновременно
    допускается одна транзакция.
    """

    def __init__(self, session: Session):
        self.session = session
        self._transaction: Optional[SessionTransaction] = None
        self._employees: Optional[Repository[Employee]] = None
        self._departments: Optional[Repository[Department]] = None
        self._projects: Optional[Repository[Project]] = None
        self._closed = False

    # --- Репозитории (создаются лениво, живут столько же, сколько UoW) ---

    @property
    def employees(self) -> Repository[Employee]:
        if self._employees is None:
            self._employees = Repository(self.session, Employee)
        return self._employees

    @property
    def departments(self) -> Repository[Department]:
        if self._departments is None:
            self._departments = Repository(self.session, Department)
        return self._departments

    @property
    def projects(self) -> Repository[Project]:
        if self._projects is None:
            self._projects = Repository(self.session, Project)
        return self._projects

    # --- Транзакции ---

    @property
    def has_active_transaction(self) -> bool:
        return self._transaction is not None

    def begin_transaction(self) -> None:
        if self._transaction is not None:
            raise TransactionStateError(
                "A transaction is already active. Commit or rollback the current transaction before starting a new one."
            )
        # Чтения до begin (валидаторы) могли уже открыть транзакцию сессии: используем её
        self._transaction = self.session.get_transaction() or self.session.begin()
        logger.debug("Transaction started")

    def commit_transaction(self) -> None:
        if self._transaction is None:
            raise TransactionStateError("No active transaction to commit.")
        try:
            self.session.flush()
            self.session.commit()
            logger.debug("Transaction committed")
        except IntegrityError as exc:
            self.session.rollback()
            logger.warning(f"Integrity error on commit: {exc.orig}")
            raise translate_integrity_error(exc) from exc
        except BaseException:
            self.session.rollback()
            raise
        finally:
            self._transaction = None

    def rollback_transaction(self) -> None:
        if self._transaction is None:
            raise TransactionStateError("No active transaction to rollback.")
        try:
            self.session.rollback()
            logger.debug("Transaction rolled back")
        finally:
            self._transaction = None

    def save_changes(self) -> int:
        """
        Сбрасывает накопленные изменения в БД (flush) внутри активной транзакции.
        Возвращает количество записанных сущностей.
        """
        if self._transaction is None:
            raise TransactionStateError(
                "Cannot save changes without an active transaction. Call begin_transaction() first."
            )
        pending = len(self.session.new) + len(self.session.dirty) + len(self.session.deleted)
        try:
            self.session.flush()
        except IntegrityError as exc:
            logger.warning(f"Integrity error on save: {exc.orig}")
            raise translate_integrity_error(exc) from exc
        return pending

    @contextmanager
    def transaction(self) -> Iterator["UnitOfWork"]:
        """
        begin → тело блока → commit; при любом исключении — rollback и проброс.
        """
        self.begin_transaction()
        try:
            yield self
        except BaseException:
            if self.has_active_transaction:
                logger.warning("Rolling back transaction after failure")
                self.rollback_transaction()
            raise
        self.commit_transaction()

    def execute_in_transaction(self, operation: Callable[[], T]) -> T:
        with self.transaction():
            return operation()

    # --- Освобождение ресурсов ---

    def close(self) -> None:
        if self._closed:
            return
        try:
            if self._transaction is not None:
                logger.warning("Unit of work closed with an active transaction, rolling back")
                self.rollback_transaction()
        finally:
            self.session.close()
            self._closed = True

    def __enter__(self) -> "UnitOfWork":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

