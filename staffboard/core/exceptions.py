# staffboard/core/exceptions.py
from dataclasses import dataclass
from typing import List, Optional


class BaseAppException(Exception):
    """Базовый класс для всех кастомных исключений приложения."""
    def __init__(self, message: str = "App exception"):
        super().__init__(message)
        self.message = message

# ==== NotFound ====

class NotFoundError(BaseAppException):
    """Ошибка отсутствия ресурса (или ресурс soft-deleted)."""
    def __init__(self, message: str = "Resource not found"):
        super().__init__(message)

class DepartmentNotFound(NotFoundError):
    """Ошибка: отдел не найден."""
    def __init__(self, department_id=None):
        super().__init__(f"Department with ID {department_id} not found")

class EmployeeNotFound(NotFoundError):
    """Ошибка: сотрудник не найден."""
    def __init__(self, employee_id=None):
        super().__init__(f"Employee with ID {employee_id} not found")

class ProjectNotFound(NotFoundError):
    """Ошибка: проект не найден."""
    def __init__(self, project_id=None):
        super().__init__(f"Project with ID {project_id} not found")

class AssignmentNotFound(NotFoundError):
    """Ошибка: сотрудник не назначен на проект."""
    def __init__(self, employee_id=None, project_id=None):
        super().__init__(
            f"Assignment between employee {employee_id} and project {project_id} not found"
        )

# ==== Валидация ====

@dataclass(frozen=True)
class FieldError:
    """Ошибка одного поля запроса."""
    property: str
    message: str

class RequestValidationFailed(BaseAppException):
    """Запрос не прошёл валидацию; содержит список ошибок по полям."""
    def __init__(self, errors: List[FieldError], message: str = "Validation failed"):
        super().__init__(message)
        self.errors = list(errors)

    def messages_for(self, property_name: str) -> List[str]:
        return [e.message for e in self.errors if e.property == property_name]

# ==== Конфликты хранилища ====

class ConflictError(BaseAppException):
    """Хранилище отклонило запись (ограничение целостности)."""
    def __init__(self, message: str = "Integrity constraint violated", detail: Optional[str] = None):
        super().__init__(message)
        self.detail = detail

class DuplicateValueError(ConflictError):
    """Нарушение уникальности."""
    def __init__(self, detail: Optional[str] = None):
        super().__init__(
            "A record with this value already exists. Please use a unique value.",
            detail=detail,
        )

class ReferentialIntegrityError(ConflictError):
    """Нарушение внешнего ключа."""
    def __init__(self, detail: Optional[str] = None):
        super().__init__(
            "The operation cannot be completed because it would violate referential integrity.",
            detail=detail,
        )

# ==== Unit of Work ====

class TransactionStateError(BaseAppException):
    """Неверное использование транзакции unit of work."""
    def __init__(self, message: str = "Invalid transaction state"):
        super().__init__(message)

# ==== Запрос ====

class BadRequestError(BaseAppException):
    """Некорректный запрос (например, пустой поисковый запрос)."""
    def __init__(self, message: str = "Bad request"):
        super().__init__(message)
