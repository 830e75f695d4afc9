# staffboard/validators/base.py
import logging
from typing import Generic, List, Optional, TypeVar

from pydantic import BaseModel

from staffboard.core.exceptions import FieldError, RequestValidationFailed
from staffboard.crud.unit_of_work import UnitOfWork

logger = logging.getLogger("Staffboard.Validation")

RequestType = TypeVar("RequestType", bound=BaseModel)


def is_blank(value: Optional[str]) -> bool:
    return value is None or not str(value).strip()


class RequestValidator(Generic[RequestType]):
    """
    Базовый валидатор запроса.

    Все правила выполняются, ошибки собираются в список (без остановки на первой).
    Имена полей в ошибках — camelCase, как в JSON.
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    def rules(self, request: RequestType, errors: List[FieldError]) -> None:
        raise NotImplementedError

    def validate(self, request: RequestType) -> List[FieldError]:
        errors: List[FieldError] = []
        self.rules(request, errors)
        return errors

    def validate_or_raise(self, request: RequestType) -> None:
        errors = self.validate(request)
        if errors:
            logger.info(
                f"{type(self).__name__} rejected request: "
                + ", ".join(f"{e.property}: {e.message}" for e in errors)
            )
            raise RequestValidationFailed(errors)

    @staticmethod
    def required(errors: List[FieldError], prop: str, value, message: str) -> bool:
        if value is None or (isinstance(value, str) and not value.strip()):
            errors.append(FieldError(prop, message))
            return False
        return True

    @staticmethod
    def max_length(errors: List[FieldError], prop: str, value: Optional[str], limit: int, message: str) -> None:
        if value is not None and len(value) > limit:
            errors.append(FieldError(prop, message))
