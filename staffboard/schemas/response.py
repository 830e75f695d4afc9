# staffboard/schemas/response.py
from typing import List, Optional

from pydantic import Field

from staffboard.core.exceptions import FieldError
from staffboard.schemas.base import ApiModel

class FieldErrorRead(ApiModel):
    """
    FieldErrorRead — ошибка валидации одного поля.
    """
    property: str = Field(..., examples=["name"], description="Имя поля")
    message: str = Field(..., examples=["Department name is required"], description="Сообщение об ошибке")

class ErrorResponse(ApiModel):
    """
    ErrorResponse — стандартная структура ответа с ошибкой.
    """
    message: str = Field(..., examples=["Validation failed"], description="Сообщение об ошибке")
    errors: Optional[List[FieldErrorRead]] = Field(None, description="Ошибки по полям (только для валидации)")

    @classmethod
    def from_field_errors(cls, message: str, errors: List[FieldError]) -> "ErrorResponse":
        return cls(
            message=message,
            errors=[FieldErrorRead(property=e.property, message=e.message) for e in errors],
        )
