# staffboard/schemas/department.py
import uuid
from typing import Optional

from pydantic import Field

from staffboard.schemas.base import ApiModel

class DepartmentBase(ApiModel):
    """
    DepartmentBase — поля запроса для отдела (правила проверяет валидатор).
    """
    name: Optional[str] = Field(None, examples=["Backend Developing"], description="Название отдела")
    description: Optional[str] = Field(None, examples=["Backend Developing department"], description="Описание")

class DepartmentCreate(DepartmentBase):
    """
    DepartmentCreate — создание отдела.
    """
    pass

class DepartmentUpdate(DepartmentBase):
    """
    DepartmentUpdate — обновление отдела. id берётся из маршрута, не из тела запроса.
    """
    id: Optional[uuid.UUID] = Field(None, exclude=True, description="ID отдела (из маршрута)")

class DepartmentRead(ApiModel):
    """
    DepartmentRead — отдел в ответе API.
    """
    id: uuid.UUID
    name: str
    description: Optional[str] = None
    employee_count: int = Field(0, description="Количество неудалённых сотрудников")
