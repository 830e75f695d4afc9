# staffboard/schemas/employee.py
import uuid
from datetime import datetime
from typing import List, Optional

from pydantic import Field

from staffboard.schemas.base import ApiModel
from staffboard.schemas.project import ProjectRead

class EmployeeBase(ApiModel):
    """
    EmployeeBase — поля запроса для сотрудника.
    """
    first_name: Optional[str] = Field(None, examples=["Panagiotis"], description="Имя")
    last_name: Optional[str] = Field(None, examples=["Stavrakellis"], description="Фамилия")
    email: Optional[str] = Field(None, examples=["panagiotis.stavrakellis@company.com"], description="Email")
    status: int = Field(0, examples=[0], description="Статус: 0 — Active, 1 — Inactive")
    hire_date: Optional[datetime] = Field(None, examples=["2024-01-15T00:00:00Z"], description="Дата найма")
    notes: Optional[str] = Field(None, examples=["Backend Developer"], description="Заметки")
    department_id: Optional[uuid.UUID] = Field(None, description="ID отдела")

class EmployeeCreate(EmployeeBase):
    """
    EmployeeCreate — создание сотрудника.
    """
    pass

class EmployeeUpdate(EmployeeBase):
    """
    EmployeeUpdate — обновление сотрудника. id берётся из маршрута.
    """
    id: Optional[uuid.UUID] = Field(None, exclude=True, description="ID сотрудника (из маршрута)")

class EmployeeRead(ApiModel):
    """
    EmployeeRead — сотрудник в списках.
    """
    id: uuid.UUID
    first_name: str
    last_name: str
    email: str
    status: int
    hire_date: datetime
    notes: Optional[str] = None
    department_id: uuid.UUID
    department_name: str = ""

class EmployeeDetail(EmployeeRead):
    """
    EmployeeDetail — сотрудник с назначенными (неудалёнными) проектами.
    """
    projects: List[ProjectRead] = Field(default_factory=list)
