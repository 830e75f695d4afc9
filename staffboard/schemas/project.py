# staffboard/schemas/project.py
import uuid
from datetime import datetime
from typing import Optional

from pydantic import Field

from staffboard.schemas.base import ApiModel

class ProjectBase(ApiModel):
    """
    ProjectBase — поля запроса для проекта.
    """
    name: Optional[str] = Field(None, examples=["Backend Developer Technical Assessment"], description="Название проекта")
    description: Optional[str] = Field(None, description="Описание")
    start_date: Optional[datetime] = Field(None, examples=["2024-01-01T00:00:00Z"], description="Дата начала")
    end_date: Optional[datetime] = Field(None, examples=["2024-12-31T00:00:00Z"], description="Дата окончания (если есть — строго после начала)")

class ProjectCreate(ProjectBase):
    """
    ProjectCreate — создание проекта.
    """
    pass

class ProjectUpdate(ProjectBase):
    """
    ProjectUpdate — обновление проекта. id берётся из маршрута.
    """
    id: Optional[uuid.UUID] = Field(None, exclude=True, description="ID проекта (из маршрута)")

class ProjectRead(ApiModel):
    """
    ProjectRead — проект в ответе API.
    """
    id: uuid.UUID
    name: str
    description: Optional[str] = None
    start_date: datetime
    end_date: Optional[datetime] = None
    employee_count: int = Field(0, description="Количество неудалённых назначенных сотрудников")
