# staffboard/models/project.py
from datetime import datetime
from sqlalchemy import Column, Index, String, func, text
from sqlalchemy.orm import relationship
from staffboard.models.base import BaseEntity, UtcDateTime

class Project(BaseEntity):
    """
    Project — проект, на который назначаются сотрудники (many-to-many через EmployeeProject).
    """
    __tablename__ = "projects"

    name: str = Column(String(200), nullable=False, doc="Название проекта")
    description: str = Column(String(2000), nullable=True, doc="Описание")
    start_date: datetime = Column(UtcDateTime, nullable=False, doc="Дата начала")
    end_date: datetime = Column(UtcDateTime, nullable=True, doc="Дата окончания")

    employee_projects = relationship(
        "EmployeeProject",
        back_populates="project",
        cascade="all, delete-orphan",
    )

    __table_args__ = (
        Index(
            "ux_projects_name_active",
            func.lower(name),
            unique=True,
            sqlite_where=text("is_deleted = 0"),
            postgresql_where=text("is_deleted = false"),
        ),
    )

    def __repr__(self):
        return f"<Project(id={self.id}, name='{self.name}', start_date={self.start_date})>"
