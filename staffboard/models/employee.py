# staffboard/models/employee.py
import enum
import uuid
from datetime import datetime
from sqlalchemy import Column, ForeignKey, Index, Integer, String, Uuid, func, text
from sqlalchemy.orm import relationship
from staffboard.models.base import BaseEntity, UtcDateTime

class EmployeeStatus(enum.IntEnum):
    ACTIVE = 0
    INACTIVE = 1

class Employee(BaseEntity):
    """
    Employee — сотрудник; принадлежит ровно одному отделу, может работать над несколькими проектами.
    """
    __tablename__ = "employees"

    first_name: str = Column(String(100), nullable=False, doc="Имя")
    last_name: str = Column(String(100), nullable=False, doc="Фамилия")
    email: str = Column(String(256), nullable=False, doc="Email")
    status: int = Column(Integer, nullable=False, default=EmployeeStatus.ACTIVE, doc="Статус: 0 — Active, 1 — Inactive")
    hire_date: datetime = Column(UtcDateTime, nullable=False, doc="Дата найма")
    notes: str = Column(String(1000), nullable=True, doc="Заметки")
    department_id: uuid.UUID = Column(
        Uuid, ForeignKey("departments.id", ondelete="RESTRICT"), nullable=False, index=True, doc="ID отдела"
    )

    # --- Связи ---
    department = relationship("Department", back_populates="employees")
    employee_projects = relationship(
        "EmployeeProject",
        back_populates="employee",
        cascade="all, delete-orphan",
    )

    __table_args__ = (
        Index(
            "ux_employees_email_active",
            func.lower(email),
            unique=True,
            sqlite_where=text("is_deleted = 0"),
            postgresql_where=text("is_deleted = false"),
        ),
    )

    def __repr__(self):
        return f"<Employee(id={self.id}, email='{self.email}', department_id={self.department_id})>"
