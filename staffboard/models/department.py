# staffboard/models/department.py
from sqlalchemy import Column, Index, String, func, text
from sqlalchemy.orm import relationship
from staffboard.models.base import BaseEntity

class Department(BaseEntity):
    """
    Department — отдел; содержит сотрудников. Поддерживает soft-delete.
    """
    __tablename__ = "departments"

    name: str = Column(String(200), nullable=False, doc="Название отдела")
    description: str = Column(String(1000), nullable=True, doc="Описание")

    employees = relationship("Employee", back_populates="department", passive_deletes="all")

    __table_args__ = (
        # Уникальность имени без учёта регистра среди неудалённых строк
        Index(
            "ux_departments_name_active",
            func.lower(name),
            unique=True,
            sqlite_where=text("is_deleted = 0"),
            postgresql_where=text("is_deleted = false"),
        ),
    )

    def __repr__(self):
        return f"<Department(id={self.id}, name='{self.name}', is_deleted={self.is_deleted})>"
