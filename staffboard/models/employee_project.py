# staffboard/models/employee_project.py
import uuid
from sqlalchemy import Column, ForeignKey, Uuid
from sqlalchemy.orm import relationship
from staffboard.models.base import Base

class EmployeeProject(Base):
    """
    EmployeeProject — связка сотрудник↔проект. Составной первичный ключ, без собственного id.
    """
    __tablename__ = "employee_projects"

    employee_id: uuid.UUID = Column(Uuid, ForeignKey("employees.id", ondelete="CASCADE"), primary_key=True)
    project_id: uuid.UUID = Column(Uuid, ForeignKey("projects.id", ondelete="CASCADE"), primary_key=True, index=True)

    employee = relationship("Employee", back_populates="employee_projects")
    project = relationship("Project", back_populates="employee_projects")

    def __repr__(self):
        return f"<EmployeeProject(employee_id={self.employee_id}, project_id={self.project_id})>"
