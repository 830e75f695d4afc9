# staffboard/services/mappers.py
"""
Проекции сущностей в схемы ответов.

Счётчики сотрудников считаются коррелированным подзапросом прямо в SELECT
и учитывают только неудалённых сотрудников.
"""
from typing import Iterable, Tuple

from sqlalchemy import func, select

from staffboard.models import Department, Employee, EmployeeProject, Project
from staffboard.schemas.department import DepartmentRead
from staffboard.schemas.employee import EmployeeDetail, EmployeeRead
from staffboard.schemas.project import ProjectRead


def department_employee_count():
    return (
        select(func.count(Employee.id))
        .where(Employee.department_id == Department.id, Employee.not_deleted())
        .correlate(Department)
        .scalar_subquery()
        .label("employee_count")
    )


def project_employee_count():
    return (
        select(func.count(EmployeeProject.employee_id))
        .join(Employee, Employee.id == EmployeeProject.employee_id)
        .where(EmployeeProject.project_id == Project.id, Employee.not_deleted())
        .correlate(Project)
        .scalar_subquery()
        .label("employee_count")
    )


def to_department_read(row: Tuple[Department, int]) -> DepartmentRead:
    department, employee_count = row
    return DepartmentRead(
        id=department.id,
        name=department.name,
        description=department.description,
        employee_count=employee_count or 0,
    )


def to_project_read(row: Tuple[Project, int]) -> ProjectRead:
    project, employee_count = row
    return ProjectRead(
        id=project.id,
        name=project.name,
        description=project.description,
        start_date=project.start_date,
        end_date=project.end_date,
        employee_count=employee_count or 0,
    )


def to_employee_read(employee: Employee) -> EmployeeRead:
    return EmployeeRead(
        id=employee.id,
        first_name=employee.first_name,
        last_name=employee.last_name,
        email=employee.email,
        status=employee.status,
        hire_date=employee.hire_date,
        notes=employee.notes,
        department_id=employee.department_id,
        department_name=employee.department.name if employee.department is not None else "",
    )


def to_employee_detail(employee: Employee, project_rows: Iterable[Tuple[Project, int]]) -> EmployeeDetail:
    base = to_employee_read(employee)
    return EmployeeDetail(
        **base.model_dump(),
        projects=[to_project_read(row) for row in project_rows],
    )
