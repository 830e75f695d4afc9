# staffboard/services/employee_service.py
import logging
import uuid

from sqlalchemy import or_
from sqlalchemy.orm import joinedload, selectinload

from staffboard.core.dates import as_utc
from staffboard.core.exceptions import AssignmentNotFound, EmployeeNotFound, ProjectNotFound
from staffboard.crud.pagination import paginate
from staffboard.crud.unit_of_work import UnitOfWork
from staffboard.models import Employee, EmployeeProject, Project
from staffboard.schemas.employee import EmployeeCreate, EmployeeDetail, EmployeeRead, EmployeeUpdate
from staffboard.schemas.pagination import PaginatedResult, PaginationParams
from staffboard.services.mappers import project_employee_count, to_employee_detail, to_employee_read

logger = logging.getLogger("Staffboard.Employees")


class EmployeeService:
    """
    Операции над сотрудниками, включая назначение на проекты.

    Назначение идемпотентно (повторное — no-op), снятие с несуществующего
    назначения — ошибка NotFound.
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    def _with_department(self):
        return (
            self.uow.employees.query()
            .options(joinedload(Employee.department))
            .order_by(Employee.last_name, Employee.first_name, Employee.id)
        )

    def _load_with_department(self, employee_id: uuid.UUID) -> Employee:
        employee = self._with_department().filter(Employee.id == employee_id).first()
        if employee is None:
            raise EmployeeNotFound(employee_id)
        return employee

    def get_all(self, pagination: PaginationParams) -> PaginatedResult[EmployeeRead]:
        return paginate(self._with_department(), pagination, to_employee_read)

    def get_by_id(self, employee_id: uuid.UUID) -> EmployeeDetail:
        employee = self._load_with_department(employee_id)
        project_rows = (
            self.uow.projects.query()
            .join(EmployeeProject, EmployeeProject.project_id == Project.id)
            .filter(EmployeeProject.employee_id == employee_id)
            .add_columns(project_employee_count())
            .order_by(Project.name, Project.id)
            .all()
        )
        return to_employee_detail(employee, project_rows)

    def search(self, term: str, pagination: PaginationParams) -> PaginatedResult[EmployeeRead]:
        pattern = f"%{term}%"
        query = self._with_department().filter(
            or_(
                Employee.first_name.ilike(pattern),
                Employee.last_name.ilike(pattern),
                Employee.email.ilike(pattern),
            )
        )
        return paginate(query, pagination, to_employee_read)

    def create(self, request: EmployeeCreate) -> EmployeeRead:
        def operation() -> EmployeeRead:
            employee = Employee(
                id=uuid.uuid4(),
                first_name=request.first_name,
                last_name=request.last_name,
                email=request.email,
                status=request.status,
                hire_date=as_utc(request.hire_date),
                notes=request.notes,
                department_id=request.department_id,
            )
            self.uow.employees.add(employee)
            self.uow.save_changes()
            logger.info(f"Created employee '{employee.email}' (ID: {employee.id})")
            # Перечитываем, чтобы получить название отдела
            return to_employee_read(self._load_with_department(employee.id))

        return self.uow.execute_in_transaction(operation)

    def update(self, employee_id: uuid.UUID, request: EmployeeUpdate) -> EmployeeRead:
        def operation() -> EmployeeRead:
            employee = self._load_with_department(employee_id)
            employee.first_name = request.first_name
            employee.last_name = request.last_name
            employee.email = request.email
            employee.status = request.status
            employee.hire_date = as_utc(request.hire_date)
            employee.notes = request.notes
            employee.department_id = request.department_id
            self.uow.employees.update(employee)
            self.uow.save_changes()
            # Отдел мог смениться: сбрасываем загруженную связь и перечитываем
            self.uow.session.expire(employee, ["department"])
            logger.info(f"Updated employee {employee.id}")
            return to_employee_read(self._load_with_department(employee_id))

        return self.uow.execute_in_transaction(operation)

    def delete(self, employee_id: uuid.UUID) -> None:
        def operation() -> None:
            if not self.uow.employees.exists(employee_id):
                raise EmployeeNotFound(employee_id)
            self.uow.employees.soft_delete(employee_id)
            self.uow.save_changes()
            logger.info(f"Soft-deleted employee {employee_id}")

        self.uow.execute_in_transaction(operation)

    def assign_to_project(self, employee_id: uuid.UUID, project_id: uuid.UUID) -> None:
        def operation() -> None:
            if not self.uow.employees.exists(employee_id):
                raise EmployeeNotFound(employee_id)
            if not self.uow.projects.exists(project_id):
                raise ProjectNotFound(project_id)

            employee = (
                self.uow.employees.query()
                .options(selectinload(Employee.employee_projects))
                .populate_existing()
                .filter(Employee.id == employee_id)
                .one()
            )
            if any(ep.project_id == project_id for ep in employee.employee_projects):
                logger.info(f"Employee {employee_id} already assigned to project {project_id}")
                return

            employee.employee_projects.append(
                EmployeeProject(employee_id=employee_id, project_id=project_id)
            )
            self.uow.save_changes()
            logger.info(f"Assigned employee {employee_id} to project {project_id}")

        self.uow.execute_in_transaction(operation)

    def remove_from_project(self, employee_id: uuid.UUID, project_id: uuid.UUID) -> None:
        def operation() -> None:
            employee = (
                self.uow.employees.query()
                .options(selectinload(Employee.employee_projects))
                .populate_existing()
                .filter(Employee.id == employee_id)
                .first()
            )
            if employee is None:
                raise EmployeeNotFound(employee_id)

            assignment = next(
                (ep for ep in employee.employee_projects if ep.project_id == project_id),
                None,
            )
            if assignment is None:
                raise AssignmentNotFound(employee_id, project_id)

            employee.employee_projects.remove(assignment)
            self.uow.save_changes()
            logger.info(f"Removed employee {employee_id} from project {project_id}")

        self.uow.execute_in_transaction(operation)
