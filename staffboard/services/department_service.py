# staffboard/services/department_service.py
import logging
import uuid

from sqlalchemy.orm import joinedload

from staffboard.core.exceptions import DepartmentNotFound
from staffboard.crud.pagination import paginate
from staffboard.crud.unit_of_work import UnitOfWork
from staffboard.models import Department, Employee
from staffboard.schemas.department import DepartmentCreate, DepartmentRead, DepartmentUpdate
from staffboard.schemas.employee import EmployeeRead
from staffboard.schemas.pagination import PaginatedResult, PaginationParams
from staffboard.services.mappers import department_employee_count, to_department_read, to_employee_read

logger = logging.getLogger("Staffboard.Departments")


class DepartmentService:
    """
    Операции над отделами. Изменения выполняются в транзакции unit of work.
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    def _projected_query(self):
        return (
            self.uow.departments.query()
            .add_columns(department_employee_count())
            .order_by(Department.name, Department.id)
        )

    def get_all(self, pagination: PaginationParams) -> PaginatedResult[DepartmentRead]:
        return paginate(self._projected_query(), pagination, to_department_read)

    def get_by_id(self, department_id: uuid.UUID) -> DepartmentRead:
        row = self._projected_query().filter(Department.id == department_id).first()
        if row is None:
            raise DepartmentNotFound(department_id)
        return to_department_read(row)

    def search(self, term: str, pagination: PaginationParams) -> PaginatedResult[DepartmentRead]:
        pattern = f"%{term}%"
        query = self._projected_query().filter(
            Department.name.ilike(pattern) | Department.description.ilike(pattern)
        )
        return paginate(query, pagination, to_department_read)

    def get_employees(self, department_id: uuid.UUID, pagination: PaginationParams) -> PaginatedResult[EmployeeRead]:
        if not self.uow.departments.exists(department_id):
            raise DepartmentNotFound(department_id)
        query = (
            self.uow.employees.query()
            .options(joinedload(Employee.department))
            .filter(Employee.department_id == department_id)
            .order_by(Employee.last_name, Employee.first_name, Employee.id)
        )
        return paginate(query, pagination, to_employee_read)

    def create(self, request: DepartmentCreate) -> DepartmentRead:
        def operation() -> DepartmentRead:
            department = Department(
                id=uuid.uuid4(),
                name=request.name,
                description=request.description,
            )
            self.uow.departments.add(department)
            self.uow.save_changes()
            logger.info(f"Created department '{department.name}' (ID: {department.id})")
            return DepartmentRead(
                id=department.id,
                name=department.name,
                description=department.description,
                employee_count=0,
            )

        return self.uow.execute_in_transaction(operation)

    def update(self, department_id: uuid.UUID, request: DepartmentUpdate) -> DepartmentRead:
        def operation() -> DepartmentRead:
            row = self._projected_query().filter(Department.id == department_id).first()
            if row is None:
                raise DepartmentNotFound(department_id)
            department, employee_count = row
            department.name = request.name
            department.description = request.description
            self.uow.departments.update(department)
            self.uow.save_changes()
            logger.info(f"Updated department {department.id}")
            return to_department_read((department, employee_count))

        return self.uow.execute_in_transaction(operation)

    def delete(self, department_id: uuid.UUID) -> None:
        def operation() -> None:
            if not self.uow.departments.exists(department_id):
                raise DepartmentNotFound(department_id)
            self.uow.departments.soft_delete(department_id)
            self.uow.save_changes()
            logger.info(f"Soft-deleted department {department_id}")

        self.uow.execute_in_transaction(operation)
