# staffboard/services/project_service.py
import logging
import uuid

from sqlalchemy.orm import joinedload

from staffboard.core.dates import as_utc
from staffboard.core.exceptions import ProjectNotFound
from staffboard.crud.pagination import paginate
from staffboard.crud.unit_of_work import UnitOfWork
from staffboard.models import Employee, EmployeeProject, Project
from staffboard.schemas.employee import EmployeeRead
from staffboard.schemas.pagination import PaginatedResult, PaginationParams
from staffboard.schemas.project import ProjectCreate, ProjectRead, ProjectUpdate
from staffboard.services.mappers import project_employee_count, to_employee_read, to_project_read

logger = logging.getLogger("Staffboard.Projects")


class ProjectService:
    """
    Операции над проектами.
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    def _projected_query(self):
        return (
            self.uow.projects.query()
            .add_columns(project_employee_count())
            .order_by(Project.name, Project.id)
        )

    def get_all(self, pagination: PaginationParams) -> PaginatedResult[ProjectRead]:
        return paginate(self._projected_query(), pagination, to_project_read)

    def get_by_id(self, project_id: uuid.UUID) -> ProjectRead:
        row = self._projected_query().filter(Project.id == project_id).first()
        if row is None:
            raise ProjectNotFound(project_id)
        return to_project_read(row)

    def search(self, term: str, pagination: PaginationParams) -> PaginatedResult[ProjectRead]:
        pattern = f"%{term}%"
        query = self._projected_query().filter(
            Project.name.ilike(pattern) | Project.description.ilike(pattern)
        )
        return paginate(query, pagination, to_project_read)

    def get_employees(self, project_id: uuid.UUID, pagination: PaginationParams) -> PaginatedResult[EmployeeRead]:
        if not self.uow.projects.exists(project_id):
            raise ProjectNotFound(project_id)
        query = (
            self.uow.employees.query()
            .options(joinedload(Employee.department))
            .filter(Employee.employee_projects.any(EmployeeProject.project_id == project_id))
            .order_by(Employee.last_name, Employee.first_name, Employee.id)
        )
        return paginate(query, pagination, to_employee_read)

    def create(self, request: ProjectCreate) -> ProjectRead:
        def operation() -> ProjectRead:
            project = Project(
                id=uuid.uuid4(),
                name=request.name,
                description=request.description,
                start_date=as_utc(request.start_date),
                end_date=as_utc(request.end_date) if request.end_date else None,
            )
            self.uow.projects.add(project)
            self.uow.save_changes()
            logger.info(f"Created project '{project.name}' (ID: {project.id})")
            return ProjectRead(
                id=project.id,
                name=project.name,
                description=project.description,
                start_date=project.start_date,
                end_date=project.end_date,
                employee_count=0,
            )

        return self.uow.execute_in_transaction(operation)

    def update(self, project_id: uuid.UUID, request: ProjectUpdate) -> ProjectRead:
        def operation() -> ProjectRead:
            row = self._projected_query().filter(Project.id == project_id).first()
            if row is None:
                raise ProjectNotFound(project_id)
            project, employee_count = row
            project.name = request.name
            project.description = request.description
            project.start_date = as_utc(request.start_date)
            project.end_date = as_utc(request.end_date) if request.end_date else None
            self.uow.projects.update(project)
            self.uow.save_changes()
            logger.info(f"Updated project {project.id}")
            return to_project_read((project, employee_count))

        return self.uow.execute_in_transaction(operation)

    def delete(self, project_id: uuid.UUID) -> None:
        def operation() -> None:
            if not self.uow.projects.exists(project_id):
                raise ProjectNotFound(project_id)
            self.uow.projects.soft_delete(project_id)
            self.uow.save_changes()
            logger.info(f"Soft-deleted project {project_id}")

        self.uow.execute_in_transaction(operation)
