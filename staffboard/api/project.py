# staffboard/api/project.py
import logging
import uuid
from typing import Optional

from fastapi import APIRouter, Depends, Query, Request, Response, status

from staffboard.core.exceptions import BadRequestError
from staffboard.crud.unit_of_work import UnitOfWork
from staffboard.dependencies import get_project_service, get_pagination, get_unit_of_work
from staffboard.schemas.project import ProjectCreate, ProjectRead, ProjectUpdate
from staffboard.schemas.employee import EmployeeRead
from staffboard.schemas.pagination import PaginatedResult, PaginationParams
from staffboard.schemas.response import ErrorResponse
from staffboard.services.project_service import ProjectService
from staffboard.validators.project import CreateProjectValidator, UpdateProjectValidator

router = APIRouter(prefix="/api/projects", tags=["Projects"])
logger = logging.getLogger("Staffboard.ProjectsAPI")

NOT_FOUND = {404: {"model": ErrorResponse, "description": "Project not found"}}
INVALID = {400: {"model": ErrorResponse, "description": "Validation failed"}}

@router.get("", response_model=PaginatedResult[ProjectRead])
def list_projects(
    pagination: PaginationParams = Depends(get_pagination),
    service: ProjectService = Depends(get_project_service),
):
    """
    Получить постраничный список проектов.
    """
    return service.get_all(pagination)

@router.get("/search", response_model=PaginatedResult[ProjectRead], responses=INVALID)
def search_projects(
    q: Optional[str] = Query(None, description="Подстрока в названии или описании"),
    pagination: PaginationParams = Depends(get_pagination),
    service: ProjectService = Depends(get_project_service),
):
    """
    Поиск проектов по названию или описанию (без учёта регистра).
    """
    if not q or not q.strip():
        raise BadRequestError("Search term is required")
    return service.search(q, pagination)

@router.get("/{project_id}", response_model=ProjectRead, responses=NOT_FOUND)
def get_project(
    project_id: uuid.UUID,
    service: ProjectService = Depends(get_project_service),
):
    """
    Получить проект по ID.
    """
    return service.get_by_id(project_id)

@router.get("/{project_id}/employees", response_model=PaginatedResult[EmployeeRead], responses=NOT_FOUND)
def list_project_employees(
    project_id: uuid.UUID,
    pagination: PaginationParams = Depends(get_pagination),
    service: ProjectService = Depends(get_project_service),
):
    """
    Сотрудники, назначенные на проект, постранично.
    """
    return service.get_employees(project_id, pagination)

@router.post("", response_model=ProjectRead, status_code=status.HTTP_201_CREATED, responses=INVALID)
def create_project(
    data: ProjectCreate,
    request: Request,
    response: Response,
    uow: UnitOfWork = Depends(get_unit_of_work),
    service: ProjectService = Depends(get_project_service),
):
    """
    Создать проект.
    """
    CreateProjectValidator(uow).validate_or_raise(data)
    created = service.create(data)
    response.headers["Location"] = str(request.url_for("get_project", project_id=created.id))
    return created

@router.put("/{project_id}", response_model=ProjectRead, responses={**NOT_FOUND, **INVALID})
def update_project(
    project_id: uuid.UUID,
    data: ProjectUpdate,
    uow: UnitOfWork = Depends(get_unit_of_work),
    service: ProjectService = Depends(get_project_service),
):
    """
    Обновить проект.
    """
    data.id = project_id
    UpdateProjectValidator(uow).validate_or_raise(data)
    return service.update(project_id, data)

@router.delete("/{project_id}", status_code=status.HTTP_204_NO_CONTENT, responses=NOT_FOUND)
def delete_project(
    project_id: uuid.UUID,
    service: ProjectService = Depends(get_project_service),
):
    """
    Удалить проект (soft delete).
    """
    service.delete(project_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
