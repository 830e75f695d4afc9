# staffboard/api/department.py
import logging
import uuid
from typing import Optional

from fastapi import APIRouter, Depends, Query, Request, Response, status

from staffboard.core.exceptions import BadRequestError
from staffboard.crud.unit_of_work import UnitOfWork
from staffboard.dependencies import get_department_service, get_pagination, get_unit_of_work
from staffboard.schemas.department import DepartmentCreate, DepartmentRead, DepartmentUpdate
from staffboard.schemas.employee import EmployeeRead
from staffboard.schemas.pagination import PaginatedResult, PaginationParams
from staffboard.schemas.response import ErrorResponse
from staffboard.services.department_service import DepartmentService
from staffboard.validators.department import CreateDepartmentValidator, UpdateDepartmentValidator

router = APIRouter(prefix="/api/departments", tags=["Departments"])
logger = logging.getLogger("Staffboard.DepartmentsAPI")

NOT_FOUND = {404: {"model": ErrorResponse, "description": "Department not found"}}
INVALID = {400: {"model": ErrorResponse, "description": "Validation failed"}}

@router.get("", response_model=PaginatedResult[DepartmentRead])
def list_departments(
    pagination: PaginationParams = Depends(get_pagination),
    service: DepartmentService = Depends(get_department_service),
):
    """
    Получить постраничный список отделов.
    """
    return service.get_all(pagination)

@router.get("/search", response_model=PaginatedResult[DepartmentRead], responses=INVALID)
def search_departments(
    q: Optional[str] = Query(None, description="Подстрока в названии или описании"),
    pagination: PaginationParams = Depends(get_pagination),
    service: DepartmentService = Depends(get_department_service),
):
    """
    Поиск отделов по названию или описанию (без учёта регистра).
    """
    if not q or not q.strip():
        raise BadRequestError("Search term is required")
    return service.search(q, pagination)

@router.get("/{department_id}", response_model=DepartmentRead, responses=NOT_FOUND)
def get_department(
    department_id: uuid.UUID,
    service: DepartmentService = Depends(get_department_service),
):
    """
    Получить отдел по ID.
    """
    return service.get_by_id(department_id)

@router.get("/{department_id}/employees", response_model=PaginatedResult[EmployeeRead], responses=NOT_FOUND)
def list_department_employees(
    department_id: uuid.UUID,
    pagination: PaginationParams = Depends(get_pagination),
    service: DepartmentService = Depends(get_department_service),
):
    """
    Сотрудники отдела, постранично.
    """
    return service.get_employees(department_id, pagination)

@router.post("", response_model=DepartmentRead, status_code=status.HTTP_201_CREATED, responses=INVALID)
def create_department(
    data: DepartmentCreate,
    request: Request,
    response: Response,
    uow: UnitOfWork = Depends(get_unit_of_work),
    service: DepartmentService = Depends(get_department_service),
):
    """
    Создать отдел.
    """
    CreateDepartmentValidator(uow).validate_or_raise(data)
    created = service.create(data)
    response.headers["Location"] = str(request.url_for("get_department", department_id=created.id))
    return created

@router.put("/{department_id}", response_model=DepartmentRead, responses={**NOT_FOUND, **INVALID})
def update_department(
    department_id: uuid.UUID,
    data: DepartmentUpdate,
    uow: UnitOfWork = Depends(get_unit_of_work),
    service: DepartmentService = Depends(get_department_service),
):
    """
    Обновить отдел.
    """
    data.id = department_id
    UpdateDepartmentValidator(uow).validate_or_raise(data)
    return service.update(department_id, data)

@router.delete("/{department_id}", status_code=status.HTTP_204_NO_CONTENT, responses=NOT_FOUND)
def delete_department(
    department_id: uuid.UUID,
    service: DepartmentService = Depends(get_department_service),
):
    """
    Удалить отдел (soft delete).
    """
    service.delete(department_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
