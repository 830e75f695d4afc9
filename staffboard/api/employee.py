# staffboard/api/employee.py
import logging
import uuid
from typing import Optional

from fastapi import APIRouter, Depends, Query, Request, Response, status

from staffboard.core.exceptions import BadRequestError
from staffboard.crud.unit_of_work import UnitOfWork
from staffboard.dependencies import get_employee_service, get_pagination, get_unit_of_work
from staffboard.schemas.employee import EmployeeCreate, EmployeeDetail, EmployeeRead, EmployeeUpdate
from staffboard.schemas.pagination import PaginatedResult, PaginationParams
from staffboard.schemas.response import ErrorResponse
from staffboard.services.employee_service import EmployeeService
from staffboard.validators.employee import CreateEmployeeValidator, UpdateEmployeeValidator

router = APIRouter(prefix="/api/employees", tags=["Employees"])
logger = logging.getLogger("Staffboard.EmployeesAPI")

NOT_FOUND = {404: {"model": ErrorResponse, "description": "Employee not found"}}
INVALID = {400: {"model": ErrorResponse, "description": "Validation failed"}}

@router.get("", response_model=PaginatedResult[EmployeeRead])
def list_employees(
    pagination: PaginationParams = Depends(get_pagination),
    service: EmployeeService = Depends(get_employee_service),
):
    """
    Получить постраничный список сотрудников (по фамилии, затем имени).
    """
    return service.get_all(pagination)

@router.get("/search", response_model=PaginatedResult[EmployeeRead], responses=INVALID)
def search_employees(
    q: Optional[str] = Query(None, description="Подстрока в имени, фамилии или email"),
    pagination: PaginationParams = Depends(get_pagination),
    service: EmployeeService = Depends(get_employee_service),
):
    if not q or not q.strip():
        raise BadRequestError("Search term is required")
    return service.search(q, pagination)

@router.get("/{employee_id}", response_model=EmployeeDetail, responses=NOT_FOUND)
def get_employee(
    employee_id: uuid.UUID,
    service: EmployeeService = Depends(get_employee_service),
):
    """
    Сотрудник с названием отдела и списком проектов.
    """
    return service.get_by_id(employee_id)

@router.post("", response_model=EmployeeRead, status_code=status.HTTP_201_CREATED, responses=INVALID)
def create_employee(
    data: EmployeeCreate,
    request: Request,
    response: Response,
    uow: UnitOfWork = Depends(get_unit_of_work),
    service: EmployeeService = Depends(get_employee_service),
):
    CreateEmployeeValidator(uow).validate_or_raise(data)
    created = service.create(data)
    response.headers["Location"] = str(request.url_for("get_employee", employee_id=created.id))
    return created

@router.put("/{employee_id}", response_model=EmployeeRead, responses={**NOT_FOUND, **INVALID})
def update_employee(
    employee_id: uuid.UUID,
    data: EmployeeUpdate,
    uow: UnitOfWork = Depends(get_unit_of_work),
    service: EmployeeService = Depends(get_employee_service),
):
    """
    Обновить сотрудника. Отдел можно сменить.
    """
    data.id = employee_id
    UpdateEmployeeValidator(uow).validate_or_raise(data)
    return service.update(employee_id, data)

@router.delete("/{employee_id}", status_code=status.HTTP_204_NO_CONTENT, responses=NOT_FOUND)
def delete_employee(
    employee_id: uuid.UUID,
    service: EmployeeService = Depends(get_employee_service),
):
    """
    Удалить сотрудника (soft delete). Назначения на проекты остаются в базе.
    """
    service.delete(employee_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)

# Назначения на проекты

@router.post("/{employee_id}/projects/{project_id}", status_code=status.HTTP_200_OK, responses=NOT_FOUND)
def assign_employee_to_project(
    employee_id: uuid.UUID,
    project_id: uuid.UUID,
    service: EmployeeService = Depends(get_employee_service),
):
    """
    Назначить сотрудника на проект. Повторное назначение ничего не меняет.
    """
    service.assign_to_project(employee_id, project_id)
    return Response(status_code=status.HTTP_200_OK)

@router.delete("/{employee_id}/projects/{project_id}", status_code=status.HTTP_200_OK, responses=NOT_FOUND)
def remove_employee_from_project(
    employee_id: uuid.UUID,
    project_id: uuid.UUID,
    service: EmployeeService = Depends(get_employee_service),
):
    """
    Снять сотрудника с проекта.
    """
    service.remove_from_project(employee_id, project_id)
    return Response(status_code=status.HTTP_200_OK)
