# staffboard/dependencies.py

from typing import Generator
from fastapi import Depends, Query
from sqlalchemy.orm import Session
from staffboard.core.settings import settings
from staffboard.crud.unit_of_work import UnitOfWork
from staffboard.database import SessionLocal
from staffboard.schemas.pagination import PaginationParams
from staffboard.services.department_service import DepartmentService
from staffboard.services.employee_service import EmployeeService
from staffboard.services.project_service import ProjectService

def get_db() -> Generator[Session, None, None]:
    """
    Создает и возвращает сессию базы данных, гарантирует закрытие после использования.
    """
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()

def get_unit_of_work(db: Session = Depends(get_db)) -> Generator[UnitOfWork, None, None]:
    """
    Unit of work на один запрос. Незавершённая транзакция откатывается при закрытии.
    """
    uow = UnitOfWork(db)
    try:
        yield uow
    finally:
        uow.close()

def get_pagination(
    page_number: int = Query(1, ge=1, alias="pageNumber"),
    page_size: int = Query(settings.DEFAULT_PAGE_SIZE, ge=1, le=settings.MAX_PAGE_SIZE, alias="pageSize"),
) -> PaginationParams:
    return PaginationParams(page_number=page_number, page_size=page_size)

# Сервисы

def get_department_service(uow: UnitOfWork = Depends(get_unit_of_work)) -> DepartmentService:
    return DepartmentService(uow)

def get_employee_service(uow: UnitOfWork = Depends(get_unit_of_work)) -> EmployeeService:
    return EmployeeService(uow)

def get_project_service(uow: UnitOfWork = Depends(get_unit_of_work)) -> ProjectService:
    return ProjectService(uow)
