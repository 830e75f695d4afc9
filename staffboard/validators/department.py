# staffboard/validators/department.py
from typing import List, Optional
import uuid

from sqlalchemy import func

from staffboard.core.exceptions import FieldError
from staffboard.models import Department
from staffboard.schemas.department import DepartmentCreate, DepartmentUpdate
from staffboard.validators.base import RequestValidator, is_blank


class _DepartmentRules:
    def name_taken(self, name: str, exclude_id: Optional[uuid.UUID] = None) -> bool:
        criteria = [func.lower(Department.name) == name.lower()]
        if exclude_id is not None:
            criteria.append(Department.id != exclude_id)
        return self.uow.departments.any_matching(*criteria)

    def check(self, request, errors: List[FieldError], exclude_id: Optional[uuid.UUID] = None) -> None:
        self.required(errors, "name", request.name, "Department name is required")
        self.max_length(errors, "name", request.name, 200, "Department name cannot exceed 200 characters")
        if not is_blank(request.name) and self.name_taken(request.name, exclude_id):
            errors.append(FieldError("name", "A department with this name already exists."))

        self.max_length(errors, "description", request.description, 1000, "Description cannot exceed 1000 characters")


class CreateDepartmentValidator(_DepartmentRules, RequestValidator[DepartmentCreate]):
    def rules(self, request: DepartmentCreate, errors: List[FieldError]) -> None:
        self.check(request, errors)


class UpdateDepartmentValidator(_DepartmentRules, RequestValidator[DepartmentUpdate]):
    def rules(self, request: DepartmentUpdate, errors: List[FieldError]) -> None:
        self.check(request, errors, exclude_id=request.id)
