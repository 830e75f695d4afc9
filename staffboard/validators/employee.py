# staffboard/validators/employee.py
from datetime import datetime, timezone
from typing import List, Optional
import uuid

from email_validator import EmailNotValidError, validate_email
from sqlalchemy import func

from staffboard.core.dates import as_utc
from staffboard.core.exceptions import FieldError
from staffboard.models import Employee, EmployeeStatus
from staffboard.schemas.employee import EmployeeCreate, EmployeeUpdate
from staffboard.validators.base import RequestValidator, is_blank


def is_valid_email(value: str) -> bool:
    try:
        validate_email(value, check_deliverability=False, globally_deliverable=False)
    except EmailNotValidError:
        return False
    return True


class _EmployeeRules:
    def email_taken(self, email: str, exclude_id: Optional[uuid.UUID] = None) -> bool:
        criteria = [func.lower(Employee.email) == email.lower()]
        if exclude_id is not None:
            criteria.append(Employee.id != exclude_id)
        return self.uow.employees.any_matching(*criteria)

    def check(self, request, errors: List[FieldError], exclude_id: Optional[uuid.UUID] = None) -> None:
        self.required(errors, "firstName", request.first_name, "First name is required")
        self.max_length(errors, "firstName", request.first_name, 100, "First name cannot exceed 100 characters")
        self.required(errors, "lastName", request.last_name, "Last name is required")
        self.max_length(errors, "lastName", request.last_name, 100, "Last name cannot exceed 100 characters")

        if self.required(errors, "hireDate", request.hire_date, "Hire date is required"):
            if as_utc(request.hire_date) > datetime.now(timezone.utc):
                errors.append(FieldError("hireDate", "Hire date cannot be in the future"))

        if request.status not in {s.value for s in EmployeeStatus}:
            errors.append(FieldError("status", "Invalid employee status"))

        self.max_length(errors, "notes", request.notes, 1000, "Notes cannot exceed 1000 characters")

        if self.required(errors, "departmentId", request.department_id, "Department is required"):
            if not self.uow.departments.exists(request.department_id):
                errors.append(FieldError("departmentId", "The specified department does not exist."))

        if self.required(errors, "email", request.email, "Email is required"):
            if not is_valid_email(request.email):
                errors.append(FieldError("email", "Invalid email format"))
        self.max_length(errors, "email", request.email, 256, "Email cannot exceed 256 characters")
        if not is_blank(request.email) and self.email_taken(request.email, exclude_id):
            errors.append(FieldError("email", "An employee with this email address already exists."))


class CreateEmployeeValidator(_EmployeeRules, RequestValidator[EmployeeCreate]):
    def rules(self, request: EmployeeCreate, errors: List[FieldError]) -> None:
        self.check(request, errors)


class UpdateEmployeeValidator(_EmployeeRules, RequestValidator[EmployeeUpdate]):
    def rules(self, request: EmployeeUpdate, errors: List[FieldError]) -> None:
        self.check(request, errors, exclude_id=request.id)
