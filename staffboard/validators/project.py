# staffboard/validators/project.py
from typing import List, Optional
import uuid

from sqlalchemy import func

from staffboard.core.dates import as_utc
from staffboard.core.exceptions import FieldError
from staffboard.models import Project
from staffboard.schemas.project import ProjectCreate, ProjectUpdate
from staffboard.validators.base import RequestValidator, is_blank


class _ProjectRules:
    def name_taken(self, name: str, exclude_id: Optional[uuid.UUID] = None) -> bool:
        criteria = [func.lower(Project.name) == name.lower()]
        if exclude_id is not None:
            criteria.append(Project.id != exclude_id)
        return self.uow.projects.any_matching(*criteria)

    def check(self, request, errors: List[FieldError], exclude_id: Optional[uuid.UUID] = None) -> None:
        self.max_length(errors, "description", request.description, 2000, "Description cannot exceed 2000 characters")

        self.required(errors, "startDate", request.start_date, "Start date is required")
        # Без даты начала сравнивать не с чем; ошибку уже выдало правило выше
        if request.end_date is not None and request.start_date is not None:
            if as_utc(request.end_date) <= as_utc(request.start_date):
                errors.append(FieldError("endDate", "End date must be after start date"))

        self.required(errors, "name", request.name, "Project name is required")
        self.max_length(errors, "name", request.name, 200, "Project name cannot exceed 200 characters")
        if not is_blank(request.name) and self.name_taken(request.name, exclude_id):
            errors.append(FieldError("name", "A project with this name already exists."))


class CreateProjectValidator(_ProjectRules, RequestValidator[ProjectCreate]):
    def rules(self, request: ProjectCreate, errors: List[FieldError]) -> None:
        self.check(request, errors)


class UpdateProjectValidator(_ProjectRules, RequestValidator[ProjectUpdate]):
    def rules(self, request: ProjectUpdate, errors: List[FieldError]) -> None:
        self.check(request, errors, exclude_id=request.id)
