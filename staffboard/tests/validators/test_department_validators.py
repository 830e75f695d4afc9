import pytest

from staffboard.core.exceptions import RequestValidationFailed
from staffboard.crud.unit_of_work import UnitOfWork
from staffboard.schemas.department import DepartmentCreate, DepartmentUpdate
from staffboard.validators.department import CreateDepartmentValidator, UpdateDepartmentValidator


def _messages(errors, prop):
    return [e.message for e in errors if e.property == prop]


def test_valid_request_passes(uow: UnitOfWork):
    assert CreateDepartmentValidator(uow).validate(DepartmentCreate(name="Engineering")) == []


@pytest.mark.parametrize("name", [None, "", "   "])
def test_name_is_required(uow: UnitOfWork, name):
    errors = CreateDepartmentValidator(uow).validate(DepartmentCreate(name=name))
    assert _messages(errors, "name") == ["Department name is required"]


def test_name_and_description_length(uow: UnitOfWork):
    errors = CreateDepartmentValidator(uow).validate(
        DepartmentCreate(name="x" * 201, description="y" * 1001)
    )
    assert _messages(errors, "name") == ["Department name cannot exceed 200 characters"]
    assert _messages(errors, "description") == ["Description cannot exceed 1000 characters"]


def test_boundary_lengths_are_accepted(uow: UnitOfWork):
    errors = CreateDepartmentValidator(uow).validate(
        DepartmentCreate(name="x" * 200, description="y" * 1000)
    )
    assert errors == []


def test_duplicate_name_any_case_is_rejected(uow: UnitOfWork, make_department):
    make_department(name="Engineering")

    with pytest.raises(RequestValidationFailed) as excinfo:
        CreateDepartmentValidator(uow).validate_or_raise(DepartmentCreate(name="ENGINEERING"))

    assert excinfo.value.message == "Validation failed"
    assert excinfo.value.messages_for("name") == ["A department with this name already exists."]


def test_name_of_deleted_department_is_free(uow: UnitOfWork, make_department):
    make_department(name="Engineering", is_deleted=True)
    assert CreateDepartmentValidator(uow).validate(DepartmentCreate(name="Engineering")) == []


def test_update_to_own_name_is_allowed(uow: UnitOfWork, make_department):
    department = make_department(name="Engineering")
    request = DepartmentUpdate(name="engineering", description="Renamed case")
    request.id = department.id

    assert UpdateDepartmentValidator(uow).validate(request) == []


def test_update_to_another_departments_name_is_rejected(uow: UnitOfWork, make_department):
    make_department(name="Sales")
    department = make_department(name="Engineering")
    request = DepartmentUpdate(name="Sales")
    request.id = department.id

    errors = UpdateDepartmentValidator(uow).validate(request)
    assert _messages(errors, "name") == ["A department with this name already exists."]
