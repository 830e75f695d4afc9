import uuid
from datetime import datetime, timedelta, timezone

import pytest
from sqlalchemy.orm import Session

from staffboard.core.exceptions import AssignmentNotFound, EmployeeNotFound, ProjectNotFound
from staffboard.crud.unit_of_work import UnitOfWork
from staffboard.models import Employee, EmployeeProject, EmployeeStatus
from staffboard.schemas.employee import EmployeeCreate, EmployeeUpdate
from staffboard.schemas.pagination import PaginationParams
from staffboard.services.employee_service import EmployeeService
from staffboard.services.project_service import ProjectService


@pytest.fixture
def service(uow: UnitOfWork) -> EmployeeService:
    return EmployeeService(uow)


def _create_request(department_id: uuid.UUID, **overrides) -> EmployeeCreate:
    data = {
        "first_name": "Eleni",
        "last_name": "Dimitriou",
        "email": "eleni.dimitriou@company.com",
        "status": EmployeeStatus.ACTIVE,
        "hire_date": datetime(2020, 11, 5, tzinfo=timezone.utc),
        "notes": "Frontend Developer",
        "department_id": department_id,
    }
    data.update(overrides)
    return EmployeeCreate(**data)


def _assignment_count(db: Session, employee_id: uuid.UUID, project_id: uuid.UUID) -> int:
    return (
        db.query(EmployeeProject)
        .filter(EmployeeProject.employee_id == employee_id, EmployeeProject.project_id == project_id)
        .count()
    )


def test_hire_date_offset_is_stored_as_utc(service: EmployeeService, db: Session, make_department):
    department = make_department()
    hire_date = datetime(2021, 3, 10, 2, 0, tzinfo=timezone(timedelta(hours=5)))

    created = service.create(_create_request(department.id, hire_date=hire_date))
    db.expunge_all()
    fetched = service.get_by_id(created.id)

    expected = datetime(2021, 3, 9, 21, 0, tzinfo=timezone.utc)
    assert created.hire_date == expected
    assert created.hire_date.utcoffset() == timedelta(0)
    assert fetched.hire_date == expected
    assert fetched.hire_date.utcoffset() == timedelta(0)


def test_naive_hire_date_reads_back_as_utc(service: EmployeeService, db: Session, make_department):
    department = make_department()

    created = service.create(_create_request(department.id, hire_date=datetime(2021, 3, 10, 9, 30)))
    db.expunge_all()
    fetched = service.get_by_id(created.id)

    assert fetched.hire_date == datetime(2021, 3, 10, 9, 30, tzinfo=timezone.utc)


def test_create_returns_department_name(service: EmployeeService, make_department):
    department = make_department(name="Backend Developing")

    created = service.create(_create_request(department.id))

    assert isinstance(created.id, uuid.UUID)
    assert created.first_name == "Eleni"
    assert created.department_id == department.id
    assert created.department_name == "Backend Developing"
    assert created.status == 0


def test_get_by_id_returns_detail_with_active_projects(service: EmployeeService, make_employee, make_project, assign):
    employee = make_employee(first_name="Georgios", last_name="Konstantinidis")
    mobile = make_project(name="Mobile Application Platform")
    migration = make_project(name="Data Migration Initiative")
    dropped = make_project(name="Cancelled", is_deleted=True)
    for project in (mobile, migration, dropped):
        assign(employee, project)

    detail = service.get_by_id(employee.id)

    assert detail.last_name == "Konstantinidis"
    assert [p.name for p in detail.projects] == ["Data Migration Initiative", "Mobile Application Platform"]
    assert all(p.employee_count == 1 for p in detail.projects)


def test_get_by_id_unknown_or_deleted_raises(service: EmployeeService, make_employee):
    deleted = make_employee(is_deleted=True)
    with pytest.raises(EmployeeNotFound):
        service.get_by_id(deleted.id)
    missing = uuid.uuid4()
    with pytest.raises(EmployeeNotFound) as excinfo:
        service.get_by_id(missing)
    assert excinfo.value.message == f"Employee with ID {missing} not found"


def test_get_all_ordered_by_last_then_first_name(service: EmployeeService, make_employee):
    make_employee(first_name="Nikolaos", last_name="Papadopoulos")
    make_employee(first_name="Maria", last_name="Georgiou")
    make_employee(first_name="Anna", last_name="Papadopoulos")

    result = service.get_all(PaginationParams())

    assert [(e.last_name, e.first_name) for e in result.items] == [
        ("Georgiou", "Maria"),
        ("Papadopoulos", "Anna"),
        ("Papadopoulos", "Nikolaos"),
    ]


def test_search_matches_names_and_email(service: EmployeeService, make_employee):
    make_employee(first_name="Maria", last_name="Georgiou", email="maria@company.com")
    make_employee(first_name="Georgios", last_name="Konstantinidis", email="gk@company.com")
    make_employee(first_name="Eleni", last_name="Dimitriou", email="eleni@georgia.example")
    make_employee(first_name="Nikolaos", last_name="Papadopoulos", email="np@company.com")

    result = service.search("GEORG", PaginationParams())

    assert sorted(e.first_name for e in result.items) == ["Eleni", "Georgios", "Maria"]
    assert result.total_count == 3


def test_update_can_move_employee_to_another_department(service: EmployeeService, make_department, make_employee):
    sales = make_department(name="Sales")
    engineering = make_department(name="Engineering")
    employee = make_employee(department=sales, email="move@company.com")

    updated = service.update(
        employee.id,
        EmployeeUpdate(
            first_name="Moved",
            last_name="Person",
            email="moved@company.com",
            status=EmployeeStatus.INACTIVE,
            hire_date=datetime(2021, 1, 1, tzinfo=timezone.utc),
            notes=None,
            department_id=engineering.id,
        ),
    )

    assert updated.department_id == engineering.id
    assert updated.department_name == "Engineering"
    assert updated.status == EmployeeStatus.INACTIVE
    assert service.get_by_id(employee.id).email == "moved@company.com"


def test_update_unknown_raises(service: EmployeeService, make_department):
    department = make_department()
    with pytest.raises(EmployeeNotFound):
        service.update(uuid.uuid4(), EmployeeUpdate(**_create_request(department.id).model_dump()))


def test_delete_soft_deletes(service: EmployeeService, db: Session, make_employee):
    employee = make_employee()

    service.delete(employee.id)

    with pytest.raises(EmployeeNotFound):
        service.get_by_id(employee.id)
    assert service.get_all(PaginationParams()).total_count == 0
    db.expire_all()
    row = db.get(Employee, employee.id)
    assert row.is_deleted is True
    assert row.deleted_at is not None


def test_assign_twice_creates_single_row(service: EmployeeService, db: Session, make_employee, make_project):
    employee = make_employee()
    project = make_project()

    service.assign_to_project(employee.id, project.id)
    service.assign_to_project(employee.id, project.id)

    assert _assignment_count(db, employee.id, project.id) == 1
    assert [p.id for p in service.get_by_id(employee.id).projects] == [project.id]


def test_assign_requires_existing_employee_and_project(service: EmployeeService, make_employee, make_project):
    employee = make_employee()
    project = make_project()
    deleted_project = make_project(is_deleted=True)

    with pytest.raises(EmployeeNotFound):
        service.assign_to_project(uuid.uuid4(), project.id)
    with pytest.raises(ProjectNotFound):
        service.assign_to_project(employee.id, uuid.uuid4())
    with pytest.raises(ProjectNotFound):
        service.assign_to_project(employee.id, deleted_project.id)


def test_remove_existing_assignment(service: EmployeeService, uow: UnitOfWork, db: Session, make_employee, make_project, assign):
    employee = make_employee()
    project = make_project()
    assign(employee, project)

    service.remove_from_project(employee.id, project.id)

    assert _assignment_count(db, employee.id, project.id) == 0
    assert ProjectService(uow).get_by_id(project.id).employee_count == 0


def test_remove_missing_assignment_raises(service: EmployeeService, make_employee, make_project):
    employee = make_employee()
    project = make_project()

    with pytest.raises(AssignmentNotFound) as excinfo:
        service.remove_from_project(employee.id, project.id)
    assert excinfo.value.message == f"Assignment between employee {employee.id} and project {project.id} not found"

    with pytest.raises(EmployeeNotFound):
        service.remove_from_project(uuid.uuid4(), project.id)


def test_assign_then_remove_then_assign_again(service: EmployeeService, db: Session, make_employee, make_project):
    employee = make_employee()
    project = make_project()

    service.assign_to_project(employee.id, project.id)
    service.remove_from_project(employee.id, project.id)
    service.assign_to_project(employee.id, project.id)

    assert _assignment_count(db, employee.id, project.id) == 1
