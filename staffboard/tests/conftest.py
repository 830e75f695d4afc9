import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker, Session
from sqlalchemy.pool import StaticPool
from datetime import datetime, timezone
import os
import uuid
from typing import Callable, Generator

# Set environment variables BEFORE importing settings or the app,
# so the application engine never touches the local staffboard.db file.
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["SEED_DATA"] = "false"

# Import all model modules via staffboard.models so Base.metadata is populated
import staffboard.models
from staffboard.models import Department, Employee, EmployeeProject, EmployeeStatus, Project
from staffboard.models.base import Base

from staffboard.main import app
from staffboard.dependencies import get_db
from staffboard.database import enable_sqlite_foreign_keys
from staffboard.crud.unit_of_work import UnitOfWork

# One in-memory database shared by every connection in the test run
engine = create_engine(
    "sqlite://",
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)
enable_sqlite_foreign_keys(engine)

TestingSessionLocal = sessionmaker(autoflush=False, bind=engine, expire_on_commit=False)


@pytest.fixture(scope="function")
def db() -> Generator[Session, None, None]:
    """
    Fresh schema for each test function; the session is closed before tables are dropped.
    """
    Base.metadata.create_all(bind=engine)
    session = TestingSessionLocal()

    yield session

    session.close()
    Base.metadata.drop_all(bind=engine)


@pytest.fixture(scope="function")
def uow(db: Session) -> Generator[UnitOfWork, None, None]:
    unit_of_work = UnitOfWork(db)
    yield unit_of_work
    unit_of_work.close()


@pytest.fixture(scope="function")
def client(db: Session) -> Generator[TestClient, None, None]:
    """
    TestClient with `get_db` overridden to use the test session.
    """
    def override_get_db():
        yield db

    app.dependency_overrides[get_db] = override_get_db
    with TestClient(app) as c:
        yield c
    del app.dependency_overrides[get_db]


# ---- Data factories (write straight through the session, bypassing validation) ----

@pytest.fixture(scope="function")
def make_department(db: Session) -> Callable[..., Department]:
    counter = {"n": 0}

    def _make(name: str = None, description: str = None, is_deleted: bool = False) -> Department:
        counter["n"] += 1
        department = Department(
            id=uuid.uuid4(),
            name=name or f"Department {counter['n']}",
            description=description,
        )
        if is_deleted:
            department.mark_deleted()
        db.add(department)
        db.commit()
        return department

    return _make


@pytest.fixture(scope="function")
def make_project(db: Session) -> Callable[..., Project]:
    counter = {"n": 0}

    def _make(
        name: str = None,
        description: str = None,
        start_date: datetime = None,
        end_date: datetime = None,
        is_deleted: bool = False,
    ) -> Project:
        counter["n"] += 1
        project = Project(
            id=uuid.uuid4(),
            name=name or f"Project {counter['n']}",
            description=description,
            start_date=start_date or datetime(2024, 1, 1, tzinfo=timezone.utc),
            end_date=end_date,
        )
        if is_deleted:
            project.mark_deleted()
        db.add(project)
        db.commit()
        return project

    return _make


@pytest.fixture(scope="function")
def make_employee(db: Session, make_department) -> Callable[..., Employee]:
    counter = {"n": 0}

    def _make(
        first_name: str = "Test",
        last_name: str = None,
        email: str = None,
        department: Department = None,
        status: int = EmployeeStatus.ACTIVE,
        hire_date: datetime = None,
        notes: str = None,
        is_deleted: bool = False,
    ) -> Employee:
        counter["n"] += 1
        department = department or make_department()
        employee = Employee(
            id=uuid.uuid4(),
            first_name=first_name,
            last_name=last_name or f"Employee{counter['n']:03d}",
            email=email or f"employee{counter['n']}@example.com",
            status=status,
            hire_date=hire_date or datetime(2022, 5, 1, tzinfo=timezone.utc),
            notes=notes,
            department_id=department.id,
        )
        if is_deleted:
            employee.mark_deleted()
        db.add(employee)
        db.commit()
        return employee

    return _make


@pytest.fixture(scope="function")
def assign(db: Session) -> Callable[[Employee, Project], EmployeeProject]:
    def _assign(employee: Employee, project: Project) -> EmployeeProject:
        link = EmployeeProject(employee_id=employee.id, project_id=project.id)
        db.add(link)
        db.commit()
        return link

    return _assign
