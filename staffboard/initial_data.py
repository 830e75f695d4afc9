# staffboard/initial_data.py

import logging
import uuid
from datetime import datetime, timezone

from sqlalchemy.orm import Session

from staffboard.database import SessionLocal, engine
from staffboard.models import Department, Employee, EmployeeProject, EmployeeStatus, Project
from staffboard.models.base import Base

logger = logging.getLogger("Staffboard.InitialData")

# Фиксированные идентификаторы, чтобы демо-данные были одинаковыми в любой базе
BACKEND_DEPARTMENT_ID = uuid.UUID("11111111-1111-1111-1111-111111111111")
ENGINEERING_DEPARTMENT_ID = uuid.UUID("22222222-2222-2222-2222-222222222222")
SALES_DEPARTMENT_ID = uuid.UUID("33333333-3333-3333-3333-333333333333")

BACKEND_ASSESSMENT_PROJECT_ID = uuid.UUID("aaaaaaaa-aaaa-aaaa-aaaa-aaaaaaaaaaaa")
MOBILE_APP_PROJECT_ID = uuid.UUID("bbbbbbbb-bbbb-bbbb-bbbb-bbbbbbbbbbbb")
DATA_MIGRATION_PROJECT_ID = uuid.UUID("cccccccc-cccc-cccc-cccc-cccccccccccc")

PANAGIOTIS_ID = uuid.UUID("dddddddd-dddd-dddd-dddd-dddddddddddd")
NIKOLAOS_ID = uuid.UUID("eeeeeeee-eeee-eeee-eeee-eeeeeeeeeeee")
GEORGIOS_ID = uuid.UUID("ffffffff-ffff-ffff-ffff-ffffffffffff")
MARIA_ID = uuid.UUID("00000000-0000-0000-0001-000000000001")
ELENI_ID = uuid.UUID("00000000-0000-0000-0002-000000000002")
DIMITRIOS_ID = uuid.UUID("00000000-0000-0000-0003-000000000003")
KONSTANTINA_ID = uuid.UUID("00000000-0000-0000-0004-000000000004")
ATHANASIOS_ID = uuid.UUID("00000000-0000-0000-0005-000000000005")


def _utc(year: int, month: int, day: int) -> datetime:
    return datetime(year, month, day, tzinfo=timezone.utc)


DEPARTMENTS = [
    {"id": BACKEND_DEPARTMENT_ID, "name": "Backend Developing", "description": "Backend Developing department"},
    {"id": ENGINEERING_DEPARTMENT_ID, "name": "Engineering", "description": "Core engineering and infrastructure team"},
    {"id": SALES_DEPARTMENT_ID, "name": "Sales", "description": "Sales and customer relations department"},
]

PROJECTS = [
    {
        "id": BACKEND_ASSESSMENT_PROJECT_ID,
        "name": "Backend Developer Technical Assessment",
        "description": "Technical assessment project for evaluating backend development skills",
        "start_date": _utc(2024, 1, 1),
        "end_date": _utc(2024, 12, 31),
    },
    {
        "id": MOBILE_APP_PROJECT_ID,
        "name": "Mobile Application Platform",
        "description": "Cross-platform mobile application development project",
        "start_date": _utc(2024, 3, 1),
        "end_date": None,
    },
    {
        "id": DATA_MIGRATION_PROJECT_ID,
        "name": "Data Migration Initiative",
        "description": "Legacy system data migration to new cloud infrastructure",
        "start_date": _utc(2024, 6, 1),
        "end_date": _utc(2024, 9, 30),
    },
]

EMPLOYEES = [
    (PANAGIOTIS_ID, "Panagiotis", "Stavrakellis", EmployeeStatus.ACTIVE, _utc(2020, 1, 15), "Backend Developer", BACKEND_DEPARTMENT_ID),
    (NIKOLAOS_ID, "Nikolaos", "Papadopoulos", EmployeeStatus.ACTIVE, _utc(2021, 3, 10), "Frontend Developer", BACKEND_DEPARTMENT_ID),
    (GEORGIOS_ID, "Georgios", "Konstantinidis", EmployeeStatus.ACTIVE, _utc(2019, 7, 22), "DevOps Engineer", ENGINEERING_DEPARTMENT_ID),
    (MARIA_ID, "Maria", "Georgiou", EmployeeStatus.ACTIVE, _utc(2022, 2, 1), "QA Engineer", ENGINEERING_DEPARTMENT_ID),
    (ELENI_ID, "Eleni", "Dimitriou", EmployeeStatus.ACTIVE, _utc(2020, 11, 5), "Frontend Developer", BACKEND_DEPARTMENT_ID),
    (DIMITRIOS_ID, "Dimitrios", "Antonopoulos", EmployeeStatus.INACTIVE, _utc(2018, 5, 15), "Former Project Manager", SALES_DEPARTMENT_ID),
    (KONSTANTINA_ID, "Konstantina", "Vasileiou", EmployeeStatus.ACTIVE, _utc(2023, 1, 10), "Sales Representative", SALES_DEPARTMENT_ID),
    (ATHANASIOS_ID, "Athanasios", "Nikolaidis", EmployeeStatus.ACTIVE, _utc(2021, 8, 20), "Database Administrator", ENGINEERING_DEPARTMENT_ID),
]

ASSIGNMENTS = [
    # Backend assessment
    (PANAGIOTIS_ID, BACKEND_ASSESSMENT_PROJECT_ID),
    (NIKOLAOS_ID, BACKEND_ASSESSMENT_PROJECT_ID),
    (MARIA_ID, BACKEND_ASSESSMENT_PROJECT_ID),
    # Mobile
    (ELENI_ID, MOBILE_APP_PROJECT_ID),
    (NIKOLAOS_ID, MOBILE_APP_PROJECT_ID),
    (GEORGIOS_ID, MOBILE_APP_PROJECT_ID),
    # Data migration
    (ATHANASIOS_ID, DATA_MIGRATION_PROJECT_ID),
    (GEORGIOS_ID, DATA_MIGRATION_PROJECT_ID),
    (PANAGIOTIS_ID, DATA_MIGRATION_PROJECT_ID),
]


def seed_initial_data(db: Session) -> int:
    """
    Добавляет демо-данные, которых ещё нет в базе (проверка по фиксированному ID,
    включая soft-deleted строки). Повторный запуск ничего не меняет.
    Возвращает количество добавленных записей.
    """
    added = 0

    for data in DEPARTMENTS:
        if db.get(Department, data["id"]) is None:
            db.add(Department(**data))
            added += 1

    for data in PROJECTS:
        if db.get(Project, data["id"]) is None:
            db.add(Project(**data))
            added += 1

    for employee_id, first_name, last_name, status, hire_date, notes, department_id in EMPLOYEES:
        if db.get(Employee, employee_id) is None:
            db.add(Employee(
                id=employee_id,
                first_name=first_name,
                last_name=last_name,
                email=f"{first_name}.{last_name}@company.com".lower(),
                status=status,
                hire_date=hire_date,
                notes=notes,
                department_id=department_id,
            ))
            added += 1
    # Назначения ссылаются на сотрудников и проекты: они должны быть записаны раньше
    db.flush()

    for employee_id, project_id in ASSIGNMENTS:
        if db.get(EmployeeProject, (employee_id, project_id)) is None:
            db.add(EmployeeProject(employee_id=employee_id, project_id=project_id))
            added += 1

    db.commit()
    if added:
        logger.info(f"Seeded {added} demo records.")
    else:
        logger.info("Demo data already present. No action taken.")
    return added


def main() -> None:
    logger.info("Initializing demo data...")
    Base.metadata.create_all(bind=engine)
    db = SessionLocal()
    try:
        seed_initial_data(db)
    finally:
        db.close()
    logger.info("Finished demo data setup.")


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    main()
