from .department import Department
from .employee import Employee, EmployeeStatus
from .project import Project
from .employee_project import EmployeeProject
