# Load tất cả model vào namespace hr.models
from .department import Department
from .employee import Employee
from .project import Project

__all__ = [
    "Department",
    "Employee",
    "Project",
]
