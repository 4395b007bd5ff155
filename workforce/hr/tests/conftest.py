import pytest
from datetime import date
from rest_framework.test import APIClient

from hr.models import Department, Employee, Project
from hr.services.department_service import DepartmentService
from hr.services.employee_service import EmployeeService
from hr.services.project_service import ProjectService


@pytest.fixture
def api_client():
    return APIClient()


@pytest.fixture
def department_service():
    return DepartmentService()


@pytest.fixture
def employee_service():
    return EmployeeService()


@pytest.fixture
def project_service():
    return ProjectService()


@pytest.fixture
def master_data(db):
    eng = Department.objects.create(id=1, name="Engineering", established=date(2010, 3, 1))
    sales = Department.objects.create(id=2, name="Sales", established=date(2012, 7, 15))
    alice = Employee.objects.create(
        emp_no="E001", name="Alice", age=30, salary=50000.0, gender="F", department=eng
    )
    bob = Employee.objects.create(
        emp_no="E002", name="Bob", age=41, salary=70000.0, gender="M", department=eng
    )
    carol = Employee.objects.create(
        emp_no="E003", name="Carol", age=28, salary=45000.0, gender="F", department=sales
    )
    dave = Employee.objects.create(
        emp_no="E004", name="Dave", age=35, salary=90000.0, gender="M", department=None
    )
    return {"eng": eng, "sales": sales, "alice": alice, "bob": bob, "carol": carol, "dave": dave}


@pytest.fixture
def project_data(db, master_data):
    apollo = Project.objects.create(id=100, name="Apollo")
    apollo.employees.add(master_data["alice"], master_data["bob"])
    return {"apollo": apollo}
