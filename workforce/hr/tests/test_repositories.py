import pytest

from hr.models import Department, Employee
from hr.repositories.department_repository import DepartmentRepository
from hr.repositories.employee_repository import EmployeeRepository
from hr.repositories.project_repository import ProjectRepository


@pytest.mark.django_db
def test_save_fields_only_writes_allowed_keys(master_data):
    repo = EmployeeRepository()
    emp = repo.get_by_id("E001")
    repo.save_fields(emp, {"name": "Alicia", "emp_no": "X999", "salary": 1.0}, allowed={"name"})
    emp = Employee.objects.get(emp_no="E001")
    assert (emp.name, emp.salary) == ("Alicia", 50000.0)
    assert not Employee.objects.filter(emp_no="X999").exists()


@pytest.mark.django_db
def test_save_fields_without_whitelist_writes_everything(master_data):
    repo = DepartmentRepository()
    dept = repo.get_by_id(2)
    repo.save_fields(dept, {"name": "Field Sales", "established": None})
    dept = Department.objects.get(id=2)
    assert (dept.name, dept.established) == ("Field Sales", None)


@pytest.mark.django_db
def test_exists_and_delete_use_model_pk(project_data):
    repo = ProjectRepository()
    assert repo.exists(100)
    assert not repo.exists(101)
    repo.delete(repo.get_by_id(100))
    assert not repo.exists(100)
    assert EmployeeRepository().exists("E001")
