import pytest
from unittest import mock

from django.db import IntegrityError

from hr.exceptions import EntityNotFound, DuplicateEntity
from hr.models import Employee
from hr.repositories.employee_repository import EmployeeRepository
from hr.services.employee_service import EmployeeService


@pytest.mark.django_db
def test_create_employee_with_department(employee_service, master_data):
    data = {"emp_no": "E010", "name": "Eve", "age": 26, "salary": 52000.0, "gender": "F", "department": {"id": 2}}
    assert employee_service.create(data) == "New Employee added"

    eve = Employee.objects.get(emp_no="E010")
    assert eve.department_id == 2
    assert (eve.name, eve.age, eve.salary, eve.gender) == ("Eve", 26, 52000.0, "F")


@pytest.mark.django_db
def test_create_employee_without_department(employee_service, db):
    employee_service.create({"emp_no": "E011", "name": "Frank", "department": None})
    assert Employee.objects.get(emp_no="E011").department is None


@pytest.mark.django_db
def test_create_duplicate_employee_raises(employee_service, master_data):
    with pytest.raises(DuplicateEntity):
        employee_service.create({"emp_no": "E001", "name": "Someone else"})
    assert Employee.objects.get(emp_no="E001").name == "Alice"


@pytest.mark.django_db
def test_create_with_unknown_department_is_not_persisted(employee_service, master_data):
    with pytest.raises(EntityNotFound) as exc:
        employee_service.create({"emp_no": "E012", "name": "Gina", "department": {"id": 42}})
    assert "Department" in str(exc.value)
    assert not Employee.objects.filter(emp_no="E012").exists()


@pytest.mark.django_db
def test_integrity_error_on_insert_is_reported_as_duplicate(master_data):
    repo = EmployeeRepository()
    service = EmployeeService(repo)
    # request khác đã insert cùng emp_no sau bước exists()
    with mock.patch.object(repo, "exists", return_value=False), \
            mock.patch.object(repo, "create", side_effect=IntegrityError("UNIQUE constraint failed")):
        with pytest.raises(DuplicateEntity):
            service.create({"emp_no": "E001", "name": "Racer"})


@pytest.mark.django_db
def test_update_applies_only_mutable_fields(employee_service, master_data):
    updated = employee_service.update("E001", {"emp_no": "HACK", "salary": 55000.0, "age": 31})
    assert updated.emp_no == "E001"

    alice = Employee.objects.get(emp_no="E001")
    assert (alice.salary, alice.age, alice.name, alice.gender) == (55000.0, 31, "Alice", "F")
    assert not Employee.objects.filter(emp_no="HACK").exists()


@pytest.mark.django_db
def test_update_moves_and_detaches_department(employee_service, master_data):
    employee_service.update("E001", {"department": {"id": 2}})
    assert Employee.objects.get(emp_no="E001").department_id == 2

    employee_service.update("E001", {"department": None})
    assert Employee.objects.get(emp_no="E001").department is None


@pytest.mark.django_db
def test_update_with_unknown_department_raises(employee_service, master_data):
    with pytest.raises(EntityNotFound):
        employee_service.update("E001", {"department": {"id": 42}})
    assert Employee.objects.get(emp_no="E001").department_id == 1


@pytest.mark.django_db
def test_get_update_delete_missing_employee_raise(employee_service, db):
    with pytest.raises(EntityNotFound):
        employee_service.get_by_id("NOPE")
    with pytest.raises(EntityNotFound):
        employee_service.update("NOPE", {"name": "x"})
    with pytest.raises(EntityNotFound):
        employee_service.delete("NOPE")


@pytest.mark.django_db
def test_delete_employee(employee_service, master_data):
    assert employee_service.delete("E003") == "Employee deleted"
    assert not Employee.objects.filter(emp_no="E003").exists()


@pytest.mark.django_db
def test_salary_range_is_inclusive(employee_service, master_data):
    employees = employee_service.find_by_salary_range(50000, 70000)
    assert sorted(e.emp_no for e in employees) == ["E001", "E002"]


@pytest.mark.django_db
def test_salary_range_without_match_is_empty(employee_service, master_data):
    assert employee_service.find_by_salary_range(100000, 200000) == []


@pytest.mark.django_db
def test_find_by_department_id_filters_on_foreign_key(employee_service, master_data):
    assert [e.emp_no for e in employee_service.find_by_department_id(1)] == ["E001", "E002"]
    assert [e.emp_no for e in employee_service.find_by_department_id(2)] == ["E003"]


@pytest.mark.django_db
def test_find_by_department_id_empty_department(employee_service, master_data):
    employee_service.update("E003", {"department": None})
    assert employee_service.find_by_department_id(2) == []


@pytest.mark.django_db
def test_find_by_unknown_department_raises(employee_service, master_data):
    with pytest.raises(EntityNotFound):
        employee_service.find_by_department_id(42)
