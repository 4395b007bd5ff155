import pytest
from hr.models import Employee


@pytest.mark.django_db
def test_employee_list(api_client, master_data):
    resp = api_client.get("/emp")
    assert resp.status_code == 200
    assert [e["empNo"] for e in resp.json()] == ["E001", "E002", "E003", "E004"]


@pytest.mark.django_db
def test_employee_create_and_get(api_client, master_data):
    payload = {
        "empNo": "E020",
        "name": "Hank",
        "age": 45,
        "salary": 61000.5,
        "gender": "M",
        "department": {"id": 2},
    }
    resp = api_client.post("/emp", payload, format="json")
    assert resp.status_code == 201, resp.content
    assert resp.json() == "New Employee added"

    resp = api_client.get("/emp/E020")
    assert resp.status_code == 200
    body = resp.json()
    assert body["empNo"] == "E020"
    assert (body["name"], body["age"], body["salary"], body["gender"]) == ("Hank", 45, 61000.5, "M")
    assert body["department"]["id"] == 2
    assert body["projects"] == []


@pytest.mark.django_db
def test_employee_create_duplicate_is_conflict(api_client, master_data):
    resp = api_client.post("/emp", {"empNo": "E001", "name": "Clone"}, format="json")
    assert resp.status_code == 409
    assert resp.json() == "Employee ID already exists: E001"


@pytest.mark.django_db
def test_employee_create_unknown_department_is_not_found(api_client, master_data):
    resp = api_client.post("/emp", {"empNo": "E021", "name": "Ivy", "department": {"id": 404}}, format="json")
    assert resp.status_code == 404
    assert resp.json() == "Department not found with id: 404"
    assert not Employee.objects.filter(emp_no="E021").exists()


@pytest.mark.django_db
def test_employee_create_validation_error(api_client, db):
    resp = api_client.post("/emp", {"empNo": "E022", "name": "Jo", "age": -1, "salary": "lots"}, format="json")
    assert resp.status_code == 400
    body = resp.json()
    assert set(body) == {"age", "salary"}


@pytest.mark.django_db
def test_employee_create_department_reference_without_id(api_client, db):
    resp = api_client.post("/emp", {"empNo": "E023", "name": "Kim", "department": {}}, format="json")
    assert resp.status_code == 400
    assert "department.id" in resp.json()


@pytest.mark.django_db
def test_employee_update(api_client, master_data):
    resp = api_client.put("/emp/E003", {"salary": 48000, "department": {"id": 1}}, format="json")
    assert resp.status_code == 200, resp.content
    body = resp.json()
    assert body["empNo"] == "E003"
    assert body["salary"] == 48000
    assert body["name"] == "Carol"
    assert body["department"]["id"] == 1


@pytest.mark.django_db
def test_employee_delete(api_client, master_data):
    resp = api_client.delete("/emp/E004")
    assert resp.status_code == 200
    assert resp.json() == "Employee deleted"
    assert not Employee.objects.filter(emp_no="E004").exists()


@pytest.mark.django_db
@pytest.mark.parametrize("method", ["get", "put", "delete"])
def test_employee_missing_id_is_not_found(api_client, db, method):
    resp = getattr(api_client, method)("/emp/NOPE", {"name": "x"}, format="json")
    assert resp.status_code == 404
    assert resp.json() == "Employee not found with id: NOPE"


@pytest.mark.django_db
def test_salary_range(api_client, master_data):
    resp = api_client.get("/emp/salary-range", {"min": 50000, "max": 70000})
    assert resp.status_code == 200
    assert sorted(e["empNo"] for e in resp.json()) == ["E001", "E002"]


@pytest.mark.django_db
def test_salary_range_empty(api_client, master_data):
    resp = api_client.get("/emp/salary-range", {"min": 1, "max": 2})
    assert resp.status_code == 200
    assert resp.json() == []


@pytest.mark.django_db
def test_salary_range_requires_bounds(api_client, db):
    resp = api_client.get("/emp/salary-range", {"min": "abc"})
    assert resp.status_code == 400
    assert set(resp.json()) == {"min", "max"}


@pytest.mark.django_db
def test_employees_by_department(api_client, master_data):
    resp = api_client.get("/emp/department/1")
    assert resp.status_code == 200
    assert [e["empNo"] for e in resp.json()] == ["E001", "E002"]

    resp = api_client.get("/emp/department/99")
    assert resp.status_code == 404


@pytest.mark.django_db
@pytest.mark.parametrize("emp_no", ["A/B", "salary-range"])
def test_employee_create_rejects_unroutable_emp_no(api_client, master_data, emp_no):
    resp = api_client.post("/emp", {"empNo": emp_no, "name": "Zed"}, format="json")
    assert resp.status_code == 400
    assert "empNo" in resp.json()
    assert not Employee.objects.filter(emp_no=emp_no).exists()


@pytest.mark.django_db
def test_employee_create_rejects_oversized_numbers(api_client, master_data):
    resp = api_client.post(
        "/emp",
        {"empNo": "E030", "name": "Zed", "age": 2**63, "department": {"id": -5}},
        format="json",
    )
    assert resp.status_code == 400
    assert set(resp.json()) == {"age", "department.id"}
    assert not Employee.objects.filter(emp_no="E030").exists()
