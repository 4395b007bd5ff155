# -*- coding: utf-8 -*-
"""
Service layer cho Employee.
"""
from __future__ import annotations
import logging
from typing import Dict, Any, List, Optional

from django.db import IntegrityError, transaction
from django.db.models import QuerySet

from hr.exceptions import EntityNotFound, DuplicateEntity
from hr.models import Department, Employee
from hr.repositories.department_repository import DepartmentRepository
from hr.repositories.employee_repository import EmployeeRepository

logger = logging.getLogger(__name__)

EMPLOYEE_ADDED = "New Employee added"
EMPLOYEE_DELETED = "Employee deleted"


class EmployeeService:
    ENTITY = "Employee"
    # emp_no là định danh, không cho sửa
    UPDATABLE_FIELDS = {"name", "age", "salary", "gender", "department"}

    def __init__(
        self,
        repo: Optional[EmployeeRepository] = None,
        departments: Optional[DepartmentRepository] = None,
    ):
        self.repo = repo or EmployeeRepository()
        self.departments = departments or DepartmentRepository()

    def _resolve_department(self, ref: Optional[Dict[str, Any]]) -> Optional[Department]:
        """Turn a `{"id": n}` reference into a Department; None detaches."""
        if ref is None:
            return None
        dept_id = ref["id"]
        dept = self.departments.get_by_id(dept_id)
        if dept is None:
            raise EntityNotFound("Department", dept_id)
        return dept

    # ============== Reads ==============
    def list_all(self) -> QuerySet[Employee]:
        return self.repo.list_all()

    def get_by_id(self, emp_no: str) -> Employee:
        emp = self.repo.get_by_id(emp_no)
        if emp is None:
            raise EntityNotFound(self.ENTITY, emp_no)
        return emp

    def find_by_salary_range(self, min_salary: float, max_salary: float) -> List[Employee]:
        # Khác với search department: không có kết quả -> list rỗng, không raise
        return list(self.repo.find_by_salary_range(min_salary, max_salary))

    def find_by_department_id(self, dept_id: int) -> List[Employee]:
        if not self.departments.exists(dept_id):
            raise EntityNotFound("Department", dept_id)
        return list(self.repo.find_by_department_id(dept_id))

    # ============== Mutations ==============
    @transaction.atomic
    def create(self, data: Dict[str, Any]) -> str:
        emp_no = data["emp_no"]
        if self.repo.exists(emp_no):
            logger.warning("Rejected duplicate employee emp_no=%s", emp_no)
            raise DuplicateEntity(self.ENTITY, emp_no)

        payload = dict(data)
        if "department" in payload:
            payload["department"] = self._resolve_department(payload["department"])

        try:
            self.repo.create(payload)
        except IntegrityError as exc:
            logger.warning("Employee emp_no=%s rejected by database: %s", emp_no, exc)
            raise DuplicateEntity(self.ENTITY, emp_no) from exc
        logger.info("Employee emp_no=%s created", emp_no)
        return EMPLOYEE_ADDED

    @transaction.atomic
    def update(self, emp_no: str, patch: Dict[str, Any]) -> Employee:
        emp = self.get_by_id(emp_no)
        changes = {k: v for k, v in patch.items() if k in self.UPDATABLE_FIELDS}
        if "department" in changes:
            changes["department"] = self._resolve_department(changes["department"])
        emp = self.repo.save_fields(emp, changes, allowed=self.UPDATABLE_FIELDS)
        logger.info("Employee emp_no=%s updated fields=%s", emp_no, sorted(changes))
        return emp

    @transaction.atomic
    def delete(self, emp_no: str) -> str:
        emp = self.get_by_id(emp_no)
        self.repo.delete(emp)
        logger.info("Employee emp_no=%s deleted", emp_no)
        return EMPLOYEE_DELETED
