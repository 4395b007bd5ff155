# -*- coding: utf-8 -*-
"""
Repository layer cho Employee (thuần DB).
- CRUD + truy vấn theo khoảng lương, theo department
- KHÔNG chứa rule nghiệp vụ, service quyết định.
"""
from __future__ import annotations
from typing import Optional, Dict, Any
from django.db import transaction
from django.db.models import QuerySet

from hr.models import Employee
from hr.repositories.base_repository import BaseRepository


class EmployeeRepository(BaseRepository):
    model = Employee

    # ============== Base queries ==============
    def base_qs(self) -> QuerySet[Employee]:
        return Employee.objects.select_related("department").prefetch_related("projects")

    def get_by_id(self, emp_no: str) -> Optional[Employee]:
        return self.base_qs().filter(emp_no=emp_no).first()

    def list_all(self) -> QuerySet[Employee]:
        return self.base_qs().order_by("emp_no")

    def find_by_salary_range(self, min_salary: float, max_salary: float) -> QuerySet[Employee]:
        # salary BETWEEN min AND max (bao gồm 2 biên)
        return self.base_qs().filter(salary__range=(min_salary, max_salary)).order_by("salary", "emp_no")

    def find_by_department_id(self, dept_id: int) -> QuerySet[Employee]:
        return self.base_qs().filter(department_id=dept_id).order_by("emp_no")

    # ============== Mutations ==============
    @transaction.atomic
    def create(self, data: Dict[str, Any]) -> Employee:
        return Employee.objects.create(**data)
