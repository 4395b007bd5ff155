# -*- coding: utf-8 -*-
"""
Repository layer cho Project (thuần DB), gồm cả bảng nối project <-> employee.
"""
from __future__ import annotations
from typing import Optional, Dict, Any, Iterable
from django.db import transaction
from django.db.models import QuerySet

from hr.models import Project, Employee
from hr.repositories.base_repository import BaseRepository


class ProjectRepository(BaseRepository):
    model = Project

    # ============== Queries ==============
    def base_qs(self) -> QuerySet[Project]:
        return Project.objects.prefetch_related("employees")

    def get_by_id(self, project_id: int) -> Optional[Project]:
        return self.base_qs().filter(id=project_id).first()

    def list_all(self) -> QuerySet[Project]:
        return self.base_qs().order_by("id")

    # ============== Mutations ==============
    @transaction.atomic
    def create(self, data: Dict[str, Any], employees: Iterable[Employee] = ()) -> Project:
        project = Project.objects.create(**data)
        members = list(employees)
        if members:
            project.employees.add(*members)
        return project

    @transaction.atomic
    def add_employee(self, obj: Project, employee: Employee) -> Project:
        # add() bỏ qua nếu cặp (project, employee) đã tồn tại
        obj.employees.add(employee)
        return obj

    @transaction.atomic
    def remove_employee(self, obj: Project, employee: Employee) -> Project:
        obj.employees.remove(employee)
        return obj
