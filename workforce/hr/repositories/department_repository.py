# -*- coding: utf-8 -*-
"""
Repository layer cho Department (thuần DB).
"""
from __future__ import annotations
from typing import Optional, Dict, Any, List
from django.db import transaction
from django.db.models import QuerySet

from hr.models import Department
from hr.repositories.base_repository import BaseRepository


class DepartmentRepository(BaseRepository):
    model = Department

    # ============== Queries ==============
    def get_by_id(self, dept_id: int) -> Optional[Department]:
        return Department.objects.filter(id=dept_id).first()

    def list_all(self) -> QuerySet[Department]:
        return Department.objects.all().order_by("id")

    def list_names(self) -> List[str]:
        return list(Department.objects.order_by("id").values_list("name", flat=True))

    def search_by_name(self, fragment: str) -> QuerySet[Department]:
        # LIKE '%fragment%' không phân biệt hoa thường
        return Department.objects.filter(name__icontains=fragment).order_by("id")

    # ============== Mutations ==============
    @transaction.atomic
    def create(self, data: Dict[str, Any]) -> Department:
        # create() dùng force_insert -> trùng id sẽ raise IntegrityError, không ghi đè
        return Department.objects.create(**data)
