# -*- coding: utf-8 -*-
"""
Service layer cho Department.
- Validate UNIQUE id khi tạo, tồn tại khi đọc / sửa / xóa.
- Repo chỉ thuần DB.
"""
from __future__ import annotations
import logging
from typing import Dict, Any, List, Optional

from django.db import IntegrityError, transaction
from django.db.models import QuerySet

from hr.exceptions import EntityNotFound, DuplicateEntity
from hr.models import Department
from hr.repositories.department_repository import DepartmentRepository

logger = logging.getLogger(__name__)

DEPARTMENT_ADDED = "New Department added"
DEPARTMENT_DELETED = "Department deleted"


class DepartmentService:
    ENTITY = "Department"
    # PUT chỉ cho đổi name, các field khác trong body bị bỏ qua
    UPDATABLE_FIELDS = {"name"}

    def __init__(self, repo: Optional[DepartmentRepository] = None):
        self.repo = repo or DepartmentRepository()

    # ============== Reads ==============
    def list_all(self) -> QuerySet[Department]:
        return self.repo.list_all()

    def get_by_id(self, dept_id: int) -> Department:
        dept = self.repo.get_by_id(dept_id)
        if dept is None:
            raise EntityNotFound(self.ENTITY, dept_id)
        return dept

    def list_names(self) -> List[str]:
        return self.repo.list_names()

    def search_by_name(self, fragment: str) -> List[Department]:
        """Case-insensitive substring search; no match is an error, not an empty list."""
        matches = list(self.repo.search_by_name(fragment))
        if not matches:
            raise EntityNotFound(self.ENTITY, message=f"No department name contains '{fragment}'")
        return matches

    # ============== Mutations ==============
    @transaction.atomic
    def create(self, data: Dict[str, Any]) -> str:
        dept_id = data["id"]
        if self.repo.exists(dept_id):
            logger.warning("Rejected duplicate department id=%s", dept_id)
            raise DuplicateEntity(self.ENTITY, dept_id)
        try:
            self.repo.create(data)
        except IntegrityError as exc:
            # id vừa được tạo bởi request khác giữa lúc check và insert
            logger.warning("Department id=%s rejected by database: %s", dept_id, exc)
            raise DuplicateEntity(self.ENTITY, dept_id) from exc
        logger.info("Department id=%s created", dept_id)
        return DEPARTMENT_ADDED

    @transaction.atomic
    def update(self, dept_id: int, patch: Dict[str, Any]) -> Department:
        dept = self.get_by_id(dept_id)
        dept = self.repo.save_fields(dept, patch, allowed=self.UPDATABLE_FIELDS)
        logger.info("Department id=%s updated", dept_id)
        return dept

    @transaction.atomic
    def delete(self, dept_id: int) -> str:
        dept = self.get_by_id(dept_id)
        self.repo.delete(dept)
        logger.info("Department id=%s deleted", dept_id)
        return DEPARTMENT_DELETED
