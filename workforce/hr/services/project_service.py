# -*- coding: utf-8 -*-
"""
Service layer cho Project và phân công nhân viên vào project.
"""
from __future__ import annotations
import logging
from typing import Dict, Any, Iterable, List, Optional

from django.db import IntegrityError, transaction
from django.db.models import QuerySet

from hr.exceptions import EntityNotFound, DuplicateEntity
from hr.models import Employee, Project
from hr.repositories.employee_repository import EmployeeRepository
from hr.repositories.project_repository import ProjectRepository

logger = logging.getLogger(__name__)

PROJECT_ADDED = "New Project added"
PROJECT_DELETED = "Project deleted"


class ProjectService:
    ENTITY = "Project"
    UPDATABLE_FIELDS = {"name"}

    def __init__(
        self,
        repo: Optional[ProjectRepository] = None,
        employees: Optional[EmployeeRepository] = None,
    ):
        self.repo = repo or ProjectRepository()
        self.employees = employees or EmployeeRepository()

    def _get_employee(self, emp_no: str) -> Employee:
        emp = self.employees.get_by_id(emp_no)
        if emp is None:
            raise EntityNotFound("Employee", emp_no)
        return emp

    def _resolve_employees(self, emp_nos: Iterable[str]) -> List[Employee]:
        # giữ thứ tự, bỏ trùng
        return [self._get_employee(emp_no) for emp_no in dict.fromkeys(emp_nos)]

    # ============== Reads ==============
    def list_all(self) -> QuerySet[Project]:
        return self.repo.list_all()

    def get_by_id(self, project_id: int) -> Project:
        project = self.repo.get_by_id(project_id)
        if project is None:
            raise EntityNotFound(self.ENTITY, project_id)
        return project

    # ============== Mutations ==============
    @transaction.atomic
    def create(self, data: Dict[str, Any]) -> str:
        project_id = data["id"]
        if self.repo.exists(project_id):
            logger.warning("Rejected duplicate project id=%s", project_id)
            raise DuplicateEntity(self.ENTITY, project_id)

        members = self._resolve_employees(data.get("employees") or [])
        fields = {k: v for k, v in data.items() if k != "employees"}
        try:
            self.repo.create(fields, employees=members)
        except IntegrityError as exc:
            logger.warning("Project id=%s rejected by database: %s", project_id, exc)
            raise DuplicateEntity(self.ENTITY, project_id) from exc
        logger.info("Project id=%s created with %d employee(s)", project_id, len(members))
        return PROJECT_ADDED

    @transaction.atomic
    def update(self, project_id: int, patch: Dict[str, Any]) -> Project:
        project = self.get_by_id(project_id)
        project = self.repo.save_fields(project, patch, allowed=self.UPDATABLE_FIELDS)
        logger.info("Project id=%s updated", project_id)
        return project

    @transaction.atomic
    def delete(self, project_id: int) -> str:
        project = self.get_by_id(project_id)
        self.repo.delete(project)
        logger.info("Project id=%s deleted", project_id)
        return PROJECT_DELETED

    @transaction.atomic
    def assign_employee(self, project_id: int, emp_no: str) -> Project:
        project = self.get_by_id(project_id)
        emp = self._get_employee(emp_no)
        project = self.repo.add_employee(project, emp)
        logger.info("Employee emp_no=%s assigned to project id=%s", emp_no, project_id)
        return project

    @transaction.atomic
    def unassign_employee(self, project_id: int, emp_no: str) -> Project:
        project = self.get_by_id(project_id)
        emp = self._get_employee(emp_no)
        project = self.repo.remove_employee(project, emp)
        logger.info("Employee emp_no=%s removed from project id=%s", emp_no, project_id)
        return project
