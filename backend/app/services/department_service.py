"""
Membership Backend — Department Service
=========================================
"""

from typing import Any, Dict

from app.models.department import Department
from app.schemas.department import DepartmentResponse
from app.services.base import CrudService


class DepartmentService(CrudService[Department, DepartmentResponse]):
    model = Department
    response_schema = DepartmentResponse
    resource = "department"

    def filter_columns(self) -> Dict[str, Any]:
        return {"name": Department.name}


department_service = DepartmentService()
