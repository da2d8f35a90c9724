"""
Membership Backend — Role Service
===================================
"""

from typing import Any, Dict

from app.models.role import Role
from app.schemas.role import RoleResponse
from app.services.base import CrudService


class RoleService(CrudService[Role, RoleResponse]):
    model = Role
    response_schema = RoleResponse
    resource = "role"

    def filter_columns(self) -> Dict[str, Any]:
        return {"name": Role.name}


role_service = RoleService()
