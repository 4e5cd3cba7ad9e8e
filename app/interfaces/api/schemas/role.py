"""Role assignment schemas."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict

from app.domain.entities import AppRole


class RoleAssignmentRead(BaseModel):
    id: str
    user_id: str
    role: AppRole
    created_at: datetime | None

    model_config = ConfigDict(from_attributes=True)


__all__ = ["RoleAssignmentRead"]
