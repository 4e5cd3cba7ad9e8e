"""Profile schemas."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class ProfileCreate(BaseModel):
    full_name: str | None = Field(default=None, max_length=200)

    model_config = ConfigDict(extra="forbid")


class ProfileUpdate(BaseModel):
    full_name: str = Field(..., min_length=1, max_length=200)

    model_config = ConfigDict(extra="forbid")


class ProfileRead(BaseModel):
    id: str
    user_id: str
    full_name: str
    email: str
    created_at: datetime | None

    model_config = ConfigDict(from_attributes=True)


__all__ = ["ProfileCreate", "ProfileRead", "ProfileUpdate"]
