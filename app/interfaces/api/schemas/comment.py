"""Comment schemas."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class CommentCreate(BaseModel):
    comment: str = Field(..., min_length=1)


class CommentUpdate(BaseModel):
    comment: str = Field(..., min_length=1)


class CommentRead(BaseModel):
    id: str
    request_id: str
    admin_id: str
    comment: str
    created_at: datetime | None
    author_name: str | None = None

    model_config = ConfigDict(from_attributes=True)


__all__ = ["CommentCreate", "CommentRead", "CommentUpdate"]
