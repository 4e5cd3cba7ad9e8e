"""Authentication related schemas."""

from pydantic import BaseModel, EmailStr, Field


class SignupRequest(BaseModel):
    email: EmailStr
    password: str = Field(..., min_length=8)
    full_name: str | None = Field(default=None, max_length=200)
    is_admin_signup: bool = Field(
        default=False, description="Request the admin role instead of the user role"
    )


class SignupResponse(BaseModel):
    user_id: str
    email: EmailStr
    full_name: str
    role: str


class Token(BaseModel):
    access_token: str
    token_type: str
    roles: list[str]
