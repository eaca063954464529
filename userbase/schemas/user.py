"""User Schemas — Pydantic request/response models for the users API.

Invariants:
    - CreateUserRequest mirrors the entity rules (name/email ≤ 255, password ≤ 100)
    - UpdateUserRequest: every field optional, at least one of name/password required
    - UserResponse never carries a password

Design Decisions:
    - Boundary validation here gives 400s with field details; the entity validator
      remains the authority for domain invariants
"""

from datetime import datetime

from pydantic import BaseModel, EmailStr, Field, model_validator


class CreateUserRequest(BaseModel):
    """Signup payload."""
    name: str = Field(min_length=1, max_length=255)
    email: EmailStr
    password: str = Field(min_length=1, max_length=100)


class UpdateUserRequest(BaseModel):
    """Partial user update — name and/or password."""
    name: str | None = Field(None, min_length=1, max_length=255)
    password: str | None = Field(None, min_length=1, max_length=100)

    @model_validator(mode="after")
    def require_one_field(self) -> "UpdateUserRequest":
        if self.name is None and self.password is None:
            raise ValueError("at least one of name or password is required")
        return self


class UserResponse(BaseModel):
    """Public user data."""
    id: str
    name: str
    email: str
    created_at: datetime


class UserListResponse(BaseModel):
    """One page of users plus search metadata."""
    items: list[UserResponse]
    total: int
    current_page: int
    per_page: int
    last_page: int
    sort: str | None = None
    sort_dir: str | None = None
    filter: str | None = None
