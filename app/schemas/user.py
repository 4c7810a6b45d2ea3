# File: app/schemas/user.py

from datetime import datetime

from pydantic import BaseModel, EmailStr, Field, field_validator

EMAIL_MAX_LENGTH = 255
NAME_MAX_LENGTH = 100


class UserRequest(BaseModel):
    """Body of POST /users and PUT /users/{id}."""

    email: EmailStr = Field(..., examples=["user@example.com"])
    name: str = Field(..., max_length=NAME_MAX_LENGTH, examples=["Jane Doe"])

    @field_validator("email", mode="before")
    @classmethod
    def check_email(cls, v):
        if isinstance(v, str):
            if not v.strip():
                raise ValueError("email must not be blank")
            if any(c in v for c in "<>") or any(c.isspace() for c in v.strip()):
                raise ValueError("email must be a bare address without a display name")
            if len(v) > EMAIL_MAX_LENGTH:
                raise ValueError(f"email must be at most {EMAIL_MAX_LENGTH} characters")
        return v

    @field_validator("name")
    @classmethod
    def check_name(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("name must not be blank")
        return v


class UserResponse(BaseModel):
    """Externally visible view of a user row."""

    id: int
    email: str
    name: str
    created_at: datetime = Field(alias="createdAt")
    updated_at: datetime = Field(alias="updatedAt")

    class Config:
        from_attributes = True  # Pydantic v2: replaces orm_mode
        populate_by_name = True

    @classmethod
    def from_user(cls, user) -> "UserResponse":
        return cls(
            id=user.id,
            email=user.email,
            name=user.name,
            created_at=user.created_at,
            updated_at=user.updated_at,
        )
