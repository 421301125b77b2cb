"""Request/response schemas for company user and department administration."""

from datetime import datetime

from pydantic import BaseModel, EmailStr, Field, field_validator

from app.core.security import PASSWORD_MAX_LEN, PASSWORD_MIN_LEN


class CompanyUserOut(BaseModel):
    id: int
    first_name: str
    last_name: str
    email: str
    job_title: str | None = None
    department: str | None = None
    is_active: bool
    created_at: datetime | None = None

    class Config:
        from_attributes = True


class CompanyUserCreate(BaseModel):
    """New user within the caller's company (camelCase keys from the web client)."""

    model_config = {"populate_by_name": True}

    first_name: str = Field(..., alias="firstName", min_length=1, max_length=100)
    last_name: str = Field(..., alias="lastName", min_length=1, max_length=100)
    email: EmailStr
    password: str = Field(..., min_length=PASSWORD_MIN_LEN, max_length=PASSWORD_MAX_LEN)
    job_title: str | None = Field(default=None, alias="jobTitle", max_length=100)
    department: str | None = Field(default=None, max_length=100)


class CompanyUserCreated(BaseModel):
    message: str = "User created successfully"
    user: CompanyUserOut


class UserStatusUpdate(BaseModel):
    model_config = {"populate_by_name": True}

    is_active: bool = Field(..., alias="isActive")


class UserStatusOut(BaseModel):
    id: int
    first_name: str
    last_name: str
    email: str
    is_active: bool

    class Config:
        from_attributes = True


class UserStatusResponse(BaseModel):
    message: str = "User status updated successfully"
    user: UserStatusOut


class DepartmentOut(BaseModel):
    id: int
    name: str
    is_active: bool
    created_at: datetime | None = None
    updated_at: datetime | None = None

    class Config:
        from_attributes = True


class DepartmentIn(BaseModel):
    name: str = Field(..., max_length=100)

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("Department name is required")
        return v
