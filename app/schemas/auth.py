"""Request/response schemas for auth endpoints."""

import re
from typing import Literal

from pydantic import BaseModel, EmailStr, Field, field_validator, model_validator

from app.core.security import PASSWORD_MAX_LEN, PASSWORD_MIN_LEN

AccountType = Literal["personal", "company"]

# At least one lowercase, one uppercase and one digit.
_PASSWORD_STRENGTH_RE = re.compile(r"^(?=.*[a-z])(?=.*[A-Z])(?=.*\d)")
_PHONE_RE = re.compile(r"^\+?[1-9]\d{0,15}$")


def _strip_required(value: str, field: str) -> str:
    value = value.strip()
    if not value:
        raise ValueError(f"{field} is required")
    return value


class RegisterRequest(BaseModel):
    """
    Sign-up payload. Accepts the camelCase keys the web client sends.

    Company accounts must name their company; personal accounts get a
    generated single-user company.
    """

    model_config = {"populate_by_name": True, "extra": "ignore"}

    email: EmailStr
    password: str = Field(..., min_length=PASSWORD_MIN_LEN, max_length=PASSWORD_MAX_LEN)
    first_name: str = Field(..., alias="firstName", max_length=50)
    last_name: str = Field(..., alias="lastName", max_length=50)
    account_type: AccountType = Field(..., alias="accountType")
    company_name: str | None = Field(default=None, alias="companyName", max_length=100)
    industry: str | None = Field(default=None, max_length=100)
    company_size: str | None = Field(default=None, alias="companySize", max_length=50)
    job_title: str | None = Field(default=None, alias="jobTitle", max_length=100)
    department: str | None = Field(default=None, max_length=100)
    website: str | None = Field(default=None, max_length=512)
    phone: str | None = Field(default=None, max_length=32)

    @field_validator("password")
    @classmethod
    def validate_password_strength(cls, v: str) -> str:
        if not _PASSWORD_STRENGTH_RE.match(v):
            raise ValueError(
                "Password must contain at least one uppercase letter, one lowercase letter, and one number"
            )
        return v

    @field_validator("first_name")
    @classmethod
    def validate_first_name(cls, v: str) -> str:
        return _strip_required(v, "First name")

    @field_validator("last_name")
    @classmethod
    def validate_last_name(cls, v: str) -> str:
        return _strip_required(v, "Last name")

    @field_validator("phone")
    @classmethod
    def validate_phone(cls, v: str | None) -> str | None:
        if v is None or not v.strip():
            return None
        if not _PHONE_RE.match(v.strip()):
            raise ValueError("Please provide a valid phone number")
        return v.strip()

    @model_validator(mode="after")
    def require_company_name(self) -> "RegisterRequest":
        if self.account_type == "company" and not (self.company_name or "").strip():
            raise ValueError("Company name is required for company accounts")
        return self


class LoginRequest(BaseModel):
    """Credentials for login."""

    email: EmailStr
    password: str = Field(..., min_length=1, max_length=PASSWORD_MAX_LEN, description="Password")


class UserSummary(BaseModel):
    """User fields returned alongside a token."""

    id: int
    email: str
    role: str

    class Config:
        from_attributes = True


class TokenResponse(BaseModel):
    """JWT access token returned after login or registration."""

    token: str = Field(..., description="JWT access token; send as 'Authorization: Bearer <token>'")
    user: UserSummary


class RefreshResponse(BaseModel):
    accessToken: str


class CurrentUser(BaseModel):
    """Authenticated user resolved from the token, for dependency injection."""

    id: int
    company_id: int
    email: str
    account_type: str
    role: str
    first_name: str | None = None
    last_name: str | None = None

    class Config:
        from_attributes = True
