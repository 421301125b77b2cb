"""Request/response schemas for system-wide application settings."""

from datetime import datetime

from pydantic import BaseModel, Field, field_validator


class AppSettingOut(BaseModel):
    id: int
    key: str
    value: str
    is_encrypted: bool
    created_by: int | None = None
    updated_by: int | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None

    class Config:
        from_attributes = True


class AppSettingCreate(BaseModel):
    key: str = Field(..., min_length=1, max_length=255)
    value: str = Field(..., min_length=1)
    is_encrypted: bool = False

    @field_validator("key")
    @classmethod
    def strip_key(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("Key is required")
        return v


class AppSettingUpdate(BaseModel):
    key: str | None = Field(default=None, min_length=1, max_length=255)
    value: str | None = None
    is_encrypted: bool | None = None

    @field_validator("key", "value", "is_encrypted")
    @classmethod
    def reject_null(cls, v: object) -> object:
        if v is None:
            raise ValueError("must not be null")
        return v.strip() if isinstance(v, str) else v
