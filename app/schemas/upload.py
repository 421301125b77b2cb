"""Request/response schemas for position description upload and management."""

from datetime import datetime
from typing import Literal

from pydantic import BaseModel, Field, field_validator

PDStatus = Literal["Draft", "In Review", "Published"]


class PositionDescriptionOut(BaseModel):
    """Stored position description row (file metadata plus review fields)."""

    id: int
    company_id: int
    title: str
    file_name: str
    file_path: str
    file_size: int
    upload_date: datetime | None = None
    status: str
    department: str | None = None
    ai_automation_score_sum: float | None = None

    class Config:
        from_attributes = True


class UploadResponse(BaseModel):
    """Response after a file is stored and its row created."""

    message: str = "File uploaded successfully"
    data: PositionDescriptionOut


class PositionDescriptionUpdate(BaseModel):
    """Partial update; only fields present in the body are written."""

    title: str | None = Field(default=None, min_length=2, max_length=200)
    status: PDStatus | None = None
    department: str | None = Field(default=None, max_length=100)

    @field_validator("title", "status")
    @classmethod
    def reject_null(cls, v: str | None) -> str | None:
        if v is None:
            raise ValueError("must not be null")
        return v

    @field_validator("title")
    @classmethod
    def strip_title(cls, v: str) -> str:
        v = v.strip()
        if len(v) < 2:
            raise ValueError("Title must be between 2 and 200 characters")
        return v

    @field_validator("department")
    @classmethod
    def strip_department(cls, v: str | None) -> str | None:
        return (v or "").strip() or None


class MessageResponse(BaseModel):
    message: str
