"""Health check payload: process, database and upload storage status."""

from typing import Literal

from pydantic import BaseModel, Field

DatabaseStatus = Literal["connected", "disconnected"]
UploadStatus = Literal["writable", "unavailable"]


class HealthResponse(BaseModel):
    status: Literal["ok"] = "ok"
    environment: str = Field(description="APP_ENV of the running process (dev or prod)")
    database: DatabaseStatus | None = None
    uploads: UploadStatus | None = Field(
        default=None,
        description="Whether new position description files can be written to UPLOAD_DIR",
    )
