"""Liveness and dependency checks for load balancers and monitoring."""

from typing import Annotated

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from app.core.config import get_settings
from app.core.database import check_db_connected, get_db
from app.schemas.health import DatabaseStatus, HealthResponse, UploadStatus
from app.services.storage import is_upload_dir_writable

router = APIRouter()


@router.get("/", response_model=HealthResponse)
def get_health(db: Annotated[Session, Depends(get_db)]) -> HealthResponse:
    """
    Always 200 while the process is up; database and uploads report whether
    PDs can currently be listed and stored.
    """
    settings = get_settings()
    database: DatabaseStatus = "connected" if check_db_connected(db) else "disconnected"
    uploads: UploadStatus = "writable" if is_upload_dir_writable(settings) else "unavailable"
    return HealthResponse(environment=settings.APP_ENV, database=database, uploads=uploads)
