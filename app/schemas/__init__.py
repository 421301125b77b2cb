"""Pydantic request/response schemas."""

from app.schemas.admin import (
    CompanyUserCreate,
    CompanyUserOut,
    DepartmentIn,
    DepartmentOut,
    UserStatusUpdate,
)
from app.schemas.auth import (
    CurrentUser,
    LoginRequest,
    RegisterRequest,
    TokenResponse,
)
from app.schemas.dashboard import (
    CompanyDetails,
    CompanyInfoBlockOut,
    DashboardResponse,
)
from app.schemas.health import HealthResponse
from app.schemas.responsibility import (
    ResponsibilityCreate,
    ResponsibilityOut,
    ResponsibilityUpdate,
)
from app.schemas.settings import AppSettingCreate, AppSettingOut, AppSettingUpdate
from app.schemas.upload import (
    PositionDescriptionOut,
    PositionDescriptionUpdate,
    UploadResponse,
)

__all__ = [
    "AppSettingCreate",
    "AppSettingOut",
    "AppSettingUpdate",
    "CompanyDetails",
    "CompanyInfoBlockOut",
    "CompanyUserCreate",
    "CompanyUserOut",
    "CurrentUser",
    "DashboardResponse",
    "DepartmentIn",
    "DepartmentOut",
    "HealthResponse",
    "LoginRequest",
    "PositionDescriptionOut",
    "PositionDescriptionUpdate",
    "RegisterRequest",
    "ResponsibilityCreate",
    "ResponsibilityOut",
    "ResponsibilityUpdate",
    "TokenResponse",
    "UploadResponse",
    "UserStatusUpdate",
]
