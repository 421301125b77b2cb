"""API v1 routes."""

from fastapi import APIRouter

from app.api.v1 import admin, auth, content, dashboard, health, system_admin, upload

router = APIRouter()
router.include_router(health.router, prefix="/health", tags=["health"])
router.include_router(auth.router, prefix="/auth", tags=["auth"])
router.include_router(upload.router, prefix="/upload", tags=["position-descriptions"])
router.include_router(dashboard.router, prefix="/dashboard", tags=["dashboard"])
router.include_router(admin.router, prefix="/admin", tags=["admin"])
router.include_router(system_admin.router, prefix="/system-admin", tags=["system-admin"])
router.include_router(content.router, prefix="/content", tags=["content"])
