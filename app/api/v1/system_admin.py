"""System administration of global application settings (system admin only)."""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from app.api.v1.auth import require_system_admin
from app.core.database import get_db
from app.models import AppSetting
from app.schemas.auth import CurrentUser
from app.schemas.settings import AppSettingCreate, AppSettingOut, AppSettingUpdate
from app.schemas.upload import MessageResponse
from app.services.app_settings import key_in_use, list_settings
from app.services.updates import apply_partial_update, changed_fields

logger = logging.getLogger(__name__)

router = APIRouter()


def _setting_or_404(db: Session, setting_id: int) -> AppSetting:
    setting = db.query(AppSetting).filter(AppSetting.id == setting_id).first()
    if setting is None:
        raise HTTPException(status_code=404, detail="Setting not found")
    return setting


@router.get("/settings", response_model=list[AppSettingOut])
def get_settings_list(
    db: Annotated[Session, Depends(get_db)],
    _admin: Annotated[CurrentUser, Depends(require_system_admin)],
) -> list[AppSetting]:
    return list_settings(db)


@router.post("/settings", response_model=AppSettingOut, status_code=status.HTTP_201_CREATED)
def create_setting(
    body: AppSettingCreate,
    db: Annotated[Session, Depends(get_db)],
    admin: Annotated[CurrentUser, Depends(require_system_admin)],
) -> AppSetting:
    if key_in_use(db, body.key):
        raise HTTPException(status_code=400, detail="Setting key already exists")
    # TODO: encrypt value when is_encrypted is set once a key management story exists.
    setting = AppSetting(
        key=body.key,
        value=body.value,
        is_encrypted=body.is_encrypted,
        created_by=admin.id,
        updated_by=admin.id,
    )
    db.add(setting)
    db.commit()
    db.refresh(setting)
    logger.info("System setting created", extra={"setting_key": setting.key, "user_id": admin.id})
    return setting


@router.put("/settings/{setting_id}", response_model=AppSettingOut)
def update_setting(
    setting_id: int,
    body: AppSettingUpdate,
    db: Annotated[Session, Depends(get_db)],
    admin: Annotated[CurrentUser, Depends(require_system_admin)],
) -> AppSetting:
    """Partially update key, value or is_encrypted. Keys must stay unique."""
    setting = _setting_or_404(db, setting_id)
    fields = changed_fields(body)
    if "key" in fields and key_in_use(db, fields["key"], exclude_id=setting_id):
        raise HTTPException(status_code=400, detail="Setting key already exists")
    if not fields:
        raise HTTPException(status_code=400, detail="No valid fields to update")
    apply_partial_update(setting, fields)
    setting.updated_by = admin.id
    db.commit()
    db.refresh(setting)
    logger.info("System setting updated", extra={"setting_id": setting_id, "user_id": admin.id})
    return setting


@router.delete("/settings/{setting_id}", response_model=MessageResponse)
def delete_setting_by_id(
    setting_id: int,
    db: Annotated[Session, Depends(get_db)],
    admin: Annotated[CurrentUser, Depends(require_system_admin)],
) -> MessageResponse:
    setting = _setting_or_404(db, setting_id)
    db.delete(setting)
    db.commit()
    logger.info("System setting deleted", extra={"setting_id": setting_id, "user_id": admin.id})
    return MessageResponse(message="Setting deleted successfully")
