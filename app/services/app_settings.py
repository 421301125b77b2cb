"""Lookup and upsert helpers for global application settings."""

import logging

from sqlalchemy import or_
from sqlalchemy.orm import Session

from app.models import AppSetting

logger = logging.getLogger(__name__)


def find_setting(db: Session, key_or_id: str) -> AppSetting | None:
    """Find a setting by key, or by numeric id when key_or_id is all digits."""
    conditions = [AppSetting.key == key_or_id]
    if key_or_id.isdigit():
        conditions.append(AppSetting.id == int(key_or_id))
    return db.query(AppSetting).filter(or_(*conditions)).order_by(AppSetting.id).first()


def get_setting_value(db: Session, key_or_id: str) -> str | None:
    setting = find_setting(db, key_or_id)
    # TODO: decrypt value when setting.is_encrypted once a key management story exists.
    return setting.value if setting is not None else None


def list_settings(db: Session) -> list[AppSetting]:
    return db.query(AppSetting).order_by(AppSetting.id).all()


def key_in_use(db: Session, key: str, exclude_id: int | None = None) -> bool:
    query = db.query(AppSetting.id).filter(AppSetting.key == key)
    if exclude_id is not None:
        query = query.filter(AppSetting.id != exclude_id)
    return query.first() is not None


def upsert_setting(
    db: Session,
    key: str,
    value: str,
    user_id: int | None,
    is_encrypted: bool | None = None,
) -> AppSetting:
    """Create or overwrite the setting named key. Commits."""
    setting = db.query(AppSetting).filter(AppSetting.key == key).first()
    if setting is None:
        setting = AppSetting(
            key=key,
            value=value,
            is_encrypted=bool(is_encrypted),
            created_by=user_id,
            updated_by=user_id,
        )
        db.add(setting)
    else:
        setting.value = value
        setting.updated_by = user_id
        if is_encrypted is not None:
            setting.is_encrypted = is_encrypted
    db.commit()
    db.refresh(setting)
    logger.info("App setting saved", extra={"setting_key": key, "user_id": user_id})
    return setting


def delete_setting(db: Session, key: str) -> bool:
    deleted = db.query(AppSetting).filter(AppSetting.key == key).delete(synchronize_session=False)
    db.commit()
    return deleted > 0
