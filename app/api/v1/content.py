"""Public site content lookup by key."""

from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from app.core.database import get_db
from app.models import Content
from app.schemas.webhook import ContentValue

router = APIRouter()


@router.get("/{key}", response_model=ContentValue)
def get_content(key: str, db: Annotated[Session, Depends(get_db)]) -> ContentValue:
    """Return the stored value for key. No authentication; used by public pages."""
    row = db.query(Content).filter(Content.key == key).first()
    if row is None:
        raise HTTPException(status_code=404, detail="Content not found")
    return ContentValue(value=row.value)
