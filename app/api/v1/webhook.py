"""Callback from the external automation platform that delivers LLM-rewritten responsibility text."""

import hmac
import logging
from typing import Annotated, Any

from fastapi import APIRouter, Body, Depends, Header, HTTPException, status
from sqlalchemy.orm import Session

from app.core.config import get_settings
from app.core.database import get_db
from app.models import Responsibility
from app.schemas.responsibility import ResponsibilityOut
from app.schemas.webhook import (
    LLM_DESC_KEYS,
    RESPONSIBILITY_ID_KEYS,
    WebhookResponse,
    first_present,
    parse_responsibility_id,
)

logger = logging.getLogger(__name__)

router = APIRouter()


def _secret_matches(received: str | None) -> bool:
    expected = get_settings().WEBHOOK_SECRET
    if expected is None or not expected.get_secret_value() or received is None:
        return False
    return hmac.compare_digest(received.encode("utf-8"), expected.get_secret_value().encode("utf-8"))


@router.post("", response_model=WebhookResponse)
def receive_llm_description(
    db: Annotated[Session, Depends(get_db)],
    body: Annotated[dict[str, Any], Body()],
    x_webhook_secret: Annotated[str | None, Header()] = None,
) -> WebhookResponse:
    """
    Store an LLM description on a responsibility.

    Requires the X-Webhook-Secret header. The responsibility id may arrive as
    Row, row or responsibilityId and the text as LLMDesc, llmDesc or
    description.
    """
    if not _secret_matches(x_webhook_secret):
        logger.warning("Webhook rejected: secret mismatch")
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Unauthorized")

    raw_id = first_present(body, RESPONSIBILITY_ID_KEYS)
    llm_desc = first_present(body, LLM_DESC_KEYS)
    if raw_id is None or llm_desc is None:
        raise HTTPException(
            status_code=400,
            detail={
                "error": "Missing responsibility ID or LLM description in request body",
                "receivedFields": list(body.keys()),
            },
        )
    responsibility_id = parse_responsibility_id(raw_id)
    if responsibility_id is None:
        raise HTTPException(status_code=400, detail="Responsibility ID must be a whole number")

    row = db.query(Responsibility).filter(Responsibility.id == responsibility_id).first()
    if row is None:
        raise HTTPException(status_code=404, detail="Responsibility not found")

    row.llm_desc = str(llm_desc)
    db.commit()
    db.refresh(row)
    logger.info("Webhook stored LLM description", extra={"responsibility_id": responsibility_id})
    return WebhookResponse(data=ResponsibilityOut.model_validate(row))
