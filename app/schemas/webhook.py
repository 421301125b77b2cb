"""Schemas for the LLM description callback and public content lookup."""

from typing import Any

from pydantic import BaseModel, Field

from app.schemas.responsibility import ResponsibilityOut

# Field names the automation platform has been seen to use, in lookup order.
RESPONSIBILITY_ID_KEYS = ("Row", "row", "responsibilityId")
LLM_DESC_KEYS = ("LLMDesc", "llmDesc", "description")


def first_present(body: dict[str, Any], keys: tuple[str, ...]) -> Any:
    """Return the first non-empty value among keys, or None."""
    for key in keys:
        value = body.get(key)
        if value not in (None, ""):
            return value
    return None


def parse_responsibility_id(raw: Any) -> int | None:
    """
    Accept ints, whole floats (12.0) and digit strings; None for anything
    else, so 12.7 or "12.7" never resolves to row 12.
    """
    if isinstance(raw, bool):
        return None
    if isinstance(raw, int):
        return raw
    if isinstance(raw, float):
        return int(raw) if raw.is_integer() else None
    if isinstance(raw, str) and raw.strip().isdigit():
        return int(raw.strip())
    return None


class WebhookResponse(BaseModel):
    message: str = "LLM_Desc updated successfully"
    data: ResponsibilityOut


class ContentValue(BaseModel):
    value: str = Field(..., description="Stored content for the requested key.")
