"""Apply partial (PATCH-style) updates from pydantic models onto ORM rows."""

from typing import Any

from pydantic import BaseModel


def changed_fields(body: BaseModel) -> dict[str, Any]:
    """Fields the client actually sent, keyed by attribute name."""
    return body.model_dump(exclude_unset=True, by_alias=False)


def apply_partial_update(row: Any, fields: dict[str, Any]) -> list[str]:
    """Set each field on row; return the attribute names that were written."""
    written: list[str] = []
    for name, value in fields.items():
        setattr(row, name, value)
        written.append(name)
    return written
