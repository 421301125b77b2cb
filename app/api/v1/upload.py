"""Position description endpoints: upload, list, download and delete files, and manage their responsibilities."""

import logging
from pathlib import Path
from typing import Annotated

from fastapi import APIRouter, Depends, File, Form, HTTPException, UploadFile, status
from fastapi.responses import FileResponse
from sqlalchemy.orm import Session

from app.api.v1.auth import get_current_user
from app.core.config import get_settings
from app.core.database import get_db
from app.models import PositionDescription, Responsibility
from app.schemas.auth import CurrentUser
from app.schemas.responsibility import (
    ResponsibilityCreate,
    ResponsibilityOut,
    ResponsibilityUpdate,
    ResponsibilityUpdateResponse,
    RewriteResponse,
)
from app.schemas.upload import (
    MessageResponse,
    PositionDescriptionOut,
    PositionDescriptionUpdate,
    UploadResponse,
)
from app.services.percentages import TOTAL_PERCENTAGE, clamp_percentage, redistribute
from app.services.rewrite import RewriteServiceError, rewrite_responsibility
from app.services.storage import (
    FileTooLargeError,
    StorageError,
    UnsupportedFileTypeError,
    delete_stored_file,
    save_upload,
)
from app.services.updates import apply_partial_update, changed_fields

logger = logging.getLogger(__name__)

router = APIRouter()

# Rewrite failure kind -> HTTP status.
_REWRITE_ERROR_STATUS = {
    "unavailable": status.HTTP_503_SERVICE_UNAVAILABLE,
    "upstream": status.HTTP_502_BAD_GATEWAY,
    "invalid_output": status.HTTP_422_UNPROCESSABLE_ENTITY,
}


def _get_pd_or_404(db: Session, pd_id: int, company_id: int) -> PositionDescription:
    pd = (
        db.query(PositionDescription)
        .filter(PositionDescription.id == pd_id, PositionDescription.company_id == company_id)
        .first()
    )
    if pd is None:
        raise HTTPException(status_code=404, detail="File not found")
    return pd


def _get_responsibility_or_404(db: Session, responsibility_id: int, company_id: int) -> Responsibility:
    row = (
        db.query(Responsibility)
        .join(PositionDescription, Responsibility.pd_id == PositionDescription.id)
        .filter(
            Responsibility.id == responsibility_id,
            PositionDescription.company_id == company_id,
        )
        .first()
    )
    if row is None:
        raise HTTPException(status_code=404, detail="Responsibility not found")
    return row


def _sibling_total(db: Session, row: Responsibility) -> float:
    """
    Sum of percentages of the other responsibilities on the same PD.

    Siblings that already add up to more than 100 (rows written before the
    limit was enforced) are scaled down in place first.
    """
    # Row lock on the parent PD serializes percentage updates until commit.
    (
        db.query(PositionDescription.id)
        .filter(PositionDescription.id == row.pd_id)
        .with_for_update()
        .one()
    )
    siblings = (
        db.query(Responsibility)
        .filter(Responsibility.pd_id == row.pd_id, Responsibility.id != row.id)
        .all()
    )
    values = [s.responsibility_percentage or 0.0 for s in siblings]
    if sum(values) > TOTAL_PERCENTAGE:
        logger.warning(
            "Responsibility percentages over limit; rescaling",
            extra={"pd_id": row.pd_id, "total": sum(values)},
        )
        for sibling, value in zip(siblings, redistribute(values)):
            sibling.responsibility_percentage = value
    return sum(s.responsibility_percentage or 0.0 for s in siblings)


@router.post("", response_model=UploadResponse, status_code=status.HTTP_201_CREATED)
async def upload_position_description(
    title: Annotated[str, Form(min_length=2, max_length=200)],
    db: Annotated[Session, Depends(get_db)],
    current_user: Annotated[CurrentUser, Depends(get_current_user)],
    file: Annotated[UploadFile | None, File()] = None,
    department: Annotated[str | None, Form(max_length=100)] = None,
) -> UploadResponse:
    """
    Upload a position description document (multipart/form-data).

    - **file**: PDF or Word document (.pdf, .doc, .docx), at most MAX_UPLOAD_BYTES.
    - **title**: 2-200 characters.
    - **department**: optional department name.

    The file is stored as `<epoch-ms>-<original name>` and a Draft row is
    created for the caller's company.
    """
    if file is None or not file.filename:
        raise HTTPException(status_code=400, detail="No file uploaded")

    settings = get_settings()
    try:
        stored = await save_upload(file, settings)
    except UnsupportedFileTypeError as e:
        raise HTTPException(status_code=400, detail=e.message) from e
    except FileTooLargeError as e:
        raise HTTPException(status_code=status.HTTP_413_REQUEST_ENTITY_TOO_LARGE, detail=e.message) from e
    except StorageError as e:
        logger.error("Upload storage failed: %s", e.cause)
        raise HTTPException(status_code=500, detail="Failed to upload file") from e

    pd = PositionDescription(
        company_id=current_user.company_id,
        title=title.strip(),
        file_name=stored.file_name,
        file_path=stored.file_path,
        file_size=stored.file_size,
        status="Draft",
        department=(department or "").strip() or None,
    )
    db.add(pd)
    try:
        db.commit()
    except Exception:
        db.rollback()
        delete_stored_file(stored.file_path)
        raise
    db.refresh(pd)
    return UploadResponse(data=PositionDescriptionOut.model_validate(pd))


@router.get("", response_model=list[PositionDescriptionOut])
def list_position_descriptions(
    db: Annotated[Session, Depends(get_db)],
    current_user: Annotated[CurrentUser, Depends(get_current_user)],
) -> list[PositionDescription]:
    """All position descriptions of the caller's company, newest first."""
    return (
        db.query(PositionDescription)
        .filter(PositionDescription.company_id == current_user.company_id)
        .order_by(PositionDescription.upload_date.desc())
        .all()
    )


@router.get("/{pd_id}", response_model=PositionDescriptionOut)
def get_position_description(
    pd_id: int,
    db: Annotated[Session, Depends(get_db)],
    current_user: Annotated[CurrentUser, Depends(get_current_user)],
) -> PositionDescription:
    return _get_pd_or_404(db, pd_id, current_user.company_id)


@router.patch("/{pd_id}", response_model=PositionDescriptionOut)
def update_position_description(
    pd_id: int,
    body: PositionDescriptionUpdate,
    db: Annotated[Session, Depends(get_db)],
    current_user: Annotated[CurrentUser, Depends(get_current_user)],
) -> PositionDescription:
    """Change title, status (Draft / In Review / Published) or department."""
    pd = _get_pd_or_404(db, pd_id, current_user.company_id)
    fields = changed_fields(body)
    if not fields:
        raise HTTPException(status_code=400, detail="No valid fields to update")
    apply_partial_update(pd, fields)
    db.commit()
    db.refresh(pd)
    return pd


@router.get("/{pd_id}/download")
def download_position_description(
    pd_id: int,
    db: Annotated[Session, Depends(get_db)],
    current_user: Annotated[CurrentUser, Depends(get_current_user)],
) -> FileResponse:
    pd = _get_pd_or_404(db, pd_id, current_user.company_id)
    if not Path(pd.file_path).is_file():
        raise HTTPException(status_code=404, detail="File not found on server")
    return FileResponse(pd.file_path, filename=pd.file_name)


@router.delete("/{pd_id}", response_model=MessageResponse)
def delete_position_description(
    pd_id: int,
    db: Annotated[Session, Depends(get_db)],
    current_user: Annotated[CurrentUser, Depends(get_current_user)],
) -> MessageResponse:
    """Delete the row (responsibilities cascade) and then the stored file."""
    pd = _get_pd_or_404(db, pd_id, current_user.company_id)
    file_path = pd.file_path
    db.delete(pd)
    db.commit()
    delete_stored_file(file_path)
    return MessageResponse(message="File deleted successfully")


@router.get("/{pd_id}/responsibilities", response_model=list[ResponsibilityOut])
def list_responsibilities(
    pd_id: int,
    db: Annotated[Session, Depends(get_db)],
    current_user: Annotated[CurrentUser, Depends(get_current_user)],
) -> list[Responsibility]:
    _get_pd_or_404(db, pd_id, current_user.company_id)
    return (
        db.query(Responsibility)
        .filter(Responsibility.pd_id == pd_id)
        .order_by(Responsibility.id)
        .all()
    )


@router.post(
    "/{pd_id}/responsibilities",
    response_model=ResponsibilityOut,
    status_code=status.HTTP_201_CREATED,
)
def add_responsibility(
    pd_id: int,
    body: ResponsibilityCreate,
    db: Annotated[Session, Depends(get_db)],
    current_user: Annotated[CurrentUser, Depends(get_current_user)],
) -> Responsibility:
    """Add a responsibility with a 0% weight."""
    _get_pd_or_404(db, pd_id, current_user.company_id)
    row = Responsibility(
        pd_id=pd_id,
        responsibility_name=body.responsibility_name,
        responsibility_percentage=0,
    )
    db.add(row)
    db.commit()
    db.refresh(row)
    return row


@router.put("/responsibility/{responsibility_id}", response_model=ResponsibilityUpdateResponse)
def update_responsibility(
    responsibility_id: int,
    body: ResponsibilityUpdate,
    db: Annotated[Session, Depends(get_db)],
    current_user: Annotated[CurrentUser, Depends(get_current_user)],
) -> ResponsibilityUpdateResponse:
    """
    Partially update a responsibility.

    A requested percentage is lowered, if needed, so that the PD's
    responsibilities total at most 100; clamped_from then carries the
    requested value.
    """
    row = _get_responsibility_or_404(db, responsibility_id, current_user.company_id)
    fields = changed_fields(body)
    if not fields:
        raise HTTPException(status_code=400, detail="No valid fields to update")

    clamped_from: float | None = None
    if "responsibility_percentage" in fields:
        requested = fields["responsibility_percentage"]
        allowed = clamp_percentage(requested, _sibling_total(db, row))
        if allowed != requested:
            clamped_from = requested
        fields["responsibility_percentage"] = allowed

    apply_partial_update(row, fields)
    db.commit()
    db.refresh(row)
    return ResponsibilityUpdateResponse(
        data=ResponsibilityOut.model_validate(row),
        clamped_from=clamped_from,
    )


@router.delete("/responsibility/{responsibility_id}", response_model=MessageResponse)
def delete_responsibility(
    responsibility_id: int,
    db: Annotated[Session, Depends(get_db)],
    current_user: Annotated[CurrentUser, Depends(get_current_user)],
) -> MessageResponse:
    row = _get_responsibility_or_404(db, responsibility_id, current_user.company_id)
    db.delete(row)
    db.commit()
    return MessageResponse(message="Responsibility deleted successfully")


@router.post("/responsibility/{responsibility_id}/rewrite", response_model=RewriteResponse)
async def rewrite_responsibility_text(
    responsibility_id: int,
    db: Annotated[Session, Depends(get_db)],
    current_user: Annotated[CurrentUser, Depends(get_current_user)],
) -> RewriteResponse:
    """
    Rewrite a responsibility with the local LLM (Ollama) and store it as LLM_Desc.

    The original text is kept; is_llm_version is not changed, so the client
    decides which version to show.
    """
    row = _get_responsibility_or_404(db, responsibility_id, current_user.company_id)
    settings = get_settings()
    try:
        rewritten = await rewrite_responsibility(
            row.responsibility_name,
            settings,
            pd_title=row.position_description.title,
            percentage=row.responsibility_percentage,
        )
    except RewriteServiceError as e:
        raise HTTPException(
            status_code=_REWRITE_ERROR_STATUS.get(e.kind, status.HTTP_502_BAD_GATEWAY),
            detail=e.message,
        ) from e

    row.llm_desc = rewritten
    db.commit()
    db.refresh(row)
    return RewriteResponse(data=ResponsibilityOut.model_validate(row), model=settings.OLLAMA_MODEL)
