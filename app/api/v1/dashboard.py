"""Dashboard endpoints: aggregate counts, company info blocks, editor config and company details."""

from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from app.api.v1.auth import get_current_user
from app.core.config import get_settings
from app.core.database import get_db
from app.models import Company, CompanyInfoBlock
from app.schemas.auth import CurrentUser
from app.schemas.dashboard import (
    CompanyDetails,
    CompanyDetailsUpdate,
    CompanyInfoBlockCreate,
    CompanyInfoBlockOut,
    CompanyInfoBlockUpdate,
    DashboardResponse,
    EditorConfigResponse,
    SettingValueResponse,
)
from app.schemas.upload import MessageResponse
from app.services.app_settings import get_setting_value
from app.services.dashboard import build_dashboard
from app.services.updates import apply_partial_update, changed_fields

router = APIRouter()


def _info_block_or_404(db: Session, block_id: int, company_id: int) -> CompanyInfoBlock:
    block = (
        db.query(CompanyInfoBlock)
        .filter(CompanyInfoBlock.id == block_id, CompanyInfoBlock.company_id == company_id)
        .first()
    )
    if block is None:
        raise HTTPException(status_code=404, detail="Company info block not found")
    return block


def _company_or_404(db: Session, company_id: int) -> Company:
    company = db.query(Company).filter(Company.id == company_id).first()
    if company is None:
        raise HTTPException(status_code=404, detail="Company not found")
    return company


@router.get("", response_model=DashboardResponse)
def get_dashboard(
    db: Annotated[Session, Depends(get_db)],
    current_user: Annotated[CurrentUser, Depends(get_current_user)],
) -> DashboardResponse:
    """
    Aggregate counts for the caller's company: PD totals, recent uploads,
    department coverage, responsibility automation and review status.
    """
    return build_dashboard(db, current_user.company_id)


@router.get("/company-info-blocks", response_model=list[CompanyInfoBlockOut])
def list_company_info_blocks(
    db: Annotated[Session, Depends(get_db)],
    current_user: Annotated[CurrentUser, Depends(get_current_user)],
) -> list[CompanyInfoBlock]:
    return (
        db.query(CompanyInfoBlock)
        .filter(CompanyInfoBlock.company_id == current_user.company_id)
        .order_by(CompanyInfoBlock.title.asc())
        .all()
    )


@router.get("/company-info-blocks/{block_id}", response_model=CompanyInfoBlockOut)
def get_company_info_block(
    block_id: int,
    db: Annotated[Session, Depends(get_db)],
    current_user: Annotated[CurrentUser, Depends(get_current_user)],
) -> CompanyInfoBlock:
    return _info_block_or_404(db, block_id, current_user.company_id)


@router.post(
    "/company-info-blocks",
    response_model=CompanyInfoBlockOut,
    status_code=status.HTTP_201_CREATED,
)
def create_company_info_block(
    body: CompanyInfoBlockCreate,
    db: Annotated[Session, Depends(get_db)],
    current_user: Annotated[CurrentUser, Depends(get_current_user)],
) -> CompanyInfoBlock:
    block = CompanyInfoBlock(
        company_id=current_user.company_id,
        title=body.title,
        description=body.description,
        is_active=body.is_active,
        created_by=current_user.id,
        updated_by=current_user.id,
    )
    db.add(block)
    db.commit()
    db.refresh(block)
    return block


@router.put("/company-info-blocks/{block_id}", response_model=CompanyInfoBlockOut)
def update_company_info_block(
    block_id: int,
    body: CompanyInfoBlockUpdate,
    db: Annotated[Session, Depends(get_db)],
    current_user: Annotated[CurrentUser, Depends(get_current_user)],
) -> CompanyInfoBlock:
    fields = changed_fields(body)
    if not fields:
        raise HTTPException(status_code=400, detail="At least one field must be provided for update")
    block = _info_block_or_404(db, block_id, current_user.company_id)
    apply_partial_update(block, fields)
    block.updated_by = current_user.id
    db.commit()
    db.refresh(block)
    return block


@router.delete("/company-info-blocks/{block_id}", response_model=MessageResponse)
def delete_company_info_block(
    block_id: int,
    db: Annotated[Session, Depends(get_db)],
    current_user: Annotated[CurrentUser, Depends(get_current_user)],
) -> MessageResponse:
    block = _info_block_or_404(db, block_id, current_user.company_id)
    db.delete(block)
    db.commit()
    return MessageResponse(message="Company info block deleted successfully")


@router.get("/editor-config", response_model=EditorConfigResponse)
def get_editor_config(
    db: Annotated[Session, Depends(get_db)],
    _user: Annotated[CurrentUser, Depends(get_current_user)],
) -> EditorConfigResponse:
    """Rich-text editor API key from app settings; 500 when it was never configured."""
    api_key = get_setting_value(db, get_settings().EDITOR_API_KEY_SETTING)
    if not api_key:
        raise HTTPException(status_code=500, detail="Editor API key not configured")
    return EditorConfigResponse(apiKey=api_key)


@router.get("/editor-key", response_model=SettingValueResponse)
def get_editor_key(
    db: Annotated[Session, Depends(get_db)],
    _user: Annotated[CurrentUser, Depends(get_current_user)],
) -> SettingValueResponse:
    value = get_setting_value(db, get_settings().EDITOR_API_KEY_SETTING)
    if value is None:
        raise HTTPException(status_code=404, detail="API key not found")
    return SettingValueResponse(value=value)


@router.get("/company-details", response_model=CompanyDetails)
def get_company_details(
    db: Annotated[Session, Depends(get_db)],
    current_user: Annotated[CurrentUser, Depends(get_current_user)],
) -> Company:
    return _company_or_404(db, current_user.company_id)


@router.put("/company-details", response_model=CompanyDetails)
def update_company_details(
    body: CompanyDetailsUpdate,
    db: Annotated[Session, Depends(get_db)],
    current_user: Annotated[CurrentUser, Depends(get_current_user)],
) -> Company:
    """Replace the editable company fields; omitted fields are cleared, except name."""
    company = _company_or_404(db, current_user.company_id)
    fields = body.model_dump()
    if fields.get("name") is None:
        fields.pop("name")
    apply_partial_update(company, fields)
    db.commit()
    db.refresh(company)
    return company
