"""Company administration: users and departments, always scoped to the caller's company."""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from app.api.v1.auth import get_current_user
from app.core.database import get_db
from app.core.security import hash_password
from app.models import Company, Department, User
from app.schemas.admin import (
    CompanyUserCreate,
    CompanyUserCreated,
    CompanyUserOut,
    DepartmentIn,
    DepartmentOut,
    UserStatusOut,
    UserStatusResponse,
    UserStatusUpdate,
)
from app.schemas.auth import CurrentUser
from app.schemas.upload import MessageResponse

logger = logging.getLogger(__name__)

router = APIRouter()


def _company_user_or_404(db: Session, user_id: int, company_id: int) -> User:
    user = db.query(User).filter(User.id == user_id, User.company_id == company_id).first()
    if user is None:
        raise HTTPException(status_code=404, detail="User not found")
    return user


def _department_or_404(db: Session, department_id: int, company_id: int) -> Department:
    department = (
        db.query(Department)
        .filter(Department.id == department_id, Department.company_id == company_id)
        .first()
    )
    if department is None:
        raise HTTPException(status_code=404, detail="Department not found")
    return department


@router.get("/users", response_model=list[CompanyUserOut])
def list_company_users(
    db: Annotated[Session, Depends(get_db)],
    current_user: Annotated[CurrentUser, Depends(get_current_user)],
) -> list[User]:
    return (
        db.query(User)
        .filter(User.company_id == current_user.company_id)
        .order_by(User.created_at.asc())
        .all()
    )


@router.post("/users", response_model=CompanyUserCreated, status_code=status.HTTP_201_CREATED)
def create_company_user(
    body: CompanyUserCreate,
    db: Annotated[Session, Depends(get_db)],
    current_user: Annotated[CurrentUser, Depends(get_current_user)],
) -> CompanyUserCreated:
    """Add an active user to the caller's company; the account type follows the company."""
    email = body.email.lower()
    if db.query(User.id).filter(User.email == email).first() is not None:
        raise HTTPException(status_code=400, detail="User with this email already exists")

    company = db.query(Company).filter(Company.id == current_user.company_id).first()
    if company is None:
        raise HTTPException(status_code=400, detail="Company not found")

    user = User(
        company_id=company.id,
        first_name=body.first_name,
        last_name=body.last_name,
        email=email,
        password_hash=hash_password(body.password),
        job_title=body.job_title or None,
        department=body.department or None,
        account_type=company.account_type,
        role="user",
        is_active=True,
    )
    db.add(user)
    db.commit()
    db.refresh(user)
    logger.info(
        "Company user created",
        extra={"user_id": user.id, "company_id": company.id, "created_by": current_user.id},
    )
    return CompanyUserCreated(user=CompanyUserOut.model_validate(user))


@router.put("/users/{user_id}/status", response_model=UserStatusResponse)
def update_company_user_status(
    user_id: int,
    body: UserStatusUpdate,
    db: Annotated[Session, Depends(get_db)],
    current_user: Annotated[CurrentUser, Depends(get_current_user)],
) -> UserStatusResponse:
    user = _company_user_or_404(db, user_id, current_user.company_id)
    user.is_active = body.is_active
    db.commit()
    db.refresh(user)
    return UserStatusResponse(user=UserStatusOut.model_validate(user))


@router.delete("/users/{user_id}", response_model=MessageResponse)
def delete_company_user(
    user_id: int,
    db: Annotated[Session, Depends(get_db)],
    current_user: Annotated[CurrentUser, Depends(get_current_user)],
) -> MessageResponse:
    user = _company_user_or_404(db, user_id, current_user.company_id)
    db.delete(user)
    db.commit()
    return MessageResponse(message="User deleted successfully")


@router.get("/departments", response_model=list[DepartmentOut])
def list_departments(
    db: Annotated[Session, Depends(get_db)],
    current_user: Annotated[CurrentUser, Depends(get_current_user)],
) -> list[Department]:
    return (
        db.query(Department)
        .filter(Department.company_id == current_user.company_id)
        .order_by(Department.id.asc())
        .all()
    )


@router.post("/departments", response_model=DepartmentOut, status_code=status.HTTP_201_CREATED)
def create_department(
    body: DepartmentIn,
    db: Annotated[Session, Depends(get_db)],
    current_user: Annotated[CurrentUser, Depends(get_current_user)],
) -> Department:
    department = Department(company_id=current_user.company_id, name=body.name, is_active=True)
    db.add(department)
    db.commit()
    db.refresh(department)
    return department


@router.put("/departments/{department_id}", response_model=DepartmentOut)
def rename_department(
    department_id: int,
    body: DepartmentIn,
    db: Annotated[Session, Depends(get_db)],
    current_user: Annotated[CurrentUser, Depends(get_current_user)],
) -> Department:
    department = _department_or_404(db, department_id, current_user.company_id)
    department.name = body.name
    db.commit()
    db.refresh(department)
    return department


@router.delete("/departments/{department_id}", response_model=MessageResponse)
def delete_department(
    department_id: int,
    db: Annotated[Session, Depends(get_db)],
    current_user: Annotated[CurrentUser, Depends(get_current_user)],
) -> MessageResponse:
    department = _department_or_404(db, department_id, current_user.company_id)
    db.delete(department)
    db.commit()
    return MessageResponse(message="Department deleted successfully")
