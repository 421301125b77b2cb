"""Registration, login and token refresh, plus the auth dependencies (get_current_user, require_system_admin)."""

import logging
from typing import Annotated

import jwt
from fastapi import APIRouter, Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from app.core.config import settings
from app.core.database import get_db
from app.core.security import (
    TokenClaimsError,
    create_access_token,
    decode_access_token,
    hash_password,
    is_token_too_old,
    normalize_claims,
    verify_password,
)
from app.models import Company, User
from app.schemas.auth import (
    CurrentUser,
    LoginRequest,
    RefreshResponse,
    RegisterRequest,
    TokenResponse,
    UserSummary,
)

logger = logging.getLogger(__name__)

router = APIRouter()
security = HTTPBearer(auto_error=False)

SYSTEM_ADMIN_ROLE = "system_admin"


def _unauthorized(detail: str) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail=detail,
        headers={"WWW-Authenticate": "Bearer"},
    )


def _token_for(user: User) -> str:
    return create_access_token(
        user_id=user.id,
        company_id=user.company_id,
        email=user.email,
        account_type=user.account_type,
        role=user.role,
    )


def _personal_defaults(body: RegisterRequest) -> dict[str, str]:
    """Personal accounts get a generated single-user company."""
    return {
        "company_name": f"{body.first_name} {body.last_name} - Personal",
        "industry": "personal",
        "company_size": "1",
        "job_title": "Personal user",
        "department": "Personal",
    }


@router.post("/register", response_model=TokenResponse, status_code=status.HTTP_201_CREATED)
def register(
    body: RegisterRequest,
    db: Annotated[Session, Depends(get_db)],
) -> TokenResponse:
    """
    Create a company and its first user in one transaction, then return a token.

    Personal accounts override the company fields with a generated
    single-user company. Returns 409 when the email is already registered.
    """
    email = body.email.lower()
    if db.query(User.id).filter(User.email == email).first() is not None:
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail="An account with this email already exists.",
        )

    fields = {
        "company_name": body.company_name,
        "industry": body.industry,
        "company_size": body.company_size,
        "job_title": body.job_title,
        "department": body.department,
    }
    if body.account_type == "personal":
        fields.update(_personal_defaults(body))

    company = Company(
        name=fields["company_name"],
        industry=fields["industry"],
        company_size=fields["company_size"],
        account_type=body.account_type,
        website=body.website if body.account_type == "company" else None,
        phone=body.phone if body.account_type == "company" else None,
    )
    user = User(
        company=company,
        email=email,
        password_hash=hash_password(body.password),
        first_name=body.first_name,
        last_name=body.last_name,
        account_type=body.account_type,
        role="user",
        job_title=fields["job_title"],
        department=fields["department"],
    )
    db.add(company)
    db.add(user)
    try:
        db.commit()
    except IntegrityError as e:
        # Lost a race with a concurrent registration for the same email.
        db.rollback()
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail="An account with this email already exists.",
        ) from e
    db.refresh(user)

    logger.info(
        "Registered account",
        extra={"user_id": user.id, "company_id": user.company_id, "account_type": body.account_type},
    )
    return TokenResponse(token=_token_for(user), user=UserSummary.model_validate(user))


@router.post("/login", response_model=TokenResponse)
def login(
    body: LoginRequest,
    db: Annotated[Session, Depends(get_db)],
) -> TokenResponse:
    """
    Authenticate with email and password; returns a JWT access token.
    Include the token in the Authorization header as: Bearer <token>
    """
    user = db.query(User).filter(User.email == body.email.lower()).first()
    if user is None or not verify_password(body.password, user.password_hash):
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid credentials",
        )
    if not user.is_active:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Account is disabled",
        )
    return TokenResponse(token=_token_for(user), user=UserSummary.model_validate(user))


def get_current_user(
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(security)],
    db: Annotated[Session, Depends(get_db)],
) -> CurrentUser:
    """
    Dependency: require a valid Bearer JWT and return the current user.

    401 when the token is missing, invalid, expired, issued too long ago or
    names an unknown user; 403 when the user has been deactivated.
    """
    if credentials is None:
        raise _unauthorized("Access token required")
    try:
        payload = decode_access_token(credentials.credentials)
    except jwt.ExpiredSignatureError:
        raise _unauthorized("Token has expired")
    except jwt.PyJWTError:
        raise _unauthorized("Invalid or expired token")
    try:
        claims = normalize_claims(payload)
    except TokenClaimsError as e:
        raise _unauthorized(str(e))
    if is_token_too_old(claims):
        raise _unauthorized("Token is too old")

    user = db.query(User).filter(User.id == claims.user_id).first()
    if user is None or user.company_id != claims.company_id:
        raise _unauthorized("User not found")
    if not user.is_active:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Account is disabled",
        )
    return CurrentUser.model_validate(user)


def require_system_admin(
    current_user: Annotated[CurrentUser, Depends(get_current_user)],
) -> CurrentUser:
    """Dependency: require the configured system admin user or the system_admin role."""
    if current_user.id != settings.SYSTEM_ADMIN_USER_ID and current_user.role != SYSTEM_ADMIN_ROLE:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Access denied. System admin privileges required.",
        )
    return current_user


@router.post("/refresh", response_model=RefreshResponse)
def refresh(
    current_user: Annotated[CurrentUser, Depends(get_current_user)],
) -> RefreshResponse:
    """Issue a fresh token for the authenticated user."""
    token = create_access_token(
        user_id=current_user.id,
        company_id=current_user.company_id,
        email=current_user.email,
        account_type=current_user.account_type,
        role=current_user.role,
    )
    return RefreshResponse(accessToken=token)
