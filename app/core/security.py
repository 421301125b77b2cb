"""Password hashing and JWT creation/verification for authentication."""

from dataclasses import dataclass
from datetime import UTC, datetime, timedelta
from typing import Any

import bcrypt
import jwt

from app.core.config import settings

# Bcrypt cost (rounds).
BCRYPT_ROUNDS = 12

PASSWORD_MIN_LEN = 8
PASSWORD_MAX_LEN = 128

# bcrypt only looks at the first 72 bytes.
_BCRYPT_MAX_BYTES = 72


class TokenClaimsError(ValueError):
    """Raised when a decoded token lacks the claims a request needs (user, company, email)."""


@dataclass(frozen=True)
class TokenClaims:
    """Canonical claim set carried by an access token."""

    user_id: int
    company_id: int
    email: str | None
    account_type: str | None
    role: str | None
    issued_at: int | None


def is_bcrypt_hash(value: str | None) -> bool:
    """True if value looks like a bcrypt hash ($2a$, $2b$, $2y$)."""
    return bool(value) and value.startswith("$2")


def hash_password(plain_password: str) -> str:
    """Hash a plain-text password for storage. Do not store plain passwords."""
    pw_bytes = plain_password.encode("utf-8")[:_BCRYPT_MAX_BYTES]
    return bcrypt.hashpw(pw_bytes, bcrypt.gensalt(rounds=BCRYPT_ROUNDS)).decode("utf-8")


def verify_password(plain_password: str, hashed: str) -> bool:
    """Verify a plain password against a stored hash."""
    pw_bytes = plain_password.encode("utf-8")[:_BCRYPT_MAX_BYTES]
    try:
        return bcrypt.checkpw(pw_bytes, hashed.encode("utf-8"))
    except (ValueError, TypeError):
        return False


def create_access_token(
    user_id: int,
    company_id: int,
    email: str,
    account_type: str | None = None,
    role: str | None = None,
) -> str:
    """Create a signed JWT with flat claims: sub (user id), company_id, email, account_type, role."""
    now = datetime.now(UTC)
    expire = now + timedelta(minutes=settings.JWT_EXPIRE_MINUTES)
    payload: dict[str, Any] = {
        "sub": str(user_id),
        "company_id": company_id,
        "email": email,
        "account_type": account_type,
        "role": role,
        "exp": expire,
        "iat": now,
    }
    return jwt.encode(
        payload,
        settings.JWT_SECRET.get_secret_value(),
        algorithm=settings.JWT_ALGORITHM,
    )


def decode_access_token(token: str) -> dict[str, Any]:
    """
    Decode and validate JWT signature and expiry; return the raw payload.
    Raises jwt.PyJWTError on invalid or expired token.
    """
    return jwt.decode(
        token,
        settings.JWT_SECRET.get_secret_value(),
        algorithms=[settings.JWT_ALGORITHM],
    )


def _as_int(value: Any) -> int | None:
    if value is None or isinstance(value, bool):
        return None
    try:
        return int(value)
    except (TypeError, ValueError):
        return None


def normalize_claims(payload: dict[str, Any]) -> TokenClaims:
    """
    Map a decoded payload onto TokenClaims.

    Accepts the flat shape written by create_access_token, camelCase keys
    (userId, companyId, accountType), and the nested {"user": {...}} shape
    issued by older clients. Raises TokenClaimsError when user id or
    company id cannot be found.
    """
    nested = payload.get("user")
    source: dict[str, Any] = dict(nested) if isinstance(nested, dict) else {}
    # Top-level keys win over the nested object.
    source.update({k: v for k, v in payload.items() if k != "user"})

    user_id = _as_int(source.get("sub")) or _as_int(source.get("userId")) or _as_int(source.get("id"))
    company_id = _as_int(source.get("company_id")) or _as_int(source.get("companyId"))
    if user_id is None or company_id is None:
        raise TokenClaimsError("Invalid token structure")

    return TokenClaims(
        user_id=user_id,
        company_id=company_id,
        email=source.get("email"),
        account_type=source.get("account_type") or source.get("accountType"),
        role=source.get("role"),
        issued_at=_as_int(source.get("iat")),
    )


def is_token_too_old(claims: TokenClaims, now: datetime | None = None) -> bool:
    """True when the token was issued more than JWT_MAX_TOKEN_AGE_HOURS ago."""
    if claims.issued_at is None:
        return False
    now = now or datetime.now(UTC)
    age_seconds = now.timestamp() - claims.issued_at
    return age_seconds > settings.JWT_MAX_TOKEN_AGE_HOURS * 3600
