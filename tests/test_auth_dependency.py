"""get_current_user and require_system_admin called directly with a mocked session."""

import unittest
from datetime import UTC, datetime, timedelta
from unittest.mock import MagicMock

import jwt
from fastapi import HTTPException
from fastapi.security import HTTPAuthorizationCredentials

from app.api.v1.auth import get_current_user, require_system_admin
from app.core.config import settings
from app.core.security import create_access_token
from app.models import User
from app.schemas.auth import CurrentUser


def _credentials(token: str) -> HTTPAuthorizationCredentials:
    return HTTPAuthorizationCredentials(scheme="Bearer", credentials=token)


def _db_returning(user: User | None) -> MagicMock:
    db = MagicMock()
    db.query.return_value.filter.return_value.first.return_value = user
    return db


def _user(is_active: bool = True, company_id: int = 7) -> User:
    return User(
        id=3,
        company_id=company_id,
        email="jane@example.com",
        first_name="Jane",
        last_name="Doe",
        account_type="company",
        role="user",
        is_active=is_active,
    )


def _token(**claims: object) -> str:
    return jwt.encode(claims, settings.JWT_SECRET.get_secret_value(), algorithm=settings.JWT_ALGORITHM)


class TestGetCurrentUser(unittest.TestCase):
    def test_valid_token_resolves_user(self) -> None:
        token = create_access_token(user_id=3, company_id=7, email="jane@example.com")
        current = get_current_user(_credentials(token), _db_returning(_user()))
        self.assertEqual(current.id, 3)
        self.assertEqual(current.company_id, 7)

    def test_legacy_nested_token_accepted(self) -> None:
        now = datetime.now(UTC)
        token = _token(user={"id": 3, "companyId": 7}, iat=now, exp=now + timedelta(minutes=5))
        current = get_current_user(_credentials(token), _db_returning(_user()))
        self.assertEqual(current.id, 3)

    def test_missing_credentials(self) -> None:
        with self.assertRaises(HTTPException) as ctx:
            get_current_user(None, MagicMock())
        self.assertEqual(ctx.exception.status_code, 401)

    def test_garbage_token(self) -> None:
        with self.assertRaises(HTTPException) as ctx:
            get_current_user(_credentials("not-a-jwt"), MagicMock())
        self.assertEqual(ctx.exception.status_code, 401)

    def test_expired_token(self) -> None:
        past = datetime.now(UTC) - timedelta(hours=1)
        token = _token(sub="3", company_id=7, iat=past, exp=past + timedelta(minutes=1))
        with self.assertRaises(HTTPException) as ctx:
            get_current_user(_credentials(token), MagicMock())
        self.assertEqual(ctx.exception.status_code, 401)
        self.assertEqual(ctx.exception.detail, "Token has expired")

    def test_token_issued_too_long_ago(self) -> None:
        now = datetime.now(UTC)
        issued = now - timedelta(hours=settings.JWT_MAX_TOKEN_AGE_HOURS + 1)
        token = _token(sub="3", company_id=7, iat=issued, exp=now + timedelta(hours=1))
        with self.assertRaises(HTTPException) as ctx:
            get_current_user(_credentials(token), _db_returning(_user()))
        self.assertEqual(ctx.exception.detail, "Token is too old")

    def test_token_without_company(self) -> None:
        now = datetime.now(UTC)
        token = _token(sub="3", iat=now, exp=now + timedelta(minutes=5))
        with self.assertRaises(HTTPException) as ctx:
            get_current_user(_credentials(token), MagicMock())
        self.assertEqual(ctx.exception.status_code, 401)

    def test_company_mismatch_rejected(self) -> None:
        token = create_access_token(user_id=3, company_id=7, email="jane@example.com")
        with self.assertRaises(HTTPException) as ctx:
            get_current_user(_credentials(token), _db_returning(_user(company_id=8)))
        self.assertEqual(ctx.exception.status_code, 401)

    def test_unknown_user(self) -> None:
        token = create_access_token(user_id=3, company_id=7, email="jane@example.com")
        with self.assertRaises(HTTPException) as ctx:
            get_current_user(_credentials(token), _db_returning(None))
        self.assertEqual(ctx.exception.status_code, 401)

    def test_inactive_user_forbidden(self) -> None:
        token = create_access_token(user_id=3, company_id=7, email="jane@example.com")
        with self.assertRaises(HTTPException) as ctx:
            get_current_user(_credentials(token), _db_returning(_user(is_active=False)))
        self.assertEqual(ctx.exception.status_code, 403)


class TestRequireSystemAdmin(unittest.TestCase):
    def _current(self, user_id: int, role: str) -> CurrentUser:
        return CurrentUser(id=user_id, company_id=1, email="a@example.com", account_type="company", role=role)

    def test_configured_admin_id_allowed(self) -> None:
        user = self._current(settings.SYSTEM_ADMIN_USER_ID, "user")
        self.assertIs(require_system_admin(user), user)

    def test_system_admin_role_allowed(self) -> None:
        user = self._current(settings.SYSTEM_ADMIN_USER_ID + 100, "system_admin")
        self.assertIs(require_system_admin(user), user)

    def test_other_user_forbidden(self) -> None:
        with self.assertRaises(HTTPException) as ctx:
            require_system_admin(self._current(settings.SYSTEM_ADMIN_USER_ID + 100, "user"))
        self.assertEqual(ctx.exception.status_code, 403)


if __name__ == "__main__":
    unittest.main()
