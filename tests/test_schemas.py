"""Validation rules of request schemas (registration, PD and responsibility updates, webhook keys)."""

import unittest

from pydantic import ValidationError

from app.schemas.auth import RegisterRequest
from app.schemas.responsibility import ResponsibilityCreate, ResponsibilityOut, ResponsibilityUpdate
from app.schemas.upload import PositionDescriptionUpdate
from app.schemas.webhook import (
    LLM_DESC_KEYS,
    RESPONSIBILITY_ID_KEYS,
    first_present,
    parse_responsibility_id,
)


def _register(**overrides: object) -> dict[str, object]:
    body: dict[str, object] = {
        "email": "jane@example.com",
        "password": "Secret123",
        "firstName": "Jane",
        "lastName": "Doe",
        "accountType": "company",
        "companyName": "Acme",
    }
    body.update(overrides)
    return body


class TestRegisterRequest(unittest.TestCase):
    def test_company_account_with_camel_case_keys(self) -> None:
        req = RegisterRequest.model_validate(_register())
        self.assertEqual(req.first_name, "Jane")
        self.assertEqual(req.company_name, "Acme")
        self.assertEqual(req.account_type, "company")

    def test_company_account_requires_company_name(self) -> None:
        with self.assertRaises(ValidationError):
            RegisterRequest.model_validate(_register(companyName="  "))

    def test_personal_account_without_company_name(self) -> None:
        req = RegisterRequest.model_validate(_register(accountType="personal", companyName=None))
        self.assertEqual(req.account_type, "personal")

    def test_weak_password_rejected(self) -> None:
        with self.assertRaises(ValidationError):
            RegisterRequest.model_validate(_register(password="alllowercase1"))

    def test_short_password_rejected(self) -> None:
        with self.assertRaises(ValidationError):
            RegisterRequest.model_validate(_register(password="Ab1"))

    def test_invalid_email_rejected(self) -> None:
        with self.assertRaises(ValidationError):
            RegisterRequest.model_validate(_register(email="not-an-email"))

    def test_unknown_account_type_rejected(self) -> None:
        with self.assertRaises(ValidationError):
            RegisterRequest.model_validate(_register(accountType="enterprise"))

    def test_phone_validation(self) -> None:
        self.assertEqual(RegisterRequest.model_validate(_register(phone="+15551234")).phone, "+15551234")
        self.assertIsNone(RegisterRequest.model_validate(_register(phone="")).phone)
        with self.assertRaises(ValidationError):
            RegisterRequest.model_validate(_register(phone="call me"))


class TestPositionDescriptionUpdate(unittest.TestCase):
    def test_only_sent_fields_are_set(self) -> None:
        body = PositionDescriptionUpdate.model_validate({"status": "In Review"})
        self.assertEqual(body.model_dump(exclude_unset=True), {"status": "In Review"})

    def test_unknown_status_rejected(self) -> None:
        with self.assertRaises(ValidationError):
            PositionDescriptionUpdate.model_validate({"status": "Archived"})

    def test_null_title_rejected(self) -> None:
        with self.assertRaises(ValidationError):
            PositionDescriptionUpdate.model_validate({"title": None})

    def test_title_length_checked_after_strip(self) -> None:
        with self.assertRaises(ValidationError):
            PositionDescriptionUpdate.model_validate({"title": "  a "})

    def test_title_and_department_stripped(self) -> None:
        body = PositionDescriptionUpdate.model_validate({"title": "  Analyst ", "department": "  "})
        self.assertEqual(body.title, "Analyst")
        self.assertIsNone(body.department)


class TestResponsibilitySchemas(unittest.TestCase):
    def test_create_strips_name(self) -> None:
        self.assertEqual(
            ResponsibilityCreate(responsibility_name="  Manage budget ").responsibility_name,
            "Manage budget",
        )

    def test_create_rejects_blank_name(self) -> None:
        with self.assertRaises(ValidationError):
            ResponsibilityCreate(responsibility_name="  a ")

    def test_update_accepts_llm_desc_alias_and_string_bool(self) -> None:
        body = ResponsibilityUpdate.model_validate({"LLM_Desc": "Better text", "is_llm_version": "true"})
        self.assertEqual(body.llm_desc, "Better text")
        self.assertIs(body.is_llm_version, True)

    def test_update_rejects_out_of_range_percentage(self) -> None:
        with self.assertRaises(ValidationError):
            ResponsibilityUpdate.model_validate({"responsibility_percentage": 120})

    def test_update_rejects_llm_desc_over_limit(self) -> None:
        with self.assertRaises(ValidationError):
            ResponsibilityUpdate.model_validate({"LLM_Desc": "x" * 2001})

    def test_out_serializes_llm_desc_under_column_name(self) -> None:
        out = ResponsibilityOut(id=1, responsibility_name="Plan", responsibility_percentage=10, llm_desc="d")
        dumped = out.model_dump(by_alias=True)
        self.assertEqual(dumped["LLM_Desc"], "d")
        self.assertNotIn("llm_desc", dumped)


class TestWebhookKeys(unittest.TestCase):
    def test_first_present_follows_key_order(self) -> None:
        body = {"row": 4, "responsibilityId": 9}
        self.assertEqual(first_present(body, RESPONSIBILITY_ID_KEYS), 4)

    def test_empty_string_skipped(self) -> None:
        body = {"LLMDesc": "", "description": "fallback"}
        self.assertEqual(first_present(body, LLM_DESC_KEYS), "fallback")

    def test_missing_returns_none(self) -> None:
        self.assertIsNone(first_present({"other": 1}, RESPONSIBILITY_ID_KEYS))


class TestParseResponsibilityId(unittest.TestCase):
    def test_whole_numbers_accepted(self) -> None:
        for raw in (12, 12.0, "12", " 12 "):
            with self.subTest(raw=raw):
                self.assertEqual(parse_responsibility_id(raw), 12)

    def test_fractional_and_non_numeric_rejected(self) -> None:
        for raw in (12.7, "12.7", "-3", "abc", True, None, [12]):
            with self.subTest(raw=raw):
                self.assertIsNone(parse_responsibility_id(raw))


if __name__ == "__main__":
    unittest.main()
