"""Unit tests for app.services.app_settings and app.services.updates with a mocked session."""

import unittest
from types import SimpleNamespace
from unittest.mock import MagicMock

from app.models import AppSetting
from app.schemas.settings import AppSettingUpdate
from app.services.app_settings import (
    delete_setting,
    get_setting_value,
    key_in_use,
    upsert_setting,
)
from app.services.updates import apply_partial_update, changed_fields


class TestLookup(unittest.TestCase):
    def test_value_for_existing_key(self) -> None:
        db = MagicMock()
        db.query.return_value.filter.return_value.order_by.return_value.first.return_value = AppSetting(
            id=4, key="tinymce_api_key", value="abc"
        )
        self.assertEqual(get_setting_value(db, "tinymce_api_key"), "abc")

    def test_missing_key(self) -> None:
        db = MagicMock()
        db.query.return_value.filter.return_value.order_by.return_value.first.return_value = None
        self.assertIsNone(get_setting_value(db, "4"))

    def test_key_in_use_excludes_own_id(self) -> None:
        db = MagicMock()
        query = db.query.return_value.filter.return_value
        query.filter.return_value.first.return_value = None
        self.assertFalse(key_in_use(db, "k", exclude_id=3))
        query.filter.assert_called_once()

    def test_key_in_use(self) -> None:
        db = MagicMock()
        db.query.return_value.filter.return_value.first.return_value = (1,)
        self.assertTrue(key_in_use(db, "k"))


class TestUpsert(unittest.TestCase):
    def test_creates_when_missing(self) -> None:
        db = MagicMock()
        db.query.return_value.filter.return_value.first.return_value = None
        setting = upsert_setting(db, "tinymce_api_key", "abc", user_id=1)
        db.add.assert_called_once_with(setting)
        db.commit.assert_called_once()
        self.assertEqual(setting.value, "abc")
        self.assertFalse(setting.is_encrypted)

    def test_overwrites_existing(self) -> None:
        db = MagicMock()
        existing = AppSetting(id=4, key="tinymce_api_key", value="old", is_encrypted=False)
        db.query.return_value.filter.return_value.first.return_value = existing
        setting = upsert_setting(db, "tinymce_api_key", "new", user_id=2)
        self.assertIs(setting, existing)
        self.assertEqual(existing.value, "new")
        self.assertEqual(existing.updated_by, 2)
        db.add.assert_not_called()

    def test_delete_reports_whether_row_existed(self) -> None:
        db = MagicMock()
        db.query.return_value.filter.return_value.delete.return_value = 0
        self.assertFalse(delete_setting(db, "nope"))
        db.query.return_value.filter.return_value.delete.return_value = 1
        self.assertTrue(delete_setting(db, "tinymce_api_key"))


class TestPartialUpdates(unittest.TestCase):
    def test_only_sent_fields(self) -> None:
        body = AppSettingUpdate.model_validate({"value": "v2"})
        self.assertEqual(changed_fields(body), {"value": "v2"})

    def test_apply_sets_attributes(self) -> None:
        row = SimpleNamespace(key="a", value="b")
        written = apply_partial_update(row, {"value": "c"})
        self.assertEqual(written, ["value"])
        self.assertEqual(row.value, "c")
        self.assertEqual(row.key, "a")


if __name__ == "__main__":
    unittest.main()
