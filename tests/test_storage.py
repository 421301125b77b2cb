"""Unit tests for app.services.storage: naming, extension checks and size-limited writes."""

import asyncio
import io
import tempfile
import unittest
from pathlib import Path
from types import SimpleNamespace

from fastapi import UploadFile

from app.services.storage import (
    FileTooLargeError,
    UnsupportedFileTypeError,
    delete_stored_file,
    file_extension,
    is_upload_dir_writable,
    sanitize_filename,
    save_upload,
    stored_name_for,
    validate_extension,
)


def _settings(upload_dir: str, max_bytes: int = 1024) -> SimpleNamespace:
    return SimpleNamespace(
        UPLOAD_DIR=upload_dir,
        MAX_UPLOAD_BYTES=max_bytes,
        allowed_upload_extensions=frozenset({".pdf", ".doc", ".docx"}),
    )


class TestNaming(unittest.TestCase):
    def test_extension_is_lowercased(self) -> None:
        self.assertEqual(file_extension("Role.PDF"), ".pdf")
        self.assertEqual(file_extension("noext"), "")

    def test_sanitize_strips_directories(self) -> None:
        self.assertEqual(sanitize_filename("../../etc/passwd.pdf"), "passwd.pdf")
        self.assertEqual(sanitize_filename("C:\\Users\\me\\role.docx"), "role.docx")

    def test_sanitize_replaces_unsafe_characters(self) -> None:
        self.assertEqual(sanitize_filename("role<1>?.pdf"), "role_1_.pdf")

    def test_sanitize_keeps_extension_when_truncating(self) -> None:
        name = sanitize_filename("a" * 300 + ".pdf")
        self.assertTrue(name.endswith(".pdf"))
        self.assertEqual(len(name), 200)

    def test_stored_name_has_timestamp_prefix(self) -> None:
        self.assertEqual(stored_name_for("Senior Analyst.pdf", now_ms=1700000000000),
                         "1700000000000-Senior Analyst.pdf")


class TestValidateExtension(unittest.TestCase):
    def test_allowed(self) -> None:
        validate_extension("role.docx", _settings("unused"))

    def test_rejected(self) -> None:
        with self.assertRaises(UnsupportedFileTypeError) as ctx:
            validate_extension("role.exe", _settings("unused"))
        self.assertIn(".pdf", ctx.exception.message)


class TestSaveUpload(unittest.TestCase):
    def setUp(self) -> None:
        self._tmp = tempfile.TemporaryDirectory()
        self.upload_dir = self._tmp.name

    def tearDown(self) -> None:
        self._tmp.cleanup()

    def test_writes_file_and_reports_size(self) -> None:
        upload = UploadFile(file=io.BytesIO(b"%PDF-1.4 body"), filename="role.pdf")
        stored = asyncio.run(save_upload(upload, _settings(self.upload_dir)))
        self.assertTrue(stored.file_name.endswith("-role.pdf"))
        self.assertEqual(stored.file_size, len(b"%PDF-1.4 body"))
        self.assertEqual(Path(stored.file_path).read_bytes(), b"%PDF-1.4 body")

    def test_too_large_leaves_no_partial_file(self) -> None:
        upload = UploadFile(file=io.BytesIO(b"x" * 50), filename="big.pdf")
        with self.assertRaises(FileTooLargeError):
            asyncio.run(save_upload(upload, _settings(self.upload_dir, max_bytes=10)))
        self.assertEqual(list(Path(self.upload_dir).iterdir()), [])

    def test_bad_extension_writes_nothing(self) -> None:
        upload = UploadFile(file=io.BytesIO(b"data"), filename="notes.txt")
        with self.assertRaises(UnsupportedFileTypeError):
            asyncio.run(save_upload(upload, _settings(self.upload_dir)))
        self.assertEqual(list(Path(self.upload_dir).iterdir()), [])

    def test_delete_stored_file(self) -> None:
        path = Path(self.upload_dir) / "1-role.pdf"
        path.write_bytes(b"x")
        self.assertTrue(delete_stored_file(str(path)))
        self.assertFalse(path.exists())
        self.assertFalse(delete_stored_file(str(path)))

    def test_upload_dir_writable(self) -> None:
        self.assertTrue(is_upload_dir_writable(_settings(self.upload_dir)))


if __name__ == "__main__":
    unittest.main()
