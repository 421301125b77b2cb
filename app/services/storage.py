"""Local-disk storage for uploaded position description files."""

import logging
import re
import time
from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING

from fastapi import UploadFile

if TYPE_CHECKING:
    from app.core.config import Settings

logger = logging.getLogger(__name__)

_CHUNK_BYTES = 64 * 1024
_UNSAFE_CHARS_RE = re.compile(r"[^A-Za-z0-9._ -]+")
_MAX_NAME_LEN = 200


class StorageError(Exception):
    """Raised when a file cannot be accepted or written."""

    def __init__(self, message: str, cause: Exception | None = None) -> None:
        self.message = message
        self.cause = cause
        super().__init__(message)


class UnsupportedFileTypeError(StorageError):
    pass


class FileTooLargeError(StorageError):
    pass


@dataclass(frozen=True)
class StoredFile:
    file_name: str
    file_path: str
    file_size: int


def file_extension(filename: str) -> str:
    return Path(filename).suffix.lower()


def sanitize_filename(filename: str) -> str:
    """Strip directories and characters that are unsafe on disk; keep the extension."""
    name = Path(filename.replace("\\", "/")).name.strip()
    name = _UNSAFE_CHARS_RE.sub("_", name)
    if len(name) > _MAX_NAME_LEN:
        suffix = Path(name).suffix
        name = name[: _MAX_NAME_LEN - len(suffix)] + suffix
    return name or "upload"


def stored_name_for(filename: str, now_ms: int | None = None) -> str:
    """Timestamp-prefixed name: '<epoch-ms>-<sanitized original>'."""
    if now_ms is None:
        now_ms = int(time.time() * 1000)
    return f"{now_ms}-{sanitize_filename(filename)}"


def ensure_upload_dir(settings: "Settings") -> Path:
    upload_dir = Path(settings.UPLOAD_DIR)
    upload_dir.mkdir(parents=True, exist_ok=True)
    return upload_dir


def is_upload_dir_writable(settings: "Settings") -> bool:
    try:
        upload_dir = ensure_upload_dir(settings)
    except OSError:
        return False
    marker = upload_dir / ".write-check"
    try:
        marker.write_bytes(b"")
        marker.unlink()
        return True
    except OSError:
        return False


def validate_extension(filename: str, settings: "Settings") -> None:
    if file_extension(filename) not in settings.allowed_upload_extensions:
        allowed = ", ".join(sorted(settings.allowed_upload_extensions))
        raise UnsupportedFileTypeError(
            f"Invalid file type. Only {allowed} files are allowed."
        )


async def save_upload(file: UploadFile, settings: "Settings") -> StoredFile:
    """
    Validate and write an uploaded file under UPLOAD_DIR.

    Reads in chunks and stops once MAX_UPLOAD_BYTES is exceeded; a partial
    file is removed before FileTooLargeError is raised.
    """
    original = file.filename or ""
    validate_extension(original, settings)

    upload_dir = ensure_upload_dir(settings)
    stored_name = stored_name_for(original)
    target = upload_dir / stored_name
    size = 0
    try:
        with target.open("wb") as out:
            while chunk := await file.read(_CHUNK_BYTES):
                size += len(chunk)
                if size > settings.MAX_UPLOAD_BYTES:
                    raise FileTooLargeError(
                        f"File size must not exceed {settings.MAX_UPLOAD_BYTES // (1024 * 1024)} MB."
                    )
                out.write(chunk)
    except FileTooLargeError:
        target.unlink(missing_ok=True)
        raise
    except OSError as e:
        target.unlink(missing_ok=True)
        raise StorageError("Failed to store uploaded file.", cause=e) from e

    logger.info(
        "Stored position description file",
        extra={"stored_name": stored_name, "file_size": size},
    )
    return StoredFile(file_name=stored_name, file_path=str(target), file_size=size)


def delete_stored_file(file_path: str) -> bool:
    """Remove a stored file if it exists; return True when something was deleted."""
    path = Path(file_path)
    if not path.is_file():
        return False
    try:
        path.unlink()
    except OSError as e:
        logger.warning("Could not delete stored file %s: %s", file_path, e)
        return False
    return True
