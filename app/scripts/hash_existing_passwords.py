"""
Replace plaintext values in users.password_hash with bcrypt hashes.

  python -m app.scripts.hash_existing_passwords [--dry-run]

Rows that already hold a bcrypt hash ($2...) are left alone, so the script
is safe to run repeatedly.
"""
import argparse
import logging
import sys

from sqlalchemy.orm import Session

from app.core.database import session_scope
from app.core.logging_config import setup_logging
from app.core.security import hash_password, is_bcrypt_hash
from app.models import User

logger = logging.getLogger(__name__)


def hash_plaintext_passwords(db: Session, dry_run: bool = False) -> tuple[int, int]:
    """Hash every non-bcrypt password_hash. Returns (hashed, already_hashed). Does not commit."""
    hashed = already = 0
    for user in db.query(User).order_by(User.id).all():
        if is_bcrypt_hash(user.password_hash):
            already += 1
            continue
        logger.info("Hashing password for user id=%s", user.id)
        if not dry_run:
            user.password_hash = hash_password(user.password_hash)
        hashed += 1
    return hashed, already


def main(argv: list[str] | None = None) -> int:
    setup_logging()
    parser = argparse.ArgumentParser(description="Hash plaintext user passwords with bcrypt.")
    parser.add_argument("--dry-run", action="store_true", help="Report only; do not write")
    args = parser.parse_args(argv)
    try:
        with session_scope() as db:
            hashed, already = hash_plaintext_passwords(db, dry_run=args.dry_run)
            if args.dry_run:
                db.rollback()
    except Exception as e:
        logger.exception("Password hashing failed: %s", e)
        return 1
    logger.info("Password hashing completed: hashed=%s already_hashed=%s", hashed, already)
    return 0


if __name__ == "__main__":
    sys.exit(main())
