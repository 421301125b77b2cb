"""
Create a company and its first user from the command line. Run from project root:
  python -m app.scripts.create_user EMAIL PASSWORD FIRST LAST [--company NAME] [--role ROLE]
Example (system admin for a fresh install):
  python -m app.scripts.create_user admin@example.com 'S3cure-pass' Ada Admin --company "PD Screen" --role system_admin
Without --company a personal account is created.
"""
import argparse
import logging
import sys

from app.core.database import session_scope
from app.core.logging_config import setup_logging
from app.core.security import PASSWORD_MAX_LEN, PASSWORD_MIN_LEN, hash_password
from app.models import Company, User

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Create a PD Screen company and user.")
    parser.add_argument("email", help="Login email (unique)")
    parser.add_argument("password", help=f"Password ({PASSWORD_MIN_LEN}-{PASSWORD_MAX_LEN} chars)")
    parser.add_argument("first_name")
    parser.add_argument("last_name")
    parser.add_argument("--company", help="Company name; omit for a personal account")
    parser.add_argument("--role", default="user", choices=["user", "system_admin"])
    return parser


def main(argv: list[str] | None = None) -> int:
    setup_logging()
    args = build_parser().parse_args(argv)

    email = args.email.strip().lower()
    if "@" not in email:
        print("Invalid email address.", file=sys.stderr)
        return 1
    if not (PASSWORD_MIN_LEN <= len(args.password) <= PASSWORD_MAX_LEN):
        print(f"Password must be {PASSWORD_MIN_LEN}-{PASSWORD_MAX_LEN} characters.", file=sys.stderr)
        return 1

    account_type = "company" if args.company else "personal"
    company_name = args.company or f"{args.first_name} {args.last_name} - Personal"

    with session_scope() as db:
        if db.query(User.id).filter(User.email == email).first() is not None:
            print(f"User '{email}' already exists.", file=sys.stderr)
            return 1
        company = Company(
            name=company_name,
            account_type=account_type,
            industry="personal" if account_type == "personal" else None,
            company_size="1" if account_type == "personal" else None,
        )
        db.add(company)
        db.add(
            User(
                company=company,
                email=email,
                password_hash=hash_password(args.password),
                first_name=args.first_name,
                last_name=args.last_name,
                account_type=account_type,
                role=args.role,
            )
        )
    print(f"Created user '{email}' ({account_type}) with role '{args.role}' in '{company_name}'.")
    return 0


if __name__ == "__main__":
    sys.exit(main())
