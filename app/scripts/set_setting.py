"""
Create, overwrite, show or delete a global app setting. Run from project root:
  python -m app.scripts.set_setting set tinymce_api_key YOUR-KEY
  python -m app.scripts.set_setting get tinymce_api_key
  python -m app.scripts.set_setting delete tinymce_api_key
"""
import argparse
import sys

from app.core.database import session_scope
from app.core.logging_config import setup_logging
from app.services.app_settings import delete_setting, get_setting_value, upsert_setting


def main(argv: list[str] | None = None) -> int:
    setup_logging()
    parser = argparse.ArgumentParser(description="Manage PD Screen app settings.")
    sub = parser.add_subparsers(dest="command", required=True)
    set_cmd = sub.add_parser("set")
    set_cmd.add_argument("key")
    set_cmd.add_argument("value")
    set_cmd.add_argument("--encrypted", action="store_true", help="Flag the value as sensitive")
    get_cmd = sub.add_parser("get")
    get_cmd.add_argument("key")
    del_cmd = sub.add_parser("delete")
    del_cmd.add_argument("key")
    args = parser.parse_args(argv)

    with session_scope() as db:
        if args.command == "set":
            setting = upsert_setting(db, args.key, args.value, user_id=None, is_encrypted=args.encrypted)
            print(f"Saved setting '{setting.key}' (id={setting.id}).")
            return 0
        if args.command == "get":
            value = get_setting_value(db, args.key)
            if value is None:
                print(f"Setting '{args.key}' not found.", file=sys.stderr)
                return 1
            print(value)
            return 0
        if not delete_setting(db, args.key):
            print(f"Setting '{args.key}' not found.", file=sys.stderr)
            return 1
        print(f"Deleted setting '{args.key}'.")
        return 0


if __name__ == "__main__":
    sys.exit(main())
