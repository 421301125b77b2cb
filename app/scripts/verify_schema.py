"""
Print the live database schema for the PD Screen tables and flag missing ones.

  python -m app.scripts.verify_schema
"""
import sys

from sqlalchemy import inspect
from sqlalchemy.engine import Inspector

from app.core.database import engine
from app.models import Base


def describe_schema(inspector: Inspector, expected_tables: list[str]) -> tuple[list[str], list[str]]:
    """Return (report lines, missing table names)."""
    lines: list[str] = []
    missing: list[str] = []
    existing = set(inspector.get_table_names())
    for table in expected_tables:
        if table not in existing:
            lines.append(f"[missing] {table}")
            missing.append(table)
            continue
        lines.append(f"[ok] {table}")
        for col in inspector.get_columns(table):
            nullable = "NULL" if col.get("nullable", True) else "NOT NULL"
            lines.append(f"    - {col['name']}: {col['type']} {nullable}")
        for fk in inspector.get_foreign_keys(table):
            cols = ", ".join(fk.get("constrained_columns", []))
            ref = ", ".join(fk.get("referred_columns", []))
            lines.append(f"    fk {cols} -> {fk.get('referred_table')}.{ref}")
        for idx in inspector.get_indexes(table):
            unique = " unique" if idx.get("unique") else ""
            lines.append(f"    index {idx['name']}{unique}")
    return lines, missing


def main() -> int:
    lines, missing = describe_schema(inspect(engine), sorted(Base.metadata.tables))
    print("\n".join(lines))
    if missing:
        print(f"\n{len(missing)} table(s) missing; run 'alembic upgrade head'.", file=sys.stderr)
        return 1
    print("\nSchema verification complete.")
    return 0


if __name__ == "__main__":
    sys.exit(main())
