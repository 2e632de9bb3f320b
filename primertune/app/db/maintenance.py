# File: primertune/app/db/maintenance.py
# Version: v0.3.0
"""
SQLite schema maintenance helpers (dev-only, non-destructive).

- ensure_schema_sqlite(engine): creates only tables that are missing.
- Imports `primertune.app.db.models` (not just Base) so every ORM model is
  registered in Base.metadata before inspection.

Usage:
  Keep SCHEMA_AUTOHEAL=true (the default) with a sqlite DB_URL. On app startup
  ensure_schema_sqlite(engine) creates any missing tables and logs each action.

Notes:
  * Safe to run multiple times; it never drops or alters existing tables.
  * Use Alembic migrations for staging/production changes.
"""
from __future__ import annotations

from typing import List

from sqlalchemy import inspect
from sqlalchemy.engine import Engine

# Imported for side effects: registers the model classes on Base.metadata.
import primertune.app.db.models as models  # noqa: F401
from primertune.app.db.base import Base


def ensure_schema_sqlite(engine: Engine) -> List[str]:
    """
    Create any missing tables declared on Base.metadata.

    Returns a list of human-readable action strings (e.g., "created table workspaces").
    """
    inspector = inspect(engine)
    existing = set(inspector.get_table_names())
    defined = set(Base.metadata.tables.keys())

    missing = sorted(defined - existing)
    actions: List[str] = []

    for name in missing:
        table = Base.metadata.tables[name]
        # checkfirst guards against races / repeated calls
        table.create(bind=engine, checkfirst=True)
        actions.append(f"created table {name}")

    if not actions:
        actions.append("all tables present")

    return actions
