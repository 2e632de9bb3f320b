# File: primertune/app/db/base.py
# Version: v0.2.0
"""
Declarative Base for PrimerTune.

Model modules import Base from here:

    from primertune.app.db.base import Base

Model modules are NOT imported here to avoid circular imports; maintenance.py
and alembic/env.py import `primertune.app.db.models` for its side effects.
"""

from __future__ import annotations

from sqlalchemy.orm import DeclarativeBase


class Base(DeclarativeBase):
    pass
