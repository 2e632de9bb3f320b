# File: primertune/app/db/models.py
# Version: v0.4.0
"""
ORM models for PrimerTune.

Tables:
- SavedWorkspace: a named snapshot of the primer workspace. The state itself is
  the encoded WorkspaceState blob (see core/primer/state_codec.py); the other
  columns are listing metadata.
"""
from __future__ import annotations

from datetime import datetime
from typing import Optional

from sqlalchemy import DateTime, Integer, LargeBinary, String
from sqlalchemy.orm import Mapped, mapped_column

from primertune.app.db.base import Base


class SavedWorkspace(Base):
    __tablename__ = "workspaces"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    created_at: Mapped[datetime] = mapped_column(DateTime, default=datetime.utcnow, nullable=False)
    updated_at: Mapped[datetime] = mapped_column(DateTime, default=datetime.utcnow, nullable=False)

    # Optional friendly label
    name: Mapped[Optional[str]] = mapped_column(String(120), nullable=True)

    # Denormalized for listings (avoids decoding every blob)
    primer_count: Mapped[int] = mapped_column(Integer, default=0, nullable=False)

    # Encoded WorkspaceState (UTF-8 JSON bytes)
    state_blob: Mapped[bytes] = mapped_column(LargeBinary, nullable=False)
