# File: primertune/app/services/workspace_store.py
# Version: v0.1.0
"""
Stored workspace helpers (service layer).

These functions encapsulate the DB logic so routers don't need to import
SQLAlchemy session management details. Blobs are produced and checked by
core/primer/state_codec.py; nothing undecodable is ever written.
"""
from __future__ import annotations

from datetime import datetime
from typing import Optional

from sqlalchemy import select, delete, desc, func
from sqlalchemy.orm import Session

from primertune.app.core.primer.schemas import WorkspaceState
from primertune.app.core.primer.state_codec import decode_state, encode_state
from primertune.app.db.models import SavedWorkspace


def save_workspace(
    db: Session, *, state: WorkspaceState, name: Optional[str] = None, workspace_id: Optional[int] = None
) -> Optional[SavedWorkspace]:
    """
    Insert a new stored workspace, or overwrite `workspace_id` if given.
    Returns None when `workspace_id` does not exist.
    """
    if workspace_id is None:
        row = SavedWorkspace()
        db.add(row)
    else:
        row = db.get(SavedWorkspace, workspace_id)
        if row is None:
            return None
        row.updated_at = datetime.utcnow()
    if name is not None:
        row.name = name
    row.primer_count = len(state.records)
    row.state_blob = encode_state(state)
    db.commit()
    db.refresh(row)
    return row


def get_workspace(db: Session, workspace_id: int) -> SavedWorkspace | None:
    return db.get(SavedWorkspace, workspace_id)


def load_workspace(db: Session, workspace_id: int) -> WorkspaceState | None:
    """Decoded state of a stored workspace; raises StateDecodeError on a corrupt blob."""
    row = db.get(SavedWorkspace, workspace_id)
    if row is None:
        return None
    return decode_state(row.state_blob)


def list_workspaces(
    db: Session, *, q: Optional[str] = None, limit: int = 50, offset: int = 0
) -> tuple[int, list[SavedWorkspace]]:
    """Return (total, items), newest first, filtered by optional name substring q."""
    stmt = select(SavedWorkspace)
    count_stmt = select(func.count()).select_from(SavedWorkspace)
    if q:
        like = f"%{q}%"
        stmt = stmt.where(SavedWorkspace.name.ilike(like))
        count_stmt = count_stmt.where(SavedWorkspace.name.ilike(like))
    total = int(db.scalar(count_stmt) or 0)
    stmt = stmt.order_by(desc(SavedWorkspace.created_at), desc(SavedWorkspace.id)).limit(limit).offset(offset)
    items = list(db.execute(stmt).scalars())
    return total, items


def delete_workspace(db: Session, workspace_id: int) -> bool:
    res = db.execute(delete(SavedWorkspace).where(SavedWorkspace.id == workspace_id))
    db.commit()
    return res.rowcount > 0
