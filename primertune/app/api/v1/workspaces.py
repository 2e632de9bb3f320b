# File: primertune/app/api/v1/workspaces.py
# Version: v0.1.0
"""
Stored workspaces API.

Endpoints
---------
POST   /workspaces                 Store a workspace state (new row)
PUT    /workspaces/{workspace_id}  Overwrite a stored workspace
GET    /workspaces                 List stored workspaces (with pagination)
GET    /workspaces/{workspace_id}  Decoded workspace state
DELETE /workspaces/{workspace_id}  Delete a stored workspace
"""
from __future__ import annotations

import logging
from datetime import datetime
from typing import Optional, List

from fastapi import APIRouter, Depends, HTTPException, Query, Response, status
from pydantic import BaseModel, Field
from sqlalchemy.orm import Session

from primertune.app.core.primer.schemas import WorkspaceState
from primertune.app.core.primer.state_codec import StateDecodeError
from primertune.app.db.session import get_db
from primertune.app.services import workspace_store

log = logging.getLogger(__name__)

router = APIRouter(prefix="/workspaces", tags=["workspaces"])


# ---------- Schemas ----------
class WorkspaceSaveRequest(BaseModel):
    name: Optional[str] = Field(None, max_length=120)
    state: WorkspaceState


class WorkspaceItem(BaseModel):
    id: int
    name: Optional[str] = None
    primer_count: int
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True


class WorkspaceListResponse(BaseModel):
    items: List[WorkspaceItem]
    total: int


class WorkspaceDetail(WorkspaceItem):
    state: WorkspaceState


# ---------- Endpoints ----------
@router.post("", response_model=WorkspaceItem, status_code=status.HTTP_201_CREATED)
def create_workspace(payload: WorkspaceSaveRequest, db: Session = Depends(get_db)):
    row = workspace_store.save_workspace(db, state=payload.state, name=payload.name)
    return WorkspaceItem.model_validate(row)


@router.put("/{workspace_id}", response_model=WorkspaceItem)
def update_workspace(workspace_id: int, payload: WorkspaceSaveRequest, db: Session = Depends(get_db)):
    row = workspace_store.save_workspace(db, state=payload.state, name=payload.name, workspace_id=workspace_id)
    if row is None:
        raise HTTPException(status_code=404, detail="Workspace not found")
    return WorkspaceItem.model_validate(row)


@router.get("", response_model=WorkspaceListResponse)
def list_workspaces(
    response: Response,
    db: Session = Depends(get_db),
    limit: int = Query(50, ge=1, le=500),
    offset: int = Query(0, ge=0),
    q: Optional[str] = Query(None, description="Filter by name substring"),
):
    """Return stored workspaces, newest first."""
    total, rows = workspace_store.list_workspaces(db, q=q, limit=limit, offset=offset)
    # The UI expects fresh lists
    response.headers["Cache-Control"] = "no-store"
    return WorkspaceListResponse(items=[WorkspaceItem.model_validate(r) for r in rows], total=total)


@router.get("/{workspace_id}", response_model=WorkspaceDetail)
def get_workspace(workspace_id: int, db: Session = Depends(get_db)):
    row = workspace_store.get_workspace(db, workspace_id)
    if row is None:
        raise HTTPException(status_code=404, detail="Workspace not found")
    try:
        state = workspace_store.load_workspace(db, workspace_id)
    except StateDecodeError as ex:
        log.error("Stored workspace %d is unreadable: %s", workspace_id, ex)
        raise HTTPException(status_code=422, detail=str(ex))
    item = WorkspaceItem.model_validate(row)
    return WorkspaceDetail(**item.model_dump(), state=state)


@router.delete("/{workspace_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_workspace(workspace_id: int, db: Session = Depends(get_db)):
    if not workspace_store.delete_workspace(db, workspace_id):
        raise HTTPException(status_code=404, detail="Workspace not found")
    return Response(status_code=status.HTTP_204_NO_CONTENT)
