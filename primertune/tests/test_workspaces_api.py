# File: primertune/tests/test_workspaces_api.py
# Version: v0.1.0
"""
Stored workspaces API (in-memory SQLite).
"""
from __future__ import annotations

from primertune.app.core.primer.schemas import WorkspaceState
from primertune.app.core.primer.workspace import PrimerWorkspace
from primertune.app.db.models import SavedWorkspace
from primertune.app.services.workspace_store import list_workspaces, load_workspace, save_workspace

TARGET = "GATCCGTACGTTAGCATGCCTAGGACTTGACCAGTATCGA"


def _state_payload() -> dict:
    ws = PrimerWorkspace()
    ws.set_sequence_text(TARGET)
    ws.make_amplification_primers()
    return ws.to_state().model_dump(mode="json")


def test_store_list_get_delete(client):
    r = client.post("/api/workspaces", json={"name": "pUC19 amplicon", "state": _state_payload()})
    assert r.status_code == 201
    created = r.json()
    assert created["primer_count"] == 2
    ws_id = created["id"]

    r = client.get("/api/workspaces")
    assert r.status_code == 200
    data = r.json()
    assert data["total"] == 1
    assert data["items"][0]["name"] == "pUC19 amplicon"
    assert r.headers["Cache-Control"] == "no-store"

    r = client.get(f"/api/workspaces/{ws_id}")
    assert r.status_code == 200
    detail = r.json()
    assert detail["state"]["seq"] == TARGET
    assert [x["description"] for x in detail["state"]["records"]] == ["Amplification Fwd", "Amplification Rev"]

    # The stored state restores into a working workspace
    restored = PrimerWorkspace.from_state(WorkspaceState.model_validate(detail["state"]))
    assert len(restored.records) == 2

    assert client.delete(f"/api/workspaces/{ws_id}").status_code == 204
    assert client.get(f"/api/workspaces/{ws_id}").status_code == 404
    assert client.delete(f"/api/workspaces/{ws_id}").status_code == 404


def test_update_workspace(client):
    ws_id = client.post("/api/workspaces", json={"name": "draft", "state": _state_payload()}).json()["id"]
    empty = PrimerWorkspace().to_state().model_dump(mode="json")
    r = client.put(f"/api/workspaces/{ws_id}", json={"name": "final", "state": empty})
    assert r.status_code == 200
    assert r.json()["name"] == "final"
    assert r.json()["primer_count"] == 0
    assert client.put("/api/workspaces/999", json={"state": empty}).status_code == 404


def test_invalid_state_is_rejected(client):
    bad = _state_payload()
    bad["ionConcentrations"]["monovalent"] = 0
    assert client.post("/api/workspaces", json={"state": bad}).status_code == 422


def test_corrupt_blob_reports_422(client, session_factory):
    db = session_factory()
    try:
        row = SavedWorkspace(name="broken", primer_count=0, state_blob=b"\x00\x01")
        db.add(row)
        db.commit()
        ws_id = row.id
    finally:
        db.close()
    r = client.get(f"/api/workspaces/{ws_id}")
    assert r.status_code == 422


def test_store_helpers_filter_by_name(session_factory):
    db = session_factory()
    try:
        state = PrimerWorkspace().to_state()
        save_workspace(db, state=state, name="GFP insert")
        save_workspace(db, state=state, name="mCherry insert")
        save_workspace(db, state=state, name="backbone")
        total, items = list_workspaces(db, q="insert")
        assert total == 2
        assert {i.name for i in items} == {"GFP insert", "mCherry insert"}
        assert load_workspace(db, items[0].id) == state
        assert load_workspace(db, 12345) is None
    finally:
        db.close()
