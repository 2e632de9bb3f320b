# File: primertune/tests/conftest.py
# Version: v0.2.0
"""
Test bootstrap: ensure project root is on sys.path so 'primertune.*' imports work.

Also provides:
- `session_factory`: an in-memory SQLite database with every table created
- `client`: a TestClient whose DB sessions and primer parameters are isolated
  from the on-disk database and JSON files
"""
import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[2]  # repo root (../.. from this file)
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402
from sqlalchemy import create_engine  # noqa: E402
from sqlalchemy.orm import sessionmaker  # noqa: E402
from sqlalchemy.pool import StaticPool  # noqa: E402

import primertune.app.db.models  # noqa: E402,F401
from primertune.app.api.v1.primers.deps import current_params  # noqa: E402
from primertune.app.core.primer.parameters import PrimerDesignParameters  # noqa: E402
from primertune.app.db.base import Base  # noqa: E402
from primertune.app.db.session import get_db  # noqa: E402
from primertune.app.main import app  # noqa: E402


@pytest.fixture()
def session_factory():
    engine = create_engine(
        "sqlite://", connect_args={"check_same_thread": False}, poolclass=StaticPool, future=True
    )
    Base.metadata.create_all(engine)
    factory = sessionmaker(bind=engine, autoflush=False, autocommit=False, future=True)
    yield factory
    engine.dispose()


@pytest.fixture()
def client(session_factory):
    def _get_db():
        db = session_factory()
        try:
            yield db
        finally:
            db.close()

    app.dependency_overrides[get_db] = _get_db
    app.dependency_overrides[current_params] = lambda: PrimerDesignParameters()
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture()
def params_paths(tmp_path, monkeypatch):
    """Point the primer parameter files at a temp dir (defaults copied from the repo)."""
    from primertune.app.core.config import settings

    default_src = Path(settings.PRIMER_PARAMS_DEFAULT_PATH)
    default_dst = tmp_path / "primers_param_default.json"
    default_dst.write_text(default_src.read_text(encoding="utf-8"), encoding="utf-8")
    current = tmp_path / "primers_param.json"
    monkeypatch.setattr(settings, "PRIMER_PARAMS_DEFAULT_PATH", default_dst)
    monkeypatch.setattr(settings, "PRIMER_PARAMS_PATH", current)
    return default_dst, current
