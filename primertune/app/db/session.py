# File: primertune/app/db/session.py
# Version: v0.2.0
"""
SQLAlchemy engine and session factory.

- Uses SQLite by default (file path from settings.DB_URL).
- Provides `get_db()` FastAPI dependency to manage session lifecycle.
- Creates the parent directory if using SQLite file URLs.

Synchronous on purpose: stored workspaces are written one at a time, on demand.
"""
from __future__ import annotations

from pathlib import Path
from typing import Generator

from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker, Session

from primertune.app.core.config import settings

DB_URL = settings.DB_URL
if DB_URL.startswith("sqlite:///"):
    db_path = DB_URL.replace("sqlite:///", "", 1)
    db_dir = Path(db_path).resolve().parent
    db_dir.mkdir(parents=True, exist_ok=True)

engine = create_engine(DB_URL, future=True)
SessionLocal = sessionmaker(bind=engine, autoflush=False, autocommit=False, future=True)

def get_db() -> Generator[Session, None, None]:
    """Yield a database session and guarantee closing it after use."""
    db: Session = SessionLocal()
    try:
        yield db
    finally:
        db.close()
