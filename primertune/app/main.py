# File: primertune/app/main.py
# Version: v0.4.0
"""
FastAPI app entry.

- Keeps route assembly in primertune/app/api/v1/api.py.
- Mounts /api/* via `api_router` and /api/v1/primers/* via the primers router.
- SQLite auto-heal is guarded by settings.SCHEMA_AUTOHEAL.
"""
from __future__ import annotations

import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from primertune.app.api.v1.api import api_router
from primertune.app.api.v1.primers.router import router as primers_router
from primertune.app.core.config import settings
from primertune.app.db.maintenance import ensure_schema_sqlite
from primertune.app.db.session import engine

logging.basicConfig(level=getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO))
log = logging.getLogger(__name__)

app = FastAPI(
    title=f"{settings.APP_NAME} API",
    version=settings.APP_VERSION,
    openapi_url=f"{settings.API_PREFIX}/openapi.json",
    docs_url=f"{settings.API_PREFIX}/docs",
)

# CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins_list,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(primers_router)


@app.get("/healthz")
def healthz():
    return {"status": "ok"}


# APIs under /api
app.include_router(api_router, prefix=settings.API_PREFIX)


@app.on_event("startup")
def _startup_autoheal() -> None:
    # Only try auto-heal if enabled AND using SQLite
    if engine.url.get_backend_name() == "sqlite" and settings.SCHEMA_AUTOHEAL:
        actions = ensure_schema_sqlite(engine)
        log.info("[schema-autoheal] %s", ", ".join(actions))
