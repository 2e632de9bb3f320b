# File: primertune/app/api/v1/api.py
# Version: v0.8.0
"""
v1 API aggregator.

Routers included under /api:
- health
- workspaces (stored primer workspaces)

The stateless primer endpoints carry their own /api/v1/primers prefix and are
mounted by main.py.
"""
from __future__ import annotations

from fastapi import APIRouter

from . import health as health_router
from . import workspaces as workspaces_router

# All v1 JSON APIs live under /api via api_router
api_router = APIRouter()
api_router.include_router(health_router.router)
api_router.include_router(workspaces_router.router)
