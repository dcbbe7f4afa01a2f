"""Master API router — mounts all endpoint routers."""

from __future__ import annotations

from fastapi import APIRouter

from elementsgrid.api import categories, elements, health

api_router = APIRouter(prefix="/api")

api_router.include_router(health.router)
api_router.include_router(elements.router)
api_router.include_router(categories.router)
