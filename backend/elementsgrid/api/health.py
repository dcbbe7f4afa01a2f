"""Health check."""

from __future__ import annotations

from fastapi import APIRouter

from elementsgrid import __version__
from elementsgrid.catalog.elements import ELEMENTS
from elementsgrid.models.responses import HealthResponse

router = APIRouter()


@router.get("/health", response_model=HealthResponse)
async def health() -> HealthResponse:
    return HealthResponse(
        status="ok",
        version=__version__,
        elements_in_catalog=len(ELEMENTS),
    )
