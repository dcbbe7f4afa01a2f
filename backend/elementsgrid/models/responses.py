"""API response models."""

from __future__ import annotations

from pydantic import BaseModel, Field

from elementsgrid import __version__


class HealthResponse(BaseModel):
    status: str = "ok"
    version: str = __version__
    elements_in_catalog: int = 0


class CategoryLegend(BaseModel):
    label: str
    colors: tuple[int, int]
    symbols: list[str] = Field(default_factory=list)
