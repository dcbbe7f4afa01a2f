"""The elementsGrid.json wire format."""

from __future__ import annotations

from pydantic import BaseModel, Field


class ElementRecord(BaseModel):
    """One fully enriched element, as stored in a grid cell."""

    number: int
    name: str
    symbol: str
    extract: str
    source: str
    category: str
    atomic_weight: str
    colors: tuple[int, int]  # packed ARGB


class ElementsAsset(BaseModel):
    """Column-major grid of cells; ``None`` marks an empty cell."""

    elements: list[ElementRecord | None] = Field(default_factory=list)
