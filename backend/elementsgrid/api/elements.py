"""GET /api/elements — the grid asset, whole or one element at a time."""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException

from elementsgrid.dependencies import get_cells
from elementsgrid.grid.assembler import GridCells
from elementsgrid.models.asset import ElementRecord, ElementsAsset

router = APIRouter()


@router.get("/elements", response_model=ElementsAsset)
async def list_elements(cells: GridCells = Depends(get_cells)) -> ElementsAsset:
    return ElementsAsset(elements=cells)


@router.get("/elements/{key}", response_model=ElementRecord)
async def get_element(key: str, cells: GridCells = Depends(get_cells)) -> ElementRecord:
    """Look up by atomic number ("26") or symbol ("fe", "Fe")."""
    number = int(key) if key.isascii() and key.isdecimal() else None
    for record in cells:
        if record is None:
            continue
        if record.number == number or record.symbol.lower() == key.lower():
            return record
    raise HTTPException(status_code=404, detail=f"No element {key!r} in the asset")
