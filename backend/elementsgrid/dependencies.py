"""FastAPI dependency injection."""

from __future__ import annotations

from fastapi import Depends, HTTPException

from elementsgrid.config import Settings, settings
from elementsgrid.grid.assembler import GridCells
from elementsgrid.grid.serializer import load_asset


def get_settings() -> Settings:
    return settings


def get_cells(config: Settings = Depends(get_settings)) -> GridCells:
    try:
        return load_asset(config.output_path)
    except FileNotFoundError:
        raise HTTPException(
            status_code=503,
            detail=f"Asset {config.output_path} not built yet; run `elementsgrid build`",
        ) from None
