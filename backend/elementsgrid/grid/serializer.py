"""Read and write the elementsGrid.json asset."""

from __future__ import annotations

import json
import logging
import os
import tempfile
from pathlib import Path
from typing import Any

from elementsgrid.grid.assembler import GridCells
from elementsgrid.models.asset import ElementsAsset

logger = logging.getLogger(__name__)


def serialize_grid(cells: GridCells) -> dict[str, Any]:
    """Asset object in grid index order; empty cells stay ``None``."""
    return {
        "elements": [
            cell.model_dump(mode="json") if cell is not None else None
            for cell in cells
        ],
    }


def write_asset(cells: GridCells, path: str | Path) -> Path:
    """Write the asset as indented UTF-8 JSON, replacing the target atomically."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    text = json.dumps(serialize_grid(cells), indent=2, ensure_ascii=False)

    fd, tmp = tempfile.mkstemp(prefix=".elementsGrid_", suffix=".json", dir=path.parent)
    try:
        with os.fdopen(fd, "w", encoding="utf-8") as f:
            f.write(text)
        os.replace(tmp, path)
    except BaseException:
        Path(tmp).unlink(missing_ok=True)
        raise

    logger.info("Wrote to output file %s", path)
    return path


def decode_asset(data: dict[str, Any] | str | bytes) -> GridCells:
    """Validate an asset (parsed or raw JSON) and return its cells."""
    if isinstance(data, (str, bytes)):
        asset = ElementsAsset.model_validate_json(data)
    else:
        asset = ElementsAsset.model_validate(data)
    return asset.elements


def load_asset(path: str | Path) -> GridCells:
    return decode_asset(Path(path).read_bytes())
