"""Grid placement and asset serialization."""

from elementsgrid.grid.assembler import (
    GridCells,
    assemble,
    grid_index,
    grid_position,
    to_record,
)
from elementsgrid.grid.serializer import decode_asset, load_asset, serialize_grid, write_asset

__all__ = [
    "GridCells",
    "assemble",
    "decode_asset",
    "grid_index",
    "grid_position",
    "load_asset",
    "serialize_grid",
    "to_record",
    "write_asset",
]
