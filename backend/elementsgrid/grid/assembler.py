"""Place catalog entries on the periodic table grid.

The grid is a flat list stored column-major: cell (column, row) lives at
``column * rows + row``. Consumers rebuild the 2-D layout from list position
and the row count alone, so this encoding must not change.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping

from elementsgrid.catalog.elements import CatalogEntry
from elementsgrid.catalog.lookup import (
    atomic_weight_of,
    category_of,
    colors_of,
    source_of,
    title_of,
)
from elementsgrid.errors import CatalogLookupError, MissingExtractError, PlacementError
from elementsgrid.models.asset import ElementRecord

logger = logging.getLogger(__name__)

GridCells = list[ElementRecord | None]


def grid_index(column: int, row: int, rows: int) -> int:
    return column * rows + row


def grid_position(index: int, rows: int) -> tuple[int, int]:
    """Inverse of grid_index: (column, row)."""
    return divmod(index, rows)


def to_record(entry: CatalogEntry, extract: str) -> ElementRecord:
    """Resolve every derived field of an entry into its output record."""
    category = category_of(entry.symbol)
    fields = {
        "source": source_of(entry.name),
        "category": category.label,
        "atomic_weight": atomic_weight_of(entry.symbol),
    }
    for field, value in fields.items():
        if not value:
            raise CatalogLookupError(f"{entry.symbol}: empty {field}")

    return ElementRecord(
        number=entry.number,
        name=entry.name,
        symbol=entry.symbol,
        extract=extract,
        colors=colors_of(category),
        **fields,
    )


def assemble(
    entries: Iterable[CatalogEntry],
    extracts: Mapping[str, str],
    rows: int,
    columns: int,
) -> GridCells:
    """Build the dense rows x columns grid, ``None`` for empty cells."""
    size = rows * columns
    cells: GridCells = [None] * size
    placed: dict[int, str] = {}

    for entry in entries:
        if not (0 <= entry.column < columns and 0 <= entry.row < rows):
            raise PlacementError(
                f"{entry.symbol}: cell ({entry.column}, {entry.row}) is outside "
                f"the {columns}x{rows} grid"
            )
        index = grid_index(entry.column, entry.row, rows)
        if index in placed:
            raise PlacementError(
                f"{entry.symbol}: cell ({entry.column}, {entry.row}) is already "
                f"taken by {placed[index]}"
            )

        title = title_of(entry.name)
        if title not in extracts:
            raise MissingExtractError(entry.symbol, title)

        cells[index] = to_record(entry, extracts[title])
        placed[index] = entry.symbol

    logger.debug("Placed %d element(s) in %d cell(s)", len(placed), size)
    return cells
