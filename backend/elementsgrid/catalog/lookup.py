"""Derived-field lookups over the catalog tables, plus the static consistency check."""

from __future__ import annotations

import re
from collections.abc import Iterable

from elementsgrid.catalog.categories import CATEGORY_COLORS, CATEGORY_MEMBERS, Category
from elementsgrid.catalog.elements import CatalogEntry
from elementsgrid.catalog.titles import TITLE_OVERRIDES, WIKI_BASE_URL
from elementsgrid.catalog.weights import ATOMIC_WEIGHTS
from elementsgrid.errors import CatalogLookupError

_SYMBOL_RE = re.compile(r"^[A-Z][a-z]?$")


def _build_symbol_index(members: dict[Category, tuple[str, ...]]) -> dict[str, Category]:
    index: dict[str, Category] = {}
    for category, symbols in members.items():
        for symbol in symbols:
            # First category wins; duplicates are reported by validate_catalog()
            index.setdefault(symbol, category)
    return index


_SYMBOL_CATEGORY = _build_symbol_index(CATEGORY_MEMBERS)


def category_of(symbol: str) -> Category:
    try:
        return _SYMBOL_CATEGORY[symbol]
    except KeyError:
        raise CatalogLookupError(f"No category lists symbol {symbol!r}") from None


def colors_of(category: Category) -> tuple[int, int]:
    try:
        return CATEGORY_COLORS[category]
    except KeyError:
        raise CatalogLookupError(f"No colors for category {category!r}") from None


def atomic_weight_of(symbol: str) -> str:
    try:
        return ATOMIC_WEIGHTS[symbol]
    except KeyError:
        raise CatalogLookupError(f"No atomic weight for symbol {symbol!r}") from None


def title_of(name: str) -> str:
    """Wikipedia title for an element name (the name itself unless overridden)."""
    return TITLE_OVERRIDES.get(name, name)


def source_of(name: str) -> str:
    return f"{WIKI_BASE_URL}{title_of(name)}"


def validate_catalog(
    entries: Iterable[CatalogEntry],
    rows: int = 10,
    columns: int = 18,
) -> list[str]:
    """Check the hand-authored tables against each other.

    Returns a list of human-readable issues; an empty list means every entry
    resolves in every table and has its own in-bounds grid cell.
    """
    entries = list(entries)
    issues: list[str] = []

    seen_numbers: dict[int, str] = {}
    seen_symbols: set[str] = set()
    seen_names: set[str] = set()
    seen_cells: dict[tuple[int, int], str] = {}

    for e in entries:
        if e.number < 1:
            issues.append(f"{e.symbol}: atomic number {e.number} is not positive")
        if e.number in seen_numbers:
            issues.append(f"{e.symbol}: atomic number {e.number} already used by {seen_numbers[e.number]}")
        seen_numbers.setdefault(e.number, e.symbol)

        if not _SYMBOL_RE.match(e.symbol):
            issues.append(f"{e.symbol!r}: symbol must be one or two letters, capitalized")
        if e.symbol in seen_symbols:
            issues.append(f"{e.symbol}: duplicate symbol")
        seen_symbols.add(e.symbol)

        if e.name in seen_names:
            issues.append(f"{e.symbol}: duplicate name {e.name!r}")
        seen_names.add(e.name)

        if not (0 <= e.column < columns and 0 <= e.row < rows):
            issues.append(f"{e.symbol}: cell ({e.column}, {e.row}) outside {columns}x{rows} grid")
        cell = (e.column, e.row)
        if cell in seen_cells:
            issues.append(f"{e.symbol}: cell {cell} already taken by {seen_cells[cell]}")
        seen_cells.setdefault(cell, e.symbol)

        if e.symbol not in _SYMBOL_CATEGORY:
            issues.append(f"{e.symbol}: not listed in any category")
        if not ATOMIC_WEIGHTS.get(e.symbol):
            issues.append(f"{e.symbol}: no atomic weight")

    claimed: dict[str, Category] = {}
    for category, symbols in CATEGORY_MEMBERS.items():
        for symbol in symbols:
            if symbol in claimed:
                issues.append(f"{symbol}: listed in both {claimed[symbol].label} and {category.label}")
            claimed.setdefault(symbol, category)
            if symbol not in seen_symbols:
                issues.append(f"{symbol}: listed in {category.label} but not in the catalog")

    for category in Category:
        if len(CATEGORY_COLORS.get(category, ())) != 2:
            issues.append(f"{category.label}: needs exactly two colors")

    for symbol in ATOMIC_WEIGHTS:
        if symbol not in seen_symbols:
            issues.append(f"{symbol}: atomic weight given but not in the catalog")

    for name in TITLE_OVERRIDES:
        if name not in seen_names:
            issues.append(f"{name!r}: title override for a name not in the catalog")

    return issues
