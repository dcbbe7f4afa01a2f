"""Static element catalog and its lookup tables."""

from elementsgrid.catalog.categories import CATEGORY_COLORS, CATEGORY_MEMBERS, Category
from elementsgrid.catalog.elements import ELEMENTS, CatalogEntry
from elementsgrid.catalog.lookup import (
    atomic_weight_of,
    category_of,
    colors_of,
    source_of,
    title_of,
    validate_catalog,
)

__all__ = [
    "CATEGORY_COLORS",
    "CATEGORY_MEMBERS",
    "Category",
    "CatalogEntry",
    "ELEMENTS",
    "atomic_weight_of",
    "category_of",
    "colors_of",
    "source_of",
    "title_of",
    "validate_catalog",
]
