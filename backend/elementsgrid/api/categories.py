"""GET /api/categories — category legend for the grid colors."""

from __future__ import annotations

from fastapi import APIRouter

from elementsgrid.catalog.categories import CATEGORY_MEMBERS, Category
from elementsgrid.catalog.lookup import colors_of
from elementsgrid.models.responses import CategoryLegend

router = APIRouter()


@router.get("/categories", response_model=list[CategoryLegend])
async def categories() -> list[CategoryLegend]:
    return [
        CategoryLegend(
            label=category.label,
            colors=colors_of(category),
            symbols=list(CATEGORY_MEMBERS[category]),
        )
        for category in Category
    ]
