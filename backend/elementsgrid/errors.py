"""Error taxonomy for the asset build. Every error here is fatal for a run."""

from __future__ import annotations


class ElementsGridError(Exception):
    """Base class for all build errors."""


class CatalogLookupError(ElementsGridError, LookupError):
    """A derived field (category, weight, ...) has no entry in its table."""


class CatalogError(ElementsGridError):
    """Static catalog validation found authoring defects."""

    def __init__(self, issues: list[str]) -> None:
        self.issues = list(issues)
        summary = "; ".join(self.issues[:5])
        if len(self.issues) > 5:
            summary += f"; ... ({len(self.issues) - 5} more)"
        super().__init__(f"Catalog has {len(self.issues)} issue(s): {summary}")


class PlacementError(ElementsGridError):
    """Grid coordinate is out of bounds or already taken."""


class MissingExtractError(ElementsGridError):
    """A catalog entry has no extract in the fetch results."""

    def __init__(self, symbol: str, title: str) -> None:
        self.symbol = symbol
        self.title = title
        super().__init__(f"No extract for {symbol} (title {title!r})")


class FetchError(ElementsGridError):
    """Network, status or parse failure while fetching extracts."""

    def __init__(self, message: str, titles: list[str] | None = None) -> None:
        self.titles = list(titles or [])
        super().__init__(message)
