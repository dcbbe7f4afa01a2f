"""Element name -> Wikipedia title overrides.

Names without an override are already suitable Wikipedia titles.
"""

from __future__ import annotations

WIKI_BASE_URL = "https://en.wikipedia.org/wiki/"

TITLE_OVERRIDES: dict[str, str] = {
    "Mercury": "Mercury (element)",
}
