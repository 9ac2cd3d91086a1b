"""Source document retrieval.

- `base.py`: scraper scaffolding
- `wikipedia.py`: single-page download with an on-disk cache
"""

from .base import BaseScraper
from .wikipedia import WikipediaScraper, read_cached_page

__all__ = [
    "BaseScraper",
    "WikipediaScraper",
    "read_cached_page",
]
