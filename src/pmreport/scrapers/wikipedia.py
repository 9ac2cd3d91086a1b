"""Wikipedia page scraper.

Downloads one page and stores it verbatim on disk so that later steps, and
later runs, work from the cached copy.
"""

from __future__ import annotations

from pathlib import Path

import httpx

from pmreport.core.config import SourceConfig, StorageConfig
from pmreport.core.errors import DataError, FetchError
from pmreport.scrapers.base import BaseScraper
from pmreport.utils.metrics import cache_hits, fetch_duration, pages_downloaded


class WikipediaScraper(BaseScraper):
    """Scraper for a single Wikipedia page."""

    def __init__(
        self,
        source: SourceConfig,
        storage: StorageConfig,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        """Initialize the scraper.

        Args:
            source: URL, timeout and User-Agent of the page
            storage: Location of the cache file
            transport: Optional httpx transport, used by tests to fake HTTP
        """
        super().__init__("wikipedia")
        self.source = source
        self.cache_path = storage.cache_path
        self._transport = transport

    def scrape(self, refresh: bool = False) -> Path:
        """Return the path of the cached page, downloading it when needed.

        Args:
            refresh: Download again even if a cached copy exists

        Returns:
            Path to the cached HTML file

        Raises:
            FetchError: If the page is unreachable, returns an error status or is empty
        """
        if not refresh and self.cache_path.exists() and self.cache_path.stat().st_size > 0:
            self.logger.info("Using cached page", path=str(self.cache_path))
            cache_hits.labels(source=self.name).inc()
            return self.cache_path

        with fetch_duration.labels(source=self.name).time():
            content = self._download(self.source.url)

        self.cache_path.parent.mkdir(parents=True, exist_ok=True)
        self.cache_path.write_bytes(content)

        pages_downloaded.labels(source=self.name).inc()
        self.logger.info("Cached page", path=str(self.cache_path), size=len(content))
        return self.cache_path

    def _download(self, url: str) -> bytes:
        headers = {
            "User-Agent": self.source.user_agent,
            "Accept": "text/html,application/xhtml+xml,application/xml;q=0.9,*/*;q=0.8",
            "Accept-Language": "en-US,en;q=0.9",
        }

        self.logger.info("Downloading page", url=url)

        try:
            with httpx.Client(
                timeout=self.source.timeout,
                follow_redirects=True,
                transport=self._transport,
            ) as client:
                response = client.get(url, headers=headers)
                response.raise_for_status()
        except httpx.HTTPStatusError as e:
            raise FetchError(
                url,
                f"HTTP {e.response.status_code}",
                retryable=e.response.status_code >= 500,
            ) from e
        except httpx.HTTPError as e:
            raise FetchError(url, str(e) or e.__class__.__name__) from e

        if not response.content.strip():
            raise FetchError(url, "empty response body")

        return response.content


def read_cached_page(path: Path) -> str:
    """Read a cached HTML document.

    Raises:
        FetchError: If the file is empty
        DataError: If the file cannot be read
    """
    try:
        html = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise DataError(f"Cannot read cached page {path}: {e}") from e

    if not html.strip():
        raise FetchError(str(path), "cached document is empty", retryable=False)
    return html
