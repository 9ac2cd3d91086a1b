"""Base class for scrapers."""

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any

from pmreport.core.logging import get_logger


class BaseScraper(ABC):
    """Common scaffolding for scrapers: a name and a bound logger."""

    def __init__(self, name: str) -> None:
        self.name = name
        self.logger = get_logger(f"pmreport.scrapers.{name}").bind(scraper=name)

    @abstractmethod
    def scrape(self, *args: Any, **kwargs: Any) -> Path:
        """Download the source and return the path of the persisted copy."""
