"""pmreport - lifespan report of the Prime Ministers of India.

Scrapes the Wikipedia list of prime ministers, parses the biography column
into structured records, summarizes ages and renders a timeline chart.

## Layers

1. **Core** (`pmreport.core`): configuration, logging, errors
2. **Scrapers** (`pmreport.scrapers`): cached page download
3. **Parsers** (`pmreport.parsers`): HTML table extraction, biography parsing
4. **Analytics** (`pmreport.analytics`): age statistics
5. **Report** (`pmreport.report`): timeline chart, Markdown report
6. **Storage** (`pmreport.storage`): records export

## Quick Start

```python
from pmreport.parsers import parse_biography

record = parse_biography("Narendra Modi(born 1950) MP for Varanasi", reference_year=2024)
record.age  # 74
```
"""

__version__ = "1.0.0"

from .core import (
    AppConfig,
    ConfigError,
    DataError,
    ExtractionError,
    FetchError,
    ParseError,
    ReportError,
    ValidationError,
    configure_logging,
    get_config,
    get_logger,
    reload_config,
)

__all__ = [
    "__version__",
    "AppConfig",
    "get_config",
    "reload_config",
    "configure_logging",
    "get_logger",
    "ReportError",
    "FetchError",
    "ExtractionError",
    "ParseError",
    "ValidationError",
    "DataError",
    "ConfigError",
]
