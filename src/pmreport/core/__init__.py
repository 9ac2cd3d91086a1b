"""Core infrastructure shared by every pmreport step.

- Configuration management
- Logging
- Error handling
"""

from .config import AppConfig, get_config, reload_config
from .errors import (
    ConfigError,
    DataError,
    ExtractionError,
    FetchError,
    ParseError,
    ReportError,
    ValidationError,
)
from .logging import configure_logging, get_logger, set_run_id

__all__ = [
    # Config
    "AppConfig",
    "get_config",
    "reload_config",
    # Errors
    "ReportError",
    "FetchError",
    "ExtractionError",
    "ParseError",
    "ValidationError",
    "DataError",
    "ConfigError",
    # Logging
    "get_logger",
    "configure_logging",
    "set_run_id",
]
