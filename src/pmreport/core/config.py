"""Application configuration with environment support.

Configuration hierarchy:
    1. Environment variables (highest priority)
    2. .env file
    3. Built-in defaults
"""

from __future__ import annotations

from datetime import date
from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# ============================================================================
# Source Configuration
# ============================================================================


class SourceConfig(BaseSettings):
    """Where the prime ministers table comes from."""

    url: str = Field(
        default="https://en.wikipedia.org/wiki/List_of_prime_ministers_of_India",
        description="Page holding the prime ministers table",
    )
    table_selector: str = Field(
        default="table.wikitable",
        description="CSS selector of the table; the first match is used",
    )
    column_keyword: str = Field(
        default="Name",
        description="Substring identifying the biography column header",
    )
    timeout: int = Field(
        default=30,
        ge=1,
        description="HTTP request timeout in seconds",
    )
    user_agent: str = Field(
        default="Mozilla/5.0 (X11; Linux x86_64) AppleWebKit/537.36 pmreport/1.0",
        description="HTTP User-Agent header",
    )

    model_config = SettingsConfigDict(env_prefix="SOURCE_", extra="allow")


# ============================================================================
# Storage Configuration
# ============================================================================


class StorageConfig(BaseSettings):
    """Local storage configuration."""

    data_dir: Path = Field(
        default=Path("./data"),
        description="Directory holding the cached source document",
    )
    cache_file: str = Field(
        default="prime_ministers.html",
        description="File name of the cached HTML page",
    )

    @field_validator("data_dir", mode="before")
    @classmethod
    def ensure_data_dir_exists(cls, v: Path | str) -> Path:
        """Create data directory if it doesn't exist."""
        if isinstance(v, str):
            v = Path(v)
        v = v.resolve()
        v.mkdir(parents=True, exist_ok=True)
        return v

    @property
    def cache_path(self) -> Path:
        return self.data_dir / self.cache_file

    model_config = SettingsConfigDict(env_prefix="STORAGE_", extra="allow")


# ============================================================================
# Report Configuration
# ============================================================================


class ReportConfig(BaseSettings):
    """Report generation configuration."""

    reference_year: int = Field(
        default_factory=lambda: date.today().year,
        ge=1000,
        le=9999,
        description="As-of year used for the age of living prime ministers",
    )
    output_dir: Path = Field(
        default=Path("./reports"),
        description="Directory receiving the chart, tables and report",
    )
    chart_file: str = Field(default="timeline.png")
    report_file: str = Field(default="report.md")
    records_file: str = Field(
        default="prime_ministers.csv",
        description="Records export; .csv or .parquet",
    )

    model_config = SettingsConfigDict(env_prefix="REPORT_", extra="allow")


# ============================================================================
# Observability Configuration
# ============================================================================


class LoggingConfig(BaseSettings):
    """Logging configuration."""

    level: str = Field(
        default="INFO",
        description="Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)",
    )
    format: str = Field(
        default="console",
        description="Log format (json, console)",
    )

    @field_validator("level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level."""
        valid_levels = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        v_upper = v.upper()
        if v_upper not in valid_levels:
            raise ValueError(f"Invalid log level: {v}. Must be one of {valid_levels}")
        return v_upper

    @field_validator("format")
    @classmethod
    def validate_log_format(cls, v: str) -> str:
        v_lower = v.lower()
        if v_lower not in {"json", "console"}:
            raise ValueError(f"Invalid log format: {v}. Must be 'json' or 'console'")
        return v_lower

    model_config = SettingsConfigDict(env_prefix="LOG_", extra="allow")


# ============================================================================
# Unified Application Configuration
# ============================================================================


class AppConfig(BaseSettings):
    """Master configuration for pmreport.

    Sub-configurations are reachable as attributes:
        config.source.url
        config.storage.cache_path
        config.report.reference_year
    """

    source: SourceConfig = Field(default_factory=SourceConfig)
    storage: StorageConfig = Field(default_factory=StorageConfig)
    report: ReportConfig = Field(default_factory=ReportConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
        case_sensitive=False,
        extra="ignore",
    )


_config: AppConfig | None = None


def get_config() -> AppConfig:
    """Get the global application configuration, loading it on first use.

    Returns:
        AppConfig instance
    """
    global _config
    if _config is None:
        _config = AppConfig()
    return _config


def reload_config() -> AppConfig:
    """Reload configuration from environment.

    Useful for testing or after changing environment variables.

    Returns:
        New AppConfig instance
    """
    global _config
    _config = AppConfig()
    return _config
