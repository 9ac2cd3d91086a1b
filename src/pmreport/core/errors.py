"""pmreport error hierarchy.

Every failure is terminal for a run; re-running the pipeline is the recovery.
"""

from __future__ import annotations
from typing import Optional


class ReportError(Exception):
    """Base exception for all pmreport errors.

    Attributes:
        message: Human-readable error description
        code: Machine-readable error code for logging
        retryable: Whether re-running the same step could succeed
        recovery_hint: Suggested recovery action
    """

    def __init__(
        self,
        message: str,
        code: str = "INTERNAL_ERROR",
        retryable: bool = False,
        recovery_hint: Optional[str] = None,
    ):
        self.message = message
        self.code = code
        self.retryable = retryable
        self.recovery_hint = recovery_hint
        super().__init__(message)

    def __str__(self) -> str:
        base = f"[{self.code}] {self.message}"
        if self.recovery_hint:
            base += f" ({self.recovery_hint})"
        return base


class FetchError(ReportError):
    """Raised when the source document cannot be retrieved.

    Examples:
        - Connection refused or timed out
        - HTTP error status
        - Empty response body
    """

    def __init__(
        self,
        url: str,
        message: str,
        retryable: bool = True,
        recovery_hint: Optional[str] = None,
    ):
        super().__init__(
            f"{url}: {message}",
            code="FETCH_ERROR",
            retryable=retryable,
            recovery_hint=recovery_hint or "Check network access and the source URL",
        )
        self.url = url


class ExtractionError(ReportError):
    """Raised when the expected table or column cannot be found."""

    def __init__(self, message: str, recovery_hint: Optional[str] = None):
        super().__init__(
            message,
            code="EXTRACTION_ERROR",
            retryable=False,
            recovery_hint=recovery_hint or "Check the table selector and column keyword",
        )


class ParseError(ReportError):
    """Raised when a raw biography string cannot be turned into a record.

    Attributes:
        raw: The offending raw string
    """

    def __init__(self, raw: str, reason: str):
        super().__init__(
            f"Cannot parse biography {raw!r}: {reason}",
            code="PARSE_ERROR",
            retryable=False,
            recovery_hint="Inspect the source table for a changed cell format",
        )
        self.raw = raw
        self.reason = reason


class ValidationError(ReportError):
    """Raised when derived data violates an expectation.

    Examples:
        - Summary statistics requested over zero records
    """

    def __init__(
        self,
        message: str,
        details: Optional[dict] = None,
        recovery_hint: Optional[str] = None,
    ):
        super().__init__(
            message,
            code="VALIDATION_ERROR",
            retryable=False,
            recovery_hint=recovery_hint,
        )
        self.details = details or {}


class DataError(ReportError):
    """Raised on local read/write failures."""

    def __init__(
        self,
        message: str,
        retryable: bool = False,
        recovery_hint: Optional[str] = None,
    ):
        super().__init__(
            message,
            code="DATA_ERROR",
            retryable=retryable,
            recovery_hint=recovery_hint or "Check the data directory and file format",
        )


class ConfigError(ReportError):
    """Raised on configuration errors."""

    def __init__(self, message: str, recovery_hint: Optional[str] = None):
        super().__init__(
            message,
            code="CONFIG_ERROR",
            retryable=False,
            recovery_hint=recovery_hint or "Check environment variables and the .env file",
        )
