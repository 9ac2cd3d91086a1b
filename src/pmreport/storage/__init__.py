"""Local storage of run artifacts."""

from .records_io import write_records

__all__ = ["write_records"]
