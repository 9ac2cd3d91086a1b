"""Summary statistics over parsed records."""

from .statistics import AgeSummary, summarize_ages, summarize_records

__all__ = ["AgeSummary", "summarize_ages", "summarize_records"]
