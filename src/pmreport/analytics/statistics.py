"""Age statistics over parsed prime minister records, computed with Polars."""

from __future__ import annotations

import math
from collections.abc import Iterable, Sequence
from dataclasses import dataclass

import polars as pl

from pmreport.core.errors import ValidationError
from pmreport.core.logging import get_logger
from pmreport.parsers.biography_parser import PrimeMinisterRecord

logger = get_logger(__name__)


@dataclass(frozen=True)
class AgeSummary:
    """Summary statistics of ages.

    Attributes:
        count: Number of ages summarized
        mean: Arithmetic mean, rounded to 2 decimals
        median: Median age
        std: Sample standard deviation (N-1); None for a single value
        alive_count: Living prime ministers, when summarizing records
        deceased_count: Deceased prime ministers, when summarizing records
        oldest: Name of the record with the highest age
        youngest: Name of the record with the lowest age
    """

    count: int
    mean: float
    median: float
    std: float | None
    alive_count: int | None = None
    deceased_count: int | None = None
    oldest: str | None = None
    youngest: str | None = None


def summarize_ages(ages: Iterable[int]) -> AgeSummary:
    """Compute mean, median and sample standard deviation of ages.

    Example:
        >>> summarize_ages([75, 74, 90, 83]).median
        79.0

    Raises:
        ValidationError: If there are no ages
    """
    series = pl.Series("age", list(ages), dtype=pl.Int64)
    if len(series) == 0:
        raise ValidationError("Cannot summarize an empty set of ages")

    std = series.std(ddof=1)
    summary = AgeSummary(
        count=len(series),
        mean=round(float(series.mean()), 2),
        median=float(series.median()),
        std=None if std is None or math.isnan(std) else float(std),
    )
    logger.debug("Summarized ages", count=summary.count, mean=summary.mean)
    return summary


def summarize_records(records: Sequence[PrimeMinisterRecord]) -> AgeSummary:
    """Summarize record ages and add alive/deceased counts and extremes.

    Ties for oldest/youngest go to the earliest-born record.

    Raises:
        ValidationError: If there are no records
    """
    if not records:
        raise ValidationError("Cannot summarize an empty set of records")

    base = summarize_ages(record.age for record in records)
    oldest = max(records, key=lambda record: (record.age, -record.birth_year))
    youngest = min(records, key=lambda record: (record.age, record.birth_year))
    alive_count = sum(1 for record in records if record.alive)

    summary = AgeSummary(
        count=base.count,
        mean=base.mean,
        median=base.median,
        std=base.std,
        alive_count=alive_count,
        deceased_count=base.count - alive_count,
        oldest=oldest.name,
        youngest=youngest.name,
    )
    logger.info(
        "Summarized records",
        count=summary.count,
        mean=summary.mean,
        median=summary.median,
        std=summary.std,
    )
    return summary
