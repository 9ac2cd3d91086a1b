"""Tabular export of parsed records."""

from pathlib import Path

import polars as pl
import structlog

from pmreport.core.errors import DataError

logger = structlog.get_logger()

SUPPORTED_SUFFIXES = {".csv", ".parquet"}


def write_records(df: pl.DataFrame, output_path: str | Path) -> Path:
    """
    Write the records DataFrame, picking the format from the file suffix.

    Args:
        df: Records DataFrame (name, birth_year, death_year, alive, age)
        output_path: Target file ending in .csv or .parquet

    Returns:
        Path to the written file

    Raises:
        DataError: If the suffix is unsupported or the write fails

    Example:
        >>> write_records(frame, "reports/prime_ministers.csv")
    """
    output_path = Path(output_path)
    suffix = output_path.suffix.lower()
    if suffix not in SUPPORTED_SUFFIXES:
        raise DataError(
            f"Unsupported records format {suffix or '(none)'!r}",
            recovery_hint=f"Use one of {sorted(SUPPORTED_SUFFIXES)}",
        )

    output_path.parent.mkdir(parents=True, exist_ok=True)
    try:
        if suffix == ".csv":
            df.write_csv(output_path)
        else:
            df.write_parquet(output_path)
    except OSError as e:
        raise DataError(f"Cannot write records to {output_path}: {e}") from e

    logger.info("Wrote records", path=str(output_path), rows=len(df))
    return output_path
