"""HTML table extraction.

Converts one HTML table into a DataFrame of raw text cells. The table is
picked with a CSS selector and handed to ``pandas.read_html``, which copies
cells spanning several rows or columns into every position they cover, so a
prime minister who served several terms shows up once per term.
"""

from __future__ import annotations

import io
from pathlib import Path

import pandas as pd
import polars as pl
from bs4 import BeautifulSoup

from pmreport.core.errors import ExtractionError
from pmreport.core.logging import get_logger
from pmreport.parsers.base_parser import Parser
from pmreport.scrapers.wikipedia import read_cached_page

logger = get_logger(__name__)


class HtmlTableExtractor(Parser):
    """Extract a table selected by CSS selector into a string DataFrame.

    Attributes:
        SCHEMA_VERSION: Parser schema version for tracking compatibility.
    """

    SCHEMA_VERSION = "v1.0"

    def __init__(self, selector: str = "table.wikitable") -> None:
        self.selector = selector

    def parse(self, file_path: Path) -> pl.DataFrame:
        """Parse the cached document at ``file_path``.

        Raises:
            ExtractionError: If no table matches or the table has no data rows
        """
        logger.info("Extracting table", file=str(file_path), selector=self.selector)
        return self.extract(read_cached_page(file_path))

    def extract(self, html: str) -> pl.DataFrame:
        """Extract the first matching table of an HTML string."""
        soup = BeautifulSoup(html, "html.parser")
        table = soup.select_one(self.selector)
        if table is None:
            raise ExtractionError(f"No table matches selector {self.selector!r}")

        try:
            # Empty cells stay "" rather than NaN
            frame = pd.read_html(io.StringIO(str(table)), flavor="bs4", keep_default_na=False)[0]
        except ValueError as e:
            raise ExtractionError(f"Table {self.selector!r} cannot be read: {e}") from e

        if pd.api.types.is_integer_dtype(frame.columns.dtype):
            raise ExtractionError(f"Table {self.selector!r} has no header row")
        if frame.empty:
            raise ExtractionError(f"Table {self.selector!r} has no data rows")

        names = [_column_name(column, index) for index, column in enumerate(frame.columns)]
        duplicated = sorted({name for name in names if names.count(name) > 1})
        if duplicated:
            raise ExtractionError(
                f"Table {self.selector!r} has duplicate column headers {duplicated}",
                recovery_hint="Select a table whose header cells are distinct",
            )
        frame.columns = names

        df = pl.from_pandas(frame.astype(str))
        logger.info("Extracted table", rows=df.height, columns=df.width)
        return df


def find_column(df: pl.DataFrame, keyword: str) -> str:
    """Return the first column whose header contains ``keyword`` (case-insensitive)."""
    needle = keyword.casefold()
    for column in df.columns:
        if needle in column.casefold():
            return column
    raise ExtractionError(
        f"No column header contains {keyword!r}",
        recovery_hint=f"Available columns: {df.columns}",
    )


def biography_strings(df: pl.DataFrame, keyword: str = "Name") -> list[str]:
    """Pull the unique, non-blank cells of the biography column.

    Order of first occurrence is kept.

    Raises:
        ExtractionError: If the column is missing or holds no usable cells
    """
    column = find_column(df, keyword)
    seen: dict[str, None] = {}
    for value in df.get_column(column).drop_nulls().str.strip_chars().to_list():
        if value:
            seen.setdefault(value, None)

    if not seen:
        raise ExtractionError(f"Column {column!r} has no non-blank cells")

    logger.info("Collected biography strings", column=column, unique=len(seen), rows=df.height)
    return list(seen)


def _column_name(column: object, index: int) -> str:
    """Flatten a (possibly multi-row) header into one name.

    Repeated levels from ``rowspan`` collapse, so ("No.", "No.") becomes
    "No." and ("Term of office", "Left office") "Term of office Left office".
    """
    levels = column if isinstance(column, tuple) else (column,)
    parts: list[str] = []
    for level in levels:
        text = " ".join(str(level).split())
        # pandas fills empty header cells with "Unnamed: ..."
        if text and not text.startswith("Unnamed:") and text not in parts:
            parts.append(text)
    return " ".join(parts) or f"column_{index}"
