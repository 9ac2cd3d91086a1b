"""Markdown report rendering."""

from __future__ import annotations

from pathlib import Path

import polars as pl

from pmreport.analytics.statistics import AgeSummary
from pmreport.core.logging import get_logger

logger = get_logger(__name__)


def frame_to_markdown(df: pl.DataFrame) -> str:
    """Render a DataFrame as a Markdown table using Polars' table formatter."""
    with pl.Config(
        tbl_formatting="MARKDOWN",
        tbl_hide_column_data_types=True,
        tbl_hide_dataframe_shape=True,
        tbl_rows=-1,
        tbl_cols=-1,
        tbl_width_chars=1000,
        fmt_str_lengths=1000,
    ):
        return str(df)


def summary_frame(summary: AgeSummary) -> pl.DataFrame:
    rows = [
        ("Prime ministers", str(summary.count)),
        ("Mean age", f"{summary.mean:.2f}"),
        ("Median age", f"{summary.median:g}"),
        ("Standard deviation", "n/a" if summary.std is None else f"{summary.std:.2f}"),
    ]
    if summary.alive_count is not None:
        rows.append(("Alive", str(summary.alive_count)))
        rows.append(("Deceased", str(summary.deceased_count)))
    if summary.oldest is not None:
        rows.append(("Oldest", summary.oldest))
        rows.append(("Youngest", summary.youngest))
    return pl.DataFrame(rows, schema=["statistic", "value"], orient="row")


def render_markdown(
    records: pl.DataFrame,
    summary: AgeSummary,
    reference_year: int,
    chart_path: Path | None = None,
) -> str:
    """Assemble the report: records table, age summary and timeline image."""
    sections = [
        "# Prime Ministers of India: lifespans",
        f"Ages of living prime ministers are counted up to {reference_year}.",
        "## Prime ministers by birth year",
        frame_to_markdown(records.sort(["birth_year", "name"])),
        "## Age summary",
        frame_to_markdown(summary_frame(summary)),
    ]
    if chart_path is not None:
        sections.append("## Timeline")
        sections.append(f"![Lifespan timeline]({Path(chart_path).name})")
    return "\n\n".join(sections) + "\n"


def write_report(markdown: str, output_path: Path) -> Path:
    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(markdown, encoding="utf-8")
    logger.info("Report written", path=str(output_path))
    return output_path
