"""End-to-end report pipeline.

fetch (or reuse cache) -> extract table -> parse biographies -> summarize
-> chart -> Markdown report -> export records

Every step either completes or raises a `ReportError`; nothing is retried.
Artifacts are written to a staging directory and moved into the output
directory only once all of them exist.
"""

from __future__ import annotations

import tempfile
from dataclasses import dataclass
from pathlib import Path

import httpx
import polars as pl

from pmreport.analytics.statistics import AgeSummary, summarize_records
from pmreport.core.config import AppConfig, get_config
from pmreport.core.errors import DataError, ReportError
from pmreport.core.logging import clear_run_id, get_logger, set_run_id
from pmreport.parsers.biography_parser import BiographyParser, PrimeMinisterRecord
from pmreport.parsers.table_extractor import HtmlTableExtractor, biography_strings
from pmreport.report.chart import render_timeline
from pmreport.report.markdown import render_markdown, write_report
from pmreport.scrapers.wikipedia import WikipediaScraper
from pmreport.storage.records_io import write_records
from pmreport.utils.metrics import last_successful_report

logger = get_logger(__name__)


@dataclass
class ReportResult:
    """Everything a run produced."""

    records: list[PrimeMinisterRecord]
    frame: pl.DataFrame
    summary: AgeSummary
    cache_path: Path
    records_path: Path
    chart_path: Path
    report_path: Path


def fetch_page(
    config: AppConfig,
    refresh: bool = False,
    transport: httpx.BaseTransport | None = None,
) -> Path:
    """Return the cached source page, downloading it when missing or on refresh."""
    scraper = WikipediaScraper(config.source, config.storage, transport=transport)
    return scraper.scrape(refresh=refresh)


def load_records(
    config: AppConfig,
    refresh: bool = False,
    transport: httpx.BaseTransport | None = None,
) -> list[PrimeMinisterRecord]:
    """Fetch, extract and parse; records come back sorted by birth year.

    Raises:
        FetchError, ExtractionError, ParseError
    """
    cache_path = fetch_page(config, refresh=refresh, transport=transport)
    table = HtmlTableExtractor(config.source.table_selector).parse(cache_path)
    raws = biography_strings(table, config.source.column_keyword)
    return BiographyParser(config.report.reference_year).parse(raws)


def run_report(
    config: AppConfig | None = None,
    refresh: bool = False,
    transport: httpx.BaseTransport | None = None,
) -> ReportResult:
    """Run the whole pipeline and write the report artifacts.

    Args:
        config: Configuration; the global one when omitted
        refresh: Download the source page even if it is cached
        transport: Optional httpx transport for the download

    Returns:
        ReportResult with records, summary and artifact paths
    """
    config = config or get_config()
    reference_year = config.report.reference_year
    set_run_id()

    logger.info(
        "Report run started",
        url=config.source.url,
        reference_year=reference_year,
    )

    try:
        records = load_records(config, refresh=refresh, transport=transport)
        frame = BiographyParser.to_frame(records)
        summary = summarize_records(records)

        chart_path, report_path, records_path = _write_artifacts(
            config, records, frame, summary
        )
        last_successful_report.set_to_current_time()
        logger.info(
            "Report run finished",
            records=len(records),
            mean_age=summary.mean,
            report=str(report_path),
        )
    except ReportError as e:
        logger.error("Report run failed", code=e.code, error=e.message)
        raise
    finally:
        clear_run_id()

    return ReportResult(
        records=records,
        frame=frame,
        summary=summary,
        cache_path=config.storage.cache_path,
        records_path=records_path,
        chart_path=chart_path,
        report_path=report_path,
    )


def _write_artifacts(
    config: AppConfig,
    records: list[PrimeMinisterRecord],
    frame: pl.DataFrame,
    summary: AgeSummary,
) -> tuple[Path, Path, Path]:
    """Render chart, report and records export; all land together or none do."""
    report = config.report
    report.output_dir.mkdir(parents=True, exist_ok=True)

    with tempfile.TemporaryDirectory(dir=report.output_dir, prefix=".staging-") as staging:
        staging_dir = Path(staging)
        chart = render_timeline(records, staging_dir / report.chart_file, report.reference_year)
        markdown = render_markdown(frame, summary, report.reference_year, chart)
        staged = [
            chart,
            write_report(markdown, staging_dir / report.report_file),
            write_records(frame, staging_dir / report.records_file),
        ]
        try:
            final = [path.replace(report.output_dir / path.name) for path in staged]
        except OSError as e:
            raise DataError(f"Cannot move artifacts into {report.output_dir}: {e}") from e

    logger.info("Artifacts written", output_dir=str(report.output_dir))
    return final[0], final[1], final[2]
