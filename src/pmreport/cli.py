from __future__ import annotations

from pathlib import Path
from typing import NoReturn

import pydantic
import typer
from rich.console import Console
from rich.table import Table

from pmreport.core.config import AppConfig, get_config
from pmreport.core.errors import ConfigError, ReportError
from pmreport.core.logging import configure_logging, get_logger

app = typer.Typer(
    name="pmreport",
    help="Lifespan report of the Prime Ministers of India, scraped from Wikipedia",
    no_args_is_help=True,
    add_completion=False,
    rich_markup_mode="rich",
)

console = Console()
logger = get_logger(__name__)


def load_config(
    reference_year: int | None = None,
    output_dir: Path | None = None,
) -> AppConfig:
    """Load configuration and apply command-line overrides.

    Raises:
        ConfigError: If the environment holds invalid settings
    """
    try:
        config = get_config()
    except pydantic.ValidationError as e:
        raise ConfigError(f"Invalid configuration: {e}") from e

    report_updates: dict = {}
    if reference_year is not None:
        report_updates["reference_year"] = reference_year
    if output_dir is not None:
        report_updates["output_dir"] = output_dir
    if report_updates:
        config = config.model_copy(
            update={"report": config.report.model_copy(update=report_updates)}
        )
    return config


def fail(error: ReportError) -> NoReturn:
    typer.secho(str(error), fg=typer.colors.RED, err=True)
    raise typer.Exit(1) from error


@app.callback()
def main(
    log_level: str | None = typer.Option(
        None, "--log-level", "-l", help="Override LOG_LEVEL (DEBUG, INFO, ...)"
    ),
):
    """Configure logging before any command runs."""
    try:
        config = get_config()
    except pydantic.ValidationError as e:
        fail(ConfigError(f"Invalid configuration: {e}"))
    try:
        configure_logging(log_level or config.logging.level, config.logging.format)
    except ValueError as e:
        typer.secho(str(e), fg=typer.colors.RED, err=True)
        raise typer.Exit(1) from e


@app.command("fetch")
def fetch():
    """Download the source page into the cache, replacing any cached copy.

    [bold]Example:[/bold]
        pmreport fetch
    """
    from pmreport.pipeline import fetch_page

    try:
        path = fetch_page(load_config(), refresh=True)
    except ReportError as e:
        fail(e)
    console.print(f"Cached page at [bold]{path}[/bold]")


@app.command("parse")
def parse(
    reference_year: int | None = typer.Option(
        None, "--reference-year", "-y", min=1000, max=9999, help="As-of year for living PMs"
    ),
    refresh: bool = typer.Option(False, "--refresh", help="Download the page again"),
):
    """Parse the table and print the records sorted by birth year.

    [bold]Example:[/bold]
        pmreport parse --reference-year 2024
    """
    from pmreport.analytics.statistics import summarize_records
    from pmreport.pipeline import load_records

    try:
        config = load_config(reference_year=reference_year)
        records = load_records(config, refresh=refresh)
        summary = summarize_records(records)
    except ReportError as e:
        fail(e)

    table = Table(title=f"Prime Ministers of India (as of {config.report.reference_year})")
    table.add_column("Name")
    table.add_column("Born", justify="right")
    table.add_column("Died", justify="right")
    table.add_column("Alive")
    table.add_column("Age", justify="right")
    for record in records:
        table.add_row(
            record.name,
            str(record.birth_year),
            "" if record.alive else str(record.death_year),
            "yes" if record.alive else "no",
            str(record.age),
        )
    console.print(table)
    console.print(
        f"mean age [bold]{summary.mean:.2f}[/bold], median [bold]{summary.median:g}[/bold]"
    )


@app.command("report")
def report(
    reference_year: int | None = typer.Option(
        None, "--reference-year", "-y", min=1000, max=9999, help="As-of year for living PMs"
    ),
    output_dir: Path | None = typer.Option(
        None, "--output-dir", "-o", help="Directory for chart, records and report"
    ),
    refresh: bool = typer.Option(False, "--refresh", help="Download the page again"),
):
    """Run the full pipeline: records export, timeline chart and Markdown report.

    [bold]Example:[/bold]
        pmreport report --reference-year 2024 --output-dir reports
    """
    from pmreport.pipeline import run_report

    try:
        result = run_report(
            load_config(reference_year=reference_year, output_dir=output_dir),
            refresh=refresh,
        )
    except ReportError as e:
        fail(e)

    console.print(f"[green]✓[/green] {len(result.records)} prime ministers parsed")
    console.print(f"  Records: {result.records_path}")
    console.print(f"  Chart:   {result.chart_path}")
    console.print(f"  Report:  {result.report_path}")
