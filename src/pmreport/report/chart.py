"""Lifespan timeline chart."""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path

import matplotlib

matplotlib.use("Agg")

import matplotlib.pyplot as plt  # noqa: E402
from matplotlib.lines import Line2D  # noqa: E402

from pmreport.core.errors import ValidationError  # noqa: E402
from pmreport.core.logging import get_logger  # noqa: E402
from pmreport.parsers.biography_parser import PrimeMinisterRecord  # noqa: E402

logger = get_logger(__name__)

DECEASED_COLOR = "#4c72b0"
ALIVE_COLOR = "#dd8452"


def render_timeline(
    records: Sequence[PrimeMinisterRecord],
    output_path: Path,
    reference_year: int,
    title: str = "Lifespans of the Prime Ministers of India",
) -> Path:
    """Draw one horizontal bar per prime minister from birth to death.

    Bars are ordered by birth year, top to bottom. Living prime ministers end
    at the reference year and are drawn in a separate color.

    Args:
        records: Parsed records
        output_path: PNG file to write
        reference_year: As-of year, drawn as a dashed vertical line
        title: Chart title

    Returns:
        Path to the written PNG

    Raises:
        ValidationError: If there are no records
    """
    if not records:
        raise ValidationError("Cannot draw a timeline without records")

    ordered = sorted(records, key=lambda record: (record.birth_year, record.name))
    height = max(4.0, 0.45 * len(ordered) + 1.5)
    fig, ax = plt.subplots(figsize=(10, height), dpi=100)

    for position, record in enumerate(ordered):
        color = ALIVE_COLOR if record.alive else DECEASED_COLOR
        ax.hlines(position, record.birth_year, record.death_year, colors=color, linewidth=8)
        ax.text(record.death_year + 1, position, str(record.age), va="center", fontsize=8)

    ax.axvline(reference_year, color="grey", linestyle="--", linewidth=1)
    ax.set_yticks(range(len(ordered)), labels=[record.name for record in ordered])
    ax.invert_yaxis()
    ax.set_xlabel("Year", fontsize=12)
    ax.set_title(title, fontsize=14)
    ax.grid(True, axis="x", linestyle="--", linewidth=0.5)
    ax.legend(
        handles=[
            Line2D([0], [0], color=DECEASED_COLOR, linewidth=8, label="Deceased"),
            Line2D([0], [0], color=ALIVE_COLOR, linewidth=8, label=f"Alive (to {reference_year})"),
        ],
        loc="lower left",
    )

    plt.tight_layout()

    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    fig.savefig(output_path, format="png", bbox_inches="tight")
    plt.close(fig)

    logger.info("Timeline saved", path=str(output_path), records=len(ordered))
    return output_path
