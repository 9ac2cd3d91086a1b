"""Parser for prime minister biography cells.

Each cell of the biography column reads like one of::

    Jawaharlal Nehru(1889–1964) MP for Phulpur
    Narendra Modi(born 1950) MP for Varanasi

The text before the first ``(`` is the name, the parenthesised part holds the
years, and anything after the closing ``)`` (constituency, party notes) is
dropped. Cells with the token ``born`` describe living prime ministers, whose
age is counted up to a caller-supplied reference year.
"""

from __future__ import annotations

import re
from collections.abc import Iterable
from dataclasses import asdict, dataclass
from typing import Any, Union

import polars as pl

from pmreport.core.errors import ParseError
from pmreport.core.logging import get_logger
from pmreport.utils.metrics import rows_parsed

logger = get_logger(__name__)

FOOTNOTE_RE = re.compile(r"\[[^\]]*\]")
BORN_TOKEN_RE = re.compile(r"\bborn")
# Anchored on the first digit run: "<birth> – <death>" with -, – or — between
DECEASED_YEARS_RE = re.compile(r"\D*(\d+)\s*[-–—]\s*(\d+)")
LIVING_YEAR_RE = re.compile(BORN_TOKEN_RE.pattern + r"\s*(\d+)")

RECORD_SCHEMA = {
    "name": pl.Utf8,
    "birth_year": pl.Int64,
    "death_year": pl.Int64,
    "alive": pl.Boolean,
    "age": pl.Int64,
}


@dataclass(frozen=True)
class PrimeMinisterRecord:
    """Structured row produced for one prime minister."""

    name: str
    birth_year: int
    death_year: int
    alive: bool
    age: int

    def as_dict(self) -> dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class DeceasedBiography:
    name: str
    birth_year: int
    death_year: int

    @classmethod
    def from_years(cls, raw: str, name: str, years: str) -> DeceasedBiography:
        match = DECEASED_YEARS_RE.match(years)
        if match is None:
            raise ParseError(raw, "expected '<birth>–<death>' years after '('")
        return cls(
            name=name,
            birth_year=_year(raw, match.group(1)),
            death_year=_year(raw, match.group(2)),
        )

    def to_record(self, reference_year: int) -> PrimeMinisterRecord:
        return PrimeMinisterRecord(
            name=self.name,
            birth_year=self.birth_year,
            death_year=self.death_year,
            alive=False,
            age=self.death_year - self.birth_year,
        )


@dataclass(frozen=True)
class LivingBiography:
    name: str
    birth_year: int

    @classmethod
    def from_years(cls, raw: str, name: str, years: str) -> LivingBiography:
        match = LIVING_YEAR_RE.search(years)
        if match is None:
            raise ParseError(raw, "no digits after 'born'")
        return cls(name=name, birth_year=_year(raw, match.group(1)))

    def to_record(self, reference_year: int) -> PrimeMinisterRecord:
        """Use the reference year as placeholder death year."""
        return PrimeMinisterRecord(
            name=self.name,
            birth_year=self.birth_year,
            death_year=reference_year,
            alive=True,
            age=reference_year - self.birth_year,
        )


Biography = Union[DeceasedBiography, LivingBiography]


def clean(raw: str) -> str:
    """Drop footnote markers like ``[a]`` and collapse whitespace."""
    return " ".join(FOOTNOTE_RE.sub("", raw).split())


def truncate(raw: str) -> str:
    """Cut the string at the first ``)`` following the first ``(``.

    Raises:
        ParseError: If the string has no ``(``
    """
    opening = raw.find("(")
    if opening == -1:
        raise ParseError(raw, "no opening parenthesis")
    closing = raw.find(")", opening + 1)
    return raw if closing == -1 else raw[:closing]


def classify(raw: str) -> type[DeceasedBiography] | type[LivingBiography]:
    """Tell which biography variant a raw string describes.

    Only the parenthesised part is inspected, so names or trailing text
    containing "born" do not flip the result.
    """
    _, years = _split(raw)
    return LivingBiography if BORN_TOKEN_RE.search(years) else DeceasedBiography


def read_biography(raw: str) -> Biography:
    """Parse a raw string into its biography variant.

    Raises:
        ParseError: If the name is empty or years are missing where expected
    """
    name, years = _split(raw)
    return classify(raw).from_years(raw, name, years)


def parse_biography(raw: str, reference_year: int) -> PrimeMinisterRecord:
    """Parse one raw string into a validated record.

    Args:
        raw: Biography cell text
        reference_year: As-of year for living prime ministers

    Raises:
        ParseError: If the string is malformed or the years are out of order
    """
    record = read_biography(raw).to_record(reference_year)
    if record.birth_year >= record.death_year:
        end = "reference year" if record.alive else "death year"
        raise ParseError(
            raw, f"birth year {record.birth_year} is not before {end} {record.death_year}"
        )
    return record


def parse_biographies(raws: Iterable[str], reference_year: int) -> list[PrimeMinisterRecord]:
    """Parse a batch of raw strings, all or nothing.

    Duplicate strings are collapsed first. The result is sorted by birth year
    (then name).

    Raises:
        ParseError: On the first string that cannot be parsed; no records are returned
    """
    unique = list(dict.fromkeys(raws))
    records = []
    for raw in unique:
        try:
            records.append(parse_biography(raw, reference_year))
        except ParseError as e:
            rows_parsed.labels(status="failed").inc()
            logger.error("Biography parse failed", raw=raw, reason=e.reason)
            raise

    rows_parsed.labels(status="success").inc(len(records))
    logger.info(
        "Parsed biographies",
        records=len(records),
        alive=sum(record.alive for record in records),
        reference_year=reference_year,
    )
    return sorted(records, key=lambda record: (record.birth_year, record.name))


def _split(raw: str) -> tuple[str, str]:
    text = clean(raw)
    if "(" not in text:
        raise ParseError(raw, "no opening parenthesis")
    name, years = truncate(text).split("(", 1)
    name = name.strip()
    if not name:
        raise ParseError(raw, "empty name before '('")
    return name, years


def _year(raw: str, digits: str) -> int:
    if len(digits) != 4:
        raise ParseError(raw, f"{digits!r} is not a four-digit year")
    return int(digits)


class BiographyParser:
    """Parse biography strings against a fixed reference year."""

    def __init__(self, reference_year: int) -> None:
        self.reference_year = reference_year

    def parse(self, raws: Iterable[str]) -> list[PrimeMinisterRecord]:
        return parse_biographies(raws, self.reference_year)

    @staticmethod
    def to_frame(records: Iterable[PrimeMinisterRecord]) -> pl.DataFrame:
        """Tabulate records with columns name, birth_year, death_year, alive, age."""
        return pl.DataFrame([record.as_dict() for record in records], schema=RECORD_SCHEMA)
