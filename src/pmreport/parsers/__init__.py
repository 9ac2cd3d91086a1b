"""Parsers turning the cached page into structured records.

- `base_parser.py`: file-backed parser interface
- `table_extractor.py`: HTML table to DataFrame, biography column lookup
- `biography_parser.py`: biography strings to `PrimeMinisterRecord`
"""

from .base_parser import Parser
from .biography_parser import (
    Biography,
    BiographyParser,
    DeceasedBiography,
    LivingBiography,
    PrimeMinisterRecord,
    classify,
    parse_biographies,
    parse_biography,
    read_biography,
    truncate,
)
from .table_extractor import HtmlTableExtractor, biography_strings, find_column

__all__ = [
    "Parser",
    "HtmlTableExtractor",
    "biography_strings",
    "find_column",
    "Biography",
    "BiographyParser",
    "DeceasedBiography",
    "LivingBiography",
    "PrimeMinisterRecord",
    "classify",
    "parse_biographies",
    "parse_biography",
    "read_biography",
    "truncate",
]
