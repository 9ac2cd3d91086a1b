"""Base parser class for file-backed parsers.

Establishes the common interface for parsers turning a persisted source
document into tabular data.
"""

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any

import polars as pl


class Parser(ABC):
    """Base class for file-backed parsers.

    Attributes:
        SCHEMA_VERSION: Version identifier for the parser's output schema.
    """

    SCHEMA_VERSION: str = "v1.0"

    @abstractmethod
    def parse(self, file_path: Path, *args: Any, **kwargs: Any) -> pl.DataFrame:
        """Parse file and return tabular data.

        Args:
            file_path: Path to the file to parse
            *args: Additional positional arguments specific to the parser
            **kwargs: Additional keyword arguments specific to the parser

        Returns:
            Polars DataFrame with the parsed content
        """

