"""
Stage bookkeeping: row/column counts and data quality findings per stage.
"""

import warnings
from contextlib import contextmanager
from dataclasses import dataclass, field
from typing import Any, Iterator

import polars as pl

from .exceptions import DataQualityWarning


@dataclass
class StageReport:
    """Counts and findings for one pipeline stage."""

    stage: str
    rows_in: int = 0
    columns_in: int = 0
    rows_out: int = 0
    columns_out: int = 0
    details: dict[str, Any] = field(default_factory=dict)
    warnings: list[str] = field(default_factory=list)

    @classmethod
    def start(cls, stage: str, *frames: pl.DataFrame) -> "StageReport":
        """Open a report with the summed input shape of ``frames``."""
        return cls(
            stage=stage,
            rows_in=sum(frame.height for frame in frames),
            columns_in=sum(frame.width for frame in frames),
        )

    def finish(self, df: pl.DataFrame, **details: Any) -> "StageReport":
        self.rows_out = df.height
        self.columns_out = df.width
        self.details.update(details)
        return self

    @contextmanager
    def capture_warnings(self) -> Iterator[None]:
        """Record ``DataQualityWarning`` messages raised inside the block.

        Every caught warning is re-issued afterwards, also when the block
        raises.
        """
        try:
            with warnings.catch_warnings(record=True) as caught:
                warnings.simplefilter("always", DataQualityWarning)
                yield
        finally:
            for item in caught:
                if issubclass(item.category, DataQualityWarning):
                    self.warnings.append(str(item.message))
                warnings.warn_explicit(item.message, item.category, item.filename, item.lineno)


__all__ = ["StageReport"]
