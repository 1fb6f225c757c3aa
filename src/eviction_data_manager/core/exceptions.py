"""
Exceptions and warnings raised by the eviction data pipeline.

Fatal errors stop the run at the stage where they occur. Data quality
findings are emitted as ``DataQualityWarning`` through :mod:`warnings`
and never interrupt a run.
"""


class EvictionDataError(Exception):
    """Base class for pipeline errors."""


class TableIOError(EvictionDataError, OSError):
    """A table could not be read from or written to the store."""

    def __init__(self, path, message: str):
        self.path = path
        super().__init__(f"{path}: {message}")


class SchemaError(EvictionDataError, ValueError):
    """An expected column is absent at a stage boundary."""

    def __init__(self, column: str, stage: str, message: str | None = None):
        self.column = column
        self.stage = stage
        super().__init__(message or f"[{stage}] missing required column '{column}'")


class MalformedRecordError(EvictionDataError, ValueError):
    """One or more rows have a combined field with the wrong token count.

    ``records`` holds every offending ``(row_number, raw_value)`` pair of
    the stage; row numbers are 1-based data rows.
    """

    def __init__(self, column: str, expected_tokens: int, records: list[tuple[int, str | None]]):
        self.column = column
        self.expected_tokens = expected_tokens
        self.records = records
        preview = ", ".join(f"row {row}: {value!r}" for row, value in records[:10])
        if len(records) > 10:
            preview += f", ... ({len(records) - 10} more)"
        super().__init__(
            f"{len(records)} value(s) in '{column}' do not split into "
            f"{expected_tokens} tokens: {preview}"
        )


class DataQualityWarning(UserWarning):
    """Non-fatal data quality finding (constant columns, duplicates, unmapped codes)."""


__all__ = [
    "EvictionDataError",
    "TableIOError",
    "SchemaError",
    "MalformedRecordError",
    "DataQualityWarning",
]
