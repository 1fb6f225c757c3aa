"""
Eviction Summary Functions
==========================

Exploratory summaries of the census and eviction extracts: dimensions,
missing values, value frequencies and distributions of continuous
indicators. These mirror the checks made before choosing the cleaning
rules (zero-variance columns, incomplete eviction rows, the garbage
execution year, negative male earnings).
"""

import logging
from typing import Any, Sequence

import polars as pl

from .cleaning import parse_numeric, zero_variance_columns


logger = logging.getLogger(__name__)


def summarize_dimensions(df: pl.DataFrame) -> dict[str, int]:
    """Row and column counts."""
    return {"rows": df.height, "columns": df.width}


def count_missing_by_column(df: pl.DataFrame) -> dict[str, int]:
    """Number of nulls in each column."""
    counts = df.null_count()
    return {column: int(counts.get_column(column)[0]) for column in df.columns}


def zero_variance_summary(df: pl.DataFrame) -> dict[str, Any]:
    """Count and names of constant numeric columns."""
    constant = zero_variance_columns(df)
    return {"zero_variance_count": len(constant), "zero_variance_columns": constant}


def tabulate_values(df: pl.DataFrame, column: str) -> dict[Any, int]:
    """Frequency of each value of ``column``, sorted by value (nulls last)."""
    counts = (
        df.get_column(column)
        .value_counts()
        .sort(column, nulls_last=True)
    )
    return dict(zip(counts.get_column(column).to_list(), counts.get_column("count").to_list()))


def describe_numeric_columns(
    df: pl.DataFrame,
    columns: Sequence[str] | None = None,
) -> dict[str, dict[str, float | int | None]]:
    """
    Distribution summary for numeric columns.

    Parameters
    ----------
    df : pl.DataFrame
        Table to describe.
    columns : Sequence[str] | None, optional
        Columns to include. If None, every column that parses as numeric.
        Non-numeric columns are skipped.

    Returns
    -------
    dict[str, dict[str, float | int | None]]
        Per column: min, 25%, median, mean, 75%, max and null count.
    """
    if columns is None:
        columns = df.columns
    summary = {}
    for column in columns:
        if column not in df.columns:
            logger.warning("Column not found for summary: %s", column)
            continue
        values = parse_numeric(df.get_column(column))
        if values is None:
            continue
        summary[column] = {
            "min": values.min(),
            "25%": values.quantile(0.25),
            "median": values.median(),
            "mean": values.mean(),
            "75%": values.quantile(0.75),
            "max": values.max(),
            "nulls": values.null_count(),
        }
    return summary


def count_non_positive(df: pl.DataFrame, column: str) -> int:
    """Rows where ``column`` parses as a number less than or equal to zero."""
    values = parse_numeric(df.get_column(column))
    if values is None:
        values = df.get_column(column).cast(pl.Float64, strict=False)
    return int((values <= 0).sum())


__all__ = [
    "summarize_dimensions",
    "count_missing_by_column",
    "zero_variance_summary",
    "tabulate_values",
    "describe_numeric_columns",
    "count_non_positive",
]
