"""
Cleaning utilities (Polars): NA handling, numeric probing, constant columns, incomplete rows.
"""

import logging
from typing import Sequence

import polars as pl
import polars.selectors as cs


logger = logging.getLogger(__name__)


def replace_na_like_values(
    df: pl.DataFrame,
    columns: Sequence[str],
    na_like: Sequence[str] = ("NA", "N/A", "", "nan"),
) -> pl.DataFrame:
    """Null out string values that are NA-like after stripping whitespace."""
    columns_to_update = [
        column for column in columns if column in df.columns and df.schema[column] == pl.String
    ]
    if not columns_to_update:
        return df.clone()
    tokens = list(na_like)
    return df.with_columns(
        [
            pl.when(pl.col(column).str.strip_chars().is_in(tokens))
            .then(None)
            .otherwise(pl.col(column))
            .alias(column)
            for column in columns_to_update
        ]
    )


def parse_numeric(series: pl.Series) -> pl.Series | None:
    """Return ``series`` as Float64 if every non-null value is a number, else None.

    Numeric dtypes pass through; string columns are probed with a
    non-strict cast and rejected if any non-null value fails to parse.
    Columns of any other dtype are not numeric.
    """
    if series.dtype.is_numeric():
        return series.cast(pl.Float64)
    if series.dtype == pl.Null:
        return series.cast(pl.Float64)
    if series.dtype == pl.String:
        parsed = series.str.strip_chars().cast(pl.Float64, strict=False)
        if parsed.null_count() == series.null_count():
            return parsed
    return None


def numeric_columns(df: pl.DataFrame) -> list[str]:
    """Names of columns that can be safely interpreted as numbers."""
    return [column for column in df.columns if parse_numeric(df.get_column(column)) is not None]


def zero_variance_columns(df: pl.DataFrame) -> list[str]:
    """Numeric columns whose variance is exactly zero.

    A complete column with a single distinct value, or a column that is
    entirely missing, has zero variance. A column with some missing values
    has undefined variance and is kept. Columns that are not numeric are
    never reported.
    """
    constant = []
    for column in df.columns:
        values = parse_numeric(df.get_column(column))
        if values is None:
            continue
        if values.null_count() == values.len() or (
            values.null_count() == 0 and values.n_unique() <= 1
        ):
            constant.append(column)
    return constant


def drop_zero_variance_columns(df: pl.DataFrame) -> tuple[pl.DataFrame, list[str]]:
    """Drop constant numeric columns; return the new frame and the removed names."""
    removed = zero_variance_columns(df)
    if removed:
        logger.info("Removing %d zero-variance columns", len(removed))
        logger.debug("Zero-variance columns: %s", removed)
    return df.drop(removed), removed


def drop_incomplete_rows(df: pl.DataFrame) -> tuple[pl.DataFrame, int]:
    """Drop every row with a null (or NaN) in any column; return the frame and the count removed."""
    out = df.with_columns(cs.float().fill_nan(None)).drop_nulls()
    removed = df.height - out.height
    logger.info("Removed %d of %d rows with missing fields", removed, df.height)
    return out, removed


__all__ = [
    "replace_na_like_values",
    "parse_numeric",
    "numeric_columns",
    "zero_variance_columns",
    "drop_zero_variance_columns",
    "drop_incomplete_rows",
]
