"""
Eviction extract cleaning and field decomposition.

The geocoded eviction extract has one row per executed eviction. Processing
happens in two stages:

- ``clean_evictions``: normalize NA-like text and drop rows with any
  missing field. This table is persisted before further changes.
- ``prepare_evictions``: split ``EXECUTED_DATE`` (M/D/YYYY) into month,
  day and year; split ``lon_lat`` into ``lon`` and ``lat``; drop the
  garbage year ``"70"``; translate month codes to labels.

Malformed combined fields are collected for the whole table and reported
in one ``MalformedRecordError`` per column; nothing is padded or dropped.
"""

import logging
import warnings
from collections.abc import Mapping, Sequence

import polars as pl

from .config import (
    EXECUTED_DATE_COLUMN,
    EXECUTED_DATE_PARTS,
    GARBAGE_YEAR,
    LON_LAT_COLUMN,
    LON_LAT_PARTS,
    MONTH_LABELS,
    NA_VALUES,
)
from .exceptions import DataQualityWarning, MalformedRecordError
from .report import StageReport
from ..utils.cleaning import drop_incomplete_rows, replace_na_like_values
from ..utils.schema import require_columns


logger = logging.getLogger(__name__)


# ============================================================================
# Missing-row elimination
# ============================================================================


def clean_evictions(df: pl.DataFrame) -> tuple[pl.DataFrame, StageReport]:
    """Drop every eviction row with at least one missing field."""
    report = StageReport.start("clean_evictions", df)
    out = replace_na_like_values(df, df.columns, na_like=NA_VALUES)
    out, removed = drop_incomplete_rows(out)
    return out, report.finish(out, incomplete_rows_removed=removed)


# ============================================================================
# Field decomposition
# ============================================================================


def find_malformed(
    df: pl.DataFrame,
    column: str,
    n_tokens: int,
    separator: str,
) -> list[tuple[int, str | None]]:
    """Rows (1-based) whose ``column`` does not split into exactly ``n_tokens``."""
    bad = (
        df.select(pl.col(column).cast(pl.String).alias("raw"))
        .with_row_index("row", offset=1)
        .filter(
            pl.col("raw").is_null()
            | (pl.col("raw").str.split(separator).list.len() != n_tokens)
        )
    )
    return list(zip(bad.get_column("row").to_list(), bad.get_column("raw").to_list()))


def _split_column(
    df: pl.DataFrame,
    column: str,
    parts: Sequence[str],
    separator: str,
    stage: str,
) -> pl.DataFrame:
    """Replace ``column`` with one string column per token, in place."""
    require_columns(df, [column], stage)
    malformed = find_malformed(df, column, len(parts), separator)
    if malformed:
        raise MalformedRecordError(column, len(parts), malformed)

    tokens = pl.col(column).cast(pl.String).str.split(separator)
    out = df.with_columns(
        [tokens.list.get(i).str.strip_chars().alias(name) for i, name in enumerate(parts)]
    )

    position = df.columns.index(column)
    before = [c for c in df.columns[:position] if c not in parts]
    after = [c for c in df.columns[position + 1:] if c not in parts]
    return out.select(before + list(parts) + after)


def decompose_executed_date(
    df: pl.DataFrame,
    date_col: str = EXECUTED_DATE_COLUMN,
    parts: Sequence[str] = EXECUTED_DATE_PARTS,
) -> pl.DataFrame:
    """Split the M/D/YYYY date into month, day and year string columns."""
    return _split_column(df, date_col, parts, "/", "prepare_evictions")


def decompose_lon_lat(
    df: pl.DataFrame,
    lon_lat_col: str = LON_LAT_COLUMN,
    parts: Sequence[str] = LON_LAT_PARTS,
) -> pl.DataFrame:
    """Split the ``"lon,lat"`` string into ``lon`` and ``lat`` string columns."""
    return _split_column(df, lon_lat_col, parts, ",", "prepare_evictions")


# ============================================================================
# Year and month cleaning
# ============================================================================


def drop_garbage_years(
    df: pl.DataFrame,
    year_col: str = EXECUTED_DATE_PARTS[2],
    garbage: str = GARBAGE_YEAR,
) -> tuple[pl.DataFrame, int]:
    """Drop rows whose year is exactly the garbage literal; other values are kept."""
    require_columns(df, [year_col], "prepare_evictions")
    out = df.filter(pl.col(year_col).cast(pl.String).ne_missing(garbage))
    removed = df.height - out.height
    logger.info("Removed %d rows with %s == %r", removed, year_col, garbage)
    if removed == 0:
        warnings.warn(
            f"no rows with {year_col} == {garbage!r} found",
            DataQualityWarning,
            stacklevel=2,
        )
    return out, removed


def translate_month_codes(
    df: pl.DataFrame,
    month_col: str = EXECUTED_DATE_PARTS[0],
    labels: Mapping[str, str] = MONTH_LABELS,
) -> tuple[pl.DataFrame, list[str]]:
    """Translate month codes ("1".."12") to labels; unknown codes are left as they are."""
    require_columns(df, [month_col], "prepare_evictions")
    codes = pl.col(month_col).cast(pl.String)
    unmapped = (
        df.filter(codes.is_not_null() & ~codes.is_in(list(labels)))
        .get_column(month_col)
        .cast(pl.String)
        .unique(maintain_order=True)
        .to_list()
    )
    if unmapped:
        warnings.warn(
            f"{len(unmapped)} month codes left untranslated: {unmapped[:10]}",
            DataQualityWarning,
            stacklevel=2,
        )
    out = df.with_columns(codes.replace(dict(labels)).alias(month_col))
    return out, unmapped


def prepare_evictions(df: pl.DataFrame) -> tuple[pl.DataFrame, StageReport]:
    """
    Decompose and sanitize the cleaned eviction table.

    Parameters
    ----------
    df : pl.DataFrame
        Eviction table after missing-row removal.

    Returns
    -------
    tuple[pl.DataFrame, StageReport]
        Table with date and coordinate parts, and the stage report.

    Raises
    ------
    SchemaError
        If ``EXECUTED_DATE`` or ``lon_lat`` is missing.
    MalformedRecordError
        If any date or coordinate value has the wrong number of tokens. Both
        columns are checked before raising; every finding is logged.
    """
    require_columns(df, [EXECUTED_DATE_COLUMN, LON_LAT_COLUMN], "prepare_evictions")
    report = StageReport.start("prepare_evictions", df)

    errors = []
    for column, parts, separator in (
        (EXECUTED_DATE_COLUMN, EXECUTED_DATE_PARTS, "/"),
        (LON_LAT_COLUMN, LON_LAT_PARTS, ","),
    ):
        malformed = find_malformed(df, column, len(parts), separator)
        if malformed:
            errors.append(MalformedRecordError(column, len(parts), malformed))
    if errors:
        for error in errors:
            logger.error("Malformed records: %s", error)
        raise errors[0]

    with report.capture_warnings():
        out = decompose_executed_date(df)
        out = decompose_lon_lat(out)
        out, garbage_rows = drop_garbage_years(out)
        out, unmapped = translate_month_codes(out)

    return out, report.finish(
        out,
        garbage_year_rows_removed=garbage_rows,
        unmapped_month_codes=unmapped,
    )


__all__ = [
    "clean_evictions",
    "find_malformed",
    "decompose_executed_date",
    "decompose_lon_lat",
    "drop_garbage_years",
    "translate_month_codes",
    "prepare_evictions",
]
