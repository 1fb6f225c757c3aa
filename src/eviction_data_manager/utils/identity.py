"""
Identity/key and record utilities (Polars).
"""

import re
from typing import Optional, Sequence

import polars as pl

from ..core.config import CENSUS_INDEX_COLUMN, TRACT_CODE_COLUMN, TRACT_MARKER


def derive_tract_code(
    df: pl.DataFrame,
    index_col: str = CENSUS_INDEX_COLUMN,
    marker: str = TRACT_MARKER,
    tract_col: str = TRACT_CODE_COLUMN,
) -> pl.DataFrame:
    """Extract the digits following ``marker`` in ``index_col`` as an integer key.

    Rows without a match get a null key.
    """
    scratch = f"_{tract_col}_match"
    out = df.with_columns(
        pl.col(index_col)
        .cast(pl.String)
        .str.extract(f"({re.escape(marker)}[0-9]+)", 1)
        .alias(scratch)
    )
    out = out.with_columns(
        pl.col(scratch)
        .str.extract(r"([0-9]+)$", 1)
        .cast(pl.Int64, strict=False)
        .alias(tract_col)
    )
    return out.drop(scratch)


def deduplicate_records(
    df: pl.DataFrame,
    keep: str = "first",
    subset: Optional[Sequence[str]] = None,
) -> tuple[pl.DataFrame, int]:
    """Drop duplicate rows (all columns unless ``subset``), keeping order."""
    dedupe_subset = list(subset) if subset is not None else None
    before = df.height
    out = df.unique(subset=dedupe_subset, keep=keep, maintain_order=True)
    return out, before - out.height


def duplicated_keys(df: pl.DataFrame, key: str = TRACT_CODE_COLUMN) -> list:
    """Non-null values of ``key`` that occur on more than one row."""
    counts = df.filter(pl.col(key).is_not_null()).group_by(key).len()
    return sorted(counts.filter(pl.col("len") > 1).get_column(key).to_list())


def tract_join_key(expr: pl.Expr) -> pl.Expr:
    """Canonical string form of a tract code.

    ``"000100"``, ``100`` and ``100.0`` all become ``"100"``; unparseable
    values become null and never match in a join.
    """
    return (
        expr.cast(pl.String)
        .str.strip_chars()
        .cast(pl.Float64, strict=False)
        .cast(pl.Int64, strict=False)
        .cast(pl.String)
    )


__all__ = [
    "derive_tract_code",
    "deduplicate_records",
    "duplicated_keys",
    "tract_join_key",
]
