"""
Analytic subset: fixed column projection and earnings validity filter.
"""

import logging
from collections.abc import Sequence

import polars as pl

from .config import ANALYTIC_COLUMNS, EARNINGS_COLUMN
from .report import StageReport
from ..utils.schema import require_columns


logger = logging.getLogger(__name__)

STAGE = "subset"


def select_analytic_columns(
    df: pl.DataFrame,
    columns: Sequence[str] = ANALYTIC_COLUMNS,
) -> pl.DataFrame:
    """Project ``columns`` in declared order; raise ``SchemaError`` if any is absent."""
    require_columns(df, columns, STAGE)
    return df.select(list(columns))


def filter_positive_earnings(
    df: pl.DataFrame,
    earnings_col: str = EARNINGS_COLUMN,
) -> tuple[pl.DataFrame, int]:
    """Keep rows whose earnings are strictly positive; missing values are dropped."""
    require_columns(df, [earnings_col], STAGE)
    out = df.filter(pl.col(earnings_col).cast(pl.Float64, strict=False) > 0)
    removed = df.height - out.height
    logger.info("Removed %d rows with %s <= 0", removed, earnings_col)
    return out, removed


def build_analytic_subset(
    joined: pl.DataFrame,
    columns: Sequence[str] = ANALYTIC_COLUMNS,
    earnings_col: str = EARNINGS_COLUMN,
) -> tuple[pl.DataFrame, StageReport]:
    """Project the joined table onto the analytic columns and drop non-positive earnings."""
    report = StageReport.start(STAGE, joined)
    out = select_analytic_columns(joined, columns)
    out, removed = filter_positive_earnings(out, earnings_col)
    return out, report.finish(out, non_positive_earnings_removed=removed)


__all__ = [
    "select_analytic_columns",
    "filter_positive_earnings",
    "build_analytic_subset",
]
