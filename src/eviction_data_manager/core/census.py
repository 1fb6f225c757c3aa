"""
Census extract cleaning.

The census extract has one row per tract: an ``index`` text column that
names the tract and roughly a thousand ACS profile indicators. Cleaning:

1. Drop numeric columns with zero variance
2. Derive an integer ``tract_code`` from the ``tract:<digits>`` part of ``index``
3. Collapse rows that are identical across all columns
"""

import logging
import warnings

import polars as pl

from .config import CENSUS_INDEX_COLUMN, TRACT_CODE_COLUMN, TRACT_MARKER
from .exceptions import DataQualityWarning
from .report import StageReport
from ..utils.cleaning import drop_zero_variance_columns
from ..utils.identity import deduplicate_records, derive_tract_code, duplicated_keys
from ..utils.schema import require_columns


logger = logging.getLogger(__name__)

STAGE = "clean_census"


def clean_census(
    df: pl.DataFrame,
    index_col: str = CENSUS_INDEX_COLUMN,
    marker: str = TRACT_MARKER,
) -> tuple[pl.DataFrame, StageReport]:
    """
    Clean the census extract and derive its tract code.

    Parameters
    ----------
    df : pl.DataFrame
        Raw census table.
    index_col : str, default "index"
        Text column holding the tract identifier.
    marker : str, default "tract:"
        Literal text that precedes the tract digits.

    Returns
    -------
    tuple[pl.DataFrame, StageReport]
        Cleaned table with a ``tract_code`` column, and the stage report.

    Raises
    ------
    SchemaError
        If ``index_col`` is missing.
    """
    require_columns(df, [index_col], STAGE)
    report = StageReport.start(STAGE, df)

    with report.capture_warnings():
        out, removed_columns = drop_zero_variance_columns(df)
        if removed_columns:
            warnings.warn(
                f"{len(removed_columns)} zero-variance columns removed from census table",
                DataQualityWarning,
                stacklevel=2,
            )

        out = derive_tract_code(out, index_col=index_col, marker=marker)
        unmatched = out.get_column(TRACT_CODE_COLUMN).null_count()
        if unmatched:
            logger.info("%d census rows have no '%s' in '%s'", unmatched, marker, index_col)

        out, duplicate_rows = deduplicate_records(out)
        if duplicate_rows:
            warnings.warn(
                f"{duplicate_rows} duplicate census rows collapsed",
                DataQualityWarning,
                stacklevel=2,
            )

        repeated = duplicated_keys(out)
        if repeated:
            warnings.warn(
                f"{len(repeated)} tract codes map to more than one census row: {repeated[:10]}",
                DataQualityWarning,
                stacklevel=2,
            )

    logger.info(
        "Census cleaned: %d -> %d rows, %d -> %d columns",
        df.height, out.height, df.width, out.width,
    )
    return out, report.finish(
        out,
        zero_variance_columns=removed_columns,
        rows_without_tract=unmatched,
        duplicate_rows_removed=duplicate_rows,
    )


__all__ = ["clean_census"]
