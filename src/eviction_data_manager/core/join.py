"""
Census/eviction join.

Both tables are lower-cased, keyed on a canonical string form of
``tract_code`` and inner joined. ACS profile codes in the result are then
renamed to readable indicator names.
"""

import logging

import polars as pl

from .config import ACS_RENAME_DICTIONARY, TRACT_CODE_COLUMN
from .report import StageReport
from ..utils.identity import tract_join_key
from ..utils.schema import lowercase_columns, rename_acs_columns, require_columns


logger = logging.getLogger(__name__)

STAGE = "join"


def join_census_evictions(
    census: pl.DataFrame,
    evictions: pl.DataFrame,
    key: str = TRACT_CODE_COLUMN,
    suffix: str = "_census",
) -> tuple[pl.DataFrame, StageReport]:
    """
    Inner join the cleaned census and eviction tables on tract code.

    Parameters
    ----------
    census : pl.DataFrame
        Cleaned census table with a derived ``tract_code``.
    evictions : pl.DataFrame
        Prepared eviction table with a ``tract_code`` column.
    key : str, default "tract_code"
        Join key, present on both sides after lower-casing.
    suffix : str, default "_census"
        Appended to census column names that also exist in the eviction
        table, so eviction and geocoding fields keep their own names.

    Returns
    -------
    tuple[pl.DataFrame, StageReport]
        Joined, renamed table and the stage report.

    Notes
    -----
    Keys that repeat on either side produce every pairing of the matching
    rows. Rows with a null key never match.
    """
    census = lowercase_columns(census, STAGE)
    evictions = lowercase_columns(evictions, STAGE)
    require_columns(census, [key], STAGE)
    require_columns(evictions, [key], STAGE)
    report = StageReport.start(STAGE, census, evictions)

    census = census.with_columns(tract_join_key(pl.col(key)).alias(key))
    evictions = evictions.with_columns(tract_join_key(pl.col(key)).alias(key))

    overlap = [column for column in census.columns if column != key and column in evictions.columns]
    if overlap:
        logger.info("Suffixing %d census columns also present in evictions: %s", len(overlap), overlap)
        census = census.rename({column: f"{column}{suffix}" for column in overlap})

    with report.capture_warnings():
        joined = census.join(evictions, on=key, how="inner")
        logger.info("Joined table: %d rows, %d columns", joined.height, joined.width)
        out = rename_acs_columns(joined, ACS_RENAME_DICTIONARY)

    return out, report.finish(
        out,
        census_rows=census.height,
        eviction_rows=evictions.height,
        matched_tracts=out.get_column(key).n_unique() if out.height else 0,
    )


__all__ = ["join_census_evictions"]
