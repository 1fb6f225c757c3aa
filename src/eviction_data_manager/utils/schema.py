"""
Schema utilities: required columns, case normalization, and column renaming.
"""

import logging
import warnings
from collections import Counter
from collections.abc import Iterable, Mapping

import polars as pl

from ..core.config import ACS_RENAME_DICTIONARY
from ..core.exceptions import DataQualityWarning, SchemaError


logger = logging.getLogger(__name__)


def require_columns(df: pl.DataFrame, columns: Iterable[str], stage: str) -> None:
    """Raise ``SchemaError`` naming the first column of ``columns`` absent from ``df``."""
    missing = [column for column in columns if column not in df.columns]
    if missing:
        raise SchemaError(
            missing[0],
            stage,
            f"[{stage}] missing required column(s): {', '.join(repr(c) for c in missing)}",
        )


def lowercase_columns(df: pl.DataFrame, stage: str = "join") -> pl.DataFrame:
    """Lower-case every column name.

    Raises ``SchemaError`` if two names become identical.
    """
    counts = Counter(column.lower() for column in df.columns)
    collisions = [name for name, count in counts.items() if count > 1]
    if collisions:
        raise SchemaError(
            collisions[0],
            stage,
            f"[{stage}] column names collide after lower-casing: {', '.join(collisions)}",
        )
    return df.rename({column: column.lower() for column in df.columns})


def rename_acs_columns(
    df: pl.DataFrame,
    rename_map: Mapping[str, str] = ACS_RENAME_DICTIONARY,
) -> pl.DataFrame:
    """Rename ACS profile codes to readable names.

    Matching ignores case. Entries whose source column is absent are skipped
    and reported with a ``DataQualityWarning``.
    """
    lookup = {old.lower(): new for old, new in rename_map.items()}
    mapping = {column: lookup[column.lower()] for column in df.columns if column.lower() in lookup}

    present = {column.lower() for column in mapping}
    absent = [old for old in lookup if old not in present]
    if absent:
        warnings.warn(
            f"{len(absent)} rename entries have no matching column: {', '.join(absent)}",
            DataQualityWarning,
            stacklevel=2,
        )

    logger.info("Renamed %d of %d ACS columns", len(mapping), len(lookup))
    return df.rename(mapping)


__all__ = [
    "require_columns",
    "lowercase_columns",
    "rename_acs_columns",
]
