"""
Input/Output utilities for census and eviction tables (delimited files).
"""

import logging
import os
import tempfile
from pathlib import Path

import polars as pl

from ..core.config import NA_VALUES, ROW_INDEX_COLUMN
from ..core.exceptions import TableIOError


logger = logging.getLogger(__name__)


def read_table(
    file_path: Path | str,
    separator: str = ",",
    na_values: tuple[str, ...] = NA_VALUES,
) -> pl.DataFrame:
    """Read a delimited text file with a header row into memory.

    Parameters
    ----------
    file_path : Path | str
        Delimited file to read.
    separator : str, default ","
        Field delimiter.
    na_values : tuple[str, ...]
        Tokens read as missing values.

    Returns
    -------
    pl.DataFrame
        Full table, column types inferred over every row.

    Raises
    ------
    TableIOError
        If the file is missing or unreadable, or has no parseable header.
    """
    file_path = Path(file_path)
    if not file_path.is_file():
        raise TableIOError(file_path, "file does not exist or is not a regular file")

    try:
        df = pl.read_csv(
            file_path,
            separator=separator,
            null_values=list(na_values),
            infer_schema_length=None,
        )
    except (OSError, pl.exceptions.PolarsError) as e:
        raise TableIOError(file_path, f"cannot parse delimited text ({e})") from e

    if not df.columns:
        raise TableIOError(file_path, "no header row")

    logger.info("Read %s: %d rows, %d columns", file_path.name, df.height, df.width)
    return df


def write_table(
    df: pl.DataFrame,
    file_path: Path | str,
    index_column: str = ROW_INDEX_COLUMN,
) -> Path:
    """Write a table as CSV with a leading 1-based row number column.

    The file is written to a temporary sibling and moved into place, so the
    target holds either the complete table or whatever it held before.

    Parameters
    ----------
    df : pl.DataFrame
        Table to persist.
    file_path : Path | str
        Destination CSV path. Parent folders are created.
    index_column : str
        Header of the row number column.

    Returns
    -------
    Path
        The written path.

    Raises
    ------
    TableIOError
        If the destination cannot be written.
    """
    file_path = Path(file_path)
    if index_column in df.columns:
        logger.warning("Replacing existing '%s' column with row numbers", index_column)
        df = df.drop(index_column)
    out = df.with_row_index(name=index_column, offset=1)

    tmp_name = None
    try:
        file_path.parent.mkdir(parents=True, exist_ok=True)
        with tempfile.NamedTemporaryFile(
            dir=file_path.parent, prefix=f".{file_path.stem}_", suffix=".tmp", delete=False
        ) as tmp:
            tmp_name = tmp.name
        out.write_csv(tmp_name)
        os.replace(tmp_name, file_path)
    except (OSError, pl.exceptions.PolarsError) as e:
        if tmp_name is not None and os.path.exists(tmp_name):
            os.remove(tmp_name)
        raise TableIOError(file_path, f"cannot write table ({e})") from e

    logger.info("Wrote %s: %d rows, %d columns", file_path, out.height, out.width)
    return file_path


__all__ = [
    "read_table",
    "write_table",
]
