"""
Utility Functions for Eviction Data Processing
==============================================

This module contains helper functions for reading and writing tables,
schema handling, cleaning, record identity and summaries.

Modules
-------
- io: Delimited file reading and atomic writing
- schema: Required columns, lower-casing and ACS renames
- cleaning: NA handling, numeric probing, constant columns, incomplete rows
- identity: Tract code derivation, deduplication and join keys
- summary: Exploratory summaries
"""

from .io import (
    read_table,
    write_table,
)
from .schema import (
    require_columns,
    lowercase_columns,
    rename_acs_columns,
)
from .cleaning import (
    replace_na_like_values,
    parse_numeric,
    numeric_columns,
    zero_variance_columns,
    drop_zero_variance_columns,
    drop_incomplete_rows,
)
from .identity import (
    derive_tract_code,
    deduplicate_records,
    duplicated_keys,
    tract_join_key,
)
from .summary import (
    summarize_dimensions,
    count_missing_by_column,
    zero_variance_summary,
    tabulate_values,
    describe_numeric_columns,
    count_non_positive,
)

__all__ = [
    # File handling
    "read_table",
    "write_table",

    # Schema
    "require_columns",
    "lowercase_columns",
    "rename_acs_columns",

    # Cleaning
    "replace_na_like_values",
    "parse_numeric",
    "numeric_columns",
    "zero_variance_columns",
    "drop_zero_variance_columns",
    "drop_incomplete_rows",

    # Key utilities
    "derive_tract_code",
    "deduplicate_records",
    "duplicated_keys",
    "tract_join_key",

    # Summaries
    "summarize_dimensions",
    "count_missing_by_column",
    "zero_variance_summary",
    "tabulate_values",
    "describe_numeric_columns",
    "count_non_positive",
]
