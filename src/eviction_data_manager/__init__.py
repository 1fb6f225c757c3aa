"""
Eviction Data Manager
=====================

Tools for preparing census and eviction records for housing-insecurity research.

This package provides functionality for:
- Loading a census (ACS 5-year profile) extract and a geocoded eviction extract
- Cleaning each table (constant columns, incomplete rows, tract code derivation)
- Joining both tables on census tract and renaming ACS profile codes
- Building the analytic subset used for modeling
- Exploratory summaries of the raw extracts

Main Modules
------------
- core: Pipeline stages, configuration and workflows
- utils: Helpers for I/O, schema handling, cleaning and summaries

Example Usage
-------------
>>> from eviction_data_manager import run_eviction_pipeline
>>> result = run_eviction_pipeline(
...     census_file="data/raw/nyc_acs5-2018_census.csv",
...     eviction_file="data/raw/nyc_evictions_geocoded.csv",
... )

Notes
-----
Every stage returns a new table; nothing is modified in place. Data quality
findings are issued as ``DataQualityWarning`` and never stop a run.
"""

__version__ = "0.1.0"

from .core import (
    PipelinePaths,
    PipelineResult,
    StageReport,
    EvictionDataError,
    TableIOError,
    SchemaError,
    MalformedRecordError,
    DataQualityWarning,
    clean_census,
    clean_evictions,
    prepare_evictions,
    decompose_executed_date,
    decompose_lon_lat,
    drop_garbage_years,
    translate_month_codes,
    join_census_evictions,
    select_analytic_columns,
    filter_positive_earnings,
    build_analytic_subset,
    run_eviction_pipeline,
    summarize_inputs_workflow,
)
from .utils import (
    read_table,
    write_table,
    require_columns,
    lowercase_columns,
    rename_acs_columns,
    replace_na_like_values,
    numeric_columns,
    drop_zero_variance_columns,
    drop_incomplete_rows,
    derive_tract_code,
    deduplicate_records,
    tract_join_key,
)

__all__ = [
    "__version__",
    # Configuration and results
    "PipelinePaths",
    "PipelineResult",
    "StageReport",
    # Errors
    "EvictionDataError",
    "TableIOError",
    "SchemaError",
    "MalformedRecordError",
    "DataQualityWarning",
    # Stages
    "clean_census",
    "clean_evictions",
    "prepare_evictions",
    "decompose_executed_date",
    "decompose_lon_lat",
    "drop_garbage_years",
    "translate_month_codes",
    "join_census_evictions",
    "select_analytic_columns",
    "filter_positive_earnings",
    "build_analytic_subset",
    # Workflows
    "run_eviction_pipeline",
    "summarize_inputs_workflow",
    # Utilities
    "read_table",
    "write_table",
    "require_columns",
    "lowercase_columns",
    "rename_acs_columns",
    "replace_na_like_values",
    "numeric_columns",
    "drop_zero_variance_columns",
    "drop_incomplete_rows",
    "derive_tract_code",
    "deduplicate_records",
    "tract_join_key",
]
