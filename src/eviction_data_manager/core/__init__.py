"""
Core Eviction Data Pipeline
===========================

This module contains the pipeline stages, the configuration constants and
the workflows that chain them.

Modules
-------
- config: Path configuration and fixed lookup tables
- exceptions: Error taxonomy and the data quality warning
- census: Census extract cleaning and tract code derivation
- evictions: Eviction extract cleaning and field decomposition
- join: Census/eviction inner join and ACS renames
- subset: Analytic column projection and earnings filter
- workflows: End-to-end pipeline and input summaries
"""

# Import configuration constants and lookup tables
from .config import (
    # Path configuration
    PROJECT_DIR,
    DATA_DIR,
    RAW_DIR,
    CLEAN_DIR,
    CENSUS_FILE,
    EVICTION_FILE,
    CLEAN_EVICTION_FILE,
    JOINED_FILE,
    SUBSET_FILE,
    PipelinePaths,
    # Lookup tables
    MONTH_LABELS,
    ACS_RENAME_DICTIONARY,
    ANALYTIC_COLUMNS,
    EARNINGS_COLUMN,
    GARBAGE_YEAR,
)

from .exceptions import (
    EvictionDataError,
    TableIOError,
    SchemaError,
    MalformedRecordError,
    DataQualityWarning,
)
from .report import StageReport

# Import stage functions
from .census import clean_census
from .evictions import (
    clean_evictions,
    prepare_evictions,
    decompose_executed_date,
    decompose_lon_lat,
    drop_garbage_years,
    translate_month_codes,
)
from .join import join_census_evictions
from .subset import (
    select_analytic_columns,
    filter_positive_earnings,
    build_analytic_subset,
)

# Import workflows
from .workflows import (
    PipelineResult,
    run_eviction_pipeline,
    summarize_inputs_workflow,
)

__all__ = [
    # Path configuration
    "PROJECT_DIR",
    "DATA_DIR",
    "RAW_DIR",
    "CLEAN_DIR",
    "CENSUS_FILE",
    "EVICTION_FILE",
    "CLEAN_EVICTION_FILE",
    "JOINED_FILE",
    "SUBSET_FILE",
    "PipelinePaths",
    # Lookup tables
    "MONTH_LABELS",
    "ACS_RENAME_DICTIONARY",
    "ANALYTIC_COLUMNS",
    "EARNINGS_COLUMN",
    "GARBAGE_YEAR",
    # Errors
    "EvictionDataError",
    "TableIOError",
    "SchemaError",
    "MalformedRecordError",
    "DataQualityWarning",
    "StageReport",
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
    "PipelineResult",
    "run_eviction_pipeline",
    "summarize_inputs_workflow",
]
