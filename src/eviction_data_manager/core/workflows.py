"""
Eviction Data Manager Workflows
===============================

High-level orchestration of the census/eviction cleaning and join pipeline.

Functions
---------
- run_eviction_pipeline: Load, clean, join and subset the two extracts,
  writing the cleaned eviction table, the joined table and the subset
- summarize_inputs_workflow: Exploratory summary of the two raw extracts

Example Usage
-------------
>>> from eviction_data_manager.core.workflows import run_eviction_pipeline
>>> result = run_eviction_pipeline(
...     census_file="data/raw/nyc_acs5-2018_census.csv",
...     eviction_file="data/raw/nyc_evictions_geocoded.csv",
... )
>>> result.saved_files["subset"]
"""

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import polars as pl

from .census import clean_census
from .config import (
    ACS_RENAME_DICTIONARY,
    EARNINGS_COLUMN,
    EXECUTED_DATE_COLUMN,
    PipelinePaths,
)
from .evictions import clean_evictions, prepare_evictions
from .join import join_census_evictions
from .report import StageReport
from .subset import build_analytic_subset
from ..utils.io import read_table, write_table
from ..utils.summary import (
    count_missing_by_column,
    count_non_positive,
    describe_numeric_columns,
    summarize_dimensions,
    tabulate_values,
    zero_variance_summary,
)

logger = logging.getLogger(__name__)


@dataclass
class PipelineResult:
    """Outcome of one pipeline run."""

    paths: PipelinePaths
    census_shape: tuple[int, int] = (0, 0)
    eviction_shape: tuple[int, int] = (0, 0)
    joined_shape: tuple[int, int] = (0, 0)
    subset_shape: tuple[int, int] = (0, 0)
    saved_files: dict[str, Path] = field(default_factory=dict)
    stages: list[StageReport] = field(default_factory=list)

    @property
    def warnings(self) -> list[str]:
        return [message for stage in self.stages for message in stage.warnings]


def run_eviction_pipeline(
    paths: PipelinePaths | None = None,
    **overrides: Any,
) -> PipelineResult:
    """
    Run the complete census/eviction pipeline.

    Stages run in order and each consumes the previous stage's output:

    1. Load both extracts
    2. Clean: zero-variance census columns, incomplete eviction rows,
       tract code derivation; the cleaned eviction table is written
    3. Join: date and coordinate decomposition, garbage year and month
       cleanup, lower-cased names, inner join, ACS renames; the joined
       table is written
    4. Subset: fixed projection and earnings filter; the subset is written

    Parameters
    ----------
    paths : PipelinePaths | None, optional
        File locations. If None, built from the configuration.
    **overrides : Any
        Individual locations passed to ``PipelinePaths.from_config`` when
        ``paths`` is None (``census_file``, ``eviction_file``,
        ``clean_eviction_file``, ``joined_file``, ``subset_file``).

    Returns
    -------
    PipelineResult
        Shapes, written files and per-stage reports.

    Raises
    ------
    TableIOError, SchemaError, MalformedRecordError
        Any failure stops the run; the failing stage writes nothing.
    """
    if paths is None:
        paths = PipelinePaths.from_config(**overrides)
    result = PipelineResult(paths=paths)

    logger.info("=" * 60)
    logger.info("Eviction Pipeline")
    logger.info("=" * 60)
    logger.info(f"Census: {paths.census_file}")
    logger.info(f"Evictions: {paths.eviction_file}")
    logger.info("")

    # Step 1: Load
    logger.info("Step 1: Loading extracts")
    logger.info("-" * 60)
    census_raw = read_table(paths.census_file)
    evictions_raw = read_table(paths.eviction_file)
    result.census_shape = census_raw.shape
    result.eviction_shape = evictions_raw.shape

    # Step 2: Clean
    logger.info("Step 2: Cleaning")
    logger.info("-" * 60)
    census, census_report = clean_census(census_raw)
    result.stages.append(census_report)
    evictions, eviction_report = clean_evictions(evictions_raw)
    result.stages.append(eviction_report)
    result.saved_files["clean_evictions"] = write_table(evictions, paths.clean_eviction_file)

    # Step 3: Join
    logger.info("Step 3: Joining")
    logger.info("-" * 60)
    evictions, prepare_report = prepare_evictions(evictions)
    result.stages.append(prepare_report)
    joined, join_report = join_census_evictions(census, evictions)
    result.stages.append(join_report)
    result.joined_shape = joined.shape
    result.saved_files["joined"] = write_table(joined, paths.joined_file)

    # Step 4: Subset
    logger.info("Step 4: Building analytic subset")
    logger.info("-" * 60)
    subset, subset_report = build_analytic_subset(joined)
    result.stages.append(subset_report)
    result.subset_shape = subset.shape
    result.saved_files["subset"] = write_table(subset, paths.subset_file)

    logger.info("")
    logger.info("=" * 60)
    logger.info("Workflow Summary")
    logger.info("=" * 60)
    for report in result.stages:
        logger.info(
            f"{report.stage}: {report.rows_in:,} -> {report.rows_out:,} rows, "
            f"{report.columns_in:,} -> {report.columns_out:,} columns"
        )
    for name, path in result.saved_files.items():
        logger.info(f"{name}: {path}")
    if result.warnings:
        logger.info(f"Data quality warnings: {len(result.warnings)}")

    return result


def summarize_inputs_workflow(
    census_file: Path | str | None = None,
    eviction_file: Path | str | None = None,
) -> dict[str, Any]:
    """
    Exploratory summary of the raw extracts.

    Reports dimensions and missing values for both tables, zero-variance
    census columns, the distribution of execution years, and the number of
    non-positive values in the male earnings indicator when present.

    Parameters
    ----------
    census_file, eviction_file : Path | str | None, optional
        Inputs. If None, the configured locations are used.

    Returns
    -------
    dict[str, Any]
        Summary keyed by table name.
    """
    paths = PipelinePaths.from_config(census_file=census_file, eviction_file=eviction_file)
    census = read_table(paths.census_file)
    evictions = read_table(paths.eviction_file)

    summary: dict[str, Any] = {
        "census": {
            **summarize_dimensions(census),
            "missing_total": sum(count_missing_by_column(census).values()),
            **zero_variance_summary(census),
        },
        "evictions": {
            **summarize_dimensions(evictions),
            "missing_by_column": count_missing_by_column(evictions),
        },
    }

    if EXECUTED_DATE_COLUMN in evictions.columns:
        years = evictions.get_column(EXECUTED_DATE_COLUMN).cast(pl.String).str.split("/").list.last()
        summary["evictions"]["executed_year_counts"] = tabulate_values(
            years.alias("executed_year").to_frame(), "executed_year"
        )

    lowered = {column.lower(): column for column in census.columns}
    indicators = [lowered[code] for code in ACS_RENAME_DICTIONARY if code in lowered]
    summary["census"]["indicators"] = describe_numeric_columns(census, indicators)

    earnings_codes = [old for old, new in ACS_RENAME_DICTIONARY.items() if new == EARNINGS_COLUMN]
    for code in earnings_codes + [EARNINGS_COLUMN]:
        if code in lowered:
            summary["census"]["non_positive_earnings"] = count_non_positive(census, lowered[code])
            break

    logger.info("=" * 60)
    logger.info("Input Summary")
    logger.info("=" * 60)
    for table, values in summary.items():
        logger.info(f"{table}: {values['rows']:,} rows, {values['columns']:,} columns")

    return summary


__all__ = [
    "PipelineResult",
    "run_eviction_pipeline",
    "summarize_inputs_workflow",
]
