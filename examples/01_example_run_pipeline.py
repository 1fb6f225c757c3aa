"""
Example: Run the Census/Eviction Pipeline
=========================================

This example demonstrates how to use run_eviction_pipeline to clean the
census and eviction extracts, join them on census tract and build the
analytic subset.

The workflow includes:
1. Loading both extracts
2. Cleaning (zero-variance census columns, incomplete eviction rows)
3. Joining on tract code and renaming ACS indicators
4. Projecting the 44 analytic columns and dropping non-positive earnings

Before running:
1. Place the extracts at the configured locations (CENSUS_FILE and
   EVICTION_FILE in your .env), or adjust the paths below

Usage:
    python examples/01_example_run_pipeline.py

Alternatively, you can use the CLI:
    evictions run --census data/raw/nyc_acs5-2018_census.csv \
        --evictions data/raw/nyc_evictions_geocoded.csv
"""

import logging

from eviction_data_manager import PipelinePaths, run_eviction_pipeline


def main():
    """Run the pipeline with configured paths."""

    # Set up logging; data quality warnings go to the log
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s - %(levelname)s - %(message)s",
    )
    logging.captureWarnings(True)

    logger = logging.getLogger(__name__)
    logger.info("Starting census/eviction pipeline")

    # Omitted paths fall back to the configuration
    paths = PipelinePaths.from_config(
        census_file="data/raw/nyc_acs5-2018_census.csv",
        eviction_file="data/raw/nyc_evictions_geocoded.csv",
    )
    result = run_eviction_pipeline(paths)

    # Report results
    logger.info("")
    logger.info(f"Joined table: {result.joined_shape[0]:,} rows x {result.joined_shape[1]:,} columns")
    logger.info(f"Analytic subset: {result.subset_shape[0]:,} rows x {result.subset_shape[1]:,} columns")
    for message in result.warnings:
        logger.info(f"Data quality: {message}")


if __name__ == "__main__":
    main()
