"""
Example: Summarize the Raw Extracts
===================================

Prints dimensions, missing values, zero-variance census columns, the
distribution of execution years and the ACS indicator summaries used to
choose the cleaning rules.

Usage:
    python examples/99_example_summarize_inputs.py
"""

import logging

from eviction_data_manager import summarize_inputs_workflow

logging.basicConfig(level=logging.INFO)

summary = summarize_inputs_workflow()

print("Census zero-variance columns:", summary["census"]["zero_variance_count"])
print("Eviction missing values:")
for column, count in summary["evictions"]["missing_by_column"].items():
    if count:
        print(f"  {column}: {count:,}")

print("Execution years:")
for year, count in summary["evictions"].get("executed_year_counts", {}).items():
    print(f"  {year}: {count:,}")

print("Indicators:")
for column, stats in summary["census"]["indicators"].items():
    print(f"  {column}: min={stats['min']}, median={stats['median']}, max={stats['max']}")
