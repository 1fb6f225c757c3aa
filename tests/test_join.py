"""Tests for :mod:`eviction_data_manager.core.join`."""

import polars as pl
import pytest

from eviction_data_manager import (
    DataQualityWarning,
    SchemaError,
    build_analytic_subset,
    clean_census,
    clean_evictions,
    join_census_evictions,
    prepare_evictions,
)


def _join(census: pl.DataFrame, evictions: pl.DataFrame):
    with pytest.warns(DataQualityWarning):
        return join_census_evictions(census, evictions)


def test_join_is_cross_product_per_key():
    census = pl.DataFrame({"Tract_Code": [1, 1, 2, 3], "Income": [10, 11, 20, 30]})
    evictions = pl.DataFrame({"TRACT_CODE": [1, 1, 1, 2, 4], "Docket": ["a", "b", "c", "d", "e"]})
    result, report = _join(census, evictions)

    # tract 1: 2 x 3, tract 2: 1 x 1; tracts 3 and 4 exist on one side only
    assert result.height == 7
    assert sorted(result.columns) == ["docket", "income", "tract_code"]
    assert set(result["tract_code"].to_list()) == {"1", "2"}
    assert report.rows_out == 7
    assert report.details["matched_tracts"] == 2


def test_join_matches_zero_padded_and_numeric_keys():
    census = pl.DataFrame({"tract_code": [100, None], "x": [1, 2]})
    evictions = pl.DataFrame({"tract_code": ["000100", None], "y": [3, 4]})
    result, _ = _join(census, evictions)
    assert result.select("tract_code", "x", "y").rows() == [("100", 1, 3)]


def test_join_suffixes_overlapping_census_columns():
    census = pl.DataFrame({"tract_code": [1], "Borough": ["census"]})
    evictions = pl.DataFrame({"tract_code": [1], "BOROUGH": ["BRONX"]})
    result, _ = _join(census, evictions)
    assert result["borough"].to_list() == ["BRONX"]
    assert result["borough_census"].to_list() == ["census"]


def test_subset_takes_eviction_values_for_shared_names(census_raw, evictions_raw):
    census_raw = census_raw.with_columns(
        pl.Series("BOROUGH", [f"census-borough-{i}" for i in range(census_raw.height)]),
        pl.Series("SIDE", [f"census-side-{i}" for i in range(census_raw.height)]),
    )
    with pytest.warns(DataQualityWarning):
        census, _ = clean_census(census_raw)
    evictions, _ = clean_evictions(evictions_raw)
    evictions, _ = prepare_evictions(evictions)

    joined, _ = join_census_evictions(census, evictions)
    subset, _ = build_analytic_subset(joined)

    assert set(subset["borough"].to_list()) == {"BRONX"}
    assert set(subset["side"].to_list()) == {"L"}
    assert "borough_census" in joined.columns


def test_join_requires_tract_code_on_both_sides():
    census = pl.DataFrame({"tract_code": [1]})
    evictions = pl.DataFrame({"tract": [1]})
    with pytest.raises(SchemaError) as excinfo:
        join_census_evictions(census, evictions)
    assert excinfo.value.column == "tract_code"
    assert excinfo.value.stage == "join"


def test_join_renames_acs_columns(census_raw, evictions_raw):
    with pytest.warns(DataQualityWarning):
        census, _ = clean_census(census_raw)
    evictions, _ = clean_evictions(evictions_raw)
    evictions, _ = prepare_evictions(evictions)

    result, report = join_census_evictions(census, evictions)

    assert all(column == column.lower() for column in result.columns)
    assert "wrkr_erng_male" in result.columns
    assert "dp03_0093e" not in result.columns
    # tract 999 has no census row
    assert sorted(result["tract_code"].to_list()) == ["100", "200", "300", "400", "400"]
    census_keys = {str(v) for v in census["tract_code"].drop_nulls().to_list()}
    eviction_keys = {str(v) for v in evictions["tract_code"].to_list()}
    assert set(result["tract_code"].to_list()) <= census_keys & eviction_keys
    assert report.warnings == []
    assert result.width == census.width + evictions.width - 1
