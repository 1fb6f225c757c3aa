"""Tests for :mod:`eviction_data_manager.core.report`."""

import warnings

import polars as pl
import pytest

from eviction_data_manager import DataQualityWarning, SchemaError, StageReport


def test_stage_report_counts_shapes():
    census = pl.DataFrame({"a": [1, 2], "b": [3, 4]})
    evictions = pl.DataFrame({"c": [5]})
    report = StageReport.start("join", census, evictions)
    assert (report.rows_in, report.columns_in) == (3, 3)

    report.finish(census, matched=2)
    assert (report.rows_out, report.columns_out) == (2, 2)
    assert report.details == {"matched": 2}


def test_capture_warnings_records_and_reissues():
    report = StageReport("census")
    with pytest.warns(DataQualityWarning, match="duplicate rows"):
        with report.capture_warnings():
            warnings.warn("2 duplicate rows removed", DataQualityWarning)
    assert report.warnings == ["2 duplicate rows removed"]


def test_capture_warnings_keeps_warnings_when_stage_fails():
    report = StageReport("join")
    with pytest.warns(DataQualityWarning, match="no matching column"):
        with pytest.raises(SchemaError):
            with report.capture_warnings():
                warnings.warn("3 rename entries have no matching column", DataQualityWarning)
                raise SchemaError("tract_code", "join")
    assert report.warnings == ["3 rename entries have no matching column"]
