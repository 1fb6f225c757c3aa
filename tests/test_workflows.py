"""End-to-end tests for the pipeline workflow and CLI."""

import polars as pl
import pytest

from eviction_data_manager import (
    DataQualityWarning,
    MalformedRecordError,
    PipelinePaths,
    run_eviction_pipeline,
    summarize_inputs_workflow,
)
from eviction_data_manager.cli import main
from eviction_data_manager.core.config import ANALYTIC_COLUMNS


def _paths(tmp_path, census_file, eviction_file) -> PipelinePaths:
    return PipelinePaths(
        census_file=census_file,
        eviction_file=eviction_file,
        clean_eviction_file=tmp_path / "clean" / "evictions_clean.csv",
        joined_file=tmp_path / "clean" / "joined.csv",
        subset_file=tmp_path / "clean" / "subset.csv",
    )


def _read_output(path) -> pl.DataFrame:
    df = pl.read_csv(path)
    return df.drop(df.columns[0])


def test_run_eviction_pipeline_writes_three_tables(tmp_path, input_files):
    paths = _paths(tmp_path, *input_files)
    with pytest.warns(DataQualityWarning):
        result = run_eviction_pipeline(paths)

    assert set(result.saved_files) == {"clean_evictions", "joined", "subset"}
    assert result.census_shape == (5, 20)
    assert result.eviction_shape == (8, 23)
    assert result.joined_shape == (5, 45)
    assert result.subset_shape == (3, 44)

    clean = _read_output(paths.clean_eviction_file)
    assert clean.height == 7
    assert "EXECUTED_DATE" in clean.columns

    subset_header = paths.subset_file.read_text().splitlines()[0].split(",")
    assert subset_header[1:] == list(ANALYTIC_COLUMNS)

    subset = _read_output(paths.subset_file)
    assert sorted(subset["wrkr_erng_male"].to_list()) == [3.0, 100.0, 100.0]
    assert (subset["wrkr_erng_male"] > 0).all()
    assert "70" not in subset["executed_year"].cast(pl.String).to_list()
    assert sorted(subset["executed_month"].to_list()) == ["Dec", "Mar", "Sept"]

    stages = [report.stage for report in result.stages]
    assert stages == ["clean_census", "clean_evictions", "prepare_evictions", "join", "subset"]
    assert any("zero-variance" in message for message in result.warnings)


def test_run_eviction_pipeline_accepts_path_overrides(tmp_path, input_files):
    census_file, eviction_file = input_files
    with pytest.warns(DataQualityWarning):
        result = run_eviction_pipeline(
            census_file=census_file,
            eviction_file=eviction_file,
            clean_eviction_file=tmp_path / "a.csv",
            joined_file=tmp_path / "b.csv",
            subset_file=tmp_path / "c.csv",
        )
    assert result.paths.subset_file == tmp_path / "c.csv"
    assert (tmp_path / "c.csv").is_file()


def test_failed_stage_writes_nothing(tmp_path, census_raw, evictions_raw):
    census_file = tmp_path / "census.csv"
    eviction_file = tmp_path / "evictions.csv"
    census_raw.write_csv(census_file)
    evictions_raw.with_columns(pl.lit("2018-01-05").alias("EXECUTED_DATE")).write_csv(eviction_file)
    paths = _paths(tmp_path, census_file, eviction_file)

    with pytest.warns(DataQualityWarning), pytest.raises(MalformedRecordError):
        run_eviction_pipeline(paths)

    assert paths.clean_eviction_file.is_file()
    assert not paths.joined_file.exists()
    assert not paths.subset_file.exists()


def test_summarize_inputs_workflow(input_files):
    census_file, eviction_file = input_files
    summary = summarize_inputs_workflow(census_file, eviction_file)

    assert summary["census"]["rows"] == 5
    assert summary["census"]["zero_variance_columns"] == ["STATE"]
    assert summary["census"]["non_positive_earnings"] == 2
    assert len(summary["census"]["indicators"]) == 18
    assert summary["evictions"]["missing_by_column"]["EVICTION_APT_NUM"] == 1
    assert summary["evictions"]["executed_year_counts"]["70"] == 1


def test_cli_run_and_summarize(tmp_path, input_files, capsys):
    census_file, eviction_file = input_files
    subset_file = tmp_path / "cli" / "subset.csv"
    exit_code = main(
        [
            "--log-level", "WARNING",
            "run",
            "--census", str(census_file),
            "--evictions", str(eviction_file),
            "--clean-evictions-output", str(tmp_path / "cli" / "clean.csv"),
            "--joined-output", str(tmp_path / "cli" / "joined.csv"),
            "--subset-output", str(subset_file),
        ]
    )
    assert exit_code == 0
    assert subset_file.is_file()

    exit_code = main(["summarize", "--census", str(census_file), "--evictions", str(eviction_file)])
    assert exit_code == 0
    assert "census:" in capsys.readouterr().out


def test_cli_reports_missing_input(tmp_path):
    exit_code = main(
        [
            "run",
            "--census", str(tmp_path / "missing.csv"),
            "--evictions", str(tmp_path / "missing.csv"),
            "--clean-evictions-output", str(tmp_path / "clean.csv"),
            "--joined-output", str(tmp_path / "joined.csv"),
            "--subset-output", str(tmp_path / "subset.csv"),
        ]
    )
    assert exit_code == 1
    assert not (tmp_path / "subset.csv").exists()
