"""Tests for :mod:`eviction_data_manager.utils.io`."""

import logging

import polars as pl
import pytest

from eviction_data_manager import TableIOError, read_table, write_table


def test_read_table_treats_na_and_empty_as_missing(tmp_path):
    path = tmp_path / "table.csv"
    path.write_text("a,b,c\n1,NA,x\n2,,y\n")
    df = read_table(path)
    assert df.columns == ["a", "b", "c"]
    assert df["b"].null_count() == 2
    assert df["a"].to_list() == [1, 2]


def test_read_table_missing_file_raises_ioerror(tmp_path):
    with pytest.raises(TableIOError) as excinfo:
        read_table(tmp_path / "missing.csv")
    assert isinstance(excinfo.value, OSError)


def test_read_table_empty_file_raises_ioerror(tmp_path):
    path = tmp_path / "empty.csv"
    path.write_text("")
    with pytest.raises(TableIOError):
        read_table(path)


def test_write_table_adds_row_number_column(tmp_path):
    df = pl.DataFrame({"a": [10, 20], "b": ["x", "y"]})
    path = write_table(df, tmp_path / "out" / "table.csv")

    lines = path.read_text().splitlines()
    assert lines[0].split(",")[0] in ("", '""')
    assert lines[0].split(",")[1:] == ["a", "b"]
    assert lines[1:] == ["1,10,x", "2,20,y"]
    assert [p.name for p in path.parent.iterdir()] == ["table.csv"]
    assert df.columns == ["a", "b"]


def test_write_table_unwritable_destination(tmp_path):
    blocker = tmp_path / "blocker"
    blocker.write_text("not a directory")
    with pytest.raises(TableIOError):
        write_table(pl.DataFrame({"a": [1]}), blocker / "table.csv")


def test_write_table_logs_written_width(tmp_path, caplog):
    df = pl.DataFrame({"a": [10, 20], "b": ["x", "y"]})
    with caplog.at_level(logging.INFO, logger="eviction_data_manager.utils.io"):
        write_table(df, tmp_path / "table.csv")
    assert "2 rows, 3 columns" in caplog.text
