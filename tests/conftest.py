"""Shared census and eviction frames for the pipeline tests."""

import polars as pl
import pytest

from eviction_data_manager.core.config import ACS_RENAME_DICTIONARY


TRACTS = ["000100", "000200", "000300", "000400"]


def _census_frame() -> pl.DataFrame:
    index = [
        f"Census Tract {int(tract) // 100}, Bronx County, New York: state:36> county:005> tract:{tract}"
        for tract in TRACTS
    ] + ["Bronx County, New York: state:36> county:005"]
    data = {"index": index, "STATE": [36] * 5}
    for position, code in enumerate(ACS_RENAME_DICTIONARY):
        data[code.upper()] = [float(10 * position + row) for row in range(5)]
    # male earnings per tract: 100 -> -5, 200 -> 0, 300 -> 3, 400 -> 100
    data["DP03_0093E"] = [-5.0, 0.0, 3.0, 100.0, 50.0]
    return pl.DataFrame(data)


def _eviction_frame() -> pl.DataFrame:
    rows = [
        # tract, date, apartment
        (100, "1/5/2018", "1A"),
        (200, "2/6/2018", "2B"),
        (300, "9/7/2019", "3C"),
        (400, "12/8/2019", "4D"),
        (400, "3/9/2020", "5E"),
        (999, "4/1/2018", "6F"),
        (300, "5/5/70", "7G"),
        (100, "6/1/2018", None),
    ]
    n = len(rows)
    return pl.DataFrame(
        {
            "COURT_INDEX_NUMBER": [f"{60000 + i}/17" for i in range(n)],
            "DOCKET_NUMBER": [80000 + i for i in range(n)],
            "EVICTION_ADDRESS": [f"{i + 1} GRAND CONCOURSE" for i in range(n)],
            "EVICTION_APT_NUM": [apt for _, _, apt in rows],
            "EXECUTED_DATE": [date for _, date, _ in rows],
            "MARSHAL_FIRST_NAME": ["Ronald"] * n,
            "MARSHAL_LAST_NAME": ["Nelson"] * n,
            "RESIDENTIAL_COMMERCIAL_IND": ["Residential"] * n,
            "BOROUGH": ["BRONX"] * n,
            "EVICTION_ZIP": [10451] * n,
            "address.cleaned": [f"{i + 1} GRAND CONCOURSE, BRONX" for i in range(n)],
            "state": ["NY"] * n,
            "input_address": [f"{i + 1} GRAND CONCOURSE, BRONX, NY, 10451" for i in range(n)],
            "match_indicator": ["Match"] * n,
            "match_type": ["Exact"] * n,
            "matched_address": [f"{i + 1} GRAND CONCOURSE, BRONX, NY, 10451" for i in range(n)],
            "lon_lat": [f"-73.9{i},40.8{i}" for i in range(n)],
            "tiger_line_id": [59656000 + i for i in range(n)],
            "side": ["L"] * n,
            "state_code": [36] * n,
            "county_code": [5] * n,
            "tract_code": [tract for tract, _, _ in rows],
            "block_code": [1000 + i for i in range(n)],
        }
    )


@pytest.fixture
def census_raw() -> pl.DataFrame:
    return _census_frame()


@pytest.fixture
def evictions_raw() -> pl.DataFrame:
    return _eviction_frame()


@pytest.fixture
def input_files(tmp_path, census_raw, evictions_raw):
    census_file = tmp_path / "raw" / "census.csv"
    eviction_file = tmp_path / "raw" / "evictions.csv"
    census_file.parent.mkdir()
    census_raw.write_csv(census_file)
    evictions_raw.write_csv(eviction_file)
    return census_file, eviction_file
