# -*- coding: utf-8 -*-
"""
Configuration management for Eviction Data Manager.

This module handles path configuration and environment variable setup
for the eviction data package, along with the fixed lookup tables used
by the cleaning and join stages.
"""

# Import Packages
from dataclasses import dataclass
from decouple import config
from pathlib import Path
from types import MappingProxyType

# Specific Data Folders
# Note: __file__.parent.parent.parent.parent goes from src/eviction_data_manager/core/ back to project root
PROJECT_DIR = Path(config("PROJECT_DIR", default=Path(__file__).parent.parent.parent.parent))
DATA_DIR = Path(config("DATA_DIR", default=PROJECT_DIR / "data"))
RAW_DIR = Path(config("EVICTION_RAW_DIR", default=DATA_DIR / "raw"))
CLEAN_DIR = Path(config("EVICTION_CLEAN_DIR", default=DATA_DIR / "clean"))

# Input and output files
CENSUS_FILE = Path(config("CENSUS_FILE", default=RAW_DIR / "nyc_acs5-2018_census.csv"))
EVICTION_FILE = Path(config("EVICTION_FILE", default=RAW_DIR / "nyc_evictions_geocoded.csv"))
CLEAN_EVICTION_FILE = Path(config("CLEAN_EVICTION_FILE", default=CLEAN_DIR / "df_nycevict_raw.csv"))
JOINED_FILE = Path(config("JOINED_FILE", default=CLEAN_DIR / "df_nycacs_evict_raw.csv"))
SUBSET_FILE = Path(config("SUBSET_FILE", default=CLEAN_DIR / "df_nycacs_evict_raw_subset.csv"))

# Header of the leading row-number column written to every output file
ROW_INDEX_COLUMN = config("ROW_INDEX_COLUMN", default="")


# ============================================================================
# Reading Constants
# ============================================================================

# Tokens read as missing values
NA_VALUES = ("", "NA")


# ============================================================================
# Census Constants
# ============================================================================

# Text column holding the geographic identifier of each tract
CENSUS_INDEX_COLUMN = "index"

# Literal text preceding the tract digits inside the index column
TRACT_MARKER = "tract:"

# Join key shared by both tables
TRACT_CODE_COLUMN = "tract_code"


# ============================================================================
# Eviction Constants
# ============================================================================

EXECUTED_DATE_COLUMN = "EXECUTED_DATE"
LON_LAT_COLUMN = "lon_lat"

# Tokens of EXECUTED_DATE (M/D/YYYY), in order
EXECUTED_DATE_PARTS = ("executed_month", "executed_day", "executed_year")
LON_LAT_PARTS = ("lon", "lat")

# Known garbage value of executed_year in the geocoded extract
GARBAGE_YEAR = "70"

_MONTH_NAMES = (
    "Jan", "Feb", "Mar", "Apr", "May", "Jun",
    "Jul", "Aug", "Sept", "Oct", "Nov", "Dec",
)

# Month code -> label. Zero-padded codes come from MM/DD/YYYY dates.
MONTH_LABELS = MappingProxyType(
    {
        **{str(number): name for number, name in enumerate(_MONTH_NAMES, start=1)},
        **{f"{number:02d}": name for number, name in enumerate(_MONTH_NAMES, start=1)},
    }
)


# ============================================================================
# Column Rename Dictionary (ACS Profile Codes -> Readable Names)
# ============================================================================

# Names are lower case on both sides: every column is lower-cased before renaming.
# Only columns that exist in the joined data are renamed.
ACS_RENAME_DICTIONARY = MappingProxyType(
    {
        "dp03_0052e": "huse_incm_less10k",
        "dp03_0062e": "huse_incm_median",
        "dp03_0066e": "huse_with_ssn",
        "dp03_0068e": "huse_incm_retr",
        "dp03_0074e": "huse_incm_with_fdstmp",
        "dp03_0075e": "fmlys",
        "dp03_0076e": "fmly_incm_less10k",
        "dp03_0086e": "fmly_incm_median",
        "dp03_0093e": "wrkr_erng_male",
        "dp03_0094e": "wrkr_erng_female",
        "dp04_0117e": "huse_mrtg_no",
        "dp04_0136e": "huse_incm_by_rent",
        "dp04_0137e": "huse_incm_by_rent_less15pct",
        "dp04_0138e": "huse_incm_by_rent_less20pct",
        "dp04_0139e": "huse_incm_by_rent_less25pct",
        "dp04_0140e": "huse_incm_by_rent_less30pct",
        "dp04_0141e": "huse_incm_by_rent_less35pct",
        "dp04_0142e": "huse_incm_by_rent_more35pct",
    }
)

# Continuous census indicators, in rename order
INDICATOR_COLUMNS = tuple(ACS_RENAME_DICTIONARY.values())

# Eviction and geocoding columns kept in the analytic subset
EVICTION_SUBSET_COLUMNS = (
    "court_index_number",
    "docket_number",
    "eviction_address",
    "eviction_apt_num",
    "executed_year",
    "executed_month",
    "executed_day",
    "marshal_first_name",
    "marshal_last_name",
    "residential_commercial_ind",
    "borough",
    "eviction_zip",
    "address.cleaned",
    "state",
    "input_address",
    "match_indicator",
    "match_type",
    "matched_address",
    "lon",
    "lat",
    "tiger_line_id",
    "side",
    "state_code",
    "county_code",
    "tract_code",
    "block_code",
)

# Final analytic subset, in output order
ANALYTIC_COLUMNS = INDICATOR_COLUMNS + EVICTION_SUBSET_COLUMNS

# Earnings indicator that must be strictly positive in the analytic subset
EARNINGS_COLUMN = "wrkr_erng_male"


# ============================================================================
# Helper Classes
# ============================================================================


@dataclass(frozen=True)
class PipelinePaths:
    """File locations for one pipeline run.

    Parameters
    ----------
    census_file : Path
        Raw census extract.
    eviction_file : Path
        Raw geocoded eviction extract.
    clean_eviction_file : Path
        Output for the eviction table after missing-row removal.
    joined_file : Path
        Output for the joined and renamed table.
    subset_file : Path
        Output for the final analytic subset.
    """

    census_file: Path
    eviction_file: Path
    clean_eviction_file: Path
    joined_file: Path
    subset_file: Path

    @classmethod
    def from_config(
        cls,
        census_file: Path | str | None = None,
        eviction_file: Path | str | None = None,
        clean_eviction_file: Path | str | None = None,
        joined_file: Path | str | None = None,
        subset_file: Path | str | None = None,
    ) -> "PipelinePaths":
        """Build paths, filling any omitted location from the configuration."""
        return cls(
            census_file=Path(census_file or CENSUS_FILE),
            eviction_file=Path(eviction_file or EVICTION_FILE),
            clean_eviction_file=Path(clean_eviction_file or CLEAN_EVICTION_FILE),
            joined_file=Path(joined_file or JOINED_FILE),
            subset_file=Path(subset_file or SUBSET_FILE),
        )
