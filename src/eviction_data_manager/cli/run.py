"""
Run Command CLI
===============

Command-line interface for the full census/eviction pipeline.
"""

import argparse
import logging

from ..core.config import PipelinePaths
from ..core.workflows import run_eviction_pipeline

logger = logging.getLogger(__name__)


def configure_run_parser(parser: argparse.ArgumentParser) -> None:
    """
    Configure the run subcommand parser.

    Parameters
    ----------
    parser : argparse.ArgumentParser
        Parser to configure
    """
    parser.description = """
Clean, join and subset the census and eviction extracts.

Three files are written:
- the eviction table after incomplete rows are removed
- the joined census/eviction table with readable indicator names
- the analytic subset (44 columns, positive male earnings only)

Any path not given falls back to the configured default (environment
variables or a .env file: CENSUS_FILE, EVICTION_FILE, CLEAN_EVICTION_FILE,
JOINED_FILE, SUBSET_FILE).

Examples:
  evictions run
  evictions run --census acs.csv --evictions evictions.csv --subset-output out/subset.csv
    """

    parser.add_argument("--census", default=None, metavar="PATH", help="Census extract (CSV)")
    parser.add_argument("--evictions", default=None, metavar="PATH", help="Eviction extract (CSV)")
    parser.add_argument(
        "--clean-evictions-output",
        default=None,
        metavar="PATH",
        help="Output for the cleaned eviction table",
    )
    parser.add_argument(
        "--joined-output",
        default=None,
        metavar="PATH",
        help="Output for the joined table",
    )
    parser.add_argument(
        "--subset-output",
        default=None,
        metavar="PATH",
        help="Output for the analytic subset",
    )


def handle_run_command(args: argparse.Namespace) -> int:
    """
    Handle the run command.

    Parameters
    ----------
    args : argparse.Namespace
        Parsed command line arguments

    Returns
    -------
    int
        Exit code (0 for success, non-zero for failure)
    """
    paths = PipelinePaths.from_config(
        census_file=args.census,
        eviction_file=args.evictions,
        clean_eviction_file=args.clean_evictions_output,
        joined_file=args.joined_output,
        subset_file=args.subset_output,
    )
    result = run_eviction_pipeline(paths)
    logger.info(
        "Analytic subset: %d rows, %d columns", result.subset_shape[0], result.subset_shape[1]
    )
    return 0
