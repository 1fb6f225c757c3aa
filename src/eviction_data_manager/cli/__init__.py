"""
Eviction Data Manager CLI
=========================

Command-line interface for the census/eviction pipeline.

Commands
--------
- evictions run: Clean, join and subset the two extracts
- evictions summarize: Exploratory summary of the raw extracts

Example Usage
-------------
# Run with the configured paths
$ evictions run

# Run with explicit inputs and outputs
$ evictions run --census data/raw/acs.csv --evictions data/raw/evictions.csv \
    --subset-output data/clean/subset.csv

# Summarize the raw extracts
$ evictions summarize

For detailed help on each command:
$ evictions run --help
$ evictions summarize --help
"""

import argparse
import logging
import sys
from typing import Sequence

from ..core.exceptions import EvictionDataError
from .run import configure_run_parser, handle_run_command
from .summarize import configure_summarize_parser, handle_summarize_command


def main(argv: Sequence[str] | None = None) -> int:
    """
    Main entry point for the eviction CLI.

    Parameters
    ----------
    argv : Sequence[str] | None, optional
        Command line arguments. If None, uses sys.argv[1:]

    Returns
    -------
    int
        Exit code (0 for success, non-zero for failure)
    """
    parser = argparse.ArgumentParser(
        prog="evictions",
        description="Eviction Data Manager - Clean and join census and eviction extracts",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Run the full pipeline with configured paths
  evictions run

  # Run with explicit inputs
  evictions run --census acs.csv --evictions evictions.csv

  # Summarize the raw extracts
  evictions summarize --census acs.csv --evictions evictions.csv
        """,
    )

    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default="INFO",
        help="Set logging level (default: INFO)",
    )

    # Create subcommands
    subparsers = parser.add_subparsers(
        dest="command",
        required=True,
        help="Command to execute",
    )

    run_parser = subparsers.add_parser(
        "run",
        help="Clean, join and subset the census and eviction extracts",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    configure_run_parser(run_parser)

    summarize_parser = subparsers.add_parser(
        "summarize",
        help="Summarize the raw extracts",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    configure_summarize_parser(summarize_parser)

    # Parse arguments
    args = parser.parse_args(argv)

    # Configure logging; data quality warnings are logged, not printed
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s - %(levelname)s - %(message)s",
    )
    logging.captureWarnings(True)

    # Execute command
    try:
        if args.command == "run":
            return handle_run_command(args)
        elif args.command == "summarize":
            return handle_summarize_command(args)
        else:
            parser.print_help()
            return 1
    except KeyboardInterrupt:
        print("\n\nOperation cancelled by user", file=sys.stderr)
        return 130
    except EvictionDataError as e:
        logging.error(f"Command failed: {e}")
        return 1
    finally:
        logging.captureWarnings(False)


if __name__ == "__main__":
    sys.exit(main())
