"""
Summarize Command CLI
=====================

Command-line interface for exploratory summaries of the raw extracts.
"""

import argparse
import json
import logging

from ..core.workflows import summarize_inputs_workflow

logger = logging.getLogger(__name__)


def configure_summarize_parser(parser: argparse.ArgumentParser) -> None:
    """Configure the summarize subcommand parser."""
    parser.description = """
Summarize the raw census and eviction extracts: dimensions, missing values,
zero-variance census columns, execution years and indicator distributions.

Examples:
  evictions summarize
  evictions summarize --census acs.csv --evictions evictions.csv --json
    """
    parser.add_argument("--census", default=None, metavar="PATH", help="Census extract (CSV)")
    parser.add_argument("--evictions", default=None, metavar="PATH", help="Eviction extract (CSV)")
    parser.add_argument(
        "--json",
        action="store_true",
        help="Print the full summary as JSON",
    )


def handle_summarize_command(args: argparse.Namespace) -> int:
    """Handle the summarize command."""
    summary = summarize_inputs_workflow(census_file=args.census, eviction_file=args.evictions)
    if args.json:
        print(json.dumps(summary, indent=2, default=str))
    else:
        for table, values in summary.items():
            print(f"{table}:")
            for key, value in values.items():
                if isinstance(value, dict) and len(value) > 12:
                    value = f"{len(value)} entries"
                print(f"  {key}: {value}")
    return 0
