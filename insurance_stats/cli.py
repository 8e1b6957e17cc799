"""
cli.py - command line entry point.

Usage:
    python -m insurance_stats <path-to-insurance.csv> <N> [--config FILE] [--log-level LEVEL]

Exit status: 0 on success, 2 for usage errors (wrong argument count, N not a
positive integer), 1 when the dataset cannot be loaded, 3 when a statistics
collector fails. No report is printed on failure.

Module: insurance_stats.cli
"""
from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from .errors import CollectorError, DataSourceError, FieldFormatError, UsageError
from .record_parser import RecordParser
from .report import build_report
from .statistics import Statistics

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_LOAD_FAILED = 1
EXIT_ANALYSIS_FAILED = 3


def parse_limit(text: str) -> int:
    """Parse the record limit N, raising UsageError unless it is a positive integer."""
    try:
        limit = int(text)
    except (TypeError, ValueError):
        raise UsageError("N must be a positive integer.") from None
    if limit <= 0:
        raise UsageError("N must be a positive integer.")
    return limit


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="insurance-stats",
        description="Summary statistics and text histograms for an insurance CSV file.",
    )
    parser.add_argument("csv_path", type=Path, help="Path to the insurance CSV file.")
    parser.add_argument("limit", metavar="N", help="Number of records to load (positive integer).")
    parser.add_argument("--config", type=Path, default=None, help="YAML file with a 'statistics' section.")
    parser.add_argument("--log-level", default="WARNING",
                        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
                        help="Logging level for messages on stderr.")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """
    Run the command line tool.

    Args:
        argv: Arguments without the program name; defaults to sys.argv[1:].

    Returns:
        Process exit status.
    """
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=getattr(logging, args.log_level), format="%(levelname)s %(name)s: %(message)s")

    try:
        limit = parse_limit(args.limit)
    except UsageError as e:
        print(e, file=sys.stderr)
        return e.exit_code

    try:
        records = RecordParser(args.csv_path).load(limit)
    except (DataSourceError, FieldFormatError) as e:
        logger.error(f"Failed to load {args.csv_path}: {e}")
        return EXIT_LOAD_FAILED

    try:
        stats = Statistics(records=records, config_file=args.config)
        results = stats.results if stats.results is not None else stats.analyze()
    except CollectorError as e:
        logger.error(f"Statistics failed: {e}")
        return EXIT_ANALYSIS_FAILED

    for line in build_report(records, results, histogram_width=stats.config.histogram_width):
        print(line)
    return EXIT_OK
