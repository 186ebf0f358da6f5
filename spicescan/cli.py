"""
Command-line interface for spicescan.

Usage::

    python -m spicescan circuit.sp
    python -m spicescan circuit.sp --format text --workers 4
"""

import argparse
import json
import logging
import sys

from spicescan.config import ParserConfig
from spicescan.errors import SpiceScanError
from spicescan.ingestor.factory import get_netlist
from spicescan.log_config import setup_logging
from spicescan.models import ParseResult

__all__ = ["build_parser", "main", "print_result"]


def build_parser() -> argparse.ArgumentParser:
    """Build the CLI argument parser."""
    parser = argparse.ArgumentParser(
        prog="spicescan",
        description="Parse a SPICE netlist and report per-line diagnostics.",
    )
    parser.add_argument("netlist", help="Path to SPICE netlist file (.sp, .cir, .spice)")
    parser.add_argument("--format", choices=["json", "text"], default="json", help="Output format (default: json)")
    parser.add_argument("--workers", "-j", type=int, help="Number of parse workers (default: CPU count)")
    parser.add_argument(
        "--unordered", action="store_true", help="Keep records in worker completion order instead of line order"
    )
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default="WARNING",
        help="Logging level for progress messages (default: WARNING)",
    )
    return parser


def print_result(result: ParseResult, output_format: str = "json", stream=None) -> None:
    """Print the parsed netlist followed by its diagnostics."""
    stream = stream or sys.stdout
    print("Parsed Netlist:", file=stream)
    if output_format == "json":
        print(json.dumps(result.netlist.to_dict(), indent=2), file=stream)
    else:
        result.netlist.write(stream)

    if result.errors:
        print("\nErrors:", file=stream)
        for error in result.errors:
            error.write(stream)


def main(argv=None) -> int:
    """CLI entry point. Returns exit code."""
    parser = build_parser()
    args = parser.parse_args(argv)
    setup_logging(getattr(logging, args.log_level))

    try:
        config = ParserConfig(num_workers=args.workers, ordered=not args.unordered)
        config.resolved_workers()
    except ValueError as e:
        parser.error(str(e))

    try:
        result = get_netlist(args.netlist, config=config)
    except SpiceScanError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    print_result(result, args.format)
    return 0
