"""CLI entry point for port status evaluation.

Examples:
  # Single port
  portstatus classify --admin enabled --oper up --health good

  # Trunk member blocked by LACP
  portstatus classify --admin enabled --oper up --health good --block blocked

  # Fold member indicators
  portstatus aggregate green:solid amber:blink_fast

  # Whole device snapshot
  portstatus report snapshot.json
"""

from __future__ import annotations

import argparse
import sys
from enum import Enum

from loguru import logger
from tabulate import tabulate

from portstatus import configure_logging
from portstatus.aggregator import aggregate
from portstatus.classifier import classify
from portstatus.exceptions import PortStatusError
from portstatus.models.indicator import BlinkPattern, LedColor, StatusIndicator
from portstatus.models.snapshot import load_report
from portstatus.models.state import AdminState, HealthState, OperState, TrunkMemberBlockState
from portstatus.report import evaluate_report


def _format(indicator: StatusIndicator) -> str:
    return f"{indicator.color.value} {indicator.pattern.value}"


def parse_indicator(text: str) -> StatusIndicator:
    """Parse ``color:pattern`` (e.g. ``amber:blink_fast``) for argparse."""
    color, sep, pattern = text.partition(":")
    if not sep:
        raise argparse.ArgumentTypeError(f"expected COLOR:PATTERN, got '{text}'")
    try:
        return StatusIndicator(LedColor(color.lower()), BlinkPattern(pattern.lower()))
    except ValueError as e:
        raise argparse.ArgumentTypeError(str(e)) from e


def cmd_classify(args: argparse.Namespace) -> None:
    """Classify a single port."""
    indicator = classify(args.admin, args.oper, args.health, args.block)
    print(_format(indicator))


def cmd_aggregate(args: argparse.Namespace) -> None:
    """Aggregate indicators given on the command line."""
    print(_format(aggregate(args.indicators)))


def cmd_report(args: argparse.Namespace) -> None:
    """Evaluate all ports and trunks in a snapshot file."""
    rows = evaluate_report(load_report(args.file))
    if not rows:
        print("No ports or trunks in snapshot")
        return
    table = [[r.name, r.kind, r.color.value, r.pattern.value] for r in rows]
    print(tabulate(table, headers=["Name", "Kind", "Color", "Pattern"]))


def _metavar(enum_cls: type[Enum]) -> str:
    return "{" + ",".join(member.value for member in enum_cls) + "}"


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser for port status evaluation."""
    parser = argparse.ArgumentParser(
        prog="portstatus",
        description="Derive port and trunk status indicators from observed port states",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # classify
    classify_parser = subparsers.add_parser("classify", help="Classify a single port")
    classify_parser.add_argument("--admin", type=AdminState, required=True, metavar=_metavar(AdminState))
    classify_parser.add_argument("--oper", type=OperState, required=True, metavar=_metavar(OperState))
    classify_parser.add_argument(
        "--health",
        type=HealthState,
        default=HealthState.UNKNOWN,
        metavar=_metavar(HealthState),
    )
    classify_parser.add_argument(
        "--block",
        type=TrunkMemberBlockState,
        default=TrunkMemberBlockState.UNKNOWN,
        metavar=_metavar(TrunkMemberBlockState),
        help="Trunk member block state (leave unknown for standalone ports)",
    )

    # aggregate
    aggregate_parser = subparsers.add_parser("aggregate", help="Fold indicators into one")
    aggregate_parser.add_argument(
        "indicators",
        nargs="*",
        type=parse_indicator,
        metavar="COLOR:PATTERN",
        help="Indicators in member order, e.g. green:solid amber:blink_fast",
    )

    # report
    report_parser = subparsers.add_parser("report", help="Evaluate a JSON state snapshot")
    report_parser.add_argument("file", help="Snapshot file with 'ports' and 'trunks'")

    return parser


def main(args: list[str] | None = None) -> None:
    """Main entry point for the port status CLI."""
    parser = build_parser()
    parsed = parser.parse_args(args)

    if not parsed.command:
        parser.print_help()
        sys.exit(1)

    if parsed.verbose:
        configure_logging()
    else:
        logger.remove()
        logger.add(sys.stderr, level="WARNING")

    try:
        if parsed.command == "classify":
            cmd_classify(parsed)
        elif parsed.command == "aggregate":
            cmd_aggregate(parsed)
        elif parsed.command == "report":
            cmd_report(parsed)
    except PortStatusError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)
    except KeyboardInterrupt:
        print("\nAborted.", file=sys.stderr)
        sys.exit(130)


if __name__ == "__main__":
    main()
