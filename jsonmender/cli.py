"""
Command-line entry point: ``jsonmender <path-to-file>``.
"""

import argparse
import json
import logging
import sys
from typing import Optional

from .core.engine import repair_file
from .security.exceptions import RepairError
from .utils.config import RepairConfig


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="jsonmender",
        description="Repair a malformed JSON document in place, keeping a backup.",
        epilog="Example: jsonmender project-content.json",
    )
    parser.add_argument("path", help="JSON document to repair")
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="report what would be fixed without writing any file",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        dest="as_json",
        help="print the report as JSON",
    )
    parser.add_argument(
        "--conservative",
        action="store_true",
        help="skip multi-line reassembly and unpaired-quote repair",
    )
    verbosity = parser.add_mutually_exclusive_group()
    verbosity.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    verbosity.add_argument("-q", "--quiet", action="store_true", help="errors only")
    return parser


def _configure_logging(verbose: bool, quiet: bool) -> None:
    level = logging.INFO
    if verbose:
        level = logging.DEBUG
    elif quiet:
        level = logging.ERROR
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")


def main(argv: Optional[list[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    _configure_logging(args.verbose, args.quiet)

    config = RepairConfig.conservative() if args.conservative else RepairConfig()
    try:
        outcome = repair_file(args.path, config=config, dry_run=args.dry_run)
    except RepairError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    report = outcome.report()
    if args.as_json:
        payload = report.to_dict()
        payload.update({"path": outcome.path, "written": outcome.written})
        print(json.dumps(payload, ensure_ascii=False, indent=2))
        return 0

    if outcome.written:
        print(f"Created backup: {outcome.backup_path}")
        print(f"File repaired: {outcome.path}")
    elif outcome.result.changed:
        print(f"Dry run, file left untouched: {outcome.path}")
    elif outcome.result.errors:
        print(f"No automatic fix applies, file left untouched: {outcome.path}")
    else:
        print(f"File is already correct: {outcome.path}")
    print()
    print(report.render())
    return 0


if __name__ == "__main__":
    sys.exit(main())
