"""
Command-line entry point.

Reads a saved smartctl JSON report (``smartctl -a -j /dev/sdX > report.json``)
from a file or stdin and prints the live self-test status. This never runs
smartctl itself and never polls; re-run it against a fresh report instead.

Exit codes:
- 0: status printed
- 1: report parsed but self-test data missing or malformed
- 2: input unreadable or not valid JSON
"""

import argparse
import json
import logging
import sys
from typing import List, Optional

from .exceptions import SmartSelfTestError
from .models.self_test import SelfTest
from .smart_data.extractor import extract_self_test, parse_smartctl_report

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_SELF_TEST_ERROR = 1
EXIT_INPUT_ERROR = 2


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="smart-selftest",
        description="Show the live self-test status from a smartctl JSON report.",
    )
    parser.add_argument(
        "report",
        nargs="?",
        default="-",
        help="Path to smartctl -j output, or '-' for stdin (default)",
    )
    parser.add_argument(
        "--section",
        action="store_true",
        help="Input is the ata_smart_data section rather than the whole report",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Print machine-readable JSON instead of a summary",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable debug logging",
    )
    return parser


def format_summary(self_test: SelfTest) -> str:
    """Render a SelfTest as a short human-readable summary."""
    status = self_test.status
    lines = [
        f"Status: {status.label} ({status.value})",
        f"Running: {'yes' if self_test.is_running() else 'no'}",
    ]

    if status.remaining_percent is not None:
        lines.append(f"Remaining: {status.remaining_percent}%")
    if status.passed is not None:
        lines.append(f"Passed: {'yes' if status.passed else 'no'}")

    for test_type, minutes in self_test.get_test_types():
        lines.append(f"Polling {test_type}: {minutes} min")

    return "\n".join(lines)


def format_json(self_test: SelfTest) -> str:
    return json.dumps(
        {
            "self_test": self_test.to_document(),
            "is_running": self_test.is_running(),
            "test_types": [list(pair) for pair in self_test.get_test_types()],
        },
        indent=2,
    )


def _read_document(source: str):
    if source == "-":
        return json.load(sys.stdin)
    with open(source, "r", encoding="utf-8") as f:
        return json.load(f)


def main(argv: Optional[List[str]] = None) -> int:
    """
    Main entry point for the command line.

    Args:
        argv: Argument list (defaults to sys.argv[1:])

    Returns:
        Process exit code
    """
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format='%(levelname)s: %(name)s: %(message)s'
    )

    try:
        document = _read_document(args.report)
    except (OSError, ValueError) as e:
        # json.JSONDecodeError is a ValueError
        print(f"Could not read report {args.report}: {e}", file=sys.stderr)
        return EXIT_INPUT_ERROR

    try:
        if args.section:
            self_test = extract_self_test(document)
        else:
            self_test = parse_smartctl_report(document)
        output = format_json(self_test) if args.json else format_summary(self_test)
    except SmartSelfTestError as e:
        logger.debug("Self-test extraction failed", exc_info=True)
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_SELF_TEST_ERROR

    print(output)
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
