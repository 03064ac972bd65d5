"""Command line interface for the legal notice parser.

Usage::

    legal-notice notice.txt
    legal-notice notice.txt --format table --report
    echo "℗ 2011 The Weeknd XO, Inc." | legal-notice -
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from pydantic import ValidationError

from legal_notice.config import ParserConfig
from legal_notice.parser import parse_lines, render_notice
from legal_notice.utils import (
    configure_logging,
    print_error,
    print_records_table,
    print_report,
    print_success,
    print_warning,
    read_text,
    records_to_json,
    save_json,
)


def _build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="legal-notice",
        description="Parse copyright and phonographic-right notices into attribution records",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "Examples:\n"
            "  legal-notice notice.txt\n"
            "  legal-notice notice.txt --format table --report\n"
            "  legal-notice - --canonical < notice.txt\n"
        ),
    )
    parser.add_argument(
        "source",
        nargs="?",
        default="-",
        help="File containing the notice text, '-' for stdin (default: -)",
    )
    parser.add_argument(
        "--format", "-f",
        choices=("json", "table"),
        default="json",
        help="Output format for the records (default: json)",
    )
    parser.add_argument(
        "--report",
        action="store_true",
        help="Also print the status of every input line and the edit note",
    )
    parser.add_argument(
        "--canonical",
        action="store_true",
        help="Print the records re-rendered as canonical notice text instead",
    )
    parser.add_argument(
        "--output", "-o",
        default=None,
        help="Write the records as JSON to this file",
    )
    parser.add_argument(
        "--config", "-c",
        default=None,
        help="Parser configuration JSON (default: from LEGAL_NOTICE_* environment)",
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Log parser decisions",
    )
    return parser


def _load_config(path: str | None) -> ParserConfig:
    if path is None:
        return ParserConfig.from_env()
    return ParserConfig.load(Path(path))


def main(argv: list[str] | None = None) -> int:
    """CLI entry point for ``legal-notice`` and ``python -m legal_notice``.

    Returns:
        The process exit code: 0 on success, 1 on invalid input.
    """
    args = _build_arg_parser().parse_args(argv)
    configure_logging(args.verbose)

    try:
        config = _load_config(args.config)
    except FileNotFoundError:
        print_error(f"Error: Config file not found: {args.config}")
        return 1
    except ValidationError as exc:
        print_error(f"Error: Invalid config {args.config}: {exc.error_count()} error(s)")
        print_error(str(exc))
        return 1

    try:
        text = read_text(args.source)
    except FileNotFoundError as exc:
        print_error(f"Error: {exc}")
        return 1
    except UnicodeDecodeError:
        print_error(f"Error: {args.source} is not UTF-8 text")
        return 1

    report = parse_lines(text, config)
    records = report.records

    if args.canonical:
        sys.stdout.write(render_notice(records) + "\n")
    elif args.format == "table":
        print_records_table(records)
    else:
        sys.stdout.write(records_to_json(records) + "\n")

    if args.report:
        print_report(report)

    if not records:
        print_warning("No attributions found.")

    if args.output:
        target = save_json([record.to_dict() for record in records], args.output)
        print_success(f"Wrote {len(records)} record(s) to {target}")

    return 0


def run() -> None:
    """Console-script wrapper around ``main``."""
    sys.exit(main())


if __name__ == "__main__":
    run()
