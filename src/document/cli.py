#!/usr/bin/env python3
"""CLI interface for document module."""

import argparse
from pathlib import Path

from rich.markup import escape

from common.env import env
from common.logger import error, get_logger, setup_logging, success

from .batch import process_document
from .formatter import format_section, sections_to_json
from .reconcile import TieBreak

logger = get_logger(__name__)


def cmd_parse(args):
    """Parse a notes file into sections and reconcile their references.

    Args:
        args: Parsed command-line arguments

    Returns:
        Exit code (0 when every block was processed, 1 otherwise)
    """
    try:
        tie_break = TieBreak(args.tie_break)
    except ValueError:
        error(f"Unknown tie-break '{escape(args.tie_break)}', expected one of: first, shortest")
        return 1

    try:
        document = args.file.read_text(encoding="utf-8")
    except OSError as e:
        error(f"Cannot read {escape(str(args.file))}: {escape(str(e))}")
        return 1

    result = process_document(document, tie_break=tie_break)

    if args.format == "json":
        output = sections_to_json(result.sections)
    else:
        output = "\n\n".join(format_section(s) for s in result.sections)

    if args.output:
        args.output.write_text(output + "\n", encoding="utf-8")
        logger.info(f"Sections written to {escape(str(args.output))}")
    else:
        print(output)

    for failure in result.failures:
        error(f"Block {failure.index}: {escape(failure.message)}")

    if not result.is_clean:
        logger.info(
            f"[bold]{len(result.failures)}[/bold] of {result.block_count} block(s) failed"
        )
        return 1

    success(f"Processed [bold]{len(result.sections)}[/bold] section(s)")
    return 0


def main(argv=None):
    """Main entry point for the CLI."""
    parser = argparse.ArgumentParser(description="Parse and reconcile note sections")

    subparsers = parser.add_subparsers(dest="command", required=True)

    parse_parser = subparsers.add_parser(
        "parse", help="Parse a notes file into sections with resolved references"
    )
    parse_parser.add_argument(
        "--file",
        type=Path,
        required=True,
        help="Notes file with blank-line separated sections",
    )
    parse_parser.add_argument(
        "--format",
        choices=["text", "json"],
        default="text",
        help="Output format (default: text)",
    )
    parse_parser.add_argument(
        "--tie-break",
        choices=[t.value for t in TieBreak],
        default=env.reference_tie_break(),
        help="Header chosen when a reference abbreviates several (default: NOTES_TIE_BREAK or first)",
    )
    parse_parser.add_argument(
        "--output",
        type=Path,
        default=None,
        help="Write sections to this file instead of stdout",
    )
    parse_parser.add_argument(
        "--log-file",
        type=str,
        default=None,
        help="Also write log records to this file",
    )
    parse_parser.set_defaults(func=cmd_parse)

    args = parser.parse_args(argv)
    setup_logging(log_file=args.log_file)
    return args.func(args)


if __name__ == "__main__":
    exit(main())
