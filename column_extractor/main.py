#!/usr/bin/env python3
"""Column extraction CLI - fetch a spreadsheet and save one column as JSON.

Usage (from project root):
    python -m column_extractor.main --url https://example.com/words.xlsx --output words
    python -m column_extractor.main --url https://example.com/words.xlsx --output words \
        --row 2 --column 3 --sheet Nouns --min-occurrences 5
    python -m column_extractor.main --jobs jobs.json

Relative output names resolve against ``DATA_DIR``.

CLI Flags:
    --url               Spreadsheet URL (single job)
    --output, -o        Output identifier; ``.json`` is appended (single job)
    --row, -r           1-based start row within the used range (default: 1)
    --column, -c        1-based column within the used range (default: 1)
    --sheet             Sheet name (default: first sheet)
    --min-occurrences   Skip rows whose right-hand count is below this value
    --no-trim           Keep surrounding whitespace
    --no-lowercase      Keep original case
    --keep-duplicates   Keep repeated values
    --jobs              JSON job file; replaces the single-job flags
    --quiet             Only log warnings and errors to the console
"""

from __future__ import annotations

import argparse
import logging
import sys
from dataclasses import replace
from pathlib import Path

from column_extractor.config import (
    DATA_DIR,
    ExtractionJob,
    build_options,
    load_jobs,
    set_console_level,
    setup_logging,
)
from column_extractor.errors import ExtractionError
from column_extractor.pipeline import run_jobs

logger = setup_logging(__name__)


def resolve_output(output: str) -> str:
    """Anchor relative output identifiers under ``DATA_DIR``."""
    path = Path(output)
    return str(path if path.is_absolute() else DATA_DIR / path)


def build_parser() -> argparse.ArgumentParser:
    """Create the argument parser."""
    parser = argparse.ArgumentParser(
        description="Extract one spreadsheet column into a JSON array of strings.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python -m column_extractor.main --url URL -o words                 # First column of first sheet
  python -m column_extractor.main --url URL -o words -r 2 -c 3       # Start at row 2, column 3
  python -m column_extractor.main --url URL -o words --min-occurrences 5
  python -m column_extractor.main --jobs jobs.json                   # Batch mode
        """,
    )
    parser.add_argument("--url", help="Spreadsheet URL")
    parser.add_argument("--output", "-o", help="Output identifier (.json is appended)")
    parser.add_argument("--row", "-r", type=int, default=1, help="1-based start row (default: 1)")
    parser.add_argument("--column", "-c", type=int, default=1, help="1-based column (default: 1)")
    parser.add_argument("--sheet", help="Sheet name (default: first sheet)")
    parser.add_argument("--min-occurrences", type=float, help="Minimum occurrence count in the next column")
    parser.add_argument("--no-trim", action="store_true", help="Don't trim whitespace")
    parser.add_argument("--no-lowercase", action="store_true", help="Don't convert to lowercase")
    parser.add_argument("--keep-duplicates", action="store_true", help="Don't remove duplicates")
    parser.add_argument("--jobs", type=Path, help="JSON job file to run instead of a single job")
    parser.add_argument("--quiet", action="store_true", help="Only show warnings and errors")
    return parser


def jobs_from_args(args: argparse.Namespace, parser: argparse.ArgumentParser) -> list[ExtractionJob]:
    """Turn parsed flags into the list of jobs to run."""
    if args.jobs is not None:
        jobs = load_jobs(args.jobs)
    else:
        if not args.url or not args.output:
            parser.error("--url and --output are required unless --jobs is given")
        options = build_options(
            {
                "url": args.url,
                "row": args.row,
                "column": args.column,
                "sheet_name": args.sheet,
                "min_occurrences": args.min_occurrences,
                "trim_whitespace": not args.no_trim,
                "lowercase": not args.no_lowercase,
                "remove_duplicates": not args.keep_duplicates,
            },
        )
        jobs = [ExtractionJob(output=args.output, options=options)]

    return [replace(job, output=resolve_output(job.output)) for job in jobs]


def main(argv: list[str] | None = None) -> int:
    """Parse CLI flags and run the requested extractions.

    Returns
    -------
    int
        ``0`` when every job succeeded; ``1`` otherwise.
    """
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.quiet:
        set_console_level(logging.WARNING)

    try:
        jobs = jobs_from_args(args, parser)
    except (OSError, ValueError) as err:
        # json.JSONDecodeError is a ValueError
        logger.error("Invalid configuration: %s", err)
        return 1

    try:
        results = run_jobs(jobs)
    except ExtractionError as err:
        logger.error("%s", err)
        return 1

    for output, values in results.items():
        logger.info("%s.json: %d values", output, len(values))
    return 0


if __name__ == "__main__":
    sys.exit(main())
