"""Command line entry point: ``python -m bujo_book --paper-size A5``."""

import argparse
import logging
import sys

import fitz

from .builder import Journal, create_journal_book
from .drawers import DEFAULT_TITLE
from .errors import JournalError
from .palette import COLOR, MONOCHROME
from .paper import PAPER_SIZES
from .surface import RecordingSurface


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="bujo-book",
        description="Generate a printable bullet journal book as a PDF.",
    )
    parser.add_argument(
        "--paper-size", default="A5",
        help=f"Paper size ({', '.join(PAPER_SIZES)}; default: A5)",
    )
    parser.add_argument("--title", default=DEFAULT_TITLE, help="Journal title")
    parser.add_argument(
        "--color-scheme", default=COLOR,
        help=f"{COLOR} or {MONOCHROME} (default: {COLOR})",
    )
    parser.add_argument("--output-dir", default="output", help="Directory for the PDF")
    parser.add_argument(
        "--dry-run", action="store_true",
        help="Lay out the book without writing a PDF",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    return parser


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )

    journal = Journal(title=args.title, color_scheme=args.color_scheme)
    surface = RecordingSurface() if args.dry_run else None

    try:
        output = create_journal_book(args.paper_size, journal, surface, args.output_dir)
    except JournalError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    print("\n" + "=" * 50)
    print("DRY RUN COMPLETE" if args.dry_run else "GENERATION COMPLETE")
    print("=" * 50)
    print(f"Output: {output}")
    if args.dry_run:
        pages = surface.page_count
    else:
        with fitz.open(output) as doc:
            pages = len(doc)
    print(f"Paper: {args.paper_size}, Pages: {pages}")
    return 0
