from __future__ import annotations

import argparse
import json
import logging
import sys
from collections.abc import Sequence
from pathlib import Path

from pydantic import ValidationError

from portfolio_cv.config import get_fonts
from portfolio_cv.models.errors import CVRenderError
from portfolio_cv.pdf.fonts import load_fonts
from portfolio_cv.services.cv_pdf import merge_projects, suggested_filename, write_cv_pdf


def build_parser() -> argparse.ArgumentParser:
    """Return the argument parser for ``portfolio-cv``."""
    parser = argparse.ArgumentParser(
        prog="portfolio-cv",
        description="Render portfolio CV data (JSON) into a PDF document.",
    )
    parser.add_argument("cv_json", type=Path, help="Path to the CV data JSON file.")
    parser.add_argument(
        "--projects",
        type=Path,
        default=None,
        help="Path to a JSON list of projects that replaces the CV's own list.",
    )
    parser.add_argument(
        "-o",
        "--output",
        type=Path,
        default=None,
        help="Output PDF path (default: '<Name> Resume.pdf' in the current directory).",
    )
    parser.add_argument("--regular-font", type=Path, default=None, help="Regular TTF font.")
    parser.add_argument("--bold-font", type=Path, default=None, help="Bold TTF font.")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging.")
    return parser


def _read_json(path: Path) -> object:
    with path.open(encoding="utf-8") as handle:
        return json.load(handle)


def _format_bytes(size: float) -> str:
    """Format bytes into human-readable string.

    Args:
        size: Size in bytes.

    Returns:
        Formatted string (e.g., "1.5 KB", "2.3 MB").
    """
    for unit in ["B", "KB", "MB"]:
        if size < 1024.0:
            return f"{size:.1f} {unit}"
        size /= 1024.0
    return f"{size:.1f} GB"


def run_cli(argv: Sequence[str] | None = None) -> int:
    """Parse *argv*, render the CV and write the PDF.

    Returns:
        Exit code (0 for success, 1 for failure).
    """
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        payload = _read_json(args.cv_json)
        projects = _read_json(args.projects) if args.projects else None
    except (OSError, json.JSONDecodeError) as exc:
        print(f"❌ Could not read input: {exc}")
        return 1

    if not isinstance(payload, dict):
        print("❌ CV data must be a JSON object.")
        return 1
    if projects is not None and not isinstance(projects, list):
        print("❌ Projects data must be a JSON list.")
        return 1

    try:
        cv = merge_projects(payload, projects)
    except ValidationError as exc:
        print(f"❌ Invalid CV data:\n{exc}")
        return 1

    output = args.output or Path.cwd() / suggested_filename(cv)
    try:
        if args.regular_font or args.bold_font:
            fonts = load_fonts(args.regular_font, args.bold_font)
        else:
            fonts = get_fonts()
        written = write_cv_pdf(cv, output, fonts)
    except CVRenderError as exc:
        print(f"❌ Failed to generate PDF: {exc}")
        return 1
    except OSError as exc:
        print(f"❌ Could not write {output}: {exc}")
        return 1

    print(f"✅ Wrote {written} ({_format_bytes(written.stat().st_size)})")
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    """Entry point for the CLI application."""
    try:
        return run_cli(argv)
    except KeyboardInterrupt:
        print("\n\n⚠️  Interrupted by user. Exiting.")
        return 130


if __name__ == "__main__":
    sys.exit(main())
