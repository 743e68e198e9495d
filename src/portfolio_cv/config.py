"""Environment-driven settings."""

from __future__ import annotations

import os

from portfolio_cv.pdf.fonts import FontPair, load_fonts

__all__ = ["BOLD_FONT_ENV", "REGULAR_FONT_ENV", "get_font_paths", "get_fonts"]

REGULAR_FONT_ENV = "PORTFOLIO_CV_REGULAR_FONT"
BOLD_FONT_ENV = "PORTFOLIO_CV_BOLD_FONT"


def get_font_paths() -> tuple[str | None, str | None]:
    """Return the configured (regular, bold) TTF paths; unset values are None."""
    return os.getenv(REGULAR_FONT_ENV) or None, os.getenv(BOLD_FONT_ENV) or None


def get_fonts() -> FontPair:
    """Return the font pair selected by the environment.

    Raises:
        FontLoadError: If only one of the two variables is set, or a path
            does not point at a file.
    """
    regular, bold = get_font_paths()
    return load_fonts(regular, bold)
