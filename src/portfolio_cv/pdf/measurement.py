"""Text measurement and greedy line wrapping."""

from __future__ import annotations

from functools import lru_cache
from typing import TYPE_CHECKING

from fpdf import FPDF

from portfolio_cv.constants.layout_constants import BULLET_EM_WIDTH
from portfolio_cv.pdf.fonts import CORE_FONTS_ENCODING

if TYPE_CHECKING:
    from portfolio_cv.pdf.fonts import Font

__all__ = ["bullet_width", "width_of", "wrap_text"]


@lru_cache(maxsize=None)
def _metrics_context(font: Font) -> FPDF:
    """Return a private FPDF instance set to *font* at 1pt.

    Widths scale linearly with size, so the context is never mutated
    after creation.
    """
    pdf = FPDF(unit="pt")
    if font.is_core:
        pdf.core_fonts_encoding = CORE_FONTS_ENCODING
    font.register(pdf)
    pdf.set_font(font.family, font.style, 1)
    return pdf


def width_of(text: str, font: Font, size: float) -> float:
    """Return the advance width of *text* in points."""
    if not text:
        return 0.0
    return _metrics_context(font).get_string_width(text) * size


def bullet_width(size: float) -> float:
    """Return the horizontal room reserved for a drawn bullet."""
    return BULLET_EM_WIDTH * size


def wrap_text(text: str, max_width: float, font: Font, size: float) -> list[str]:
    """Greedily pack space-separated words into lines.

    A word joins the current line only if the line plus a space and the
    word still fits *max_width*. A word wider than *max_width* on its own
    is placed alone on a line and never split.

    Args:
        text: Paragraph to wrap.
        max_width: Maximum line width in points.
        font: Font used to measure.
        size: Font size in points.

    Returns:
        The wrapped lines; empty for empty input.
    """
    lines: list[str] = []
    current = ""

    for word in text.split(" "):
        candidate = f"{current} {word}" if current else word
        if current and width_of(candidate, font, size) > max_width:
            lines.append(current)
            current = word
        else:
            current = candidate

    if current:
        lines.append(current)
    return lines
