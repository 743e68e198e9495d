"""Drawing primitives at absolute page coordinates."""

from __future__ import annotations

import re
from typing import TYPE_CHECKING

from portfolio_cv.constants.layout_constants import (
    BULLET_RADIUS,
    BULLET_X_OFFSET,
    BULLET_Y_OFFSET,
    GREEN,
    LINK_ASCENT,
    LINK_DESCENT,
    MARGIN,
    PAGE_WIDTH,
    SECONDARY_SIZE,
    SECTION_HEADER_HEIGHT,
    SECTION_RULE_GAP,
    SECTION_RULE_THICKNESS,
    SECTION_TITLE_SIZE,
    SMALL_BULLET_RADIUS,
)
from portfolio_cv.pdf.document import CircleOp, LineOp, LinkAnnotation, Rect, TextOp
from portfolio_cv.pdf.measurement import bullet_width, width_of

if TYPE_CHECKING:
    from portfolio_cv.pdf.document import Color, Page
    from portfolio_cv.pdf.fonts import Font

__all__ = [
    "draw_bullet",
    "draw_bulleted_text",
    "draw_circle",
    "draw_line",
    "draw_text",
    "register_link",
    "render_section_header",
    "text_link_rect",
]

BULLET_MARKER = "•"
_DASH_SEPARATOR = re.compile(r"\s-\s")


def draw_text(
    page: Page,
    text: str,
    x: float,
    y: float,
    size: float,
    font: Font,
    color: Color,
) -> None:
    page.add(TextOp(text=text, x=x, y=y, size=size, font=font, color=color))


def draw_circle(page: Page, x: float, y: float, radius: float, color: Color) -> None:
    page.add(CircleOp(x=x, y=y, radius=radius, color=color))


def draw_line(
    page: Page,
    start: tuple[float, float],
    end: tuple[float, float],
    thickness: float,
    color: Color,
) -> None:
    page.add(LineOp(*start, *end, thickness=thickness, color=color))


def draw_bullet(
    page: Page,
    x: float,
    y: float,
    size: float,
    color: Color = GREEN,
    radius: float | None = None,
) -> None:
    """Draw a bullet dot for text of *size* whose glyph box starts at *x*.

    The radius defaults to 1.5pt for secondary text and 2pt otherwise.
    """
    if radius is None:
        radius = SMALL_BULLET_RADIUS if size <= SECONDARY_SIZE else BULLET_RADIUS
    draw_circle(page, x + size * BULLET_X_OFFSET, y + size * BULLET_Y_OFFSET, radius, color)


def draw_bulleted_text(
    page: Page,
    text: str,
    x: float,
    y: float,
    size: float,
    font: Font,
    color: Color,
) -> float:
    """Draw *text*, turning ``" - "`` and ``•`` separators into accent bullets.

    The bullets are drawn as circles rather than glyphs so they can carry
    the accent color while the text keeps *color*.

    Returns:
        The x position reached after the last run.
    """
    runs = _DASH_SEPARATOR.sub(f" {BULLET_MARKER} ", text).split(BULLET_MARKER)
    space = width_of(" ", font, size)
    current_x = x

    for index, run in enumerate(runs):
        if index > 0:
            current_x += space
            draw_bullet(page, current_x, y, size)
            current_x += bullet_width(size) + space
        if run:
            draw_text(page, run, current_x, y, size, font, color)
            current_x += width_of(run, font, size)

    return current_x


def text_link_rect(x: float, y: float, width: float, ascent: float = LINK_ASCENT) -> Rect:
    """Return the clickable box over a run of text drawn at ``(x, y)``."""
    return Rect(x, y - LINK_DESCENT, x + width, y + ascent)


def register_link(page: Page, rect: Rect, uri: str) -> LinkAnnotation:
    """Create a pending link annotation for *page*.

    The caller pushes the returned annotation onto its cursor so that it
    is sealed together with the page it was drawn on.
    """
    return LinkAnnotation(rect=rect, uri=uri, page_number=page.number)


def render_section_header(page: Page, title: str, y: float, bold_font: Font) -> float:
    """Draw an accent section title with a rule underneath.

    Returns:
        The y position for the first line of section content.
    """
    draw_text(page, title, MARGIN, y, SECTION_TITLE_SIZE, bold_font, GREEN)
    rule_y = y - SECTION_RULE_GAP
    draw_line(
        page,
        (MARGIN, rule_y),
        (PAGE_WIDTH - MARGIN, rule_y),
        SECTION_RULE_THICKNESS,
        GREEN,
    )
    return y - SECTION_HEADER_HEIGHT
