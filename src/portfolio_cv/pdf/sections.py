"""Section renderers for the body of the CV.

Every renderer takes the current :class:`Cursor` and returns the cursor
to continue from. A renderer whose data slice is empty returns the cursor
it was given untouched. Otherwise it reserves room for its header, then
checks for space again before every entry and every wrapped line.
"""

from __future__ import annotations

import logging
import re
from enum import Enum
from typing import TYPE_CHECKING

from portfolio_cv.constants.layout_constants import (
    BODY_SIZE,
    BULLET_RADIUS,
    BULLET_Y_OFFSET,
    COLUMN_WIDTH,
    CONTENT_WIDTH,
    DESCRIPTION_LINE_HEIGHT,
    ENTRY_BUDGET,
    ENTRY_GAP,
    ENTRY_ORG_STEP,
    ENTRY_PERIOD_STEP,
    ENTRY_TITLE_STEP,
    GRAY,
    GREEN,
    HIGHLIGHT_BUDGET,
    HIGHLIGHT_BULLET_OFFSET,
    HIGHLIGHT_GAP,
    HIGHLIGHT_INDENT,
    HIGHLIGHT_TEXT_OFFSET,
    LANGUAGE_SLOT_HEIGHT,
    LEFT_COLUMN_X,
    LIGHT_GRAY,
    LINE_HEIGHT,
    LINK_LABEL_ASCENT,
    LINK_LABEL_SIZE,
    MARGIN,
    PROJECT_LINK_ROW_STEP,
    PROJECT_META_STEP,
    PROJECT_TITLE_STEP,
    RIGHT_COLUMN_X,
    SECONDARY_SIZE,
    SECTION_GAP,
    SECTION_HEADER_BUDGET,
    SKILL_GROUP_BUDGET,
    SKILL_GROUP_GAP,
    SKILL_TITLE_STEP,
    SMALL_BULLET_RADIUS,
    TOP_Y,
)
from portfolio_cv.models.cv_data import Tenure
from portfolio_cv.pdf.document import ensure_space, start_new_page
from portfolio_cv.pdf.measurement import bullet_width, width_of, wrap_text
from portfolio_cv.pdf.primitives import (
    draw_bullet,
    draw_bulleted_text,
    draw_circle,
    draw_text,
    register_link,
    render_section_header,
    text_link_rect,
)

if TYPE_CHECKING:
    from portfolio_cv.models.cv_data import CVData, ExperienceEntry, Project
    from portfolio_cv.pdf.document import Cursor, Document
    from portfolio_cv.pdf.fonts import FontPair

__all__ = [
    "fit_project_lines",
    "parse_highlights",
    "period_label",
    "project_height",
    "render_education",
    "render_experience",
    "render_featured_projects",
    "render_highlights",
    "render_languages",
    "render_technical_skills",
]

logger = logging.getLogger(__name__)

_HIGHLIGHT_MARKERS = ("•", "-")
_HIGHLIGHT_PREFIX = re.compile(r"^[•\-]\s*")
_URL_PATTERN = re.compile(r"https?://\S+")


class _Column(Enum):
    LEFT = "left"
    RIGHT = "right"

    @property
    def x(self) -> float:
        return LEFT_COLUMN_X if self is _Column.LEFT else RIGHT_COLUMN_X

    @property
    def other(self) -> _Column:
        return _Column.RIGHT if self is _Column.LEFT else _Column.LEFT


# ---------------------------------------------------------------------------
# Shared helpers


def _open_section(cursor: Cursor, document: Document, title: str, fonts: FontPair) -> Cursor:
    """Reserve room for a section header, then draw it below a small gap."""
    cursor = ensure_space(cursor, document, SECTION_HEADER_BUDGET)
    y = render_section_header(cursor.page, title, cursor.y - SECTION_GAP, fonts.bold)
    return cursor.at(y)


def _draw_entry_heading(
    cursor: Cursor,
    title: str,
    organization: str,
    period: str,
    fonts: FontPair,
) -> Cursor:
    page = cursor.page
    y = cursor.y

    draw_text(page, title, MARGIN, y, BODY_SIZE, fonts.bold, GREEN)
    y -= ENTRY_TITLE_STEP
    draw_bulleted_text(page, organization, MARGIN, y, BODY_SIZE, fonts.bold, GRAY)
    y -= ENTRY_ORG_STEP
    draw_bulleted_text(page, period, MARGIN, y, SECONDARY_SIZE, fonts.regular, LIGHT_GRAY)
    y -= ENTRY_PERIOD_STEP

    return cursor.at(y)


def _draw_description(
    cursor: Cursor,
    document: Document,
    description: str,
    fonts: FontPair,
) -> Cursor:
    for line in wrap_text(description, CONTENT_WIDTH, fonts.regular, BODY_SIZE):
        cursor = ensure_space(cursor, document, DESCRIPTION_LINE_HEIGHT)
        draw_text(cursor.page, line, MARGIN, cursor.y, BODY_SIZE, fonts.regular, GRAY)
        cursor = cursor.down(DESCRIPTION_LINE_HEIGHT)
    return cursor


# ---------------------------------------------------------------------------
# Highlights


def parse_highlights(about: str) -> list[str]:
    """Return the bullet items of an ``about`` block, markers stripped.

    Only lines starting with ``•`` or ``-`` are items; other lines are
    dropped.
    """
    items: list[str] = []
    for line in about.split("\n"):
        stripped = line.strip()
        if stripped.startswith(_HIGHLIGHT_MARKERS):
            items.append(_HIGHLIGHT_PREFIX.sub("", stripped))
    return items


def render_highlights(cursor: Cursor, document: Document, cv: CVData, fonts: FontPair) -> Cursor:
    items = parse_highlights(cv.about or "")
    if not items:
        logger.debug("No highlight bullets; skipping section")
        return cursor

    cursor = _open_section(cursor, document, "HIGHLIGHTS", fonts)
    text_x = MARGIN + HIGHLIGHT_TEXT_OFFSET

    for item in items:
        cursor = ensure_space(cursor, document, HIGHLIGHT_BUDGET)
        lines = wrap_text(item, CONTENT_WIDTH - HIGHLIGHT_INDENT, fonts.regular, BODY_SIZE)

        for index, line in enumerate(lines):
            if index > 0:
                cursor = ensure_space(cursor, document, LINE_HEIGHT)
            else:
                draw_circle(
                    cursor.page,
                    MARGIN + HIGHLIGHT_BULLET_OFFSET,
                    cursor.y + BODY_SIZE * BULLET_Y_OFFSET,
                    BULLET_RADIUS,
                    GREEN,
                )
            draw_text(cursor.page, line, text_x, cursor.y, BODY_SIZE, fonts.regular, GRAY)
            cursor = cursor.down(LINE_HEIGHT)

        cursor = cursor.down(HIGHLIGHT_GAP)

    return cursor


# ---------------------------------------------------------------------------
# Experience and education


def period_label(entry: ExperienceEntry) -> str:
    """Return the period line for a work-experience entry."""
    match entry.tenure:
        case Tenure.CURRENT:
            return f"{entry.period} (Current)"
        case Tenure.PAST:
            return entry.period


def render_experience(cursor: Cursor, document: Document, cv: CVData, fonts: FontPair) -> Cursor:
    if not cv.experience:
        return cursor

    cursor = _open_section(cursor, document, "WORK EXPERIENCE", fonts)

    for entry in cv.experience:
        cursor = ensure_space(cursor, document, ENTRY_BUDGET)
        cursor = _draw_entry_heading(cursor, entry.title, entry.company, period_label(entry), fonts)
        cursor = _draw_description(cursor, document, entry.description, fonts)
        cursor = cursor.down(ENTRY_GAP)

    return cursor


def _draw_link_line(
    cursor: Cursor,
    document: Document,
    prefix: str,
    url: str,
    fonts: FontPair,
) -> Cursor:
    """Draw ``prefix`` followed by a clickable accent ``url`` on one line."""
    cursor = ensure_space(cursor, document, DESCRIPTION_LINE_HEIGHT)
    font = fonts.regular
    x = MARGIN

    if prefix:
        draw_text(cursor.page, prefix, x, cursor.y, BODY_SIZE, font, GRAY)
        x += width_of(prefix, font, BODY_SIZE)

    url_width = width_of(url, font, BODY_SIZE)
    draw_text(cursor.page, url, x, cursor.y, BODY_SIZE, font, GREEN)
    link = register_link(cursor.page, text_link_rect(x, cursor.y, url_width), url)

    return cursor.with_link(link).down(DESCRIPTION_LINE_HEIGHT)


def render_education(cursor: Cursor, document: Document, cv: CVData, fonts: FontPair) -> Cursor:
    """Render education entries.

    A description containing a URL is printed as its prefix plus the
    first URL, linked, on a single line. Text after that URL is not
    printed.
    """
    if not cv.education:
        return cursor

    cursor = _open_section(cursor, document, "EDUCATION", fonts)

    for entry in cv.education:
        cursor = ensure_space(cursor, document, ENTRY_BUDGET)
        cursor = _draw_entry_heading(cursor, entry.degree, entry.institution, entry.period, fonts)

        if entry.description:
            match = _URL_PATTERN.search(entry.description)
            if match:
                prefix = entry.description[: match.start()]
                cursor = _draw_link_line(cursor, document, prefix, match.group(), fonts)
            else:
                cursor = _draw_description(cursor, document, entry.description, fonts)

        cursor = cursor.down(ENTRY_GAP)

    return cursor


# ---------------------------------------------------------------------------
# Languages


def render_languages(cursor: Cursor, document: Document, cv: CVData, fonts: FontPair) -> Cursor:
    """Render ``language - level`` pairs alternating between two columns."""
    if not cv.languages:
        return cursor

    cursor = _open_section(cursor, document, "LANGUAGES", fonts)
    column_y = {_Column.LEFT: cursor.y, _Column.RIGHT: cursor.y}
    column = _Column.LEFT

    for entry in cv.languages:
        if column_y[column] - LANGUAGE_SLOT_HEIGHT < MARGIN:
            if column is _Column.LEFT and column_y[_Column.RIGHT] - LANGUAGE_SLOT_HEIGHT >= MARGIN:
                column = _Column.RIGHT
            else:
                cursor = start_new_page(cursor, document)
                column_y = {_Column.LEFT: cursor.y, _Column.RIGHT: cursor.y}
                column = _Column.LEFT

        draw_bulleted_text(
            cursor.page,
            f"{entry.language} - {entry.level}",
            column.x,
            column_y[column],
            BODY_SIZE,
            fonts.regular,
            GRAY,
        )
        column_y[column] -= LANGUAGE_SLOT_HEIGHT
        column = column.other

    return cursor.at(min(column_y.values()))


# ---------------------------------------------------------------------------
# Technical skills


def _render_skill_group(
    cursor: Cursor,
    document: Document,
    title: str,
    skills: tuple[str, ...],
    fonts: FontPair,
) -> Cursor:
    """Flow *skills* left to right, wrapping at token boundaries."""
    cursor = ensure_space(cursor, document, SKILL_GROUP_BUDGET)
    draw_text(cursor.page, title, MARGIN, cursor.y, BODY_SIZE, fonts.bold, GRAY)
    cursor = cursor.down(SKILL_TITLE_STEP)

    font = fonts.regular
    gap = width_of(" ", font, BODY_SIZE) * 2
    separator = gap + bullet_width(BODY_SIZE) + gap
    offset = 0.0

    for index, skill in enumerate(skills):
        skill_width = width_of(skill, font, BODY_SIZE)
        needed = separator if index > 0 else 0.0

        if offset > 0 and offset + needed + skill_width > CONTENT_WIDTH:
            cursor = cursor.down(DESCRIPTION_LINE_HEIGHT)
            cursor = ensure_space(cursor, document, DESCRIPTION_LINE_HEIGHT)
            offset = 0.0
        elif index > 0:
            offset += gap
            draw_bullet(cursor.page, MARGIN + offset, cursor.y, BODY_SIZE)
            offset += bullet_width(BODY_SIZE) + gap

        draw_text(cursor.page, skill, MARGIN + offset, cursor.y, BODY_SIZE, font, GRAY)
        offset += skill_width

    return cursor.down(SKILL_GROUP_GAP)


def render_technical_skills(
    cursor: Cursor,
    document: Document,
    cv: CVData,
    fonts: FontPair,
) -> Cursor:
    """Render skill groups, always starting on a new page."""
    skills = cv.skills
    if skills is None or skills.is_empty():
        return cursor

    cursor = start_new_page(cursor, document)
    cursor = cursor.at(render_section_header(cursor.page, "TECHNICAL SKILLS", cursor.y, fonts.bold))

    groups = (
        ("Technologies", skills.frontend),
        ("Tools", skills.tools),
        ("Methodologies/Practices", skills.backend),
    )
    for title, tokens in groups:
        if tokens:
            cursor = _render_skill_group(cursor, document, title, tokens, fonts)

    return cursor


# ---------------------------------------------------------------------------
# Featured projects


def project_height(line_count: int) -> float:
    """Return the vertical room a project block takes in its column."""
    return (
        PROJECT_TITLE_STEP
        + line_count * LINE_HEIGHT
        + PROJECT_META_STEP
        + PROJECT_LINK_ROW_STEP
    )


def fit_project_lines(lines: list[str], title: str = "") -> list[str]:
    """Cap description *lines* so the block fits one column of a fresh page.

    Blocks that already fit are returned unchanged.
    """
    max_lines = int((TOP_Y - MARGIN - project_height(0)) // LINE_HEIGHT)
    if len(lines) <= max_lines:
        return lines
    logger.warning(
        "Project %r description truncated from %d to %d lines", title, len(lines), max_lines
    )
    return lines[:max_lines]


def _draw_project_links(
    cursor: Cursor,
    project: Project,
    x: float,
    y: float,
    fonts: FontPair,
) -> Cursor:
    """Draw the GitHub / Demo labels, each with its own link annotation."""
    font = fonts.regular
    links = [
        (label, uri)
        for label, uri in (("GitHub", project.github_url), ("Demo", project.demo_url))
        if uri
    ]
    gap = width_of("  ", font, LINK_LABEL_SIZE)

    for index, (label, uri) in enumerate(links):
        if index > 0:
            x += gap
            draw_bullet(cursor.page, x, y, LINK_LABEL_SIZE, radius=SMALL_BULLET_RADIUS)
            x += bullet_width(LINK_LABEL_SIZE) + gap

        label_width = width_of(label, font, LINK_LABEL_SIZE)
        draw_text(cursor.page, label, x, y, LINK_LABEL_SIZE, font, GREEN)
        rect = text_link_rect(x, y, label_width, LINK_LABEL_ASCENT)
        cursor = cursor.with_link(register_link(cursor.page, rect, uri))
        x += label_width

    return cursor


def _draw_project(
    cursor: Cursor,
    project: Project,
    lines: list[str],
    x: float,
    y: float,
    fonts: FontPair,
) -> tuple[Cursor, float]:
    page = cursor.page

    draw_text(page, project.title, x, y, BODY_SIZE, fonts.bold, GREEN)
    y -= PROJECT_TITLE_STEP

    for line in lines:
        draw_text(page, line, x, y, BODY_SIZE, fonts.regular, GRAY)
        y -= LINE_HEIGHT

    meta = f"{project.year} • {project.status.label}"
    draw_bulleted_text(page, meta, x, y, SECONDARY_SIZE, fonts.regular, LIGHT_GRAY)
    y -= PROJECT_META_STEP

    cursor = _draw_project_links(cursor, project, x, y, fonts)
    y -= PROJECT_LINK_ROW_STEP

    return cursor, y


def render_featured_projects(
    cursor: Cursor,
    document: Document,
    cv: CVData,
    fonts: FontPair,
) -> Cursor:
    """Render featured projects in two columns.

    Each block's height is computed before drawing. A block goes in the
    current column if it fits, otherwise in the right column if that one
    still has room, otherwise at the top-left of a new page. A description
    too long for a whole column is cut to what fits.
    """
    projects = cv.featured_projects
    if not projects:
        return cursor

    cursor = _open_section(cursor, document, "FEATURED PROJECTS", fonts)
    column_y = {_Column.LEFT: cursor.y, _Column.RIGHT: cursor.y}
    column = _Column.LEFT

    for project in projects:
        lines = wrap_text(project.summary, COLUMN_WIDTH, fonts.regular, BODY_SIZE)
        lines = fit_project_lines(lines, project.title)
        height = project_height(len(lines))

        if column_y[column] - height < MARGIN:
            if column is _Column.LEFT and column_y[_Column.RIGHT] - height >= MARGIN:
                column = _Column.RIGHT
            else:
                cursor = start_new_page(cursor, document)
                column_y = {_Column.LEFT: cursor.y, _Column.RIGHT: cursor.y}
                column = _Column.LEFT

        cursor, column_y[column] = _draw_project(
            cursor, project, lines, column.x, column_y[column], fonts
        )
        column = column.other

    return cursor.at(min(column_y.values()))
