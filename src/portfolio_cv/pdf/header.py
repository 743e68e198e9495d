"""Name/title header and the contact-info rows below it."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from portfolio_cv.constants.layout_constants import (
    BODY_SIZE,
    CONTACT_ITEM_GAP,
    CONTACT_ROW_HEIGHT,
    GRAY,
    GREEN,
    MARGIN,
    NAME_STEP,
    PAGE_WIDTH,
    SUBTITLE_SIZE,
    TITLE_SIZE,
    TITLE_STEP,
)
from portfolio_cv.pdf.document import ensure_space
from portfolio_cv.pdf.measurement import bullet_width, width_of
from portfolio_cv.pdf.primitives import draw_bullet, draw_text, register_link, text_link_rect

if TYPE_CHECKING:
    from portfolio_cv.models.cv_data import CVData, PersonalInfo
    from portfolio_cv.pdf.document import Color, Cursor, Document
    from portfolio_cv.pdf.fonts import FontPair

__all__ = ["contact_rows", "render_contact_info", "render_header"]

_RIGHT_EDGE = PAGE_WIDTH - MARGIN


def render_header(cursor: Cursor, document: Document, cv: CVData, fonts: FontPair) -> Cursor:
    """Draw the name and professional title.

    Missing name or title fall back to the ``Name`` / ``Title`` placeholders.
    """
    info = cv.personal_info
    if info is None:
        return cursor

    cursor = ensure_space(cursor, document, NAME_STEP + TITLE_STEP)
    page = cursor.page
    y = cursor.y

    draw_text(page, info.name or "Name", MARGIN, y, TITLE_SIZE, fonts.bold, GREEN)
    y -= NAME_STEP
    draw_text(page, info.title or "Title", MARGIN, y, SUBTITLE_SIZE, fonts.regular, GRAY)
    y -= TITLE_STEP

    return cursor.at(y)


@dataclass(frozen=True, slots=True)
class ContactItem:
    text: str
    color: Color
    uri: str | None = None


def contact_rows(info: PersonalInfo) -> list[list[ContactItem]]:
    """Group the contact details into the three printed rows.

    Row one holds email, phone and location; row two website and GitHub;
    row three LinkedIn. Rows may be empty.
    """
    first: list[ContactItem] = []
    if info.email:
        first.append(ContactItem(info.email, GREEN, f"mailto:{info.email}"))
    if info.phone:
        if info.phone.startswith(("http://", "https://")):
            first.append(ContactItem(info.phone, GREEN, info.phone))
        else:
            first.append(ContactItem(info.phone, GRAY))
    if info.location:
        first.append(ContactItem(info.location, GRAY))

    second = [ContactItem(link, GREEN, link) for link in (info.website, info.github) if link]
    third = [ContactItem(info.linkedin, GREEN, info.linkedin)] if info.linkedin else []
    return [first, second, third]


def _next_line(cursor: Cursor, document: Document) -> Cursor:
    return ensure_space(cursor.down(CONTACT_ROW_HEIGHT), document, CONTACT_ROW_HEIGHT)


def render_contact_info(
    cursor: Cursor,
    document: Document,
    cv: CVData,
    fonts: FontPair,
) -> Cursor:
    """Draw the contact rows, flowing items left to right.

    Items on a row are separated by an accent bullet; an item that would
    cross the right margin moves to a new line. Every row advances the
    cursor by one line even when it is empty.
    """
    info = cv.personal_info
    if info is None:
        return cursor

    font = fonts.regular
    separator = bullet_width(BODY_SIZE)

    for row in contact_rows(info):
        cursor = ensure_space(cursor, document, CONTACT_ROW_HEIGHT)
        x = MARGIN

        for index, item in enumerate(row):
            if index > 0:
                if x + separator + CONTACT_ITEM_GAP > _RIGHT_EDGE:
                    cursor = _next_line(cursor, document)
                    x = MARGIN
                else:
                    draw_bullet(cursor.page, x, cursor.y, BODY_SIZE)
                    x += separator + CONTACT_ITEM_GAP

            item_width = width_of(item.text, font, BODY_SIZE)
            if x > MARGIN and x + item_width > _RIGHT_EDGE:
                cursor = _next_line(cursor, document)
                x = MARGIN

            draw_text(cursor.page, item.text, x, cursor.y, BODY_SIZE, font, item.color)
            if item.uri is not None:
                rect = text_link_rect(x, cursor.y, item_width)
                cursor = cursor.with_link(register_link(cursor.page, rect, item.uri))
            x += item_width + CONTACT_ITEM_GAP

        cursor = cursor.down(CONTACT_ROW_HEIGHT)

    return cursor
