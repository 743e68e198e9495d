"""Document assembler.

Runs the section renderers in their fixed order, threading the cursor
from one to the next, then seals the last page.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

from portfolio_cv.constants.layout_constants import PAGE_HEIGHT, PAGE_WIDTH, TOP_Y
from portfolio_cv.models.errors import CVRenderError
from portfolio_cv.pdf.document import Cursor, Document, finalize
from portfolio_cv.pdf.header import render_contact_info, render_header
from portfolio_cv.pdf.sections import (
    render_education,
    render_experience,
    render_featured_projects,
    render_highlights,
    render_languages,
    render_technical_skills,
)

if TYPE_CHECKING:
    from collections.abc import Callable

    from portfolio_cv.models.cv_data import CVData
    from portfolio_cv.pdf.fonts import FontPair

    SectionRenderer = Callable[[Cursor, Document, CVData, FontPair], Cursor]

__all__ = ["SECTION_ORDER", "CVRenderResult", "build_cv_document", "render_cv_pdf"]

logger = logging.getLogger(__name__)

SECTION_ORDER: tuple[SectionRenderer, ...] = (
    render_header,
    render_contact_info,
    render_highlights,
    render_experience,
    render_technical_skills,
    render_education,
    render_languages,
    render_featured_projects,
)


@dataclass(frozen=True, slots=True)
class CVRenderResult:
    """A finished document and the cursor it ended on."""

    document: Document
    cursor: Cursor

    @property
    def page_count(self) -> int:
        return self.document.page_count

    @property
    def final_y(self) -> float:
        return self.cursor.y

    def to_bytes(self) -> bytes:
        """Serialize the document.

        Raises:
            CVRenderError: If fpdf2 rejects the content (for example a
                character a core font cannot encode).
        """
        try:
            return self.document.to_bytes()
        except Exception as exc:
            logger.exception("PDF serialization failed")
            raise CVRenderError(f"Failed to serialize CV: {exc}") from exc


def _document_title(cv: CVData) -> str | None:
    info = cv.personal_info
    if info is None or not info.name:
        return None
    return f"{info.name} Resume"


def build_cv_document(cv: CVData, fonts: FontPair) -> CVRenderResult:
    """Lay out *cv* into a new document.

    Args:
        cv: Validated CV snapshot. It is never modified.
        fonts: Regular and bold faces used for every section.

    Returns:
        The sealed document together with the final cursor.

    Raises:
        CVRenderError: If any renderer fails. No partial document is
            returned.
    """
    document = Document(PAGE_WIDTH, PAGE_HEIGHT, title=_document_title(cv))
    cursor = Cursor(page=document.add_page(), y=TOP_Y)

    try:
        for renderer in SECTION_ORDER:
            cursor = renderer(cursor, document, cv, fonts)
        finalize(cursor)
    except CVRenderError:
        logger.exception("CV layout failed")
        raise
    except Exception as exc:
        logger.exception("CV layout failed")
        raise CVRenderError(f"Failed to lay out CV: {exc}") from exc

    logger.debug("Laid out %d page(s), final y=%.1f", document.page_count, cursor.y)
    return CVRenderResult(document=document, cursor=cursor)


def render_cv_pdf(cv: CVData, fonts: FontPair) -> bytes:
    """Lay out *cv* and serialize it to PDF bytes."""
    return build_cv_document(cv, fonts).to_bytes()
