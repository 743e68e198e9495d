"""Page model, write cursor and page-break policy.

Pages collect draw operations in page coordinates (points, origin at the
bottom-left). Link annotations stay pending on the :class:`Cursor` until
the page is retired, at which point they are sealed onto it and the page
becomes read-only. :meth:`Document.to_bytes` replays every page through
fpdf2.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field, replace
from typing import TYPE_CHECKING

from fpdf import FPDF

from portfolio_cv.constants.layout_constants import MARGIN, PAGE_HEIGHT, PAGE_WIDTH, TOP_Y
from portfolio_cv.models.errors import CVRenderError, PageSealedError
from portfolio_cv.pdf.fonts import CORE_FONTS_ENCODING

if TYPE_CHECKING:
    from collections.abc import Iterable

    from portfolio_cv.pdf.fonts import Font

__all__ = [
    "CircleOp",
    "Color",
    "Cursor",
    "Document",
    "LineOp",
    "LinkAnnotation",
    "Page",
    "Rect",
    "TextOp",
    "ensure_space",
    "finalize",
    "start_new_page",
]

logger = logging.getLogger(__name__)

Color = tuple[float, float, float]


def _rgb255(color: Color) -> tuple[int, int, int]:
    r, g, b = color
    return round(r * 255), round(g * 255), round(b * 255)


# ---------------------------------------------------------------------------
# Draw operations


@dataclass(frozen=True, slots=True)
class TextOp:
    """A run of text whose baseline starts at ``(x, y)``."""

    text: str
    x: float
    y: float
    size: float
    font: Font
    color: Color

    def paint(self, pdf: FPDF, page_height: float) -> None:
        pdf.set_font(self.font.family, self.font.style, self.size)
        pdf.set_text_color(*_rgb255(self.color))
        pdf.text(self.x, page_height - self.y, self.text)


@dataclass(frozen=True, slots=True)
class LineOp:
    x0: float
    y0: float
    x1: float
    y1: float
    thickness: float
    color: Color

    def paint(self, pdf: FPDF, page_height: float) -> None:
        pdf.set_draw_color(*_rgb255(self.color))
        pdf.set_line_width(self.thickness)
        pdf.line(self.x0, page_height - self.y0, self.x1, page_height - self.y1)


@dataclass(frozen=True, slots=True)
class CircleOp:
    """A filled circle centred on ``(x, y)``."""

    x: float
    y: float
    radius: float
    color: Color

    def paint(self, pdf: FPDF, page_height: float) -> None:
        pdf.set_fill_color(*_rgb255(self.color))
        diameter = self.radius * 2
        pdf.ellipse(
            self.x - self.radius,
            page_height - self.y - self.radius,
            diameter,
            diameter,
            style="F",
        )


DrawOp = TextOp | LineOp | CircleOp


# ---------------------------------------------------------------------------
# Link annotations


@dataclass(frozen=True, slots=True)
class Rect:
    x0: float
    y0: float
    x1: float
    y1: float

    @property
    def width(self) -> float:
        return self.x1 - self.x0

    @property
    def height(self) -> float:
        return self.y1 - self.y0


@dataclass(frozen=True, slots=True)
class LinkAnnotation:
    """A clickable rectangle bound to a URI, owned by one page.

    The URI is embedded as given; it is not validated.
    """

    rect: Rect
    uri: str
    page_number: int


# ---------------------------------------------------------------------------
# Pages and document


class Page:
    """One page of the document.

    Draw operations are appended while the page is current. Sealing
    attaches the page's link annotations and freezes it.
    """

    def __init__(self, number: int) -> None:
        self.number = number
        self._operations: list[DrawOp] = []
        self._annotations: tuple[LinkAnnotation, ...] = ()
        self._sealed = False

    def __repr__(self) -> str:
        return f"Page(number={self.number}, ops={len(self._operations)}, sealed={self._sealed})"

    @property
    def operations(self) -> tuple[DrawOp, ...]:
        return tuple(self._operations)

    @property
    def annotations(self) -> tuple[LinkAnnotation, ...]:
        return self._annotations

    @property
    def sealed(self) -> bool:
        return self._sealed

    @property
    def text_ops(self) -> list[TextOp]:
        return [op for op in self._operations if isinstance(op, TextOp)]

    @property
    def circle_ops(self) -> list[CircleOp]:
        return [op for op in self._operations if isinstance(op, CircleOp)]

    def add(self, op: DrawOp) -> None:
        if self._sealed:
            raise PageSealedError(f"Page {self.number} is sealed and cannot be drawn on")
        self._operations.append(op)

    def seal(self, annotations: Iterable[LinkAnnotation]) -> None:
        """Attach *annotations* and make the page read-only."""
        if self._sealed:
            raise PageSealedError(f"Page {self.number} is already sealed")
        annotations = tuple(annotations)
        for annotation in annotations:
            if annotation.page_number != self.number:
                raise CVRenderError(
                    f"Link to {annotation.uri!r} belongs to page {annotation.page_number}, "
                    f"not page {self.number}"
                )
        self._annotations = annotations
        self._sealed = True


class Document:
    """Ordered pages of a fixed size, owned by a single build."""

    def __init__(
        self,
        width: float = PAGE_WIDTH,
        height: float = PAGE_HEIGHT,
        title: str | None = None,
    ) -> None:
        self.width = width
        self.height = height
        self.title = title
        self.pages: list[Page] = []

    @property
    def page_count(self) -> int:
        return len(self.pages)

    def add_page(self) -> Page:
        page = Page(number=len(self.pages) + 1)
        self.pages.append(page)
        return page

    def _fonts(self) -> list[Font]:
        fonts: dict[Font, None] = {}
        for page in self.pages:
            for op in page.text_ops:
                fonts.setdefault(op.font)
        return list(fonts)

    def to_bytes(self) -> bytes:
        """Serialize every page, with its sealed annotations, to PDF bytes."""
        pdf = FPDF(unit="pt", format=(self.width, self.height))
        pdf.set_auto_page_break(auto=False)
        pdf.set_margin(0)
        pdf.core_fonts_encoding = CORE_FONTS_ENCODING
        if self.title:
            pdf.set_title(self.title)

        for font in self._fonts():
            font.register(pdf)

        for page in self.pages:
            if not page.sealed:
                logger.warning("Serializing unsealed page %d; pending links are lost", page.number)
            pdf.add_page()
            for op in page.operations:
                op.paint(pdf, self.height)
            for annotation in page.annotations:
                rect = annotation.rect
                pdf.link(rect.x0, self.height - rect.y1, rect.width, rect.height, annotation.uri)

        return bytes(pdf.output())


# ---------------------------------------------------------------------------
# Cursor and page-break policy


@dataclass(frozen=True, slots=True)
class Cursor:
    """Current page, vertical write position and pending link annotations."""

    page: Page
    y: float
    annotations: tuple[LinkAnnotation, ...] = field(default=())

    def at(self, y: float) -> Cursor:
        return replace(self, y=y)

    def down(self, dy: float) -> Cursor:
        return replace(self, y=self.y - dy)

    def with_link(self, annotation: LinkAnnotation) -> Cursor:
        return replace(self, annotations=(*self.annotations, annotation))


def start_new_page(cursor: Cursor, document: Document) -> Cursor:
    """Seal the current page and continue at the top of a fresh one."""
    cursor.page.seal(cursor.annotations)
    page = document.add_page()
    logger.debug("Page break: page %d -> page %d", cursor.page.number, page.number)
    return Cursor(page=page, y=TOP_Y)


def ensure_space(cursor: Cursor, document: Document, required_height: float) -> Cursor:
    """Break to a new page when *required_height* no longer fits above the margin.

    Returns the cursor unchanged when there is room.
    """
    if cursor.y - required_height < MARGIN:
        return start_new_page(cursor, document)
    return cursor


def finalize(cursor: Cursor) -> None:
    """Seal the last page of the document."""
    cursor.page.seal(cursor.annotations)
