"""CV layout engine: measurement, page model, renderers and assembler."""

from portfolio_cv.pdf.assembler import CVRenderResult, build_cv_document, render_cv_pdf
from portfolio_cv.pdf.document import Cursor, Document, Page, ensure_space, start_new_page
from portfolio_cv.pdf.fonts import CORE_FONTS, Font, FontPair, load_fonts
from portfolio_cv.pdf.measurement import width_of, wrap_text

__all__ = [
    "CORE_FONTS",
    "CVRenderResult",
    "Cursor",
    "Document",
    "Font",
    "FontPair",
    "Page",
    "build_cv_document",
    "ensure_space",
    "load_fonts",
    "render_cv_pdf",
    "start_new_page",
    "width_of",
    "wrap_text",
]
