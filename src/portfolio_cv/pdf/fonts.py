"""Font handles shared by the layout engine and the PDF writer."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING

from portfolio_cv.models.errors import FontLoadError

if TYPE_CHECKING:
    from fpdf import FPDF

__all__ = ["CORE_FONTS", "CORE_FONTS_ENCODING", "Font", "FontPair", "load_fonts"]

_TTF_FAMILY = "cvsans"

# Core faces cover the WinAnsi (cp1252) character set.
CORE_FONTS_ENCODING = "windows-1252"


@dataclass(frozen=True, slots=True)
class Font:
    """A font face the engine can measure and draw with.

    Attributes:
        family: fpdf2 family name (a core family such as ``helvetica`` or
            the name a TTF file is registered under).
        style: ``""`` for regular, ``"B"`` for bold.
        path: TTF file backing the face, or *None* for a core font.
    """

    family: str
    style: str = ""
    path: str | None = None

    @property
    def is_core(self) -> bool:
        return self.path is None

    def register(self, pdf: FPDF) -> None:
        """Make this face available on *pdf*."""
        if self.path is not None:
            pdf.add_font(self.family, self.style, self.path)


@dataclass(frozen=True, slots=True)
class FontPair:
    """The regular and bold faces every renderer receives."""

    regular: Font
    bold: Font

    def __iter__(self):
        yield self.regular
        yield self.bold


CORE_FONTS = FontPair(regular=Font("helvetica"), bold=Font("helvetica", "B"))


def load_fonts(
    regular_path: str | Path | None = None,
    bold_path: str | Path | None = None,
) -> FontPair:
    """Return the font pair to render with.

    Without paths the core Helvetica faces are used. TTF files give full
    Unicode coverage; core faces only cover Latin-1.

    Raises:
        FontLoadError: If only one path is given or a file is missing.
    """
    if regular_path is None and bold_path is None:
        return CORE_FONTS
    if regular_path is None or bold_path is None:
        raise FontLoadError("Both a regular and a bold font file are required")

    for path in (regular_path, bold_path):
        if not Path(path).is_file():
            raise FontLoadError(f"Font file not found: {path}")

    return FontPair(
        regular=Font(_TTF_FAMILY, "", str(regular_path)),
        bold=Font(_TTF_FAMILY, "B", str(bold_path)),
    )
