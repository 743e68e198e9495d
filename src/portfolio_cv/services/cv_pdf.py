"""CV PDF service.

Validates raw CV payloads, renders them with the layout engine and
persists the result.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from pathlib import Path
from typing import TYPE_CHECKING, Any

from portfolio_cv.config import get_fonts
from portfolio_cv.models.cv_data import CVData
from portfolio_cv.pdf.assembler import build_cv_document

if TYPE_CHECKING:
    from portfolio_cv.pdf.assembler import CVRenderResult
    from portfolio_cv.pdf.fonts import FontPair

__all__ = [
    "DEFAULT_FILENAME",
    "generate_cv_pdf",
    "layout_cv",
    "merge_projects",
    "suggested_filename",
    "write_cv_pdf",
]

logger = logging.getLogger(__name__)

DEFAULT_FILENAME = "My Resume.pdf"


def merge_projects(
    cv_payload: Mapping[str, Any],
    projects: Sequence[Mapping[str, Any]] | None = None,
) -> CVData:
    """Attach a separately fetched project list and validate the payload.

    Args:
        cv_payload: CV JSON as served by the CMS.
        projects: Project listing fetched on its own. *None* keeps
            whatever ``projects`` the payload already carries.

    Returns:
        The validated snapshot.

    Raises:
        pydantic.ValidationError: If the payload is malformed.
    """
    payload = dict(cv_payload)
    if projects is not None:
        payload["projects"] = list(projects)
    return CVData.model_validate(payload)


def suggested_filename(cv: CVData) -> str:
    """Return the download filename for *cv*."""
    info = cv.personal_info
    if info is None or not info.name:
        return DEFAULT_FILENAME
    return f"{info.name} Resume.pdf"


def layout_cv(cv: CVData, fonts: FontPair | None = None) -> CVRenderResult:
    """Lay out *cv* without serializing it.

    Fonts come from the environment when not given.
    """
    if fonts is None:
        fonts = get_fonts()
    return build_cv_document(cv, fonts)


def generate_cv_pdf(cv: CVData, fonts: FontPair | None = None) -> bytes:
    """Render *cv* to PDF bytes.

    Raises:
        CVRenderError: If layout or serialization fails.
        FontLoadError: If the configured fonts cannot be loaded.
    """
    logger.info("Generating CV PDF")
    result = layout_cv(cv, fonts)
    data = result.to_bytes()

    logger.info("Generated CV PDF: %d page(s), %d bytes", result.page_count, len(data))
    return data


def write_cv_pdf(
    cv: CVData,
    output_path: str | Path,
    fonts: FontPair | None = None,
) -> Path:
    """Render *cv* and write it to *output_path*, creating parent directories.

    Returns:
        The path written.
    """
    path = Path(output_path)
    data = generate_cv_pdf(cv, fonts)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_bytes(data)
    logger.info("Wrote CV PDF to %s", path)
    return path
