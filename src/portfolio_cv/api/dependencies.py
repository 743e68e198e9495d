"""Shared dependencies for API routes."""

from __future__ import annotations

import logging

from fastapi import HTTPException, status

from portfolio_cv.config import get_fonts
from portfolio_cv.models.errors import FontLoadError
from portfolio_cv.pdf.fonts import FontPair

logger = logging.getLogger(__name__)


def get_render_fonts() -> FontPair:
    """Resolve the fonts configured for rendering.

    Raises:
        HTTPException: 500 if the font configuration is invalid.
    """
    try:
        return get_fonts()
    except FontLoadError as exc:
        logger.error("Invalid font configuration: %s", exc)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Font configuration is invalid",
        ) from None
