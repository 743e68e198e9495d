from __future__ import annotations

from portfolio_cv.constants.layout_constants import (
    BODY_SIZE,
    CONTENT_WIDTH,
    GRAY,
    GREEN,
    LIGHT_GRAY,
    LINE_HEIGHT,
    MARGIN,
    PAGE_HEIGHT,
    PAGE_WIDTH,
    SECONDARY_SIZE,
    SUBTITLE_SIZE,
    TITLE_SIZE,
)

__all__ = [
    "BODY_SIZE",
    "CONTENT_WIDTH",
    "GRAY",
    "GREEN",
    "LIGHT_GRAY",
    "LINE_HEIGHT",
    "MARGIN",
    "PAGE_HEIGHT",
    "PAGE_WIDTH",
    "SECONDARY_SIZE",
    "SUBTITLE_SIZE",
    "TITLE_SIZE",
]
