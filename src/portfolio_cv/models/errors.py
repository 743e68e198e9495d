"""Errors raised by the CV rendering engine."""

from __future__ import annotations


class CVRenderError(RuntimeError):
    """Raised when a CV document cannot be built or serialized."""


class PageSealedError(CVRenderError):
    """Raised when a sealed page is drawn on or sealed a second time."""


class FontLoadError(CVRenderError):
    """Raised when the configured fonts cannot be loaded."""
