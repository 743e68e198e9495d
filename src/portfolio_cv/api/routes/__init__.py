"""Route handlers for the API."""

from portfolio_cv.api.routes import cv, health

__all__ = ["cv", "health"]
