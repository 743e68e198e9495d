"""Liveness route for the CV rendering API."""

from __future__ import annotations

from fastapi import APIRouter

router = APIRouter(tags=["health"])

SERVICE_NAME = "portfolio-cv"


@router.get("/health")
def health_check() -> dict[str, str]:
    """Report that the renderer is up."""
    return {"status": "healthy", "service": SERVICE_NAME}
