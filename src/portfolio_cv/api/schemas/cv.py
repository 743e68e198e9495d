"""Pydantic schemas for CV rendering endpoints."""

from __future__ import annotations

from pydantic import BaseModel, Field

from portfolio_cv.models.cv_data import CVData, Project


class CVPdfRequest(BaseModel):
    """Request schema for rendering a CV.

    ``projects`` mirrors the separate projects listing; when given it
    replaces the projects carried inside ``cv``.
    """

    cv: CVData = Field(..., description="CV snapshot to render")
    projects: list[Project] | None = Field(
        None, description="Project listing fetched separately from the CV data"
    )

    def to_cv(self) -> CVData:
        """Return the CV snapshot with the project listing attached."""
        if self.projects is None:
            return self.cv
        return self.cv.model_copy(update={"projects": tuple(self.projects)})


class CVLayoutResponse(BaseModel):
    """Response schema summarizing a rendered CV."""

    page_count: int = Field(description="Number of pages in the document")
    final_y: float = Field(description="Cursor height after the last section, in points")
    byte_size: int = Field(description="Size of the serialized PDF in bytes")
