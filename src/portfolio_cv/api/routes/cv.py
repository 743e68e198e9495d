"""CV rendering routes for the API."""

from __future__ import annotations

from typing import Annotated
from urllib.parse import quote

from fastapi import APIRouter, Depends, HTTPException, Response, status

from portfolio_cv.api.dependencies import get_render_fonts
from portfolio_cv.api.schemas.cv import CVLayoutResponse, CVPdfRequest
from portfolio_cv.models.errors import CVRenderError
from portfolio_cv.pdf.fonts import FontPair
from portfolio_cv.services.cv_pdf import generate_cv_pdf, layout_cv, suggested_filename

router = APIRouter(prefix="/cv", tags=["cv"])


def _content_disposition(filename: str) -> str:
    """Build an attachment header that survives non-ASCII names."""
    fallback = filename.encode("ascii", "replace").decode("ascii").replace('"', "")
    return f"attachment; filename=\"{fallback}\"; filename*=UTF-8''{quote(filename)}"


@router.post(
    "/pdf",
    responses={200: {"content": {"application/pdf": {}}}},
    summary="Render a CV to PDF",
)
def render_cv_pdf_endpoint(
    data: CVPdfRequest,
    fonts: Annotated[FontPair, Depends(get_render_fonts)],
) -> Response:
    """Render the CV and return it as a PDF download."""
    cv = data.to_cv()
    try:
        pdf_bytes = generate_cv_pdf(cv, fonts)
    except CVRenderError:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to generate PDF",
        ) from None

    return Response(
        content=pdf_bytes,
        media_type="application/pdf",
        headers={"Content-Disposition": _content_disposition(suggested_filename(cv))},
    )


@router.post(
    "/layout",
    response_model=CVLayoutResponse,
    summary="Summarize a CV layout",
)
def layout_cv_endpoint(
    data: CVPdfRequest,
    fonts: Annotated[FontPair, Depends(get_render_fonts)],
) -> CVLayoutResponse:
    """Lay out the CV and report page count, final cursor and byte size."""
    try:
        result = layout_cv(data.to_cv(), fonts)
        byte_size = len(result.to_bytes())
    except CVRenderError:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to generate PDF",
        ) from None

    return CVLayoutResponse(
        page_count=result.page_count,
        final_y=result.final_y,
        byte_size=byte_size,
    )
