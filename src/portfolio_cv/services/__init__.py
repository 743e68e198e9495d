"""Services"""

from portfolio_cv.services.cv_pdf import (
    generate_cv_pdf,
    layout_cv,
    merge_projects,
    suggested_filename,
    write_cv_pdf,
)

__all__ = [
    "generate_cv_pdf",
    "layout_cv",
    "merge_projects",
    "suggested_filename",
    "write_cv_pdf",
]
