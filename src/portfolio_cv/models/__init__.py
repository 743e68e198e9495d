"""Data models and error types"""

from portfolio_cv.models.cv_data import (
    CVData,
    EducationEntry,
    ExperienceEntry,
    LanguageEntry,
    PersonalInfo,
    Project,
    ProjectStatus,
    Skills,
    Tenure,
)
from portfolio_cv.models.errors import CVRenderError, FontLoadError, PageSealedError

__all__ = [
    "CVData",
    "CVRenderError",
    "EducationEntry",
    "ExperienceEntry",
    "FontLoadError",
    "LanguageEntry",
    "PageSealedError",
    "PersonalInfo",
    "Project",
    "ProjectStatus",
    "Skills",
    "Tenure",
]
