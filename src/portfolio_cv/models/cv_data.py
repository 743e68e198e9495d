"""Read-only CV snapshot consumed by the rendering engine.

The shapes mirror the JSON served by the portfolio CMS (``/api/cv-data``
and the projects listing). Every model is frozen: nothing in the engine
mutates the snapshot it is handed.
"""

from __future__ import annotations

from enum import StrEnum

from pydantic import BaseModel, ConfigDict, Field

__all__ = [
    "CVData",
    "EducationEntry",
    "ExperienceEntry",
    "LanguageEntry",
    "PersonalInfo",
    "Project",
    "ProjectStatus",
    "Skills",
    "Tenure",
]


class ProjectStatus(StrEnum):
    """Lifecycle state of a portfolio project."""

    IN_PROGRESS = "in-progress"
    COMPLETED = "completed"
    ARCHIVED = "archived"

    @property
    def label(self) -> str:
        """Human-readable label printed in the project metadata line."""
        return _STATUS_LABELS[self]


_STATUS_LABELS: dict[ProjectStatus, str] = {
    ProjectStatus.IN_PROGRESS: "In Progress",
    ProjectStatus.COMPLETED: "Completed",
    ProjectStatus.ARCHIVED: "Archived",
}


class Tenure(StrEnum):
    """Whether a work-experience entry is still ongoing."""

    CURRENT = "current"
    PAST = "past"


class _Snapshot(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)


class PersonalInfo(_Snapshot):
    """Name, headline and contact links shown at the top of the CV."""

    name: str | None = None
    title: str | None = None
    email: str | None = None
    phone: str | None = None
    location: str | None = None
    website: str | None = None
    github: str | None = None
    linkedin: str | None = None
    avatar: tuple[str, ...] = ()


class ExperienceEntry(_Snapshot):
    """A single work-experience record."""

    title: str
    company: str
    period: str
    description: str = ""
    current: bool = False

    @property
    def tenure(self) -> Tenure:
        return Tenure.CURRENT if self.current else Tenure.PAST


class EducationEntry(_Snapshot):
    """A single education record."""

    degree: str
    institution: str
    period: str
    description: str = ""


class LanguageEntry(_Snapshot):
    language: str
    level: str


class Skills(_Snapshot):
    """Skill tokens split by group.

    ``frontend`` is printed as *Technologies* and ``backend`` as
    *Methodologies/Practices*.
    """

    frontend: tuple[str, ...] = ()
    tools: tuple[str, ...] = ()
    backend: tuple[str, ...] = ()

    def is_empty(self) -> bool:
        return not (self.frontend or self.tools or self.backend)


class Project(_Snapshot):
    """A portfolio project; only ``featured`` ones appear on the CV."""

    id: int | None = None
    title: str
    description: str
    short_description: str | None = None
    technologies: tuple[str, ...] = ()
    github_url: str | None = None
    demo_url: str | None = None
    image_urls: tuple[str, ...] = ()
    year: int
    featured: bool = False
    status: ProjectStatus
    created_at: str | None = None

    @property
    def summary(self) -> str:
        """Text shown under the project title."""
        return self.short_description or self.description


class CVData(_Snapshot):
    """Top-level bundle handed to the document assembler."""

    personal_info: PersonalInfo | None = Field(None, alias="personalInfo")
    about: str | None = None
    experience: tuple[ExperienceEntry, ...] = ()
    education: tuple[EducationEntry, ...] = ()
    languages: tuple[LanguageEntry, ...] = ()
    skills: Skills | None = None
    projects: tuple[Project, ...] = ()

    @property
    def featured_projects(self) -> list[Project]:
        return [project for project in self.projects if project.featured]
