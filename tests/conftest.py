from __future__ import annotations

import pytest

from portfolio_cv.constants.layout_constants import TOP_Y
from portfolio_cv.models.cv_data import CVData
from portfolio_cv.pdf.document import Cursor, Document
from portfolio_cv.pdf.fonts import CORE_FONTS, FontPair


@pytest.fixture
def fonts() -> FontPair:
    """Core Helvetica faces; no font files needed."""
    return CORE_FONTS


@pytest.fixture
def document() -> Document:
    return Document()


@pytest.fixture
def cursor(document: Document) -> Cursor:
    """A cursor at the top of the document's first page."""
    return Cursor(page=document.add_page(), y=TOP_Y)


@pytest.fixture(autouse=True)
def _clear_font_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep font overrides from the host environment out of tests."""
    monkeypatch.delenv("PORTFOLIO_CV_REGULAR_FONT", raising=False)
    monkeypatch.delenv("PORTFOLIO_CV_BOLD_FONT", raising=False)


@pytest.fixture
def cv_payload() -> dict:
    """A complete CV payload in the JSON shape the CMS serves."""
    return {
        "personalInfo": {
            "name": "Jane Doe",
            "title": "Software Engineer",
            "email": "jane@example.com",
            "phone": "+1 555 0100",
            "location": "Vancouver, BC",
            "website": "https://janedoe.dev",
            "github": "https://github.com/janedoe",
            "linkedin": "https://linkedin.com/in/janedoe",
            "avatar": [],
        },
        "about": (
            "I build things.\n"
            "• Shipped a layout engine used by thousands\n"
            "- Led a team of four engineers\n"
            "Thanks for reading."
        ),
        "experience": [
            {
                "title": "Senior Engineer",
                "company": "Acme Corp - Remote",
                "period": "2021 - Present",
                "description": "Built document pipelines and reporting services.",
                "current": True,
            },
            {
                "title": "Engineer",
                "company": "Initech",
                "period": "2018 - 2021",
                "description": "Maintained billing integrations.",
                "current": False,
            },
        ],
        "education": [
            {
                "degree": "BSc Computer Science",
                "institution": "X Univ",
                "period": "2014 - 2018",
                "description": "See https://example.com/verify",
            }
        ],
        "languages": [
            {"language": "English", "level": "Native"},
            {"language": "French", "level": "Intermediate"},
            {"language": "Spanish", "level": "Basic"},
        ],
        "skills": {
            "frontend": ["TypeScript", "React", "CSS"],
            "tools": ["Git", "Docker"],
            "backend": ["TDD", "Code review"],
        },
        "projects": [
            {
                "id": 1,
                "title": "CV Engine",
                "description": "A long description of the CV engine.",
                "short_description": "Paginated PDF layout.",
                "technologies": ["Python"],
                "github_url": "https://github.com/janedoe/cv-engine",
                "demo_url": "https://cv.janedoe.dev",
                "image_urls": [],
                "year": 2024,
                "featured": True,
                "status": "completed",
            },
            {
                "id": 2,
                "title": "Side Project",
                "description": "Not featured.",
                "year": 2023,
                "featured": False,
                "status": "archived",
            },
        ],
    }


@pytest.fixture
def sample_cv(cv_payload: dict) -> CVData:
    return CVData.model_validate(cv_payload)
