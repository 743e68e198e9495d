"""Tests for the document assembler."""

from __future__ import annotations

import pytest

from portfolio_cv.constants.layout_constants import MARGIN, TOP_Y
from portfolio_cv.models.cv_data import CVData
from portfolio_cv.models.errors import CVRenderError
from portfolio_cv.pdf import assembler
from portfolio_cv.pdf.assembler import build_cv_document, render_cv_pdf
from portfolio_cv.pdf.fonts import FontPair

SECTION_TITLES = {
    "HIGHLIGHTS",
    "WORK EXPERIENCE",
    "TECHNICAL SKILLS",
    "EDUCATION",
    "LANGUAGES",
    "FEATURED PROJECTS",
}


class TestBuildCVDocument:
    """Tests for build_cv_document."""

    def test_sections_follow_fixed_order(self, sample_cv: CVData, fonts: FontPair) -> None:
        result = build_cv_document(sample_cv, fonts)

        pages = result.document.pages
        first_page = [op.text for op in pages[0].text_ops]
        second_page = [op.text for op in pages[1].text_ops]

        assert first_page[0] == "Jane Doe"
        assert [t for t in first_page if t in SECTION_TITLES] == [
            "HIGHLIGHTS",
            "WORK EXPERIENCE",
        ]
        assert [t for t in second_page if t in SECTION_TITLES] == [
            "TECHNICAL SKILLS",
            "EDUCATION",
            "LANGUAGES",
            "FEATURED PROJECTS",
        ]

    def test_skills_force_second_page(self, sample_cv: CVData, fonts: FontPair) -> None:
        result = build_cv_document(sample_cv, fonts)
        assert result.page_count == 2

    def test_every_page_is_sealed(self, sample_cv: CVData, fonts: FontPair) -> None:
        result = build_cv_document(sample_cv, fonts)
        assert all(page.sealed for page in result.document.pages)

    def test_links_land_on_their_pages(self, sample_cv: CVData, fonts: FontPair) -> None:
        result = build_cv_document(sample_cv, fonts)

        for page in result.document.pages:
            assert all(link.page_number == page.number for link in page.annotations)
        assert len(result.document.pages[0].annotations) == 4
        # education URL plus GitHub and Demo
        assert len(result.document.pages[1].annotations) == 3

    def test_nothing_written_below_margin(self, sample_cv: CVData, fonts: FontPair) -> None:
        result = build_cv_document(sample_cv, fonts)

        for page in result.document.pages:
            assert all(op.y >= MARGIN for op in page.text_ops)
        assert result.final_y >= MARGIN

    def test_empty_cv_is_a_single_blank_page(self, fonts: FontPair) -> None:
        result = build_cv_document(CVData(), fonts)

        assert result.page_count == 1
        assert result.final_y == TOP_Y
        assert result.document.pages[0].operations == ()

    def test_input_is_left_untouched(self, sample_cv: CVData, fonts: FontPair) -> None:
        before = sample_cv.model_dump()
        build_cv_document(sample_cv, fonts)
        assert sample_cv.model_dump() == before

    def test_document_title_uses_name(self, sample_cv: CVData, fonts: FontPair) -> None:
        assert build_cv_document(sample_cv, fonts).document.title == "Jane Doe Resume"


class TestFailures:
    """Tests for failure propagation."""

    def test_renderer_error_is_wrapped(
        self, monkeypatch: pytest.MonkeyPatch, sample_cv: CVData, fonts: FontPair
    ) -> None:
        def broken(cursor, document, cv, fonts):
            raise ValueError("boom")

        monkeypatch.setattr(assembler, "SECTION_ORDER", (broken,))

        with pytest.raises(CVRenderError) as excinfo:
            build_cv_document(sample_cv, fonts)
        assert isinstance(excinfo.value.__cause__, ValueError)

    def test_windows_1252_punctuation_renders(self, fonts: FontPair) -> None:
        cv = CVData.model_validate(
            {
                "experience": [
                    {
                        "title": "Lead \u2013 Platform",
                        "company": "Acme",
                        "period": "2019 \u2013 2021",
                        "description": "Led the team\u2019s migration, saving \u20ac2M.",
                    }
                ]
            }
        )

        assert render_cv_pdf(cv, fonts).startswith(b"%PDF-")

    def test_unencodable_text_fails_whole_build(self, fonts: FontPair) -> None:
        cv = CVData.model_validate({"personalInfo": {"name": "Jane → Doe"}})

        with pytest.raises(CVRenderError):
            render_cv_pdf(cv, fonts)


class TestRenderCVPdf:
    def test_returns_pdf_bytes(self, sample_cv: CVData, fonts: FontPair) -> None:
        data = render_cv_pdf(sample_cv, fonts)
        assert data.startswith(b"%PDF-")

    def test_is_deterministic_in_size(self, sample_cv: CVData, fonts: FontPair) -> None:
        first = build_cv_document(sample_cv, fonts)
        second = build_cv_document(sample_cv, fonts)
        assert first.final_y == second.final_y
        assert first.page_count == second.page_count
