"""Tests for the header and contact-info renderers."""

from __future__ import annotations

from portfolio_cv.constants.layout_constants import GRAY, GREEN, MARGIN, TITLE_SIZE, TOP_Y
from portfolio_cv.models.cv_data import CVData, PersonalInfo
from portfolio_cv.pdf.document import Cursor, Document
from portfolio_cv.pdf.fonts import FontPair
from portfolio_cv.pdf.header import contact_rows, render_contact_info, render_header


class TestRenderHeader:
    """Tests for render_header."""

    def test_skips_without_personal_info(
        self, cursor: Cursor, document: Document, fonts: FontPair
    ) -> None:
        assert render_header(cursor, document, CVData(), fonts) is cursor
        assert cursor.page.operations == ()

    def test_draws_name_and_title(
        self, cursor: Cursor, document: Document, fonts: FontPair, sample_cv: CVData
    ) -> None:
        result = render_header(cursor, document, sample_cv, fonts)

        name, title = cursor.page.text_ops
        assert name.text == "Jane Doe"
        assert name.size == TITLE_SIZE
        assert name.color == GREEN
        assert name.y == TOP_Y
        assert title.text == "Software Engineer"
        assert title.y == TOP_Y - 25
        assert result.y == TOP_Y - 43

    def test_missing_fields_use_placeholders(
        self, cursor: Cursor, document: Document, fonts: FontPair
    ) -> None:
        cv = CVData.model_validate({"personalInfo": {}})

        render_header(cursor, document, cv, fonts)

        assert [op.text for op in cursor.page.text_ops] == ["Name", "Title"]


class TestContactRows:
    """Tests for grouping contact items into rows."""

    def test_email_links_with_mailto(self) -> None:
        (email,) = contact_rows(PersonalInfo(email="a@b.c"))[0]
        assert email.uri == "mailto:a@b.c"
        assert email.color == GREEN

    def test_plain_phone_is_gray_and_unlinked(self) -> None:
        (phone,) = contact_rows(PersonalInfo(phone="+1 555 0100"))[0]
        assert phone.color == GRAY
        assert phone.uri is None

    def test_url_phone_is_linked(self) -> None:
        (phone,) = contact_rows(PersonalInfo(phone="https://wa.me/15550100"))[0]
        assert phone.uri == "https://wa.me/15550100"
        assert phone.color == GREEN

    def test_row_assignment(self) -> None:
        info = PersonalInfo(
            email="a@b.c",
            location="Here",
            website="https://site",
            github="https://gh",
            linkedin="https://li",
        )

        first, second, third = contact_rows(info)

        assert [item.text for item in first] == ["a@b.c", "Here"]
        assert [item.text for item in second] == ["https://site", "https://gh"]
        assert [item.text for item in third] == ["https://li"]

    def test_empty_info_gives_three_empty_rows(self) -> None:
        assert contact_rows(PersonalInfo()) == [[], [], []]


class TestRenderContactInfo:
    """Tests for render_contact_info."""

    def test_renders_rows_links_and_separators(
        self, cursor: Cursor, document: Document, fonts: FontPair, sample_cv: CVData
    ) -> None:
        result = render_contact_info(cursor, document, sample_cv, fonts)

        assert result.y == TOP_Y - 36
        assert [link.uri for link in result.annotations] == [
            "mailto:jane@example.com",
            "https://janedoe.dev",
            "https://github.com/janedoe",
            "https://linkedin.com/in/janedoe",
        ]
        # two separators on the first row, one on the second
        assert len(cursor.page.circle_ops) == 3

    def test_empty_rows_still_advance(
        self, cursor: Cursor, document: Document, fonts: FontPair
    ) -> None:
        cv = CVData.model_validate({"personalInfo": {"name": "Solo"}})

        result = render_contact_info(cursor, document, cv, fonts)

        assert result.y == TOP_Y - 36
        assert cursor.page.text_ops == []

    def test_skips_without_personal_info(
        self, cursor: Cursor, document: Document, fonts: FontPair
    ) -> None:
        assert render_contact_info(cursor, document, CVData(), fonts) is cursor

    def test_item_past_right_margin_wraps(
        self, cursor: Cursor, document: Document, fonts: FontPair
    ) -> None:
        location = " ".join(["Word"] * 20)
        cv = CVData.model_validate({"personalInfo": {"email": "a@b.c", "location": location}})

        result = render_contact_info(cursor, document, cv, fonts)

        email, wrapped = cursor.page.text_ops
        assert wrapped.text == location
        assert wrapped.x == MARGIN
        assert wrapped.y == email.y - 12
        assert result.y == TOP_Y - 48
