"""Tests for the page model, cursor and page-break policy."""

from __future__ import annotations

import pytest

from portfolio_cv.constants.layout_constants import GREEN, MARGIN, TOP_Y
from portfolio_cv.models.errors import CVRenderError, PageSealedError
from portfolio_cv.pdf.document import (
    Cursor,
    Document,
    LinkAnnotation,
    Rect,
    TextOp,
    ensure_space,
    finalize,
    start_new_page,
)
from portfolio_cv.pdf.fonts import FontPair


def _link(page_number: int, uri: str = "https://example.com") -> LinkAnnotation:
    return LinkAnnotation(rect=Rect(60, 500, 120, 511), uri=uri, page_number=page_number)


class TestCursor:
    def test_down_moves_towards_bottom(self, cursor: Cursor) -> None:
        assert cursor.down(12).y == TOP_Y - 12

    def test_at_sets_absolute_position(self, cursor: Cursor) -> None:
        assert cursor.at(300).y == 300

    def test_with_link_does_not_mutate_original(self, cursor: Cursor) -> None:
        linked = cursor.with_link(_link(1))
        assert cursor.annotations == ()
        assert len(linked.annotations) == 1
        assert linked.page is cursor.page


class TestEnsureSpace:
    """Tests for the page-break check."""

    def test_returns_same_cursor_when_space_remains(
        self, cursor: Cursor, document: Document
    ) -> None:
        assert ensure_space(cursor, document, 100) is cursor
        assert document.page_count == 1

    def test_exact_fit_does_not_break(self, cursor: Cursor, document: Document) -> None:
        positioned = cursor.at(MARGIN + 40)
        assert ensure_space(positioned, document, 40) is positioned

    def test_overflow_starts_new_page(self, cursor: Cursor, document: Document) -> None:
        positioned = cursor.at(MARGIN + 10)

        result = ensure_space(positioned, document, 11)

        assert document.page_count == 2
        assert result.page is document.pages[1]
        assert result.y == TOP_Y
        assert result.annotations == ()

    def test_overflow_seals_pending_links_on_old_page(
        self, cursor: Cursor, document: Document
    ) -> None:
        link = _link(1)
        positioned = cursor.at(MARGIN + 5).with_link(link)

        ensure_space(positioned, document, 12)

        first = document.pages[0]
        assert first.sealed
        assert first.annotations == (link,)

    def test_result_never_writes_below_margin(self, cursor: Cursor, document: Document) -> None:
        current = cursor
        for _ in range(200):
            current = ensure_space(current, document, 14)
            assert current.y - 14 >= MARGIN
            current = current.down(14)
        assert document.page_count > 1


class TestStartNewPage:
    def test_breaks_even_with_room_left(self, cursor: Cursor, document: Document) -> None:
        result = start_new_page(cursor, document)

        assert document.page_count == 2
        assert result.page.number == 2
        assert document.pages[0].sealed


class TestPageSealing:
    """Tests for sealed-page invariants."""

    def test_drawing_on_sealed_page_raises(self, cursor: Cursor, fonts: FontPair) -> None:
        cursor.page.seal(())
        op = TextOp("late", MARGIN, 400, 10, fonts.regular, GREEN)

        with pytest.raises(PageSealedError):
            cursor.page.add(op)

    def test_sealing_twice_raises(self, cursor: Cursor) -> None:
        finalize(cursor)
        with pytest.raises(PageSealedError):
            finalize(cursor)

    def test_foreign_annotation_is_rejected(self, cursor: Cursor) -> None:
        with pytest.raises(CVRenderError):
            cursor.page.seal((_link(page_number=7),))
        assert not cursor.page.sealed

    def test_finalize_attaches_pending_links(self, cursor: Cursor) -> None:
        link = _link(1)
        finalize(cursor.with_link(link))
        assert cursor.page.annotations == (link,)


class TestDocumentSerialization:
    """Tests for Document.to_bytes."""

    def test_produces_pdf_bytes(self, cursor: Cursor, document: Document, fonts: FontPair) -> None:
        cursor.page.add(TextOp("Hello", MARGIN, TOP_Y, 10, fonts.regular, GREEN))
        finalize(cursor.with_link(_link(1)))

        data = document.to_bytes()

        assert data.startswith(b"%PDF-")
        assert b"%%EOF" in data[-16:]

    def test_serializes_every_page(self, cursor: Cursor, document: Document) -> None:
        finalize(start_new_page(start_new_page(cursor, document), document))

        assert document.page_count == 3
        assert document.to_bytes().startswith(b"%PDF-")
