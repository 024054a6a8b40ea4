"""
Tests for the journal book builder and its page schedule.
"""

import dataclasses

import pytest

from bujo_book.builder import (
    FRONT_MATTER,
    MONTHLY_BLOCK,
    Journal,
    create_journal_book,
    expected_page_count,
    slugify,
)
from bujo_book.errors import UnsupportedPaperSize
from bujo_book.palette import COLOR_PALETTE, MONOCHROME_PALETTE
from bujo_book.paper import PAPER_SIZES
from bujo_book.surface import RecordingSurface


class TestCreateJournalBook:

    @pytest.mark.parametrize("size_id", list(PAPER_SIZES))
    def test_full_book_page_count_matches_oracle(self, surface, size_id):
        create_journal_book(size_id, surface=surface)

        assert surface.page_count == 66
        assert surface.page_count == expected_page_count()
        assert surface.count("commit") == 1

    def test_invalid_paper_size_draws_nothing(self, surface):
        with pytest.raises(UnsupportedPaperSize):
            create_journal_book("InvalidSize", surface=surface)

        assert surface.operations == []
        assert surface.committed == []

    def test_palette_applied_once_before_pages(self, surface):
        create_journal_book("A4", surface=surface)

        names = [op.name for op in surface.operations]
        assert names[:3] == ["set_text_color", "set_line_color", "open_page"]
        assert surface.count("set_text_color") == 1
        assert surface.count("set_line_color") == 1
        assert surface.operations[0].args == (COLOR_PALETTE.text_color,)

    def test_monochrome_journal(self, surface):
        create_journal_book("A5", Journal(color_scheme="monochrome"), surface)
        assert surface.operations[1].args == (MONOCHROME_PALETTE.line_color,)

    def test_commit_is_last_and_uses_title_slug(self, surface):
        result = create_journal_book("A4", Journal(title="Test Journal"), surface)

        assert surface.operations[-1].name == "commit"
        assert surface.committed == ["test_journal_journal_book.pdf"]
        assert result == "test_journal_journal_book.pdf"

    def test_default_title_file_name(self, surface):
        create_journal_book("A6", surface=surface)
        assert surface.committed == ["my_bullet_journal_journal_book.pdf"]

    def test_page_order(self, surface):
        create_journal_book("A4", Journal(title="Order Check"), surface)
        pages = surface.pages

        def first_text(page):
            return next(op.args[0] for op in page if op.name == "draw_text")

        assert first_text(pages[0]) == "Order Check"
        assert first_text(pages[1]) == "Index"
        assert first_text(pages[2]) == "Undated Calendar"
        assert first_text(pages[15]) == "Top 30 Milestones"
        assert first_text(pages[17]) == "Helicopter Overview"
        for month in range(12):
            start = 18 + month * 4
            assert all(op.name == "draw_circle" for op in pages[start])
            assert first_text(pages[start + 1]) == "Daily Planner"
            assert first_text(pages[start + 2]) == "Weekly Overview"
            assert first_text(pages[start + 3]) == "Flexible Tracking"

    def test_dotted_grid_uses_fifth_inch_spacing(self, surface):
        create_journal_book("A4", surface=surface)

        dots = surface.pages[18]
        assert dots[0].args[:2] == (0.2, 0.2)

    def test_layout_is_deterministic(self):
        first, second = RecordingSurface(), RecordingSurface()
        journal = Journal(title="Same")

        create_journal_book("A4", journal, first)
        create_journal_book("A4", journal, second)

        assert first.operations == second.operations

    def test_paper_size_scales_layout(self):
        a4, a5 = RecordingSurface(), RecordingSurface()
        create_journal_book("A4", surface=a4)
        create_journal_book("A5", surface=a5)

        assert [op.name for op in a4.pages[19]] == [op.name for op in a5.pages[19]]
        assert a4.pages[19] != a5.pages[19]


class TestJournal:

    def test_defaults(self):
        journal = Journal()
        assert journal.title == "My Bullet Journal"
        assert journal.color_scheme == "color"

    def test_is_immutable(self):
        with pytest.raises(dataclasses.FrozenInstanceError):
            Journal().title = "Other"

    @pytest.mark.parametrize("title, expected", [
        ("Test Journal", "test_journal"),
        ("My  Big\tPlan", "my_big_plan"),
        ("Solo", "solo"),
    ])
    def test_slugify(self, title, expected):
        assert slugify(title) == expected

    def test_file_name(self):
        assert Journal("Test Journal").file_name == "test_journal_journal_book.pdf"


def test_expected_page_count():
    assert expected_page_count() == 66
    assert len(FRONT_MATTER) == 5
    assert len(MONTHLY_BLOCK) == 4
