"""
Unit tests for layout config, cursor transitions and page models.
"""

import pytest

from repo_pdf.builder.layout import (
    Cursor,
    LayoutConfig,
    LayoutResult,
    PagePlan,
    TextRun,
)


def _run(y: float = 15.0) -> TextRun:
    return TextRun(text="a", x=15.0, y=y, color="#000000", font_name="Courier", font_size=9)


class TestLayoutConfig:
    """Tests for LayoutConfig dataclass."""

    def test_init_when_defaults_then_a4_with_15_margins(self):
        config = LayoutConfig()

        assert config.page_width == 210.0
        assert config.page_height == 297.0
        assert config.available_width == 180.0
        assert config.available_height == 267.0
        assert config.content_right == 195.0
        assert config.page_bottom == 282.0

    def test_init_when_margins_exceed_width_then_raises_error(self):
        with pytest.raises(ValueError, match="Margins exceed page width"):
            LayoutConfig(page_width=20, margin_left=10, margin_right=10)

    def test_init_when_margins_exceed_height_then_raises_error(self):
        with pytest.raises(ValueError, match="Margins exceed page height"):
            LayoutConfig(page_height=30)


class TestCursor:
    """Tests for pure Cursor transitions."""

    def test_place_when_called_then_only_x_moves(self):
        cursor = Cursor(page_index=0, y=15, x=15)

        moved = cursor.place(10)

        assert (moved.page_index, moved.y, moved.x) == (0, 15, 25)
        assert cursor.x == 15  # original untouched

    def test_advance_row_when_called_then_y_grows_and_x_resets(self):
        cursor = Cursor(page_index=2, y=40, x=120)

        moved = cursor.advance_row(5.175, left=15)

        assert moved.page_index == 2
        assert moved.y == pytest.approx(45.175)
        assert moved.x == 15

    def test_advance_page_when_called_then_next_page_at_top_left(self):
        cursor = Cursor(page_index=0, y=280, x=90)

        moved = cursor.advance_page(top=15, left=15)

        assert moved == Cursor(page_index=1, y=15, x=15)

    def test_advance_and_carriage_return(self):
        cursor = Cursor(page_index=0, y=15, x=50)

        assert cursor.advance(10) == Cursor(page_index=0, y=25, x=50)
        assert cursor.carriage_return(15) == Cursor(page_index=0, y=15, x=15)


class TestPageModels:
    """Tests for PagePlan and LayoutResult."""

    def test_page_plan_counts(self):
        page = PagePlan(index=0, runs=(_run(), _run(20)))
        assert page.run_count == 2
        assert not page.is_empty
        assert not page.has_background

    def test_layout_result_totals(self):
        result = LayoutResult(pages=(PagePlan(0, (_run(),)), PagePlan(1, ())))
        assert result.page_count == 2
        assert result.total_runs == 1
        assert result.pages[1].is_empty
