"""
Unit tests for RenderConfig.
"""

import pytest

from repo_pdf.builder.config import FontFamily, LineSpacing, RenderConfig, Theme


class TestRenderConfig:
    """Tests for RenderConfig dataclass."""

    def test_init_when_defaults_then_creates_valid_config(self):
        config = RenderConfig()

        assert config.font_family is FontFamily.COURIER
        assert config.font_size_pt == 9
        assert config.line_spacing == pytest.approx(1.15)
        assert config.theme is Theme.LIGHT

    @pytest.mark.parametrize(
        "size, spacing, expected",
        [
            (9, LineSpacing.NORMAL.value, 5.175),
            (8, LineSpacing.COMPACT.value, 4.0),
            (10, LineSpacing.SPACIOUS.value, 7.5),
        ],
    )
    def test_line_height_when_presets_then_size_times_half_times_spacing(self, size, spacing, expected):
        config = RenderConfig(font_size_pt=size, line_spacing=spacing)
        assert config.line_height == pytest.approx(expected)

    def test_init_when_any_positive_size_then_accepted(self):
        assert RenderConfig(font_size_pt=13.5).line_height > 0

    def test_init_when_size_not_positive_then_raises_error(self):
        with pytest.raises(ValueError, match="font_size_pt must be positive"):
            RenderConfig(font_size_pt=0)

    def test_init_when_spacing_not_positive_then_raises_error(self):
        with pytest.raises(ValueError, match="line_spacing must be positive"):
            RenderConfig(line_spacing=-1)

    def test_init_when_theme_is_string_then_raises_error(self):
        with pytest.raises(ValueError, match="Unknown theme"):
            RenderConfig(theme="dark")

    def test_is_frozen(self):
        config = RenderConfig()
        with pytest.raises(AttributeError):
            config.theme = Theme.DARK

    def test_to_dict_when_dark_then_serializable_values(self):
        config = RenderConfig(font_family=FontFamily.TIMES, theme=Theme.DARK)
        assert config.to_dict() == {
            "font_family": "times",
            "font_size_pt": 9,
            "line_spacing": pytest.approx(1.15),
            "theme": "dark",
        }
