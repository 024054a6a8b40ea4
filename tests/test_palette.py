import pytest

from bujo_book.palette import (
    COLOR_PALETTE,
    MONOCHROME_PALETTE,
    ColorPalette,
    apply_palette,
    resolve_color_scheme,
)


class TestResolveColorScheme:

    def test_color_scheme_returns_chromatic_palette(self):
        assert resolve_color_scheme("color") == ColorPalette(
            text_color="#4A90E2",
            line_color="#F5A623",
            highlight_color="#7ED321",
        )

    def test_monochrome_scheme_returns_gray_palette(self):
        assert resolve_color_scheme("monochrome") == ColorPalette(
            text_color="#000000",
            line_color="#333333",
            highlight_color="#666666",
        )

    @pytest.mark.parametrize("scheme", ["sepia", "COLOR", "", None, 42])
    def test_unrecognized_scheme_falls_back_to_monochrome(self, scheme):
        assert resolve_color_scheme(scheme) == MONOCHROME_PALETTE

    def test_palette_is_immutable(self):
        with pytest.raises(AttributeError):
            COLOR_PALETTE.text_color = "#FFFFFF"


def test_apply_palette_sets_text_then_line_color(surface):
    apply_palette(surface, COLOR_PALETTE)

    assert [(op.name, op.args) for op in surface.operations] == [
        ("set_text_color", ("#4A90E2",)),
        ("set_line_color", ("#F5A623",)),
    ]
