"""Color schemes for journal text and rules."""

from dataclasses import dataclass

COLOR = "color"
MONOCHROME = "monochrome"


@dataclass(frozen=True)
class ColorPalette:
    text_color: str
    line_color: str
    highlight_color: str


COLOR_PALETTE = ColorPalette(
    text_color="#4A90E2",       # blue
    line_color="#F5A623",       # orange
    highlight_color="#7ED321",  # green
)

MONOCHROME_PALETTE = ColorPalette(
    text_color="#000000",
    line_color="#333333",
    highlight_color="#666666",
)


def resolve_color_scheme(scheme) -> ColorPalette:
    """Map a scheme id to its palette. Anything but "color" is monochrome."""
    if scheme == COLOR:
        return COLOR_PALETTE
    return MONOCHROME_PALETTE


def apply_palette(surface, palette: ColorPalette):
    """Set the surface's text and line colors from the palette."""
    surface.set_text_color(palette.text_color)
    surface.set_line_color(palette.line_color)
