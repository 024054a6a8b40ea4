"""
Page drawers for the bullet journal book.

Each drawer opens one page (or a fixed block of pages) on a DrawingSurface and
issues a fixed sequence of drawing calls. Positions are designed on an A4
grid and scaled to the supplied paper dimensions; centered titles always sit
at width / 2.
"""

import logging
from enum import Enum
from pathlib import Path
from typing import Optional

from .errors import InvalidDimensions, InvalidDotSpacing, InvalidSurface
from .paper import PAPER_SIZES, PaperDimensions

logger = logging.getLogger(__name__)

# =============================================================================
# CONSTANTS
# =============================================================================

# Design grid (A4, inches); everything below is placed on this grid
DESIGN_SIZE = PAPER_SIZES["A4"]
DEFAULT_DIMENSIONS = PAPER_SIZES["A4"]
MARGIN_LEFT = 0.6
MARGIN_RIGHT = DESIGN_SIZE.width - 0.6
TITLE_Y = 0.8

FONT_SIZES = {
    "cover_title": 32,
    "cover_subtitle": 14,
    "page_title": 18,
    "header": 14,
    "body": 11,
    "small": 9,
}

# Dot grid
DOT_RADIUS = 0.01
EPSILON = 1e-9

# Checklists: one circle followed by one ruled line per item
CHECKBOX_RADIUS = 0.08
CHECKBOX_GAP = 0.2

DEFAULT_TITLE = "My Bullet Journal"
ASSETS_DIR = Path("assets") / "module-images"
ILLUSTRATION_TITLE_Y = 0.79
ILLUSTRATION_RECT = (0.79, 1.18, 6.69, 4.72)  # x, y, w, h

MONTH_NAMES = ["January", "February", "March", "April", "May", "June",
               "July", "August", "September", "October", "November", "December"]
# Undated: February gets 29 boxes so any year fits
DAYS_PER_MONTH = [31, 29, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31]
DAY_NAMES = ["Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday"]
DAY_LETTERS = ["M", "T", "W", "T", "F", "S", "S"]

HABIT_ROWS = 5
INDEX_ENTRIES = 20


class PageSection(str, Enum):
    COVER = "cover"
    INDEX = "index"
    CALENDAR = "calendar"
    MILESTONES = "milestones"
    OVERVIEW = "overview"
    DOTTED_GRID = "dotted-grid"
    DAILY = "daily"
    WEEKLY = "weekly"
    FLEXIBLE = "flexible"
    ILLUSTRATION = "illustration"


# =============================================================================
# LAYOUT HELPERS
# =============================================================================

class _Grid:
    """Scale design-grid coordinates to the target paper."""

    def __init__(self, dimensions: PaperDimensions):
        self.width = dimensions.width
        self.height = dimensions.height
        self.sx = dimensions.width / DESIGN_SIZE.width
        self.sy = dimensions.height / DESIGN_SIZE.height

    def x(self, value: float) -> float:
        return value * self.sx

    def y(self, value: float) -> float:
        return value * self.sy

    def r(self, value: float) -> float:
        return value * min(self.sx, self.sy)


def _check_surface(surface):
    if surface is None:
        raise InvalidSurface("A drawing surface is required")


def _check_dimensions(dimensions, required: bool = True) -> PaperDimensions:
    """Accept PaperDimensions or a {"width", "height"} mapping."""
    if dimensions is None:
        if required:
            raise InvalidDimensions("Paper dimensions are required")
        return DEFAULT_DIMENSIONS
    if isinstance(dimensions, PaperDimensions):
        return dimensions
    try:
        width = float(dimensions["width"])
        height = float(dimensions["height"])
    except (KeyError, TypeError, ValueError) as e:
        raise InvalidDimensions(f"Invalid paper dimensions: {dimensions!r}") from e
    return PaperDimensions(width, height)


def _draw_title(surface, grid: _Grid, text: str, y: float = TITLE_Y,
                font_size: float = FONT_SIZES["page_title"]):
    surface.set_font_size(font_size)
    surface.draw_text(text, grid.width / 2, grid.y(y), "center")


def _draw_label(surface, grid: _Grid, text: str, x: float, y: float,
                font_size: float = FONT_SIZES["header"]):
    surface.set_font_size(font_size)
    surface.draw_text(text, grid.x(x), grid.y(y))


def _draw_rule(surface, grid: _Grid, x1: float, x2: float, y: float):
    surface.draw_line(grid.x(x1), grid.y(y), grid.x(x2), grid.y(y))


def _draw_checklist(surface, grid: _Grid, x: float, y: float, count: int,
                    step: float, line_length: float):
    radius = grid.r(CHECKBOX_RADIUS)
    for i in range(count):
        item_y = y + i * step
        surface.draw_circle(grid.x(x), grid.y(item_y), radius)
        line_x = x + CHECKBOX_GAP
        _draw_rule(surface, grid, line_x, line_x + line_length, item_y + CHECKBOX_RADIUS)


# =============================================================================
# TRACKING PAGES (monthly block)
# =============================================================================

def add_dotted_grid_page(surface, dot_spacing: float, dimensions):
    """Fill a page with filled dots every dot_spacing inches.

    At least one dot is drawn per axis even when the spacing is larger than
    the page.
    """
    _check_surface(surface)
    dimensions = _check_dimensions(dimensions)
    if dot_spacing is None or dot_spacing <= 0:
        raise InvalidDotSpacing(f"Dot spacing must be positive, got {dot_spacing!r}")

    columns = int(max(dot_spacing, dimensions.width) / dot_spacing + EPSILON)
    rows = int(max(dot_spacing, dimensions.height) / dot_spacing + EPSILON)

    surface.open_page()
    for col in range(1, columns + 1):
        x = col * dot_spacing
        for row in range(1, rows + 1):
            surface.draw_circle(x, row * dot_spacing, DOT_RADIUS, True)


def add_daily_planning_page(surface, dimensions):
    _check_surface(surface)
    grid = _Grid(_check_dimensions(dimensions))

    surface.open_page()
    _draw_title(surface, grid, "Daily Planner")

    for label, y in (("Morning", 1.5), ("Afternoon", 2.7), ("Evening", 3.9)):
        _draw_label(surface, grid, label, MARGIN_LEFT, y)

    _draw_label(surface, grid, "To-Do List", MARGIN_LEFT, 5.1)
    _draw_checklist(surface, grid, MARGIN_LEFT + 0.1, 5.5, 10, step=0.35, line_length=3.2)

    _draw_label(surface, grid, "Priority Tasks", 4.4, 5.1)
    _draw_checklist(surface, grid, 4.5, 5.5, 3, step=0.35, line_length=2.8)

    _draw_label(surface, grid, "Notes", MARGIN_LEFT, 9.4)
    _draw_rule(surface, grid, MARGIN_LEFT, MARGIN_RIGHT, 9.8)


def add_weekly_overview_page(surface, dimensions):
    """Seven day slots in a four-column grid, plus a five-item goal list."""
    _check_surface(surface)
    grid = _Grid(_check_dimensions(dimensions))

    surface.open_page()
    _draw_title(surface, grid, "Weekly Overview")

    column_width = 1.8
    row_height = 2.6
    for i, day in enumerate(DAY_NAMES):
        col, row = i % 4, i // 4
        x = MARGIN_LEFT + col * column_width
        y = 1.6 + row * row_height
        _draw_label(surface, grid, day, x, y, FONT_SIZES["body"])
        _draw_rule(surface, grid, x, x + column_width - 0.2, y + 0.15)

    _draw_label(surface, grid, "Goals", MARGIN_LEFT, 7.2)
    _draw_checklist(surface, grid, MARGIN_LEFT + 0.1, 7.6, 5, step=0.4, line_length=6.6)


def add_flexible_tracking_page(surface, dimensions):
    _check_surface(surface)
    grid = _Grid(_check_dimensions(dimensions))

    surface.open_page()
    _draw_title(surface, grid, "Flexible Tracking")

    # Habit tracker: one column per weekday
    _draw_label(surface, grid, "Habit Tracker", MARGIN_LEFT, 1.6)
    radius = grid.r(0.12)
    for col, letter in enumerate(DAY_LETTERS):
        x = 1.0 + col * 0.8
        surface.set_font_size(FONT_SIZES["body"])
        surface.draw_text(letter, grid.x(x), grid.y(2.1), "center")
        for row in range(HABIT_ROWS):
            surface.draw_circle(grid.x(x), grid.y(2.5 + row * 0.45), radius)

    _draw_label(surface, grid, "Goal-Setting", MARGIN_LEFT, 5.2)
    _draw_checklist(surface, grid, MARGIN_LEFT + 0.1, 5.6, 5, step=0.4, line_length=6.6)

    _draw_label(surface, grid, "Flexible Tracking Space", MARGIN_LEFT, 8.0)
    _draw_rule(surface, grid, MARGIN_LEFT, MARGIN_RIGHT, 8.4)


# =============================================================================
# FRONT MATTER
# =============================================================================

def add_cover_page(surface, title: str = DEFAULT_TITLE, dimensions=None):
    _check_surface(surface)
    grid = _Grid(_check_dimensions(dimensions, required=False))

    surface.open_page()
    _draw_title(surface, grid, title, y=3.5, font_size=FONT_SIZES["cover_title"])
    _draw_rule(surface, grid, 2.0, DESIGN_SIZE.width - 2.0, 3.9)
    _draw_title(surface, grid, "Bullet Journal", y=4.4, font_size=FONT_SIZES["cover_subtitle"])


def add_index_page(surface, dimensions=None):
    _check_surface(surface)
    grid = _Grid(_check_dimensions(dimensions, required=False))

    surface.open_page()
    _draw_title(surface, grid, "Index")
    surface.set_font_size(FONT_SIZES["body"])
    for n in range(1, INDEX_ENTRIES + 1):
        y = 1.6 + (n - 1) * 0.45
        surface.draw_text(f"{n}.", grid.x(MARGIN_LEFT), grid.y(y))
        _draw_rule(surface, grid, MARGIN_LEFT + 0.4, MARGIN_RIGHT, y + 0.05)


def add_undated_calendar_pages(surface, dimensions=None):
    """Header page followed by one page per month (13 pages)."""
    _check_surface(surface)
    grid = _Grid(_check_dimensions(dimensions, required=False))

    surface.open_page()
    _draw_title(surface, grid, "Undated Calendar", y=5.5, font_size=FONT_SIZES["cover_title"])
    _draw_title(surface, grid, "Fill in the year as you go", y=6.1,
                font_size=FONT_SIZES["cover_subtitle"])

    column_width = 1.0
    row_height = 1.4
    for month, days in zip(MONTH_NAMES, DAYS_PER_MONTH):
        surface.open_page()
        _draw_title(surface, grid, month)
        surface.set_font_size(FONT_SIZES["small"])
        for day in range(1, days + 1):
            col, row = (day - 1) % 7, (day - 1) // 7
            x = MARGIN_LEFT + col * column_width + 0.1
            y = 1.8 + row * row_height
            surface.draw_text(str(day), grid.x(x), grid.y(y))
        weeks = (days + 6) // 7
        for row in range(weeks):
            _draw_rule(surface, grid, MARGIN_LEFT, MARGIN_LEFT + 7 * column_width,
                       1.8 + row * row_height + 1.1)


def add_top_milestones_pages(surface, dimensions=None):
    """Top 30 (two columns of 15) and Top 10 milestone checklists."""
    _check_surface(surface)
    grid = _Grid(_check_dimensions(dimensions, required=False))

    surface.open_page()
    _draw_title(surface, grid, "Top 30 Milestones")
    for x in (MARGIN_LEFT + 0.1, 4.3):
        _draw_checklist(surface, grid, x, 1.6, 15, step=0.6, line_length=3.2)

    surface.open_page()
    _draw_title(surface, grid, "Top 10 Milestones")
    _draw_checklist(surface, grid, MARGIN_LEFT + 0.1, 1.6, 10, step=0.9, line_length=6.6)


def add_helicopter_overview_page(surface, dimensions=None):
    """Year at a glance: twelve month slots in a 3 x 4 grid."""
    _check_surface(surface)
    grid = _Grid(_check_dimensions(dimensions, required=False))

    surface.open_page()
    _draw_title(surface, grid, "Helicopter Overview")
    for i, month in enumerate(MONTH_NAMES):
        col, row = i % 3, i // 3
        x = MARGIN_LEFT + col * 2.45
        y = 1.8 + row * 2.4
        _draw_label(surface, grid, month, x, y, FONT_SIZES["body"])
        _draw_rule(surface, grid, x, x + 2.1, y + 0.15)


def add_illustration_page(surface, module_name: str, color_scheme: str = "color",
                          dimensions=None):
    """Module title and its illustration image for the given color scheme.

    The image keeps its fixed position; on paper narrower than A4 it is
    shrunk, aspect preserved, to keep the same side margins.
    """
    _check_surface(surface)
    grid = _Grid(_check_dimensions(dimensions, required=False))
    image_path = ASSETS_DIR / f"{module_name}-{color_scheme}.png"

    x, y, w, h = ILLUSTRATION_RECT
    max_width = grid.width - 2 * x
    if w > max_width + EPSILON:
        h = h * max_width / w
        w = max_width

    surface.open_page()
    surface.set_font_size(FONT_SIZES["page_title"])
    surface.draw_text(f"Module: {module_name}", grid.width / 2, ILLUSTRATION_TITLE_Y, "center")
    surface.draw_image(str(image_path), x, y, w, h)


# =============================================================================
# SECTION DISPATCH
# =============================================================================

SECTION_DRAWERS = {
    PageSection.COVER: add_cover_page,
    PageSection.INDEX: add_index_page,
    PageSection.CALENDAR: add_undated_calendar_pages,
    PageSection.MILESTONES: add_top_milestones_pages,
    PageSection.OVERVIEW: add_helicopter_overview_page,
    PageSection.DOTTED_GRID: add_dotted_grid_page,
    PageSection.DAILY: add_daily_planning_page,
    PageSection.WEEKLY: add_weekly_overview_page,
    PageSection.FLEXIBLE: add_flexible_tracking_page,
    PageSection.ILLUSTRATION: add_illustration_page,
}


def draw_section(surface, section, dimensions: Optional[PaperDimensions] = None,
                 **params) -> bool:
    """Draw the page block for a section. Unknown sections are skipped.

    Args:
        surface: Drawing surface receiving the pages
        section: PageSection or its string value (e.g. "daily")
        dimensions: Paper dimensions passed through to the drawer
        params: Extra drawer arguments (title, dot_spacing, module_name, ...)

    Returns:
        True if pages were drawn, False if the section was unknown.
    """
    try:
        section = PageSection(section)
    except ValueError:
        logger.warning("Unknown page section %r, skipping", section)
        return False
    SECTION_DRAWERS[section](surface, dimensions=dimensions, **params)
    return True
