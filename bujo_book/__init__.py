"""Bullet journal book PDF generator."""

from .builder import (
    FRONT_MATTER,
    MONTHLY_BLOCK,
    NUM_MONTHS,
    Journal,
    create_journal_book,
    expected_page_count,
    slugify,
)
from .drawers import (
    PageSection,
    add_cover_page,
    add_daily_planning_page,
    add_dotted_grid_page,
    add_flexible_tracking_page,
    add_helicopter_overview_page,
    add_illustration_page,
    add_index_page,
    add_top_milestones_pages,
    add_undated_calendar_pages,
    add_weekly_overview_page,
    draw_section,
)
from .errors import (
    InvalidDimensions,
    InvalidDotSpacing,
    InvalidSurface,
    JournalError,
    UnsupportedPaperSize,
)
from .palette import ColorPalette, apply_palette, resolve_color_scheme
from .paper import PAPER_SIZES, PaperDimensions, lookup_paper_size
from .surface import DrawingSurface, FitzSurface, RecordingSurface

__version__ = "0.1.0"
