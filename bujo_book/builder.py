"""
Assemble the bullet journal book.

The book is a fixed schedule of page sections: front matter once, then twelve
monthly blocks. The same schedule drives the builder and the expected page
count.
"""

import logging
import re
from dataclasses import dataclass
from typing import Dict, List, Optional

from .drawers import DEFAULT_TITLE, PageSection, draw_section
from .palette import COLOR, apply_palette, resolve_color_scheme
from .paper import lookup_paper_size
from .surface import DrawingSurface, FitzSurface

logger = logging.getLogger(__name__)

# =============================================================================
# SCHEDULE
# =============================================================================

FRONT_MATTER: List[PageSection] = [
    PageSection.COVER,
    PageSection.INDEX,
    PageSection.CALENDAR,
    PageSection.MILESTONES,
    PageSection.OVERVIEW,
]

MONTHLY_BLOCK: List[PageSection] = [
    PageSection.DOTTED_GRID,
    PageSection.DAILY,
    PageSection.WEEKLY,
    PageSection.FLEXIBLE,
]

NUM_MONTHS = 12
DOT_SPACING = 0.2

# Pages opened by one drawer call
SECTION_PAGE_COUNTS: Dict[PageSection, int] = {
    PageSection.COVER: 1,
    PageSection.INDEX: 1,
    PageSection.CALENDAR: 13,     # header + 12 months
    PageSection.MILESTONES: 2,    # top 30 + top 10
    PageSection.OVERVIEW: 1,
    PageSection.DOTTED_GRID: 1,
    PageSection.DAILY: 1,
    PageSection.WEEKLY: 1,
    PageSection.FLEXIBLE: 1,
    PageSection.ILLUSTRATION: 1,
}

FILE_SUFFIX = "_journal_book.pdf"


def expected_page_count() -> int:
    """Total pages of a full book: 1 + 1 + 13 + 2 + 1 + 12 * 4 = 66."""
    front = sum(SECTION_PAGE_COUNTS[s] for s in FRONT_MATTER)
    monthly = sum(SECTION_PAGE_COUNTS[s] for s in MONTHLY_BLOCK)
    return front + NUM_MONTHS * monthly


def slugify(title: str) -> str:
    """Lowercase the title and collapse whitespace runs to one underscore."""
    return re.sub(r"\s+", "_", title).lower()


# =============================================================================
# JOURNAL
# =============================================================================

@dataclass(frozen=True)
class Journal:
    title: str = DEFAULT_TITLE
    color_scheme: str = COLOR

    @property
    def file_name(self) -> str:
        return slugify(self.title) + FILE_SUFFIX


def create_journal_book(paper_size_id: str, journal: Optional[Journal] = None,
                        surface: Optional[DrawingSurface] = None, output_dir: str = "."):
    """Lay out the full book on a surface and commit it.

    Args:
        paper_size_id: One of "A3", "A4", "A5", "A6"
        journal: Title and color scheme; defaults to Journal()
        surface: Drawing surface; a FitzSurface writing to output_dir if None
        output_dir: Where the default surface saves the PDF

    Returns:
        Whatever the surface's commit returns (the saved path for FitzSurface).

    Raises:
        UnsupportedPaperSize: before anything is drawn.
    """
    if journal is None:
        journal = Journal()
    dimensions = lookup_paper_size(paper_size_id)
    owns_surface = surface is None
    if owns_surface:
        surface = FitzSurface(dimensions, output_dir)

    logger.info("Generating %r (%s, %s)", journal.title, paper_size_id, journal.color_scheme)
    try:
        _lay_out(surface, journal, dimensions)
    except BaseException:
        if owns_surface:
            surface.close()
        raise
    return surface.commit(journal.file_name)


def _lay_out(surface, journal: Journal, dimensions):
    apply_palette(surface, resolve_color_scheme(journal.color_scheme))

    page = 1
    for section in FRONT_MATTER:
        params = {"title": journal.title} if section is PageSection.COVER else {}
        page = _emit(surface, section, dimensions, page, **params)

    for month in range(NUM_MONTHS):
        logger.debug("Monthly block %d/%d", month + 1, NUM_MONTHS)
        for section in MONTHLY_BLOCK:
            params = {"dot_spacing": DOT_SPACING} if section is PageSection.DOTTED_GRID else {}
            page = _emit(surface, section, dimensions, page, **params)

    logger.info("Laid out %d pages", page - 1)


def _emit(surface, section: PageSection, dimensions, page: int, **params) -> int:
    count = SECTION_PAGE_COUNTS[section]
    logger.debug("  [%d-%d] %s", page, page + count - 1, section.value)
    draw_section(surface, section, dimensions, **params)
    return page + count
