"""
Drawing surfaces for the journal layout engine.

Page drawers only ever talk to a DrawingSurface. Coordinates are in inches,
origin at the top-left corner, y growing downward; text y is the baseline.

- FitzSurface renders to a PDF with PyMuPDF.
- RecordingSurface keeps the call sequence, for dry runs and tests.
"""

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional, Protocol, Tuple

import fitz

from .errors import InvalidSurface
from .paper import PaperDimensions

logger = logging.getLogger(__name__)

# =============================================================================
# CONSTANTS
# =============================================================================

POINTS_PER_INCH = 72
FONT_NAME = "helv"
DEFAULT_FONT_SIZE = 16
LINE_WIDTH = 0.5

COLOR_BLACK = (0, 0, 0)
COLOR_PLACEHOLDER = (0.85, 0.85, 0.85)


# =============================================================================
# CAPABILITY INTERFACE
# =============================================================================

class DrawingSurface(Protocol):

    def open_page(self) -> None: ...

    def set_font_size(self, size: float) -> None: ...

    def draw_text(self, text: str, x: float, y: float, align: Optional[str] = None) -> None: ...

    def draw_line(self, x1: float, y1: float, x2: float, y2: float) -> None: ...

    def draw_circle(self, x: float, y: float, r: float, fill: bool = False) -> None: ...

    def draw_image(self, path: str, x: float, y: float, w: float, h: float) -> None: ...

    def set_text_color(self, color: str) -> None: ...

    def set_line_color(self, color: str) -> None: ...

    def commit(self, filename: str): ...


def hex_to_rgb(color: str) -> Tuple[float, float, float]:
    """Convert "#RRGGBB" to a PyMuPDF (r, g, b) tuple in 0..1."""
    value = color.lstrip("#")
    if len(value) != 6:
        raise ValueError(f"Expected a #RRGGBB color, got {color!r}")
    return tuple(int(value[i:i + 2], 16) / 255 for i in (0, 2, 4))


# =============================================================================
# PYMUPDF BACKEND
# =============================================================================

class FitzSurface:
    """Render drawing calls into a PyMuPDF document.

    Lines and circles are batched into one Shape per page and committed when
    the next page opens or the document is saved.
    """

    def __init__(self, dimensions: PaperDimensions, output_dir: str = "."):
        self.dimensions = dimensions
        self.output_dir = Path(output_dir)
        self.doc = fitz.open()
        self.page: Optional[fitz.Page] = None
        self.shape = None
        self.font_size = DEFAULT_FONT_SIZE
        self.text_color = COLOR_BLACK
        self.line_color = COLOR_BLACK

    # -------------------------------------------------------------------------
    # Helpers
    # -------------------------------------------------------------------------

    @staticmethod
    def _pt(value: float) -> float:
        return value * POINTS_PER_INCH

    def _point(self, x: float, y: float) -> fitz.Point:
        return fitz.Point(self._pt(x), self._pt(y))

    def _require_page(self) -> fitz.Page:
        if self.page is None:
            raise InvalidSurface("No page is open; call open_page() first")
        return self.page

    def _flush_shape(self):
        if self.shape is not None:
            self.shape.commit()
            self.shape = None

    def get_text_width(self, text: str, font_size: float) -> float:
        """Text width in points."""
        return fitz.get_text_length(text, fontname=FONT_NAME, fontsize=font_size)

    # -------------------------------------------------------------------------
    # Drawing operations
    # -------------------------------------------------------------------------

    def open_page(self):
        self._flush_shape()
        self.page = self.doc.new_page(width=self._pt(self.dimensions.width),
                                      height=self._pt(self.dimensions.height))
        self.shape = self.page.new_shape()

    def set_font_size(self, size: float):
        self.font_size = size

    def set_text_color(self, color: str):
        self.text_color = hex_to_rgb(color)

    def set_line_color(self, color: str):
        self.line_color = hex_to_rgb(color)

    def draw_text(self, text: str, x: float, y: float, align: Optional[str] = None):
        page = self._require_page()
        left = self._pt(x)
        if align in ("center", "right"):
            width = self.get_text_width(text, self.font_size)
            left -= width / 2 if align == "center" else width
        page.insert_text(fitz.Point(left, self._pt(y)), text, fontsize=self.font_size,
                         fontname=FONT_NAME, color=self.text_color)

    def draw_line(self, x1: float, y1: float, x2: float, y2: float):
        self._require_page()
        self.shape.draw_line(self._point(x1, y1), self._point(x2, y2))
        self.shape.finish(color=self.line_color, width=LINE_WIDTH)

    def draw_circle(self, x: float, y: float, r: float, fill: bool = False):
        self._require_page()
        self.shape.draw_circle(self._point(x, y), self._pt(r))
        self.shape.finish(color=self.line_color,
                          fill=self.line_color if fill else None,
                          width=LINE_WIDTH)

    def draw_image(self, path: str, x: float, y: float, w: float, h: float):
        page = self._require_page()
        rect = fitz.Rect(self._pt(x), self._pt(y), self._pt(x + w), self._pt(y + h))
        if Path(path).is_file():
            page.insert_image(rect, filename=str(path))
            return
        logger.warning("Image not found, drawing placeholder: %s", path)
        self.shape.draw_rect(rect)
        self.shape.finish(color=COLOR_PLACEHOLDER, width=LINE_WIDTH)

    def commit(self, filename: str) -> Path:
        """Save the document to output_dir/filename and close it."""
        self._flush_shape()
        self.output_dir.mkdir(parents=True, exist_ok=True)
        output_path = self.output_dir / filename
        page_count = len(self.doc)
        self.doc.save(str(output_path))
        self.close()
        logger.info("Saved %d pages to %s", page_count, output_path)
        return output_path

    def close(self):
        """Discard the document without saving. Safe to call twice."""
        if not self.doc.is_closed:
            self.doc.close()
        self.page = None
        self.shape = None


# =============================================================================
# RECORDING BACKEND
# =============================================================================

@dataclass(frozen=True)
class Operation:
    name: str
    args: Tuple


class RecordingSurface:
    """Keep every drawing call in order instead of rendering it."""

    def __init__(self):
        self.operations: List[Operation] = []
        self.committed: List[str] = []

    def _record(self, name: str, *args):
        self.operations.append(Operation(name, args))

    def open_page(self):
        self._record("open_page")

    def set_font_size(self, size: float):
        self._record("set_font_size", size)

    def set_text_color(self, color: str):
        self._record("set_text_color", color)

    def set_line_color(self, color: str):
        self._record("set_line_color", color)

    def draw_text(self, text: str, x: float, y: float, align: Optional[str] = None):
        self._record("draw_text", text, x, y, align)

    def draw_line(self, x1: float, y1: float, x2: float, y2: float):
        self._record("draw_line", x1, y1, x2, y2)

    def draw_circle(self, x: float, y: float, r: float, fill: bool = False):
        self._record("draw_circle", x, y, r, fill)

    def draw_image(self, path: str, x: float, y: float, w: float, h: float):
        self._record("draw_image", path, x, y, w, h)

    def commit(self, filename: str) -> str:
        self._record("commit", filename)
        self.committed.append(filename)
        return filename

    # -------------------------------------------------------------------------
    # Inspection
    # -------------------------------------------------------------------------

    def count(self, name: str) -> int:
        return sum(1 for op in self.operations if op.name == name)

    @property
    def page_count(self) -> int:
        return self.count("open_page")

    @property
    def pages(self) -> List[List[Operation]]:
        """Operations grouped by page, each group starting after its open_page."""
        pages: List[List[Operation]] = []
        for op in self.operations:
            if op.name == "open_page":
                pages.append([])
            elif pages and op.name != "commit":
                pages[-1].append(op)
        return pages

    def texts(self) -> List[str]:
        return [op.args[0] for op in self.operations if op.name == "draw_text"]
