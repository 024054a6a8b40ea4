"""Paper sizes supported by the journal book (inches)."""

from dataclasses import dataclass
from typing import Dict

from .errors import InvalidDimensions, UnsupportedPaperSize


@dataclass(frozen=True)
class PaperDimensions:
    width: float
    height: float

    def __post_init__(self):
        if self.width <= 0 or self.height <= 0:
            raise InvalidDimensions(
                f"Paper dimensions must be positive, got {self.width} x {self.height}"
            )


PAPER_SIZES: Dict[str, PaperDimensions] = {
    "A3": PaperDimensions(11.69, 16.54),
    "A4": PaperDimensions(8.27, 11.69),
    "A5": PaperDimensions(5.83, 8.27),
    "A6": PaperDimensions(4.13, 5.83),
}


def lookup_paper_size(size_id: str) -> PaperDimensions:
    """Return the dimensions for a paper size id such as "A4"."""
    try:
        return PAPER_SIZES[size_id]
    except (KeyError, TypeError):
        accepted = ", ".join(PAPER_SIZES)
        raise UnsupportedPaperSize(
            f"Unsupported paper size {size_id!r} (expected one of {accepted})"
        ) from None
