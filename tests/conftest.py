import pytest

from bujo_book.paper import PAPER_SIZES
from bujo_book.surface import RecordingSurface


@pytest.fixture
def surface():
    """A fresh recording surface."""
    return RecordingSurface()


@pytest.fixture
def a4():
    return PAPER_SIZES["A4"]
