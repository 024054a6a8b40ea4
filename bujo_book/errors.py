"""Errors raised while laying out a journal book."""


class JournalError(Exception):
    """Base class for journal generation errors."""


class UnsupportedPaperSize(JournalError, ValueError):
    """Paper size identifier is not in the paper size table."""


class InvalidSurface(JournalError):
    """No drawing surface was supplied, or it cannot accept drawing yet."""


class InvalidDimensions(JournalError, ValueError):
    """Paper dimensions are missing or not positive."""


class InvalidDotSpacing(JournalError, ValueError):
    """Dot grid spacing must be greater than zero."""
