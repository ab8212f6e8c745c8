"""
Errors raised by seam carving.

All of them are caller input errors detected before any seam is removed.
"""


class SeamCarvingError(ValueError):
    """Base class for seam carving precondition violations."""


class InvalidDimension(SeamCarvingError):
    """Image width or height is too small for energy or seam computation."""


class InvalidReduction(SeamCarvingError):
    """Requested number of seams would leave a zero or negative width."""
