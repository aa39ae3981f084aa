"""Estimation exception.

Raised when no dominant hue can be derived from a pixel stream.
"""

from .huekey_error import HueKeyError


class EstimationError(HueKeyError):
    """Exception thrown when hue estimation has no data to work with."""

    def __init__(self, message: str = "Cannot estimate dominant hue", cause: Exception | None = None):
        super().__init__(message, cause)
