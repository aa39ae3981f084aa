"""Decode exception.

Raised when an image file cannot be read or parsed.
"""

from .huekey_error import HueKeyError


class DecodeError(HueKeyError):
    """Exception thrown when an input or background image cannot be decoded."""

    def __init__(
        self,
        message: str = "Cannot decode image",
        cause: Exception | None = None,
        image_path: str | None = None,
    ):
        """Initialize decode exception.

        Args:
            message: Error message
            cause: Underlying exception that caused this error
            image_path: Path to the image that failed to decode
        """
        super().__init__(message, cause)
        self.image_path = image_path
