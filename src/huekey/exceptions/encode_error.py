"""Encode exception.

Raised when the output image cannot be written.
"""

from .huekey_error import HueKeyError


class EncodeError(HueKeyError):
    """Exception thrown when the output image cannot be encoded or written."""

    def __init__(
        self,
        message: str = "Cannot encode image",
        cause: Exception | None = None,
        image_path: str | None = None,
    ):
        """Initialize encode exception.

        Args:
            message: Error message
            cause: Underlying exception that caused this error
            image_path: Path of the output that could not be written
        """
        super().__init__(message, cause)
        self.image_path = image_path
