"""Input exception.

Raised when required arguments are missing or invalid.
"""

from .huekey_error import HueKeyError


class InputError(HueKeyError):
    """Exception thrown when command line arguments are missing or invalid."""

    def __init__(
        self,
        message: str = "Invalid input",
        cause: Exception | None = None,
        argument: str | None = None,
    ):
        """Initialize input exception.

        Args:
            message: Error message
            cause: Underlying exception that caused this error
            argument: Name of the offending argument (if applicable)
        """
        super().__init__(message, cause)
        self.argument = argument
