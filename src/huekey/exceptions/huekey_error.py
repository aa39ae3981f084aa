"""Base runtime exception for huekey."""


class HueKeyError(RuntimeError):
    """Root of the huekey exception hierarchy.

    Every error raised by the pipeline is terminal: nothing in the package
    retries, so the CLI maps each subclass to an exit status and aborts.
    """

    def __init__(self, message: str | None = None, cause: Exception | None = None):
        """Construct a new error.

        Args:
            message: The detail message
            cause: The cause of the error
        """
        if message and cause:
            super().__init__(f"{message}: {cause}")
            self.__cause__ = cause
        elif message:
            super().__init__(message)
        elif cause:
            super().__init__(str(cause))
            self.__cause__ = cause
        else:
            super().__init__()
