"""Base exception for all application-level errors."""


class AppException(Exception):
    """Root of the application exception hierarchy.

    Domain code raises subclasses of this; HTTP mapping lives in
    ``modactivity/core/error_handlers.py``.
    """

    def __init__(self, message: str = "An application error occurred"):
        """
        Initialize the exception with a human-readable message.

        Parameters:
            message (str): Description of the error, also stored as `message`.
        """
        self.message = message
        super().__init__(message)
