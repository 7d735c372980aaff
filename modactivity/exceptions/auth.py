"""Authentication and authorization exceptions."""

from modactivity.exceptions.base import AppException


class AuthenticationError(AppException):
    """Base class for authentication-related errors."""

    pass


class InsufficientPermissionsError(AuthenticationError):
    """Caller is not a staff account."""

    def __init__(self, message: str = "Unauthorized - staff access required"):
        """
        Initialize InsufficientPermissionsError with an optional message describing the permission failure.

        Parameters:
            message (str): Human-readable error message; defaults to "Unauthorized - staff access required".
        """
        super().__init__(message)
