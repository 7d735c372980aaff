"""Input validation exceptions."""

from modactivity.exceptions.base import AppException


class ValidationError(AppException):
    """Business logic validation failed."""

    def __init__(self, message: str, field: str | None = None):
        """
        Create a ValidationError representing a business logic validation failure.

        Parameters:
            message (str): Human-readable error message describing the validation failure.
            field (str | None): Optional name of the offending field; None if not field-specific.
        """
        self.field = field
        super().__init__(message)
