"""Exceptions raised while building moderation reports."""

from modactivity.exceptions.base import AppException


class AggregationError(AppException):
    """A query backing the activity report failed; no partial report is produced."""

    def __init__(self, detail: str):
        """
        Initialize an AggregationError carrying the underlying failure message.

        Parameters:
            detail (str): Message of the underlying failure, exposed to callers as `detail`.
        """
        self.detail = detail
        super().__init__(f"Failed to build moderation activity report: {detail}")
