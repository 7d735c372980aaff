"""
Application exceptions module.

This module provides a clean separation of concerns for error handling:
- Base exceptions define the hierarchy
- Validation exceptions handle rejected input
- Auth exceptions handle authentication/authorization
- Reporting exceptions handle report aggregation failures
- HTTP mapping is handled separately in modactivity/core/error_handlers.py
"""

from modactivity.exceptions.base import AppException
from modactivity.exceptions.crud import (
    ValidationError,
)
from modactivity.exceptions.auth import (
    AuthenticationError,
    InsufficientPermissionsError,
)
from modactivity.exceptions.reporting import AggregationError

__all__ = [
    # Base
    "AppException",
    # Validation
    "ValidationError",
    # Auth
    "AuthenticationError",
    "InsufficientPermissionsError",
    # Reporting
    "AggregationError",
]
