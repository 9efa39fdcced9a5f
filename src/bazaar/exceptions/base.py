"""
Application error taxonomy.

A single exception type, `AppError`, carries a tagged `ErrorCategory`. The HTTP
boundary (see `bazaar.api.v1.error_handlers`) switches on the category instead of
matching exception subclasses, so a feature-specific error only has to pick a
category to get the right response.
"""

from enum import Enum
from typing import Mapping
from uuid import UUID


class ErrorCategory(str, Enum):
    NOT_FOUND = "not_found"
    BAD_REQUEST = "bad_request"
    UNCLASSIFIED = "unclassified"


class AppError(Exception):
    """
    Base exception for repository/service errors.

    - category: the ErrorCategory the boundary translates into a status code
    - message: human-friendly message (safe to show to clients for NOT_FOUND / BAD_REQUEST)
    - fields: optional mapping of field name -> validation message (e.g., {'email': 'must not be null'})
    """

    # Map category -> HTTP status.
    CATEGORY_TO_STATUS = {
        ErrorCategory.NOT_FOUND: 404,
        ErrorCategory.BAD_REQUEST: 400,
        ErrorCategory.UNCLASSIFIED: 500,
    }

    def __init__(self, category: ErrorCategory, message: str, *,
                 fields: Mapping[str, str] | None = None):
        super().__init__(message)
        self.category = category
        self.message = message
        self.fields = dict(fields) if fields else None

    def __str__(self) -> str:
        # keep the category visible in logs / tests
        base = f"[{self.category.value}] {self.message}"
        if self.fields:
            return f"{base} (fields: {', '.join(self.fields)})"
        return base

    def http_status(self) -> int:
        return self.CATEGORY_TO_STATUS.get(self.category, 500)


# ------------------------
# Feature-specific errors
# ------------------------

def user_not_found(user_id: UUID) -> AppError:
    return AppError(ErrorCategory.NOT_FOUND, f"User not found with ID: {user_id}")


def bad_request(message: str, fields: Mapping[str, str] | None = None) -> AppError:
    return AppError(ErrorCategory.BAD_REQUEST, message, fields=fields)


def unclassified(message: str) -> AppError:
    return AppError(ErrorCategory.UNCLASSIFIED, message)


__all__ = [
    "ErrorCategory",
    "AppError",
    "user_not_found",
    "bad_request",
    "unclassified",
]
