# bazaar/
# │
# ├── exceptions/
# │   ├── __init__.py
# │   ├── base.py       # ErrorCategory + AppError and the feature-specific factories
# │   └── mapper.py     # Map SQLAlchemy errors to AppError (db_error_handler)

from .base import AppError, ErrorCategory, user_not_found, bad_request, unclassified
from .mapper import db_error_handler

__all__ = [
    "AppError",
    "ErrorCategory",
    "user_not_found",
    "bad_request",
    "unclassified",
    "db_error_handler",
]
