r"""
Centralized access to all database models.

Importing this package registers every model with `Base.metadata`, which is
what `create_all()` relies on.

    from bazaar.models import User
"""

from .user import User

__all__ = [
    "User",
]
