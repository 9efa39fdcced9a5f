"""
User repository for handling user-specific database operations.

The user table needs nothing beyond the generic save / find / delete surface,
so this class only binds `BaseRepository` to the `User` model.
"""

from sqlalchemy.ext.asyncio import AsyncSession

from bazaar.models.user import User
from .base_repository import BaseRepository


class UserRepository(BaseRepository[User]):
    """
    Repository for User entity operations.
    """

    def __init__(self, db: AsyncSession):
        super().__init__(User, db)
