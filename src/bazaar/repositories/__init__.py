"""
Repository layer initialization module.

Usage:
    from bazaar.repositories import BaseRepository, UserRepository
"""

from .base_repository import BaseRepository
from .user_repository import UserRepository

__all__ = [
    "BaseRepository",
    "UserRepository",
]
