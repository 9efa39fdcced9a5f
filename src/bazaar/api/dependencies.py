from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from bazaar.database.session import get_async_session
from bazaar.repositories.user_repository import UserRepository
from bazaar.services.user_service import UserService


async def get_user_service(db: AsyncSession = Depends(get_async_session)) -> UserService:
    # Build the request-scoped service chain explicitly: session -> repository -> service
    return UserService(UserRepository(db), db)
