"""
User service: the business-rule layer between the HTTP routes and the repository.

Responsibilities:
  - build entities from request DTOs and project entities to response DTOs
  - raise NOT_FOUND application errors for unknown identifiers
  - own the transaction boundary: each write operation commits once at the end

Collaborators are passed in explicitly; see `bazaar.api.dependencies.get_user_service`
for the per-request wiring.
"""
import logging
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from bazaar.exceptions.base import user_not_found
from bazaar.models.user import User
from bazaar.repositories.user_repository import UserRepository
from bazaar.schemas.user import UserCreateRequest, UserUpdateRequest, UserResponse

logger = logging.getLogger(__name__)


def to_response(user: User) -> UserResponse:
    # pure projection of the persisted fields
    return UserResponse(id=user.id, name=user.name, email=user.email)


class UserService:

    def __init__(self, repository: UserRepository, db: AsyncSession):
        self.repository = repository
        self.db = db

    async def create(self, request: UserCreateRequest) -> UserResponse:
        user = await self.repository.save(User(name=request.name, email=request.email))
        await self.db.commit()
        logger.info("user.created", extra={"user_id": str(user.id)})
        return to_response(user)

    async def get_by_id(self, user_id: UUID) -> UserResponse:
        return to_response(await self._get_or_raise(user_id))

    async def get_all(self) -> list[UserResponse]:
        return [to_response(user) for user in await self.repository.find_all()]

    async def update(self, user_id: UUID, request: UserUpdateRequest) -> UserResponse:
        """
        Overwrite name and email of an existing user. The identifier never changes.

        Raises:
            AppError: NOT_FOUND when no user has this id; nothing is written in that case.
        """
        user = await self._get_or_raise(user_id)

        user.name = request.name
        user.email = request.email

        user = await self.repository.save(user)
        await self.db.commit()
        logger.info("user.updated", extra={"user_id": str(user.id)})
        return to_response(user)

    async def delete(self, user_id: UUID) -> None:
        # No existence check: deleting an unknown id succeeds silently.
        await self.repository.delete_by_id(user_id)
        await self.db.commit()
        logger.info("user.deleted", extra={"user_id": str(user_id)})

    async def _get_or_raise(self, user_id: UUID) -> User:
        user = await self.repository.find_by_id(user_id)
        if user is None:
            raise user_not_found(user_id)
        return user
