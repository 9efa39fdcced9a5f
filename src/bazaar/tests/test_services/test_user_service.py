import uuid

import pytest

from bazaar.exceptions.base import AppError, ErrorCategory
from bazaar.models.user import User
from bazaar.schemas.user import UserCreateRequest, UserResponse, UserUpdateRequest
from bazaar.services.user_service import UserService, to_response


def test_to_response_projects_persisted_fields():
    user_id = uuid.uuid4()
    response = to_response(User(id=user_id, name="Alice", email="a@x.com"))
    assert response == UserResponse(id=user_id, name="Alice", email="a@x.com")


@pytest.mark.asyncio
class TestUserServiceCreate:

    async def test_create_returns_generated_id(self, user_service: UserService):
        """
        Behavior:
          - create() persists and commits; the response carries a fresh id
            and echoes name and email.
        """
        response = await user_service.create(UserCreateRequest(name="Alice", email="a@x.com"))

        assert isinstance(response.id, uuid.UUID)
        assert response.name == "Alice"
        assert response.email == "a@x.com"

    async def test_create_then_get_round_trip(self, user_service: UserService):
        created = await user_service.create(UserCreateRequest(name="Bob", email="bob@example.com"))
        assert await user_service.get_by_id(created.id) == created

    async def test_create_ignores_client_supplied_id(self, user_service: UserService):
        client_id = uuid.uuid4()
        request = UserCreateRequest.model_validate({"id": str(client_id), "name": "Eve", "email": "eve@example.com"})

        response = await user_service.create(request)

        assert response.id != client_id


@pytest.mark.asyncio
class TestUserServiceRead:

    async def test_get_by_id_missing_raises_not_found(self, user_service: UserService):
        missing = uuid.uuid4()
        with pytest.raises(AppError) as exc_info:
            await user_service.get_by_id(missing)

        err = exc_info.value
        assert err.category is ErrorCategory.NOT_FOUND
        assert err.message == f"User not found with ID: {missing}"

    async def test_get_all_empty(self, user_service: UserService):
        assert await user_service.get_all() == []

    async def test_get_all_returns_every_user(self, user_service: UserService, multiple_users: list[User]):
        responses = await user_service.get_all()
        assert {r.id for r in responses} == {u.id for u in multiple_users}
        assert all(isinstance(r, UserResponse) for r in responses)


@pytest.mark.asyncio
class TestUserServiceUpdate:

    async def test_update_overwrites_fields_and_keeps_id(self, user_service: UserService, created_user: User):
        response = await user_service.update(
            created_user.id, UserUpdateRequest(name="Alice Smith", email="alice@smith.com")
        )

        assert response.id == created_user.id
        assert response.name == "Alice Smith"
        assert response.email == "alice@smith.com"
        assert await user_service.get_by_id(created_user.id) == response

    async def test_update_missing_raises_and_writes_nothing(
        self, user_service: UserService, multiple_users: list[User]
    ):
        before = await user_service.get_all()

        with pytest.raises(AppError) as exc_info:
            await user_service.update(uuid.uuid4(), UserUpdateRequest(name="Ghost", email="ghost@example.com"))

        assert exc_info.value.category is ErrorCategory.NOT_FOUND
        assert await user_service.get_all() == before


@pytest.mark.asyncio
class TestUserServiceDelete:

    async def test_delete_then_get_raises_not_found(self, user_service: UserService, created_user: User):
        await user_service.delete(created_user.id)

        with pytest.raises(AppError) as exc_info:
            await user_service.get_by_id(created_user.id)
        assert exc_info.value.category is ErrorCategory.NOT_FOUND

    async def test_delete_missing_id_succeeds(self, user_service: UserService, multiple_users: list[User]):
        await user_service.delete(uuid.uuid4())
        assert len(await user_service.get_all()) == len(multiple_users)
