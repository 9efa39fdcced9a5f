from .user import UserCreateRequest, UserUpdateRequest, UserResponse
from .error import ErrorResponse

__all__ = [
    "UserCreateRequest",
    "UserUpdateRequest",
    "UserResponse",
    "ErrorResponse",
]
