from .user_service import UserService, to_response

__all__ = ["UserService", "to_response"]
