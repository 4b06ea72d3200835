from todo_api.services.user_service import UserService, validate_credentials

__all__ = ["UserService", "validate_credentials"]
