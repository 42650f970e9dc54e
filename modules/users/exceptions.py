"""
User domain exceptions.
"""
from shared.domain.exceptions import DomainException, UnauthorizedError


class UserAlreadyExistsError(DomainException):
    """Raised when attempting to create a user that already exists."""

    def __init__(self, field: str, value: str):
        super().__init__(
            message=f"User with {field} '{value}' already exists",
            code="USER_ALREADY_EXISTS"
        )
        self.field = field
        self.value = value


class UserNotFoundError(DomainException):
    """Raised when a user is not found."""

    def __init__(self, identifier: str):
        super().__init__(
            message=f"User '{identifier}' not found",
            code="USER_NOT_FOUND"
        )
        self.identifier = identifier


class InvalidCredentialsError(UnauthorizedError):
    """Raised when login credentials are invalid."""

    def __init__(self, message: str = "Invalid email or password"):
        super().__init__(message=message)
        self.code = "INVALID_CREDENTIALS"


class UserInactiveError(UnauthorizedError):
    """Raised when an inactive user attempts to perform an action."""

    def __init__(self, user_id: str):
        super().__init__(message=f"User '{user_id}' is inactive")
        self.code = "USER_INACTIVE"
        self.user_id = user_id
