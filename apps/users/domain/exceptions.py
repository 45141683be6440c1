"""
User domain exceptions.
"""
from shared.domain.exceptions import AuthorizationError, DomainException, EntityNotFoundError, ValidationError


class InvalidEmailError(ValidationError):
    """Raised when an email is invalid."""

    def __init__(self, email: str):
        super().__init__(message=f"Invalid email format: '{email}'", field="email")
        self.email = email


class InvalidRoleError(ValidationError):
    """Raised when an unknown role is requested."""

    def __init__(self, role: str):
        super().__init__(message=f"Unknown role: '{role}'", field="role")
        self.role = role


class UserAlreadyExistsError(DomainException):
    """Raised when attempting to create a user that already exists."""

    def __init__(self, field: str, value: str):
        super().__init__(
            message=f"User with {field} '{value}' already exists",
            code="USER_ALREADY_EXISTS"
        )
        self.field = field
        self.value = value

    def to_dict(self) -> dict:
        return {**super().to_dict(), 'field': self.field}


class UserNotFoundError(EntityNotFoundError):
    """Raised when a user is not found."""

    def __init__(self, identifier: str):
        super().__init__(entity_name="User", entity_id=identifier, code="USER_NOT_FOUND")
        self.identifier = identifier


class InvalidCredentialsError(AuthorizationError):
    """Raised when login credentials are invalid."""

    def __init__(self):
        super().__init__(
            message="Invalid email or password",
            reason="unauthenticated",
            code="INVALID_CREDENTIALS"
        )


class UserInactiveError(AuthorizationError):
    """Raised when an inactive user attempts to perform an action."""

    def __init__(self, user_id: str):
        super().__init__(
            message=f"User '{user_id}' is inactive",
            reason="inactive",
            code="USER_INACTIVE"
        )
        self.user_id = user_id
