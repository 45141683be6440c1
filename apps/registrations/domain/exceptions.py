"""
Registration domain exceptions.
"""
from typing import Optional

from shared.domain.exceptions import (
    AuthorizationError,
    BusinessRuleViolationError,
    DomainException,
    EntityNotFoundError,
    ValidationError,
)


class UnauthorizedRegistrationError(AuthorizationError):
    """Raised when the caller is not a signed-in student."""

    def __init__(self, reason: str):
        messages = {
            'unauthenticated': "Please log in to register for events",
            'forbidden_role': "Only students can register for events",
        }
        super().__init__(message=messages.get(reason, "Not allowed to register"), reason=reason)


class InvalidRegistrationInputError(ValidationError):
    """Raised when a registration field is empty, not text or too long."""

    def __init__(self, field: str, message: Optional[str] = None):
        super().__init__(
            message=message or f"Registration field '{field}' is required",
            field=field,
            code="INVALID_INPUT",
        )


class DuplicateRegistrationError(BusinessRuleViolationError):
    """Raised under the reject policy when the (event, usn) pair is taken."""

    def __init__(self, registration_id: str):
        super().__init__(
            message=f"Registration '{registration_id}' already exists",
            rule="one_registration_per_usn",
            code="DUPLICATE_REGISTRATION",
        )
        self.registration_id = registration_id

    def to_dict(self) -> dict:
        return {**super().to_dict(), 'registration_id': self.registration_id}


class RegistrationNotFoundError(EntityNotFoundError):
    """Raised when a registration record is not found."""

    def __init__(self, registration_id: str):
        super().__init__(
            entity_name="Registration",
            entity_id=registration_id,
            code="REGISTRATION_NOT_FOUND",
        )


class RegistrationPartialFailureError(DomainException):
    """
    Raised when a write step fails.

    Steps before ``step`` stay committed unless ``rolled_back`` is set.
    """

    def __init__(
        self,
        step: str,
        cause: Exception,
        completed_steps: Optional[list] = None,
        rolled_back: bool = False,
    ):
        super().__init__(
            message=f"Registration failed at step '{step}': {cause}",
            code="PARTIAL_FAILURE",
        )
        self.step = step
        self.cause = cause
        self.completed_steps = list(completed_steps or [])
        self.rolled_back = rolled_back

    def to_dict(self) -> dict:
        return {
            **super().to_dict(),
            'step': self.step,
            'cause': f"{self.cause.__class__.__name__}: {self.cause}",
            'completed_steps': self.completed_steps,
            'rolled_back': self.rolled_back,
        }
