"""
Domain exceptions.
"""
from typing import Optional


class DomainException(Exception):
    """Base exception for domain layer."""

    def __init__(self, message: str, code: Optional[str] = None):
        self.message = message
        self.code = code or self.__class__.__name__
        super().__init__(self.message)

    def to_dict(self) -> dict:
        """Serializable error body."""
        return {'error': self.message, 'code': self.code}


class EntityNotFoundError(DomainException):
    """Raised when an entity is not found."""

    def __init__(self, entity_name: str, entity_id: str, code: str = "ENTITY_NOT_FOUND"):
        super().__init__(
            message=f"{entity_name} with id '{entity_id}' not found",
            code=code,
        )
        self.entity_name = entity_name
        self.entity_id = entity_id

    def to_dict(self) -> dict:
        return {
            **super().to_dict(),
            'entity': self.entity_name,
            'entity_id': self.entity_id,
        }


class ValidationError(DomainException):
    """Raised when validation fails."""

    def __init__(self, message: str, field: Optional[str] = None, code: str = "VALIDATION_ERROR"):
        super().__init__(message=message, code=code)
        self.field = field

    def to_dict(self) -> dict:
        return {**super().to_dict(), 'field': self.field}


class AuthorizationError(DomainException):
    """Raised when the caller may not perform an operation."""

    def __init__(self, message: str, reason: Optional[str] = None, code: str = "UNAUTHORIZED"):
        super().__init__(message=message, code=code)
        self.reason = reason

    def to_dict(self) -> dict:
        return {**super().to_dict(), 'reason': self.reason}


class BusinessRuleViolationError(DomainException):
    """Raised when a business rule is violated."""

    def __init__(self, message: str, rule: Optional[str] = None, code: str = "BUSINESS_RULE_VIOLATION"):
        super().__init__(message=message, code=code)
        self.rule = rule

    def to_dict(self) -> dict:
        return {**super().to_dict(), 'rule': self.rule}


class InvalidOperationError(DomainException):
    """Raised when an operation is invalid for the current state."""

    def __init__(self, message: str, operation: Optional[str] = None, state: Optional[str] = None):
        super().__init__(message=message, code="INVALID_OPERATION")
        self.operation = operation
        self.state = state

    def to_dict(self) -> dict:
        return {**super().to_dict(), 'operation': self.operation, 'state': self.state}
