"""
Custom exception handlers for DRF.
"""
import logging

from rest_framework import status
from rest_framework.response import Response
from rest_framework.views import exception_handler

from shared.domain.exceptions import (
    DomainException,
    EntityNotFoundError,
    ValidationError,
    AuthorizationError,
    BusinessRuleViolationError,
    InvalidOperationError,
)

logger = logging.getLogger(__name__)


# Checked in order; the first matching base class wins.
DOMAIN_EXCEPTION_STATUS = (
    (EntityNotFoundError, status.HTTP_404_NOT_FOUND),
    (ValidationError, status.HTTP_400_BAD_REQUEST),
    (BusinessRuleViolationError, status.HTTP_422_UNPROCESSABLE_ENTITY),
    (InvalidOperationError, status.HTTP_409_CONFLICT),
)


def status_for_exception(exc: DomainException) -> int:
    """Pick the HTTP status for a domain exception."""
    if isinstance(exc, AuthorizationError):
        if exc.reason == 'unauthenticated':
            return status.HTTP_401_UNAUTHORIZED
        return status.HTTP_403_FORBIDDEN
    for exc_class, status_code in DOMAIN_EXCEPTION_STATUS:
        if isinstance(exc, exc_class):
            return status_code
    return status.HTTP_400_BAD_REQUEST


def custom_exception_handler(exc, context):
    """Handle custom domain exceptions."""
    # Call REST framework's default exception handler first
    response = exception_handler(exc, context)

    if isinstance(exc, DomainException):
        status_code = status_for_exception(exc)
        logger.info(
            f"Domain error {exc.code} in {context.get('view').__class__.__name__}: {exc.message}"
        )
        return Response(exc.to_dict(), status=status_code)

    return response
