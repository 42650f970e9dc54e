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
    InsufficientStockError,
    UnauthorizedError,
    PersistenceError,
)

logger = logging.getLogger(__name__)


def _error_body(exc: DomainException, http_status: int, **extra) -> dict:
    body = {
        'status': http_status,
        'message': exc.message,
        'code': exc.code,
    }
    body.update(extra)
    return body


def custom_exception_handler(exc, context):
    """Handle custom domain exceptions."""
    # Call REST framework's default exception handler first
    response = exception_handler(exc, context)

    if isinstance(exc, UnauthorizedError):
        return Response(
            _error_body(exc, status.HTTP_401_UNAUTHORIZED),
            status=status.HTTP_401_UNAUTHORIZED,
            headers={'WWW-Authenticate': 'Bearer realm="api"'},
        )

    if isinstance(exc, EntityNotFoundError):
        return Response(
            _error_body(
                exc,
                status.HTTP_404_NOT_FOUND,
                entity=exc.entity_name,
                entity_id=exc.entity_id,
            ),
            status=status.HTTP_404_NOT_FOUND,
        )

    if isinstance(exc, ValidationError):
        return Response(
            _error_body(exc, status.HTTP_400_BAD_REQUEST, field=exc.field),
            status=status.HTTP_400_BAD_REQUEST,
        )

    if isinstance(exc, InsufficientStockError):
        return Response(
            _error_body(
                exc,
                status.HTTP_409_CONFLICT,
                product_id=exc.product_id,
                requested=exc.requested,
                available=exc.available,
            ),
            status=status.HTTP_409_CONFLICT,
        )

    if isinstance(exc, PersistenceError):
        view = context.get('view')
        logger.error(
            f"Persistence failure in {view.__class__.__name__ if view else 'unknown view'}: {exc.message}"
        )
        return Response(
            _error_body(exc, status.HTTP_500_INTERNAL_SERVER_ERROR),
            status=status.HTTP_500_INTERNAL_SERVER_ERROR,
        )

    if isinstance(exc, DomainException):
        return Response(
            _error_body(exc, status.HTTP_400_BAD_REQUEST),
            status=status.HTTP_400_BAD_REQUEST,
        )

    return response
