"""
Translate domain exceptions into DRF responses.
"""
import logging

from rest_framework import status
from rest_framework.response import Response
from rest_framework.views import exception_handler

from shared.domain.exceptions import (
    BusinessRuleViolationError,
    DomainException,
    EntityNotFoundError,
    ExternalServiceError,
    ValidationError,
)

logger = logging.getLogger(__name__)

# Most specific first; DomainException catches the rest.
STATUS_BY_EXCEPTION = (
    (EntityNotFoundError, status.HTTP_404_NOT_FOUND),
    (ValidationError, status.HTTP_400_BAD_REQUEST),
    (BusinessRuleViolationError, status.HTTP_422_UNPROCESSABLE_ENTITY),
    (ExternalServiceError, status.HTTP_503_SERVICE_UNAVAILABLE),
    (DomainException, status.HTTP_400_BAD_REQUEST),
)


def error_body(exc: DomainException) -> dict:
    body = {'error': exc.message, 'code': exc.code}
    if isinstance(exc, EntityNotFoundError):
        body.update(entity=exc.entity_name, entity_id=exc.entity_id)
    elif isinstance(exc, ValidationError):
        body['field'] = exc.field
    elif isinstance(exc, BusinessRuleViolationError):
        body['rule'] = exc.rule
    elif isinstance(exc, ExternalServiceError):
        body['service'] = exc.service
    return body


def custom_exception_handler(exc, context):
    """DRF EXCEPTION_HANDLER: domain errors first, then DRF's own handling."""
    if not isinstance(exc, DomainException):
        return exception_handler(exc, context)

    status_code = next(code for exc_type, code in STATUS_BY_EXCEPTION if isinstance(exc, exc_type))
    if isinstance(exc, ExternalServiceError):
        logger.error(f"{exc.service} unavailable: {exc.message}")
    else:
        view = context.get('view')
        logger.info(f"{type(exc).__name__} in {type(view).__name__}: {exc.message}")
    return Response(error_body(exc), status=status_code)
