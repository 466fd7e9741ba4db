"""
Domain exceptions.

Every error carries a human-readable `message` and a stable machine `code`;
the API layer maps the four families below onto HTTP statuses.
"""
from typing import Optional


class DomainException(Exception):
    default_code = "DOMAIN_ERROR"

    def __init__(self, message: str, code: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.code = code or self.default_code

    def __repr__(self) -> str:
        return f"{type(self).__name__}(code={self.code!r}, message={self.message!r})"


class EntityNotFoundError(DomainException):
    default_code = "ENTITY_NOT_FOUND"

    def __init__(self, entity_name: str, entity_id: str, code: Optional[str] = None):
        super().__init__(f"{entity_name} '{entity_id}' not found", code)
        self.entity_name = entity_name
        self.entity_id = entity_id


class ValidationError(DomainException):
    """Input that can never be valid, whatever the state of the system."""
    default_code = "VALIDATION_ERROR"

    def __init__(self, message: str, field: Optional[str] = None, code: Optional[str] = None):
        super().__init__(message, code)
        self.field = field


class BusinessRuleViolationError(DomainException):
    """Valid input rejected because of the current state, e.g. checking out an empty cart."""
    default_code = "BUSINESS_RULE_VIOLATION"

    def __init__(self, message: str, rule: Optional[str] = None, code: Optional[str] = None):
        super().__init__(message, code)
        self.rule = rule


class ExternalServiceError(DomainException):
    default_code = "EXTERNAL_SERVICE_UNAVAILABLE"

    def __init__(self, message: str, service: Optional[str] = None, code: Optional[str] = None):
        super().__init__(message, code)
        self.service = service
