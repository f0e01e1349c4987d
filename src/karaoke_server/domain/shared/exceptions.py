"""Base exception classes for domain-level errors."""

from __future__ import annotations


class DomainError(Exception):
    """Base exception for all domain-level errors."""

    def __init__(self, message: str, code: str | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.code = code or self.__class__.__name__


class ValidationError(DomainError):
    """Raised when input fails domain validation (missing field, bad index)."""

    def __init__(self, message: str, field: str | None = None) -> None:
        super().__init__(message, code="VALIDATION_ERROR")
        self.field = field


class EntityNotFoundError(DomainError):
    """Raised when a requested entity does not exist."""

    def __init__(self, entity_type: str, identifier: str | int, message: str | None = None) -> None:
        msg = message or f"{entity_type} with id '{identifier}' not found"
        super().__init__(msg, code="ENTITY_NOT_FOUND")
        self.entity_type = entity_type
        self.identifier = identifier


class MediaNotFoundError(EntityNotFoundError):
    """Raised when a media file cannot be resolved under its root."""

    def __init__(self, kind: str, name: str, message: str | None = None) -> None:
        super().__init__(kind, name, message or f"{kind} not found")
        self.code = "MEDIA_NOT_FOUND"
        self.kind = kind
        self.name = name


class ForbiddenExtensionError(DomainError):
    """Raised when a file extension is outside the allow-list of its media kind."""

    def __init__(self, extension: str, message: str | None = None) -> None:
        msg = message or f"File type '{extension}' is not allowed"
        super().__init__(msg, code="FORBIDDEN_EXTENSION")
        self.extension = extension


class BusinessRuleViolationError(DomainError):
    """Raised when a business rule is violated."""

    def __init__(self, rule: str, message: str | None = None) -> None:
        msg = message or f"Business rule violated: {rule}"
        super().__init__(msg, code="BUSINESS_RULE_VIOLATION")
        self.rule = rule
