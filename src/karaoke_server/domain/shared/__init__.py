"""
Shared Domain Kernel

Contains types, validators and exceptions shared across all bounded contexts.
"""

from karaoke_server.domain.shared.exceptions import (
    BusinessRuleViolationError,
    DomainError,
    EntityNotFoundError,
    ForbiddenExtensionError,
    MediaNotFoundError,
    ValidationError,
)

__all__ = [
    "DomainError",
    "ValidationError",
    "EntityNotFoundError",
    "MediaNotFoundError",
    "ForbiddenExtensionError",
    "BusinessRuleViolationError",
]
