"""
Domain Layer

Contains pure business logic organized by bounded contexts:
- shared/: Cross-cutting types, validators, messages and exceptions
- media/: Media kinds, roots, resolved files and byte ranges
- queue/: Queue entries, ordering rules and the store contract
"""

from karaoke_server.domain.shared.exceptions import DomainError

__all__ = ["DomainError"]
