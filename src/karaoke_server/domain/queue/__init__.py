"""
Queue Bounded Context

Domain logic for the shared, densely numbered performance queue.
"""

from karaoke_server.domain.queue.entities import QueueEntry
from karaoke_server.domain.queue.repository import QueueStore
from karaoke_server.domain.queue.services import QueueDomainService

__all__ = [
    "QueueEntry",
    "QueueStore",
    "QueueDomainService",
]
