"""HTTP API layer (FastAPI)."""

from karaoke_server.infrastructure.http.app import create_app

__all__ = ["create_app"]
