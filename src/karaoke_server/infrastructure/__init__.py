"""Infrastructure layer - external systems integration.

This layer contains implementations for:
- Persistence (in-memory queue store)
- Media (filename resolution, range streaming)
- HTTP (FastAPI application, routers, error translation)
"""
