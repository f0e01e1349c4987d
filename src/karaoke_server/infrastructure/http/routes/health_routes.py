"""Liveness endpoints polled by the terminal and the admin screen."""

from __future__ import annotations

from fastapi import APIRouter

from ..dependencies import QueueServiceDep
from ..schemas import HealthResponse

router = APIRouter(tags=["health"])


@router.get("/health", response_model=HealthResponse)
@router.get("/test", response_model=HealthResponse, include_in_schema=False)
async def health(queue: QueueServiceDep) -> HealthResponse:
    info = await queue.get_queue()
    return HealthResponse(queue_length=info.total_length)
