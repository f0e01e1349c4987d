"""Shared performance queue endpoints.

Devices poll ``GET /queue`` every few seconds; every read renumbers the
queue, so the positions they see are always dense.
"""

from __future__ import annotations

from typing import Any

from fastapi import APIRouter, status
from fastapi.responses import JSONResponse

from ....domain.shared.exceptions import ValidationError
from ....domain.shared.messages import ErrorMessages
from ..dependencies import QueueServiceDep
from ..schemas import ClearResponse, DequeueRequest, EnqueueRequest, MoveRequest, OkResponse

router = APIRouter(prefix="/queue", tags=["queue"])


@router.get("")
async def list_queue(queue: QueueServiceDep) -> list[dict[str, Any]]:
    info = await queue.get_queue()
    return [entry.to_wire() for entry in info.entries]


@router.post("", status_code=status.HTTP_201_CREATED)
async def enqueue(queue: QueueServiceDep, payload: EnqueueRequest | None = None) -> JSONResponse:
    payload = payload or EnqueueRequest()
    entry = await queue.enqueue(payload.song, payload.singer)
    return JSONResponse(entry.to_wire(), status_code=status.HTTP_201_CREATED)


@router.delete("", response_model=ClearResponse)
async def clear_queue(queue: QueueServiceDep) -> ClearResponse:
    removed = await queue.clear()
    return ClearResponse(ok=True, removed=removed)


@router.post("/move", response_model=OkResponse)
async def move_entry(payload: MoveRequest, queue: QueueServiceDep) -> OkResponse:
    """Manual reordering from the admin screen (0-based indices)."""
    if not await queue.move(payload.from_index, payload.to_index):
        raise ValidationError(
            ErrorMessages.INVALID_QUEUE_MOVE.format(
                from_index=payload.from_index, to_index=payload.to_index
            ),
            field="index",
        )
    return OkResponse(ok=True)


@router.post("/dequeue")
async def dequeue(queue: QueueServiceDep, payload: DequeueRequest | None = None) -> dict[str, Any]:
    """Take an entry (the head by default) off the queue when its performance starts."""
    payload = payload or DequeueRequest()
    entry = await queue.dequeue(payload.index)
    return entry.to_wire()


@router.delete("/{entry_id}", response_model=OkResponse)
async def remove_entry(entry_id: str, queue: QueueServiceDep) -> OkResponse:
    await queue.remove(entry_id)
    return OkResponse(ok=True)
