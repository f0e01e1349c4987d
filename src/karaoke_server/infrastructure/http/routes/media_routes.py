"""Video and sound streaming endpoints."""

from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Request
from fastapi.responses import Response

from ..dependencies import MediaServiceDep

router = APIRouter(tags=["media"])


@router.get("/videos/resolve/{number}")
async def resolve_video(number: str, media: MediaServiceDep) -> dict[str, Any]:
    """Debug view of how a song number maps to a file under the video root."""
    return await media.diagnose_video(number)


@router.get("/videos/{filename}")
async def stream_video(filename: str, request: Request, media: MediaServiceDep) -> Response:
    return await media.stream_video(filename, request.headers.get("range"))


@router.get("/sounds/{filename}")
async def stream_sound(filename: str, request: Request, media: MediaServiceDep) -> Response:
    return await media.stream_sound(filename, request.headers.get("range"))
