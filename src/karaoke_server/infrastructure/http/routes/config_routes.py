"""Runtime media-root configuration endpoints."""

from __future__ import annotations

from fastapi import APIRouter

from ....domain.media.value_objects import MediaKind
from ..dependencies import ConfigRegistryDep
from ..schemas import ConfigResponse, ConfigUpdateRequest, ConfigUpdateResponse

router = APIRouter(prefix="/config", tags=["config"])


@router.get("", response_model=ConfigResponse)
async def get_config(registry: ConfigRegistryDep) -> ConfigResponse:
    return ConfigResponse(**registry.snapshot())


@router.post("", response_model=ConfigUpdateResponse)
async def update_config(
    registry: ConfigRegistryDep, payload: ConfigUpdateRequest | None = None
) -> ConfigUpdateResponse:
    """Replace either root; blank or non-string values are ignored."""
    if payload is not None:
        registry.set(MediaKind.VIDEO, payload.videos_path)
        registry.set(MediaKind.AUDIO, payload.sounds_path)
    return ConfigUpdateResponse(ok=True, **registry.snapshot())
