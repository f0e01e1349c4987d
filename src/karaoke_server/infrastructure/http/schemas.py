"""Request and response models for the HTTP API.

Request models are deliberately loose (``Any`` fields, extra keys ignored):
phones and the terminal send hand-built JSON, and the lenient handling of
bad values belongs to the services, not to FastAPI's 422 machinery.
"""

from __future__ import annotations

from typing import Any

from pydantic import AliasChoices, BaseModel, ConfigDict, Field


class ConfigUpdateRequest(BaseModel):
    model_config = ConfigDict(extra="ignore")

    videos_path: Any = Field(default=None, validation_alias=AliasChoices("videosPath", "videos_path"))
    sounds_path: Any = Field(default=None, validation_alias=AliasChoices("soundsPath", "sounds_path"))


class ConfigResponse(BaseModel):
    videosPath: str
    soundsPath: str


class ConfigUpdateResponse(ConfigResponse):
    ok: bool = True


class EnqueueRequest(BaseModel):
    model_config = ConfigDict(extra="ignore")

    song: Any = None
    singer: Any = None


class MoveRequest(BaseModel):
    model_config = ConfigDict(extra="ignore")

    from_index: int = Field(validation_alias=AliasChoices("fromIndex", "from_index", "from"))
    to_index: int = Field(validation_alias=AliasChoices("toIndex", "to_index", "to"))


class DequeueRequest(BaseModel):
    model_config = ConfigDict(extra="ignore")

    index: int = Field(default=0, ge=0)


class OkResponse(BaseModel):
    ok: bool = True


class ClearResponse(OkResponse):
    removed: int = 0


class HealthResponse(BaseModel):
    status: str = "ok"
    message: str = "Server running"
    queue_length: int = 0
