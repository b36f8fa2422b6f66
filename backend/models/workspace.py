"""Workspace state models"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel


class UtilityView(str, Enum):
    """Utility panels the client can show"""

    JSON = "json"
    BASE64 = "base64"
    TIMESTAMP = "timestamp"
    REGEX = "regex"
    COLOR = "color"
    IMAGE_RESIZE = "image-resize"
    IMAGE_CONVERT = "image-convert"
    UUID = "uuid"
    HASH = "hash"
    PASSWORD = "password"
    JWT = "jwt"
    SCRATCHPAD = "scratchpad"
    DIFF = "diff"
    CRONTAB = "crontab"


class WorkspaceState(BaseModel):
    """Persisted client state"""

    activeView: UtilityView = UtilityView.JSON
    scratchpad: str = ""


class WorkspaceUpdateRequest(BaseModel):
    """Partial workspace update"""

    activeView: UtilityView | None = None
    scratchpad: str | None = None
