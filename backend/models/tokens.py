"""Compact token (JWT) data models"""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Any

from pydantic import BaseModel, ConfigDict

DATE_CLAIMS = ("exp", "nbf", "iat")


class DecodedToken(BaseModel):
    """Header and payload of a decoded token; the signature is kept as-is"""

    model_config = ConfigDict(frozen=True)

    header: dict[str, Any]
    payload: dict[str, Any]
    signature: str

    def claim(self, key: str, default: Any = None) -> Any:
        """Look up any payload claim"""
        return self.payload.get(key, default)

    def _numeric_claim(self, key: str) -> float | None:
        value = self.payload.get(key)
        # bool is an int subclass but never a timestamp
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            return None
        return value

    @property
    def exp(self) -> float | None:
        return self._numeric_claim("exp")

    @property
    def nbf(self) -> float | None:
        return self._numeric_claim("nbf")

    @property
    def iat(self) -> float | None:
        return self._numeric_claim("iat")

    @property
    def iss(self) -> str | None:
        value = self.payload.get("iss")
        return value if isinstance(value, str) else None

    @property
    def sub(self) -> str | None:
        value = self.payload.get("sub")
        return value if isinstance(value, str) else None

    @property
    def aud(self) -> str | list[str] | None:
        value = self.payload.get("aud")
        if isinstance(value, str):
            return value
        if isinstance(value, list) and all(isinstance(item, str) for item in value):
            return value
        return None

    def claim_datetime(self, key: str) -> datetime | None:
        """Convert a seconds-since-epoch claim to an aware UTC datetime"""
        seconds = self._numeric_claim(key)
        if seconds is None:
            return None
        try:
            return datetime.fromtimestamp(seconds, tz=timezone.utc)
        except (OverflowError, OSError, ValueError):
            return None

    def is_expired(self, now_ms: float) -> bool:
        """True when exp is set and now (epoch milliseconds) has reached it"""
        exp = self.exp
        return exp is not None and now_ms >= exp * 1000


class TokenRequest(BaseModel):
    """Request to decode a token"""

    token: str
    now_ms: int | None = None  # Defaults to the current time


class TokenResponse(BaseModel):
    """Decoded token with derived claim information"""

    header: dict[str, Any]
    payload: dict[str, Any]
    signature: str
    expired: bool
    dates: dict[str, datetime | None]
