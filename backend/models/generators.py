"""Generator endpoint models"""

from __future__ import annotations

from pydantic import BaseModel


class HashRequest(BaseModel):
    """Request to hash text"""

    text: str
    algorithm: str = "sha256"  # md5, sha256, sha512


class HashResponse(BaseModel):
    algorithm: str
    digest: str


class PasswordOptions(BaseModel):
    """Character classes and length of a generated password"""

    length: int = 16
    include_uppercase: bool = True
    include_lowercase: bool = True
    include_numbers: bool = True
    include_symbols: bool = False


class PasswordResponse(BaseModel):
    password: str


class UuidResponse(BaseModel):
    uuids: list[str]
