"""Hash, password and UUID generator API endpoints"""

from __future__ import annotations

from fastapi import APIRouter, HTTPException

from models.generators import (
    HashRequest,
    HashResponse,
    PasswordOptions,
    PasswordResponse,
    UuidResponse,
)
from services.generators import generate_hash, generate_password, generate_uuids

router = APIRouter()


@router.post("/hash", response_model=HashResponse)
async def hash_text(request: HashRequest) -> HashResponse:
    """Hash text with md5, sha256 or sha512"""
    try:
        digest = generate_hash(request.text, request.algorithm)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return HashResponse(algorithm=request.algorithm.lower(), digest=digest)


@router.post("/password", response_model=PasswordResponse)
async def password(options: PasswordOptions) -> PasswordResponse:
    """Generate a random password"""
    try:
        return PasswordResponse(password=generate_password(options))
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))


@router.get("/uuid", response_model=UuidResponse)
async def uuids(count: int = 1) -> UuidResponse:
    """Generate one or more random UUIDs"""
    try:
        return UuidResponse(uuids=generate_uuids(count))
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
