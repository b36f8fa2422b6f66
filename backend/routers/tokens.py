"""JWT debugger API endpoints"""

from __future__ import annotations

import time

from fastapi import APIRouter, HTTPException

from models.tokens import DATE_CLAIMS, TokenRequest, TokenResponse
from services.errors import FormatError
from services.token_decoder import decode_token

router = APIRouter()


@router.post("/decode", response_model=TokenResponse)
async def decode(request: TokenRequest) -> TokenResponse:
    """Decode a token without verifying its signature"""
    try:
        token = decode_token(request.token)
    except FormatError as e:
        raise HTTPException(status_code=400, detail=e.message)

    now_ms = request.now_ms if request.now_ms is not None else int(time.time() * 1000)

    return TokenResponse(
        header=token.header,
        payload=token.payload,
        signature=token.signature,
        expired=token.is_expired(now_ms),
        dates={claim: token.claim_datetime(claim) for claim in DATE_CLAIMS},
    )
