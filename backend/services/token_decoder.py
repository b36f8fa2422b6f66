"""
Token Decoder Service - Decode compact header.payload.signature tokens

Decoding only: the signature segment is returned untouched and never verified.
"""

from __future__ import annotations

import base64
import binascii
import json
from typing import Any

from models.tokens import DecodedToken
from services.errors import FormatError


def base64url_decode(segment: str) -> bytes:
    """Decode a base64url segment, re-adding any stripped padding"""
    normalized = segment.replace("-", "+").replace("_", "/")
    normalized += "=" * (-len(normalized) % 4)
    try:
        return base64.b64decode(normalized, validate=True)
    except (binascii.Error, ValueError) as e:
        raise FormatError(f"Invalid base64url segment: {e}") from e


def _decode_object(segment: str, name: str) -> dict[str, Any]:
    raw = base64url_decode(segment)
    try:
        value = json.loads(raw.decode("utf-8"))
    except UnicodeDecodeError as e:
        raise FormatError(f"Invalid {name}: not UTF-8 ({e})") from e
    except json.JSONDecodeError as e:
        raise FormatError(f"Invalid {name} JSON: {e}") from e

    if not isinstance(value, dict):
        raise FormatError(f"Invalid {name}: expected a JSON object")
    return value


def decode_token(token: str) -> DecodedToken:
    """Split a token into its three segments and decode header and payload"""
    parts = token.strip().split(".")
    if len(parts) != 3:
        raise FormatError("wrong segment count")

    header_b64, payload_b64, signature = parts
    return DecodedToken(
        header=_decode_object(header_b64, "header"),
        payload=_decode_object(payload_b64, "payload"),
        signature=signature,
    )
