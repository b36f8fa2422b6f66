"""Regex tester API endpoints"""

from __future__ import annotations

from fastapi import APIRouter, HTTPException

from models.regex import RegexRequest, RegexResponse
from services.config_manager import ConfigManager
from services.errors import CompileError
from services.regex_engine import RegexEngine, get_backend, parse_flags, to_highlight_segments

router = APIRouter()


@router.post("/match", response_model=RegexResponse)
async def match_pattern(request: RegexRequest) -> RegexResponse:
    """Run a pattern against the test string and return highlight segments"""
    backend_name = ConfigManager.get_instance().get_config()["regex"]["backend"]

    try:
        engine = RegexEngine(get_backend(backend_name))
    except ValueError as e:
        raise HTTPException(status_code=500, detail=str(e))

    try:
        flags = parse_flags(request.flags)
        matches = engine.find_matches(request.pattern, flags, request.subject)
    except CompileError as e:
        raise HTTPException(status_code=400, detail=e.message)

    return RegexResponse(
        flags=flags.letters,
        match_count=len(matches),
        matches=matches,
        segments=to_highlight_segments(request.subject, matches),
    )
