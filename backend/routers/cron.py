"""Crontab generator API endpoints"""

from __future__ import annotations

from fastapi import APIRouter, HTTPException

from models.cron import CronPreset, CronRequest, CronResponse
from services.cron_parser import PRESETS, build_expression, describe_cron, parse_cron
from services.errors import ParseError

router = APIRouter()


@router.post("/describe", response_model=CronResponse)
async def describe_expression(request: CronRequest) -> CronResponse:
    """Parse a cron expression and describe it in English"""
    try:
        fields = parse_cron(request.expression)
    except ParseError as e:
        raise HTTPException(status_code=400, detail=e.message)

    return CronResponse(
        expression=build_expression(fields),
        fields=fields,
        description=describe_cron(fields),
    )


@router.get("/presets", response_model=list[CronPreset])
async def list_presets() -> list[CronPreset]:
    """Common schedules"""
    return PRESETS
