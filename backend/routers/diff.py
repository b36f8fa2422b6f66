"""Diff checker API endpoints"""

from __future__ import annotations

from fastapi import APIRouter

from models.diff import DiffRequest, DiffResult
from services.config_manager import ConfigManager
from services.diff_generator import DiffGenerator

router = APIRouter()


@router.post("", response_model=DiffResult)
async def diff_texts(request: DiffRequest) -> DiffResult:
    """Compare two texts line by line"""
    settings = ConfigManager.get_instance().get_config()["diff"]
    diff_generator = DiffGenerator(max_edit_cost=settings["maxEditCost"])

    context_lines = request.context_lines
    if context_lines is None:
        context_lines = settings["contextLines"]

    return diff_generator.generate_diff(
        request.old_text,
        request.new_text,
        context_lines=max(0, context_lines),
    )
