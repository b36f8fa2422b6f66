"""Workspace state API endpoints"""

from __future__ import annotations

from fastapi import APIRouter

from models.workspace import WorkspaceState, WorkspaceUpdateRequest
from services.config_manager import ConfigManager

router = APIRouter()


@router.get("", response_model=WorkspaceState)
async def get_workspace() -> WorkspaceState:
    """Get the saved active view and scratchpad"""
    return WorkspaceState(**ConfigManager.get_instance().get_workspace())


@router.put("", response_model=WorkspaceState)
async def update_workspace(request: WorkspaceUpdateRequest) -> WorkspaceState:
    """Update only the provided workspace fields"""
    changes = request.model_dump(mode="json", exclude_none=True)
    state = ConfigManager.get_instance().update_workspace(**changes)
    return WorkspaceState(**state)


@router.delete("/scratchpad", response_model=WorkspaceState)
async def clear_scratchpad() -> WorkspaceState:
    """Clear the scratchpad note"""
    return WorkspaceState(**ConfigManager.get_instance().clear_scratchpad())
