"""Models module - Pydantic data models"""

from .diff import DiffKind, DiffRequest, DiffResult, DiffStats, LineDiffPart
from .regex import FlagSet, HighlightSegment, MatchSpan, RegexRequest, RegexResponse
from .cron import (
    AnyField,
    CronField,
    CronPreset,
    CronRequest,
    CronResponse,
    ListField,
    RangeField,
    StepField,
    ValueField,
)
from .tokens import DecodedToken, TokenRequest, TokenResponse
from .generators import HashRequest, HashResponse, PasswordOptions, PasswordResponse, UuidResponse
from .workspace import UtilityView, WorkspaceState, WorkspaceUpdateRequest

__all__ = [
    # Diff models
    "DiffKind",
    "DiffRequest",
    "DiffResult",
    "DiffStats",
    "LineDiffPart",
    # Regex models
    "FlagSet",
    "HighlightSegment",
    "MatchSpan",
    "RegexRequest",
    "RegexResponse",
    # Cron models
    "AnyField",
    "CronField",
    "CronPreset",
    "CronRequest",
    "CronResponse",
    "ListField",
    "RangeField",
    "StepField",
    "ValueField",
    # Token models
    "DecodedToken",
    "TokenRequest",
    "TokenResponse",
    # Generator models
    "HashRequest",
    "HashResponse",
    "PasswordOptions",
    "PasswordResponse",
    "UuidResponse",
    # Workspace models
    "UtilityView",
    "WorkspaceState",
    "WorkspaceUpdateRequest",
]
