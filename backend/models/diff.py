"""Diff-related data models"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel


class DiffKind(str, Enum):
    """Relation of a run of lines between the old and new text"""

    ADDED = "added"
    REMOVED = "removed"
    UNCHANGED = "unchanged"


class LineDiffPart(BaseModel):
    """A maximal run of lines sharing one relation"""

    text: str  # Lines concatenated, newlines included
    kind: DiffKind
    line_count: int


class DiffStats(BaseModel):
    """Line totals per kind"""

    added: int = 0
    removed: int = 0
    unchanged: int = 0


class DiffResult(BaseModel):
    """Complete line diff of two texts"""

    parts: list[LineDiffPart]
    stats: DiffStats
    unified: str  # "+ "/"- "/"  " prefixed preview


class DiffRequest(BaseModel):
    """Request to compare two texts"""

    old_text: str = ""
    new_text: str = ""
    context_lines: int | None = None
