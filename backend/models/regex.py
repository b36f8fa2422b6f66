"""Regex tester data models"""

from __future__ import annotations

from pydantic import BaseModel

FLAG_LETTERS = {
    "g": "global_search",
    "i": "case_insensitive",
    "m": "multiline",
    "s": "dot_all",
    "u": "unicode",
    "y": "sticky",
}


class FlagSet(BaseModel):
    """Matching options, one per regex flag letter"""

    global_search: bool = False  # g - all non-overlapping matches
    case_insensitive: bool = False  # i
    multiline: bool = False  # m - ^ and $ match at line breaks
    dot_all: bool = False  # s - . matches newlines
    unicode: bool = False  # u
    sticky: bool = False  # y - match must start at the scan position

    @property
    def letters(self) -> str:
        return "".join(letter for letter, name in FLAG_LETTERS.items() if getattr(self, name))


class MatchSpan(BaseModel):
    """A single match of a pattern inside the subject"""

    start: int
    end: int  # Exclusive
    full_text: str
    groups: list[str | None] = []  # Capture groups 1..n, None when unmatched
    named_groups: dict[str, str | None] = {}


class HighlightSegment(BaseModel):
    """A slice of the subject, flagged when it is matched text"""

    text: str
    is_match: bool


class RegexRequest(BaseModel):
    """Request to run a pattern against a test string"""

    pattern: str
    flags: str = "g"
    subject: str = ""


class RegexResponse(BaseModel):
    """Matches plus the highlight partition of the subject"""

    flags: str
    match_count: int
    matches: list[MatchSpan]
    segments: list[HighlightSegment]
