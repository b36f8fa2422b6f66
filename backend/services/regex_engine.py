"""
Regex Engine Service - Run a pattern over a test string and split it for highlighting

Matching goes through a RegexBackend, the capability set of a concrete regex
library. The engine owns the scan loop (global, sticky, empty-match stepping),
so a backend only has to compile a pattern and match at or after a position.
"""

from __future__ import annotations

import logging
import re
from abc import ABC, abstractmethod
from typing import Any

from models.regex import FLAG_LETTERS, FlagSet, HighlightSegment, MatchSpan
from services.errors import CompileError

logger = logging.getLogger(__name__)


def parse_flags(letters: str) -> FlagSet:
    """Build a FlagSet from letters like "gim"; unknown or repeated letters fail"""
    options: dict[str, bool] = {}
    for letter in letters:
        name = FLAG_LETTERS.get(letter)
        if name is None:
            raise CompileError(f"Invalid flags supplied to RegExp constructor '{letters}'")
        if name in options:
            raise CompileError(f"Duplicate flag '{letter}' in '{letters}'")
        options[name] = True
    return FlagSet(**options)


# Inside a character class a scoped group is not allowed, so spell out the set
_ASCII_CLASS_MEMBERS = {"w": "a-zA-Z0-9_", "d": "0-9"}


def scope_ascii_classes(pattern: str) -> str:
    """Limit \\w \\W \\d \\D \\b \\B to ASCII without touching literal case folding.

    Outside a character class each escape becomes an ASCII-scoped group such
    as ``(?a:\\w)``; inside one, \\w and \\d become explicit ranges. \\W and \\D
    inside a class keep Unicode semantics.
    """
    out = []
    in_class = False
    class_body_start = 0
    i = 0

    while i < len(pattern):
        char = pattern[i]

        if char == "\\" and i + 1 < len(pattern):
            escape = pattern[i + 1]
            i += 2
            if in_class and escape in _ASCII_CLASS_MEMBERS:
                out.append(_ASCII_CLASS_MEMBERS[escape])
                # Keep a following hyphen literal instead of opening a range
                if pattern[i:i + 1] == "-" and pattern[i + 1:i + 2] != "]":
                    out.append("\\-")
                    i += 1
            elif not in_class and escape in "wWdDbB":
                out.append(f"(?a:\\{escape})")
            else:
                out.append(char + escape)
            continue

        if in_class:
            # A "]" right after "[" or "[^" is a literal member
            if char == "]" and i > class_body_start:
                in_class = False
        elif char == "[":
            in_class = True
            class_body_start = i + 2 if pattern[i + 1:i + 2] == "^" else i + 1

        out.append(char)
        i += 1

    return "".join(out)


class RegexBackend(ABC):
    """Capability set of a pattern-matching backend"""

    name: str = ""
    supported_flags: frozenset[str] = frozenset()

    @abstractmethod
    def compile(self, pattern: str, flags: FlagSet) -> Any:
        """Compile the pattern, raising CompileError with the backend's own diagnostic"""

    @abstractmethod
    def search(self, compiled: Any, subject: str, pos: int) -> MatchSpan | None:
        """First match starting at or after pos"""

    @abstractmethod
    def match_at(self, compiled: Any, subject: str, pos: int) -> MatchSpan | None:
        """Match starting exactly at pos"""


class StdlibRegexBackend(RegexBackend):
    """Backend over Python's re module.

    Outside unicode mode \\w, \\W, \\d, \\D, \\b and \\B are rewritten to their ASCII
    forms; literals and case folding stay Unicode-aware. Positions are code
    point offsets.
    """

    name = "re"
    supported_flags = frozenset(FLAG_LETTERS)

    def compile(self, pattern: str, flags: FlagSet) -> re.Pattern:
        options = 0
        if flags.case_insensitive:
            options |= re.IGNORECASE
        if flags.multiline:
            options |= re.MULTILINE
        if flags.dot_all:
            options |= re.DOTALL
        if not flags.unicode:
            pattern = scope_ascii_classes(pattern)

        try:
            return re.compile(pattern, options)
        except re.error as e:
            raise CompileError(str(e)) from e

    def search(self, compiled: re.Pattern, subject: str, pos: int) -> MatchSpan | None:
        return self._to_span(compiled.search(subject, pos))

    def match_at(self, compiled: re.Pattern, subject: str, pos: int) -> MatchSpan | None:
        return self._to_span(compiled.match(subject, pos))

    @staticmethod
    def _to_span(match: re.Match | None) -> MatchSpan | None:
        if match is None:
            return None
        return MatchSpan(
            start=match.start(),
            end=match.end(),
            full_text=match.group(0),
            groups=list(match.groups()),
            named_groups=match.groupdict(),
        )


BACKENDS: dict[str, type[RegexBackend]] = {
    StdlibRegexBackend.name: StdlibRegexBackend,
}


def get_backend(name: str) -> RegexBackend:
    """Instantiate a registered backend by name"""
    backend_cls = BACKENDS.get(name)
    if backend_cls is None:
        raise ValueError(f"Unknown regex backend: {name}")
    return backend_cls()


class RegexEngine:
    """Find pattern matches in a subject string"""

    def __init__(self, backend: RegexBackend | None = None):
        self.backend = backend or StdlibRegexBackend()

    def find_matches(
        self,
        pattern: str,
        flags: FlagSet | str,
        subject: str,
        max_matches: int | None = None,
    ) -> list[MatchSpan]:
        """Scan subject left to right; one match unless the global flag is set"""
        if isinstance(flags, str):
            flags = parse_flags(flags)

        unsupported = sorted(set(flags.letters) - self.backend.supported_flags)
        if unsupported:
            raise CompileError(
                f"Flag(s) {''.join(unsupported)} not supported by the '{self.backend.name}' backend"
            )

        compiled = self.backend.compile(pattern, flags)
        matches: list[MatchSpan] = []
        pos = 0

        while pos <= len(subject):
            if flags.sticky:
                span = self.backend.match_at(compiled, subject, pos)
            else:
                span = self.backend.search(compiled, subject, pos)
            if span is None:
                break

            matches.append(span)
            if not flags.global_search:
                break
            if max_matches is not None and len(matches) >= max_matches:
                logger.debug("[RegexEngine] Stopped after %d matches", max_matches)
                break

            # Step past empty matches so the scan always advances
            pos = span.end if span.end > span.start else span.end + 1

        return matches


def to_highlight_segments(subject: str, matches: list[MatchSpan]) -> list[HighlightSegment]:
    """Partition subject into alternating unmatched and matched segments"""
    segments: list[HighlightSegment] = []
    last_end = 0

    for span in sorted(matches, key=lambda s: (s.start, s.end)):
        start = min(max(span.start, last_end), len(subject))
        end = min(max(span.end, start), len(subject))
        if start > last_end:
            segments.append(HighlightSegment(text=subject[last_end:start], is_match=False))
        segments.append(HighlightSegment(text=subject[start:end], is_match=True))
        last_end = end

    if last_end < len(subject) or not segments:
        segments.append(HighlightSegment(text=subject[last_end:], is_match=False))

    return segments
