"""
Diff Generator Service - Line-level diffs between two texts

Lines are aligned with Myers' O(ND) bisection, which runs in linear space.
A single bisection gives up after ``max_edit_cost`` edit steps and that
sub-problem is aligned by difflib.SequenceMatcher instead, so the Myers part
costs O((N+M) * min(D, max_edit_cost)) and large, mostly unrelated inputs
degrade to a non-minimal but fast alignment.
"""

from __future__ import annotations

import logging
import re
from difflib import SequenceMatcher

from models.diff import DiffKind, DiffResult, DiffStats, LineDiffPart

logger = logging.getLogger(__name__)

DEFAULT_MAX_EDIT_COST = 1024

_LINE_RE = re.compile(r"[^\n]*\n|[^\n]+")

# (tag, old_start, old_end, new_start, new_end), tags as in SequenceMatcher
Opcode = tuple[str, int, int, int, int]


def split_lines(text: str) -> list[str]:
    """Split text into lines, keeping the newline terminators"""
    return _LINE_RE.findall(text)


def count_lines(text: str) -> int:
    return len(split_lines(text))


class DiffGenerator:
    """Generate line diffs between two texts"""

    def __init__(self, max_edit_cost: int = DEFAULT_MAX_EDIT_COST):
        self.max_edit_cost = max(1, max_edit_cost)

    def generate_diff(
        self,
        old_text: str,
        new_text: str,
        context_lines: int = 3,
    ) -> DiffResult:
        """Diff two texts and bundle the parts with stats and a unified preview"""
        parts = self.diff_lines(old_text, new_text)
        return DiffResult(
            parts=parts,
            stats=self.compute_stats(parts),
            unified=self.generate_inline_preview(parts, context_lines),
        )

    def diff_lines(self, old_text: str, new_text: str) -> list[LineDiffPart]:
        """Compute the ordered list of added/removed/unchanged line runs"""
        old_lines = split_lines(old_text)
        new_lines = split_lines(new_text)

        if old_text == new_text:
            return [
                LineDiffPart(
                    text=old_text,
                    kind=DiffKind.UNCHANGED,
                    line_count=len(old_lines),
                )
            ]

        # Intern lines so the alignment compares ints
        line_ids: dict[str, int] = {}
        a = [line_ids.setdefault(line, len(line_ids)) for line in old_lines]
        b = [line_ids.setdefault(line, len(line_ids)) for line in new_lines]

        opcodes: list[Opcode] = []
        self._align(a, b, 0, len(a), 0, len(b), opcodes)
        return self._build_parts(old_lines, new_lines, opcodes)

    @staticmethod
    def compute_stats(parts: list[LineDiffPart]) -> DiffStats:
        """Sum line counts per kind"""
        stats = DiffStats()
        for part in parts:
            if part.kind == DiffKind.ADDED:
                stats.added += part.line_count
            elif part.kind == DiffKind.REMOVED:
                stats.removed += part.line_count
            else:
                stats.unchanged += part.line_count
        return stats

    def generate_inline_preview(
        self,
        parts: list[LineDiffPart],
        context_lines: int = 3,
    ) -> str:
        """Render parts as a unified preview with context lines around changes"""
        result_lines = []

        for part in parts:
            lines = [line.removesuffix("\n") for line in split_lines(part.text)]
            if part.kind == DiffKind.REMOVED:
                result_lines.extend(f"- {line}" for line in lines)
            elif part.kind == DiffKind.ADDED:
                result_lines.extend(f"+ {line}" for line in lines)
            elif len(lines) <= 2 * context_lines:
                result_lines.extend(f"  {line}" for line in lines)
            else:
                result_lines.extend(f"  {line}" for line in lines[:context_lines])
                result_lines.append("...")
                if context_lines:
                    result_lines.extend(f"  {line}" for line in lines[-context_lines:])

        return "\n".join(result_lines)

    # ========== Alignment ==========

    def _align(
        self,
        a: list[int],
        b: list[int],
        a_lo: int,
        a_hi: int,
        b_lo: int,
        b_hi: int,
        opcodes: list[Opcode],
    ) -> None:
        """Append opcodes aligning a[a_lo:a_hi] with b[b_lo:b_hi]"""
        start_a, start_b = a_lo, b_lo
        while a_lo < a_hi and b_lo < b_hi and a[a_lo] == b[b_lo]:
            a_lo += 1
            b_lo += 1
        if a_lo > start_a:
            opcodes.append(("equal", start_a, a_lo, start_b, b_lo))

        end_a, end_b = a_hi, b_hi
        while a_lo < a_hi and b_lo < b_hi and a[a_hi - 1] == b[b_hi - 1]:
            a_hi -= 1
            b_hi -= 1

        if a_lo == a_hi or b_lo == b_hi:
            if a_lo < a_hi:
                opcodes.append(("delete", a_lo, a_hi, b_lo, b_lo))
            if b_lo < b_hi:
                opcodes.append(("insert", a_hi, a_hi, b_lo, b_hi))
        else:
            split = self._bisect(a, b, a_lo, a_hi, b_lo, b_hi)
            if split is None or split in ((a_lo, b_lo), (a_hi, b_hi)):
                self._align_fallback(a, b, a_lo, a_hi, b_lo, b_hi, opcodes)
            else:
                x, y = split
                self._align(a, b, a_lo, x, b_lo, y, opcodes)
                self._align(a, b, x, a_hi, y, b_hi, opcodes)

        if a_hi < end_a:
            opcodes.append(("equal", a_hi, end_a, b_hi, end_b))

    def _bisect(
        self,
        a: list[int],
        b: list[int],
        a_lo: int,
        a_hi: int,
        b_lo: int,
        b_hi: int,
    ) -> tuple[int, int] | None:
        """Find the middle snake split point, or None past the edit cost cap"""
        n = a_hi - a_lo
        m = b_hi - b_lo
        max_d = (n + m + 1) // 2
        v_offset = max_d
        v_length = 2 * max_d + 2
        v1 = [-1] * v_length
        v1[v_offset + 1] = 0
        v2 = v1[:]
        delta = n - m
        # Odd delta: the forward path is the one that detects the overlap
        front = delta % 2 != 0
        k1start = k1end = k2start = k2end = 0

        for d in range(min(max_d, self.max_edit_cost)):
            # Forward path
            for k1 in range(-d + k1start, d + 1 - k1end, 2):
                k1_offset = v_offset + k1
                if k1 == -d or (k1 != d and v1[k1_offset - 1] < v1[k1_offset + 1]):
                    x1 = v1[k1_offset + 1]
                else:
                    x1 = v1[k1_offset - 1] + 1
                y1 = x1 - k1
                while x1 < n and y1 < m and a[a_lo + x1] == b[b_lo + y1]:
                    x1 += 1
                    y1 += 1
                v1[k1_offset] = x1
                if x1 > n:
                    k1end += 2
                elif y1 > m:
                    k1start += 2
                elif front:
                    k2_offset = v_offset + delta - k1
                    if 0 <= k2_offset < v_length and v2[k2_offset] != -1:
                        x2 = n - v2[k2_offset]
                        if x1 >= x2:
                            return a_lo + x1, b_lo + y1

            # Reverse path
            for k2 in range(-d + k2start, d + 1 - k2end, 2):
                k2_offset = v_offset + k2
                if k2 == -d or (k2 != d and v2[k2_offset - 1] < v2[k2_offset + 1]):
                    x2 = v2[k2_offset + 1]
                else:
                    x2 = v2[k2_offset - 1] + 1
                y2 = x2 - k2
                while x2 < n and y2 < m and a[a_hi - x2 - 1] == b[b_hi - y2 - 1]:
                    x2 += 1
                    y2 += 1
                v2[k2_offset] = x2
                if x2 > n:
                    k2end += 2
                elif y2 > m:
                    k2start += 2
                elif not front:
                    k1_offset = v_offset + delta - k2
                    if 0 <= k1_offset < v_length and v1[k1_offset] != -1:
                        x1 = v1[k1_offset]
                        y1 = x1 - (k1_offset - v_offset)
                        if x1 >= n - x2:
                            return a_lo + x1, b_lo + y1

        return None

    def _align_fallback(
        self,
        a: list[int],
        b: list[int],
        a_lo: int,
        a_hi: int,
        b_lo: int,
        b_hi: int,
        opcodes: list[Opcode],
    ) -> None:
        """Align a sub-problem with SequenceMatcher when Myers gets too expensive"""
        logger.debug(
            "[DiffGenerator] Edit cost above %d, falling back to SequenceMatcher (%d x %d lines)",
            self.max_edit_cost,
            a_hi - a_lo,
            b_hi - b_lo,
        )
        matcher = SequenceMatcher(None, a[a_lo:a_hi], b[b_lo:b_hi])

        for tag, i1, i2, j1, j2 in matcher.get_opcodes():
            i1, i2, j1, j2 = i1 + a_lo, i2 + a_lo, j1 + b_lo, j2 + b_lo
            if tag == "equal":
                opcodes.append(("equal", i1, i2, j1, j2))
                continue
            if i1 < i2:
                opcodes.append(("delete", i1, i2, j1, j1))
            if j1 < j2:
                opcodes.append(("insert", i2, i2, j1, j2))

    # ========== Script Partition ==========

    def _build_parts(
        self,
        old_lines: list[str],
        new_lines: list[str],
        opcodes: list[Opcode],
    ) -> list[LineDiffPart]:
        """Merge opcodes into maximal runs, removed before added in each change block"""
        parts: list[LineDiffPart] = []
        unchanged: list[str] = []
        removed: list[str] = []
        added: list[str] = []

        def flush(lines: list[str], kind: DiffKind) -> None:
            if lines:
                parts.append(LineDiffPart(text="".join(lines), kind=kind, line_count=len(lines)))
                lines.clear()

        for tag, i1, i2, j1, j2 in opcodes:
            if tag == "equal":
                flush(removed, DiffKind.REMOVED)
                flush(added, DiffKind.ADDED)
                unchanged.extend(old_lines[i1:i2])
            else:
                flush(unchanged, DiffKind.UNCHANGED)
                removed.extend(old_lines[i1:i2])
                added.extend(new_lines[j1:j2])

        flush(unchanged, DiffKind.UNCHANGED)
        flush(removed, DiffKind.REMOVED)
        flush(added, DiffKind.ADDED)
        return parts
