"""
Diff Generator Service - Whitespace-normalized line diff with similarity score

Lines are compared after normalization (tabs, repeated spaces and surrounding
whitespace are ignored) but reported with their original content.
The LCS table costs O(m*n) time and memory in the line counts of the inputs.
"""

from __future__ import annotations

import math
import re

from models.diff import ChangeType, DiffLine, DiffOp, DiffResult

_MULTI_SPACE = re.compile(r" {2,}")


def normalize_line(line: str) -> str:
    """Canonicalize a line for comparison"""
    line = line.replace("\t", " ")
    line = _MULTI_SPACE.sub(" ", line)
    return line.strip()


def build_lcs_table(a: list[str], b: list[str]) -> list[list[int]]:
    """Longest-common-subsequence length table of shape (len(a)+1) x (len(b)+1)"""
    m = len(a)
    n = len(b)
    table = [[0] * (n + 1) for _ in range(m + 1)]

    for i in range(1, m + 1):
        row = table[i]
        prev = table[i - 1]
        line_a = a[i - 1]
        for j in range(1, n + 1):
            if line_a == b[j - 1]:
                row[j] = prev[j - 1] + 1
            else:
                row[j] = max(prev[j], row[j - 1])

    return table


def backtrack(table: list[list[int]], a: list[str], b: list[str]) -> list[DiffOp]:
    """Walk the LCS table from the bottom-right corner into a forward edit script.

    When skipping a line on either side is equally good, the right-hand line
    is taken as ADDED first. Output stability depends on this tie-break.
    """
    ops: list[DiffOp] = []
    i = len(a)
    j = len(b)

    while i > 0 or j > 0:
        if i > 0 and j > 0 and a[i - 1] == b[j - 1]:
            ops.append(DiffOp(type=ChangeType.EQUAL, leftIndex=i - 1, rightIndex=j - 1))
            i -= 1
            j -= 1
        elif j > 0 and (i == 0 or table[i][j - 1] >= table[i - 1][j]):
            ops.append(DiffOp(type=ChangeType.ADDED, rightIndex=j - 1))
            j -= 1
        else:
            ops.append(DiffOp(type=ChangeType.REMOVED, leftIndex=i - 1))
            i -= 1

    ops.reverse()
    return ops


def build_side_lines(
    ops: list[DiffOp],
    raw_a: list[str],
    raw_b: list[str],
) -> tuple[list[DiffLine], list[DiffLine]]:
    """Split an edit script into left and right annotated lines (1-indexed)"""
    left: list[DiffLine] = []
    right: list[DiffLine] = []

    for op in ops:
        if op.leftIndex is not None:
            left.append(
                DiffLine(type=op.type, lineNumber=op.leftIndex + 1, content=raw_a[op.leftIndex])
            )
        if op.rightIndex is not None:
            right.append(
                DiffLine(type=op.type, lineNumber=op.rightIndex + 1, content=raw_b[op.rightIndex])
            )

    return left, right


def similarity_score(matched_chars: int, total_chars_a: int, total_chars_b: int) -> float:
    """Percentage of matched normalized characters against the larger side.

    Two empty texts score 0, not 100.
    """
    denom = max(total_chars_a, total_chars_b, 1)
    # half-up rounding to two decimals
    score = math.floor(matched_chars / denom * 10000 + 0.5) / 100
    return min(score, 100.0)


class DiffGenerator:
    """Generate side-by-side line diffs"""

    def generate_diff(self, text_a: str, text_b: str) -> DiffResult:
        """Compare two texts line by line"""
        raw_a = text_a.split("\n")
        raw_b = text_b.split("\n")

        norm_a = [normalize_line(line) for line in raw_a]
        norm_b = [normalize_line(line) for line in raw_b]

        table = build_lcs_table(norm_a, norm_b)
        ops = backtrack(table, norm_a, norm_b)
        left, right = build_side_lines(ops, raw_a, raw_b)

        lines_added = 0
        lines_removed = 0
        lines_unchanged = 0
        matched_chars = 0

        for op in ops:
            if op.type == ChangeType.EQUAL:
                lines_unchanged += 1
                matched_chars += len(norm_a[op.leftIndex])
            elif op.type == ChangeType.REMOVED:
                lines_removed += 1
            else:
                lines_added += 1

        similarity = similarity_score(
            matched_chars,
            sum(len(line) for line in norm_a),
            sum(len(line) for line in norm_b),
        )

        return DiffResult(
            left=left,
            right=right,
            similarity=similarity,
            totalCharsLeft=len(text_a),
            totalCharsRight=len(text_b),
            linesAdded=lines_added,
            linesRemoved=lines_removed,
            linesUnchanged=lines_unchanged,
        )
