"""Diff-related data models"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel


class ChangeType(str, Enum):
    """How a line takes part in the edit script"""

    EQUAL = "equal"
    ADDED = "added"
    REMOVED = "removed"


class DiffOp(BaseModel):
    """A single step of the edit script.

    Indices are 0-based positions into the left/right line sequences.
    EQUAL carries both, REMOVED only the left one, ADDED only the right one.
    """

    type: ChangeType
    leftIndex: int | None = None
    rightIndex: int | None = None


class DiffLine(BaseModel):
    """One annotated line on one side of the diff"""

    type: ChangeType
    lineNumber: int  # 1-indexed
    content: str  # original, non-normalized


class DiffRequest(BaseModel):
    """Request to compare two text blobs"""

    textA: str | None = None
    textB: str | None = None


class DiffResult(BaseModel):
    """Side-by-side diff of two texts"""

    left: list[DiffLine]
    right: list[DiffLine]
    similarity: float  # 0-100, two decimals
    totalCharsLeft: int
    totalCharsRight: int
    linesAdded: int
    linesRemoved: int
    linesUnchanged: int
