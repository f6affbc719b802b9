"""Emoji removal data models"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel


class RemovalMode(str, Enum):
    """Preset of code point ranges to strip"""

    SIMPLE = "simple"
    THOROUGH = "thorough"


class EmojiRemovalResponse(BaseModel):
    """Result of cleaning an uploaded file"""

    originalText: str
    cleanedText: str
    fileName: str
    originalSize: int  # characters, not bytes
    cleanedSize: int
    emojisRemoved: int


class EmojiSpan(BaseModel):
    """A run of strippable characters, [start, end) in code points"""

    start: int
    end: int
    text: str


class EmojiScanRequest(BaseModel):
    """Request to locate strippable characters without removing them"""

    text: str
    mode: RemovalMode = RemovalMode.SIMPLE


class EmojiScanResponse(BaseModel):
    """Located runs of strippable characters"""

    spans: list[EmojiSpan] = []
    count: int = 0
